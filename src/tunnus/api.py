"""Main API functions for Tunnus."""

from __future__ import annotations

import logging
from typing import Any

import polars as pl

from tunnus.report import Report
from tunnus.types import IdentifierKind, Severity
from tunnus.validators import FinnishIdentifierValidator, registry, require_columns

logger = logging.getLogger(__name__)


def _to_lazyframe(data: Any) -> pl.LazyFrame:
    if isinstance(data, pl.LazyFrame):
        return data
    if isinstance(data, pl.DataFrame):
        return data.lazy()
    if isinstance(data, dict):
        return pl.LazyFrame(data)
    raise ValueError(
        f"Unsupported input type: {type(data).__name__}. "
        "Expected pl.DataFrame, pl.LazyFrame or dict"
    )


def check(
    data: Any,
    identifiers: dict[str, str | IdentifierKind] | None = None,
    validators: list[FinnishIdentifierValidator] | None = None,
    min_severity: str | Severity | None = None,
    **validator_kwargs: Any,
) -> Report:
    """Validate identifier columns of the input data.

    Args:
        data: Input data (pl.DataFrame, pl.LazyFrame or dict)
        identifiers: Mapping of column name to identifier kind
                    ("pin", "ssn", "vat", "business_id", "finuid", any case).
        validators: Optional list of already configured validators,
                   run in addition to those built from identifiers.
        min_severity: Minimum severity level to include in results.
                     Can be "low", "medium", "high", or "critical".
        **validator_kwargs: Options passed to every validator built from
                           identifiers (e.g. allow_null, mask_output, mostly).

    Returns:
        Report with the issues found and the kind checked in each column.

    Raises:
        ValueError: If no columns are given or an identifier kind is unknown.
        ColumnNotFoundError: If a mapped column is missing from the data.

    Example:
        >>> import tunnus
        >>> report = tunnus.check(
        ...     {"hetu": ["311280-888Y", "311280-8880"]},
        ...     identifiers={"hetu": "pin"},
        ... )
        >>> report.issues[0].count
        1
    """
    if not identifiers and not validators:
        raise ValueError("Nothing to check: pass identifiers or validators")

    lf = _to_lazyframe(data)

    column_validators: list[FinnishIdentifierValidator] = [
        registry.for_kind(kind)(column=column, **validator_kwargs)
        for column, kind in (identifiers or {}).items()
    ]
    for v in validators or []:
        if not isinstance(v, FinnishIdentifierValidator):
            raise ValueError(
                f"Invalid validator: {v!r}. Expected FinnishIdentifierValidator instance."
            )
        column_validators.append(v)

    require_columns(lf, [v.column for v in column_validators])

    df = lf.collect()
    lf = df.lazy()

    issues = []
    for validator in column_validators:
        issues.extend(validator.validate(lf))

    logger.debug(
        f"Checked {len(column_validators)} columns over {len(df)} rows: "
        f"{len(issues)} with invalid identifiers"
    )

    report = Report(
        issues=issues,
        checked={v.column: v.kind for v in column_validators},
        source=type(data).__name__,
        row_count=len(df),
    )

    if min_severity is not None:
        if isinstance(min_severity, str):
            min_severity = Severity(min_severity.lower())
        report = report.filter_by_severity(min_severity)

    return report
