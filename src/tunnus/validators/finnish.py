"""Column validators for Finnish identifiers.

Each validator checks one string column of a Polars frame against one of the
per-value checks in :mod:`tunnus.identity`:
- FinnishPINValidator: henkilötunnus
- FinnishSSNValidator: henkilötunnus under its SSN name
- FinnishVATValidator: ALV-numero
- FinnishBusinessIdValidator: Y-tunnus
- FinnishFINUIDValidator: SATU
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Callable

import polars as pl

from tunnus.identity import (
    validate_business_id,
    validate_finuid,
    validate_pin,
    validate_ssn,
    validate_vat,
)
from tunnus.types import IdentifierKind, Severity
from tunnus.validators.base import ValidationIssue, ValidatorConfig, require_columns
from tunnus.validators.registry import register_validator

# Characters of a masked sample left readable (the birth date of a PIN)
VISIBLE_PREFIX = 6

_INVALID = "_tunnus_invalid"


class FinnishIdentifierValidator:
    """Checks that every value of a column is a valid identifier of one kind.

    Empty strings count as missing values. Whitespace is kept unless
    strip_whitespace is set, so " 311280-888Y" is invalid by default.

    Subclasses set ``name``, ``kind``, ``label``, ``severity`` and
    ``mask_by_default``, and point ``check_value`` at a function from
    :mod:`tunnus.identity`.
    """

    name: str = ""
    kind: IdentifierKind
    label: str = ""
    severity: Severity = Severity.MEDIUM
    mask_by_default: bool = False
    check_value: Callable[[Any], bool]

    def __init__(
        self,
        column: str,
        allow_null: bool = True,
        strip_whitespace: bool = False,
        mask_output: bool | None = None,
        config: ValidatorConfig | None = None,
        **config_overrides: Any,
    ):
        """
        Args:
            column: Name of the identifier column
            allow_null: Whether missing and empty values pass
            strip_whitespace: Strip surrounding whitespace before checking
            mask_output: Mask invalid samples in the issue; defaults to the
                validator's mask_by_default
            config: Reporting options
            **config_overrides: ValidatorConfig fields overriding config
        """
        self.column = column
        self.allow_null = allow_null
        self.strip_whitespace = strip_whitespace
        self.mask_output = self.mask_by_default if mask_output is None else mask_output
        self.config = replace(config or ValidatorConfig(), **config_overrides)
        self.logger = logging.getLogger(f"tunnus.{self.name}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(column={self.column!r})"

    def _is_invalid(self, value: str) -> bool | None:
        if value == "":
            return None
        return not self.check_value(value)

    def invalid_mask(self, expr: pl.Expr) -> pl.Expr:
        """Boolean expression, true where a value is not a valid identifier."""
        expr = expr.cast(pl.String)
        if self.strip_whitespace:
            expr = expr.str.strip_chars()
        return expr.map_elements(
            self._is_invalid, return_dtype=pl.Boolean, skip_nulls=True
        ).fill_null(not self.allow_null)

    def mask(self, value: str) -> str:
        """Hide everything after the leading birth date digits."""
        if len(value) <= VISIBLE_PREFIX:
            return "*" * len(value)
        return value[:VISIBLE_PREFIX] + "*" * (len(value) - VISIBLE_PREFIX)

    def validate(self, lf: pl.LazyFrame) -> list[ValidationIssue]:
        """Check the column and return at most one issue for it.

        Raises:
            ColumnNotFoundError: If the column is missing from lf
        """
        require_columns(lf, [self.column])
        dtype = lf.collect_schema()[self.column]
        if dtype not in (pl.String, pl.Categorical, pl.Null):
            self.logger.warning(
                f"Column '{self.column}' is {dtype}, not a string column; "
                "values are validated as text"
            )

        col = pl.col(self.column)
        df = lf.select(col.cast(pl.String), self.invalid_mask(col).alias(_INVALID)).collect()
        checked = len(df)
        invalid = df.filter(pl.col(_INVALID))
        count = len(invalid)
        if count == 0:
            return []

        if self.config.mostly is not None and (checked - count) / checked >= self.config.mostly:
            self.logger.debug(
                f"{count} invalid {self.label} in '{self.column}' within mostly={self.config.mostly}"
            )
            return []

        samples = [
            "" if v is None else v
            for v in invalid.get_column(self.column).head(self.config.sample_size).to_list()
        ]
        if self.mask_output:
            samples = [self.mask(v) for v in samples]
            shown = "Samples masked for privacy"
        else:
            shown = f"Sample: {samples}"

        return [
            ValidationIssue(
                column=self.column,
                kind=self.kind,
                count=count,
                checked=checked,
                severity=self.config.severity_override or self.severity,
                details=f"Found {count} invalid {self.label} ({count / checked:.2%}). {shown}",
                sample_values=samples,
            )
        ]


@register_validator
class FinnishPINValidator(FinnishIdentifierValidator):
    """Personal identity numbers (henkilötunnus), e.g. 311280-888Y."""

    name = "finnish_pin"
    kind = IdentifierKind.PIN
    label = "Finnish personal identity numbers"
    severity = Severity.HIGH
    mask_by_default = True
    check_value = staticmethod(validate_pin)


@register_validator
class FinnishSSNValidator(FinnishPINValidator):
    name = "finnish_ssn"
    kind = IdentifierKind.SSN
    label = "Finnish social security numbers"
    check_value = staticmethod(validate_ssn)


@register_validator
class FinnishVATValidator(FinnishIdentifierValidator):
    """VAT numbers (ALV-numero): FI and a Business ID without the hyphen."""

    name = "finnish_vat"
    kind = IdentifierKind.VAT
    label = "Finnish VAT numbers"
    check_value = staticmethod(validate_vat)


@register_validator
class FinnishBusinessIdValidator(FinnishIdentifierValidator):
    """Business IDs (Y-tunnus), e.g. 1572860-0."""

    name = "finnish_business_id"
    kind = IdentifierKind.BUSINESS_ID
    label = "Finnish business IDs"
    check_value = staticmethod(validate_business_id)


@register_validator
class FinnishFINUIDValidator(FinnishIdentifierValidator):
    """Unique identification numbers (SATU), e.g. 10011187H."""

    name = "finnish_finuid"
    kind = IdentifierKind.FINUID
    label = "Finnish unique identification numbers"
    severity = Severity.HIGH
    mask_by_default = True
    check_value = staticmethod(validate_finuid)
