"""Errors, configuration and findings shared by the column validators."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import polars as pl

from tunnus.types import IdentifierKind, Severity


class ColumnNotFoundError(Exception):
    """Raised when an identifier column is missing from the frame."""

    def __init__(self, column: str, available_columns: list[str]):
        self.column = column
        self.available_columns = available_columns
        super().__init__(
            f"Identifier column '{column}' not found. "
            f"Available: {', '.join(available_columns) or '(none)'}"
        )


def require_columns(lf: pl.LazyFrame, columns: list[str]) -> None:
    """Raise ColumnNotFoundError for the first of columns missing from lf."""
    available = lf.collect_schema().names()
    for column in columns:
        if column not in available:
            raise ColumnNotFoundError(column, available)


@dataclass(frozen=True)
class ValidatorConfig:
    """Immutable reporting options of a column validator.

    Attributes:
        severity_override: Severity to report instead of the validator's own
            (a Severity or its name)
        sample_size: Maximum number of invalid values kept as samples
        mostly: Fraction of values that must be valid; at or above it the
            column is not reported
    """

    severity_override: Severity | None = None
    sample_size: int = 5
    mostly: float | None = None

    def __post_init__(self) -> None:
        if isinstance(self.severity_override, str) and not isinstance(
            self.severity_override, Severity
        ):
            object.__setattr__(
                self, "severity_override", Severity(self.severity_override.lower())
            )
        if self.sample_size < 0:
            raise ValueError(f"sample_size cannot be negative: {self.sample_size}")
        if self.mostly is not None and not 0 <= self.mostly <= 1:
            raise ValueError(f"mostly is a fraction between 0 and 1, got {self.mostly}")


@dataclass
class ValidationIssue:
    """Invalid identifiers found in one column."""

    column: str
    kind: IdentifierKind
    count: int
    checked: int
    severity: Severity
    details: str
    sample_values: list[Any] = field(default_factory=list)

    @property
    def issue_type(self) -> str:
        return f"invalid_finnish_{self.kind.value}"

    @property
    def ratio(self) -> float:
        return self.count / self.checked if self.checked else 0.0

    def to_dict(self) -> dict:
        return {
            "column": self.column,
            "kind": self.kind.value,
            "issue_type": self.issue_type,
            "count": self.count,
            "checked": self.checked,
            "severity": self.severity.value,
            "details": self.details,
            "sample_values": self.sample_values,
        }
