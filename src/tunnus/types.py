"""Type definitions for Tunnus."""

from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of invalid identifiers in a column, lowest first."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return list(Severity).index(self)

    def __ge__(self, other: "Severity") -> bool:
        return self.rank >= Severity(other).rank

    def __gt__(self, other: "Severity") -> bool:
        return self.rank > Severity(other).rank

    def __le__(self, other: "Severity") -> bool:
        return self.rank <= Severity(other).rank

    def __lt__(self, other: "Severity") -> bool:
        return self.rank < Severity(other).rank


class IdentifierKind(str, Enum):
    """Finnish identifier formats understood by Tunnus."""

    PIN = "pin"  # henkilötunnus
    SSN = "ssn"  # alias of PIN
    VAT = "vat"  # ALV-numero
    BUSINESS_ID = "business_id"  # Y-tunnus
    FINUID = "finuid"  # SATU

    @classmethod
    def parse(cls, value: "str | IdentifierKind") -> "IdentifierKind":
        """Resolve a kind from its value, ignoring case.

        Raises:
            ValueError: If the value names no identifier kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            available = ", ".join(k.value for k in cls)
            raise ValueError(
                f"Unknown identifier kind: {value}. Available: {available}"
            ) from None

    @property
    def validator_name(self) -> str:
        """Registry name of the column validator for this kind."""
        return f"finnish_{self.value}"
