"""Tunnus - Validation of Finnish national identifiers, with Polars column checks."""

from tunnus.api import check
from tunnus.identity import (
    FinnishIdentityValidator,
    IdentityValidator,
    PersonalIdentityNumber,
    parse_pin,
    validate_business_id,
    validate_finuid,
    validate_pin,
    validate_ssn,
    validate_vat,
)
from tunnus.report import Report
from tunnus.types import IdentifierKind, Severity
from tunnus.validators import registry

# Version: Single source of truth from pyproject.toml
try:
    from importlib.metadata import version, PackageNotFoundError

    __version__ = version("tunnus")
except PackageNotFoundError:
    # Package not installed (development mode)
    __version__ = "0.0.0.dev"
__all__ = [
    # Identifier validation
    "validate_pin",
    "validate_ssn",
    "validate_vat",
    "validate_business_id",
    "validate_finuid",
    "parse_pin",
    "PersonalIdentityNumber",
    "IdentityValidator",
    "FinnishIdentityValidator",
    # Column checks
    "check",
    "Report",
    "registry",
    # Types
    "IdentifierKind",
    "Severity",
]
