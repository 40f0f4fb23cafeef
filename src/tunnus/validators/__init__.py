"""Column validators for Finnish identifiers, one per identifier kind."""

from __future__ import annotations

from tunnus.validators.base import (
    ColumnNotFoundError,
    ValidationIssue,
    ValidatorConfig,
    require_columns,
)
from tunnus.validators.registry import ValidatorRegistry, registry, register_validator
from tunnus.validators.finnish import (
    FinnishIdentifierValidator,
    FinnishPINValidator,
    FinnishSSNValidator,
    FinnishVATValidator,
    FinnishBusinessIdValidator,
    FinnishFINUIDValidator,
)

__all__ = [
    "ColumnNotFoundError",
    "ValidationIssue",
    "ValidatorConfig",
    "require_columns",
    "ValidatorRegistry",
    "registry",
    "register_validator",
    "get_validator",
    "list_validators",
    "FinnishIdentifierValidator",
    "FinnishPINValidator",
    "FinnishSSNValidator",
    "FinnishVATValidator",
    "FinnishBusinessIdValidator",
    "FinnishFINUIDValidator",
]


def get_validator(name: str) -> type[FinnishIdentifierValidator]:
    """Get a validator class by registry name, e.g. "finnish_pin".

    Raises:
        ValueError: If no validator has that name
    """
    return registry.get(name)


def list_validators() -> dict[str, type[FinnishIdentifierValidator]]:
    return registry.list_all()
