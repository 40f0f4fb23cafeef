"""Registry of column validators, keyed by validator name."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from tunnus.types import IdentifierKind

if TYPE_CHECKING:
    from tunnus.validators.finnish import FinnishIdentifierValidator

    ValidatorClass = type[FinnishIdentifierValidator]


class ValidatorRegistry:
    """Name -> validator class lookup, filled by @register_validator."""

    def __init__(self) -> None:
        self._validators: dict[str, "ValidatorClass"] = {}

    def register(self, validator_cls: "ValidatorClass") -> None:
        """Register a validator class under its name.

        Raises:
            ValueError: If another class already uses the name
        """
        name = validator_cls.name
        existing = self._validators.get(name)
        if existing is not None and existing is not validator_cls:
            raise ValueError(
                f"Validator name '{name}' already registered by {existing.__name__}"
            )
        self._validators[name] = validator_cls

    def unregister(self, name: str) -> None:
        """Remove a validator; unknown names are ignored."""
        self._validators.pop(name, None)

    def get(self, name: str) -> "ValidatorClass":
        """Get a validator class by name."""
        if name not in self._validators:
            available = ", ".join(sorted(self._validators))
            raise ValueError(f"Unknown validator: {name}. Available: {available}")
        return self._validators[name]

    def for_kind(self, kind: str | IdentifierKind) -> "ValidatorClass":
        """Get the validator class checking an identifier kind."""
        return self.get(IdentifierKind.parse(kind).validator_name)

    def list_all(self) -> dict[str, "ValidatorClass"]:
        return dict(self._validators)

    def __iter__(self) -> Iterator[tuple[str, "ValidatorClass"]]:
        return iter(list(self._validators.items()))

    def __contains__(self, name: str) -> bool:
        return name in self._validators

    def __len__(self) -> int:
        return len(self._validators)


registry = ValidatorRegistry()


def register_validator(cls: "ValidatorClass") -> "ValidatorClass":
    """Class decorator registering a validator in the shared registry."""
    registry.register(cls)
    return cls
