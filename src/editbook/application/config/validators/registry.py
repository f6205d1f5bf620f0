"""Registry of case file validators.

Validators register by name and run in name order so that reports are
stable between runs.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from .base import ValidationResult

if TYPE_CHECKING:
    from editbook.application.config.schema import CaseFileConfiguration
    from editbook.contracts.validators import Validator

logger = logging.getLogger(__name__)


class ValidatorRegistry:
    """Class-level registry of case file validators.

    Example:
        ValidatorRegistry.register(CaseStructureValidator())
        result = ValidatorRegistry.validate_all(config)
        ValidatorRegistry.disable("addresses")
    """

    _validators: ClassVar[dict[str, "Validator"]] = {}
    _disabled: ClassVar[set[str]] = set()

    @classmethod
    def register(cls, validator: "Validator") -> None:
        """Register a validator instance, replacing any with the same name."""
        name = validator.name
        if name in cls._validators:
            logger.warning(f"Overwriting existing validator '{name}'")
        cls._validators[name] = validator
        logger.debug(f"Registered validator '{name}': {type(validator).__name__}")

    @classmethod
    def get(cls, name: str) -> "Validator":
        """Get a validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            available = ", ".join(sorted(cls._validators))
            raise KeyError(
                f"No validator registered with name '{name}'. "
                f"Available validators: {available or 'none'}"
            )
        return cls._validators[name]

    @classmethod
    def available(cls) -> list[str]:
        return sorted(cls._validators)

    @classmethod
    def is_registered(cls, name: str) -> bool:
        return name in cls._validators

    @classmethod
    def enable(cls, name: str) -> None:
        """Re-enable a disabled validator.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        cls._disabled.discard(name)
        logger.debug(f"Enabled validator '{name}'")

    @classmethod
    def disable(cls, name: str) -> None:
        """Skip a validator in validate_all().

        Raises:
            KeyError: If no validator is registered with that name.
        """
        if name not in cls._validators:
            raise KeyError(f"No validator registered with name '{name}'")
        cls._disabled.add(name)
        logger.debug(f"Disabled validator '{name}'")

    @classmethod
    def is_enabled(cls, name: str) -> bool:
        return name in cls._validators and name not in cls._disabled

    @classmethod
    def validate_all(cls, config: "CaseFileConfiguration") -> ValidationResult:
        """Run every enabled validator and merge their results.

        A validator that raises is reported as an error on the "validation"
        path instead of aborting the run.
        """
        result = ValidationResult()

        for name in sorted(cls._validators):
            if name in cls._disabled:
                logger.debug(f"Skipping disabled validator '{name}'")
                continue

            validator = cls._validators[name]
            logger.debug(f"Running validator '{name}'")
            try:
                result.merge(validator.validate(config))
            except Exception as e:
                logger.error(f"Validator '{name}' raised an exception: {e}")
                result.add_error(
                    path="validation",
                    message=f"Validator '{name}' failed: {e}",
                )

        return result

    @classmethod
    def validate_single(
        cls, name: str, config: "CaseFileConfiguration"
    ) -> ValidationResult:
        """Run one validator by name.

        Raises:
            KeyError: If no validator is registered with that name.
        """
        return cls.get(name).validate(config)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered validators and disabled states."""
        cls._validators.clear()
        cls._disabled.clear()

    @classmethod
    def reset_disabled(cls) -> None:
        cls._disabled.clear()
