"""Full validation of a case file configuration."""

from editbook.application.config.schema import CaseFileConfiguration
from editbook.application.config.validators import (
    AddressListValidator,
    CaseStructureValidator,
    ValidationResult,
    ValidatorRegistry,
)

DEFAULT_VALIDATORS = (CaseStructureValidator, AddressListValidator)


def register_default_validators() -> None:
    """Register the built-in validators that are not registered yet."""
    for validator_class in DEFAULT_VALIDATORS:
        validator = validator_class()
        if not ValidatorRegistry.is_registered(validator.name):
            ValidatorRegistry.register(validator)


def validate_config(config: CaseFileConfiguration) -> ValidationResult:
    """Perform full validation of a case configuration.

    Structural checks are already handled by the pydantic schema; this
    runs every enabled registered validator on top of it.

    Args:
        config: A CaseFileConfiguration instance (already validated by pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    register_default_validators()
    return ValidatorRegistry.validate_all(config)
