"""Validator protocol for case file validation.

Every configuration validator implements this protocol so the registry
can run them uniformly.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from editbook.application.config.schema import CaseFileConfiguration
    from editbook.application.config.validators.base import ValidationResult


@runtime_checkable
class Validator(Protocol):
    """Protocol for case file validators.

    Attributes:
        name: Unique identifier for the validator (e.g., "structure", "addresses").

    Example:
        class MyValidator:
            @property
            def name(self) -> str:
                return "my_validator"

            def validate(self, config: CaseFileConfiguration) -> ValidationResult:
                result = ValidationResult()
                if problem_found:
                    result.add_error("wings[0]", "Description of problem")
                return result
    """

    @property
    def name(self) -> str:
        """Return the unique name/identifier for this validator."""
        ...

    def validate(self, config: CaseFileConfiguration) -> ValidationResult:
        """Validate the given configuration."""
        ...
