"""Validators subpackage - modular validators for case files.

- CaseStructureValidator: cell widths, wing boundaries, shelf capacity,
  reserved cell layout
- AddressListValidator: address ids, cell address references, displacement

The ValidatorRegistry coordinates running them against a configuration.
"""

from .addresses import AddressListValidator
from .base import ValidationError, ValidationResult, ValidationWarning
from .case import CaseStructureValidator
from .registry import ValidatorRegistry

__all__ = [
    # Base classes
    "ValidationError",
    "ValidationWarning",
    "ValidationResult",
    # Registry
    "ValidatorRegistry",
    # Validators
    "AddressListValidator",
    "CaseStructureValidator",
]
