"""Configuration schema and loading system for case files.

This package provides JSON-based case file loading and validation. It
includes pydantic models for schema validation, a loader with
comprehensive error handling, the adapter to domain objects and the
validator registry.

Example:
    >>> from pathlib import Path
    >>> from editbook.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("route-001.json"))
    ...     print(f"Wings: {len(config.wings)}, addresses: {len(config.addresses)}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from editbook.application.config.adapter import (
    case_to_config,
    config_to_addresses,
    config_to_case,
    wing_id_for,
)
from editbook.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
    write_config,
)
from editbook.application.config.schema import (
    SUPPORTED_VERSIONS,
    AddressConfig,
    CaseFileConfiguration,
    CellConfig,
    RouteConfig,
    ShelfConfig,
    StickerConfig,
    WingConfig,
)
from editbook.application.config.validator import (
    register_default_validators,
    validate_config,
)
from editbook.application.config.validators import (
    AddressListValidator,
    CaseStructureValidator,
    ValidationError,
    ValidationResult,
    ValidationWarning,
    ValidatorRegistry,
)

__all__ = [
    # Schema
    "SUPPORTED_VERSIONS",
    "AddressConfig",
    "CaseFileConfiguration",
    "CellConfig",
    "RouteConfig",
    "ShelfConfig",
    "StickerConfig",
    "WingConfig",
    # Loading
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    "write_config",
    # Adapter
    "case_to_config",
    "config_to_addresses",
    "config_to_case",
    "wing_id_for",
    # Validation
    "AddressListValidator",
    "CaseStructureValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
    "ValidatorRegistry",
    "register_default_validators",
    "validate_config",
]
