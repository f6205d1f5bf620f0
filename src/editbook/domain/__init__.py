"""Domain layer - core business logic."""

from .entities import (
    Address,
    CaseConfiguration,
    Cell,
    CellLocation,
    OccupiedWing,
    Shelf,
    Sticker,
    Wing,
)
from .services import (
    PlacementEngine,
    ZoneTable,
    apply_resize,
    auto_resolve,
    compute_reserved_zones,
    create_case,
    place_addresses,
    resolve_resize,
    validate_configuration,
)
from .value_objects import (
    CellType,
    EquipmentType,
    Placement,
    PlacementResult,
    ResizeResult,
    Violation,
    ViolationKind,
)

__all__ = [
    "Address",
    "CaseConfiguration",
    "Cell",
    "CellLocation",
    "CellType",
    "EquipmentType",
    "OccupiedWing",
    "Placement",
    "PlacementEngine",
    "PlacementResult",
    "ResizeResult",
    "Shelf",
    "Sticker",
    "Violation",
    "ViolationKind",
    "Wing",
    "ZoneTable",
    "apply_resize",
    "auto_resolve",
    "compute_reserved_zones",
    "create_case",
    "place_addresses",
    "resolve_resize",
    "validate_configuration",
]
