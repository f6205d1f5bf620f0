"""Domain services for case layout allocation and constraints."""

from .cell_editor import add_sticker, clear_cell, edit_cell, remove_sticker
from .constraints import (
    MIN_CELL_WIDTH,
    CellMutation,
    auto_resolve,
    validate_all,
    validate_configuration,
    validate_min_width,
    validate_mutation,
    validate_reserved_protection,
    validate_shelf_overflow,
    validate_wing_boundary,
)
from .equipment import (
    WING_LABELS,
    EquipmentChange,
    EquipmentError,
    add_wing,
    build_wing,
    change_equipment,
    create_case,
    remove_wing,
)
from .placement import PlacementEngine, place_addresses
from .reserved_zones import (
    CaseStats,
    ZoneTable,
    compute_case_stats,
    compute_reserved_zones,
)
from .resize import apply_resize, resolve_resize

__all__ = [
    # Reserved zones
    "CaseStats",
    "ZoneTable",
    "compute_case_stats",
    "compute_reserved_zones",
    # Placement
    "PlacementEngine",
    "place_addresses",
    # Constraints
    "MIN_CELL_WIDTH",
    "CellMutation",
    "auto_resolve",
    "validate_all",
    "validate_configuration",
    "validate_min_width",
    "validate_mutation",
    "validate_reserved_protection",
    "validate_shelf_overflow",
    "validate_wing_boundary",
    # Resize
    "apply_resize",
    "resolve_resize",
    # Equipment
    "WING_LABELS",
    "EquipmentChange",
    "EquipmentError",
    "add_wing",
    "build_wing",
    "change_equipment",
    "create_case",
    "remove_wing",
    # Cell editing
    "add_sticker",
    "clear_cell",
    "edit_cell",
    "remove_sticker",
]
