"""Value objects for the case layout domain.

This module provides immutable data types used throughout the engine.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Equipment and reserved cells
from ._equipment import (
    EQUIPMENT_SPECS,
    FORM_3982_PER_SHELF,
    MAX_WINGS,
    RESERVED_STATUS_CODES,
    SHELF_COUNT,
    TOTAL_STATUS_WIDTH,
    CellType,
    EquipmentSpec,
    EquipmentType,
    StatusCode,
    equipment_spec,
)

# Reserved zones
from ._zones import (
    ShelfZone,
    StatusCodePlacement,
)

# Placement output
from ._placement import (
    Placement,
    PlacementResult,
)

# Constraints and resizing
from ._constraints import (
    ConstraintResult,
    FixAction,
    MutationType,
    ResizeResult,
    SuggestedFix,
    Violation,
    ViolationKind,
    WidthAdjustment,
)

__all__ = [
    # Equipment
    "EQUIPMENT_SPECS",
    "FORM_3982_PER_SHELF",
    "MAX_WINGS",
    "RESERVED_STATUS_CODES",
    "SHELF_COUNT",
    "TOTAL_STATUS_WIDTH",
    "CellType",
    "EquipmentSpec",
    "EquipmentType",
    "StatusCode",
    "equipment_spec",
    # Zones
    "ShelfZone",
    "StatusCodePlacement",
    # Placement
    "Placement",
    "PlacementResult",
    # Constraints
    "ConstraintResult",
    "FixAction",
    "MutationType",
    "ResizeResult",
    "SuggestedFix",
    "Violation",
    "ViolationKind",
    "WidthAdjustment",
]
