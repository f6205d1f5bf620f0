"""Pydantic schemas for the REST API."""

from editbook.web.schemas.requests import (
    CaseConfigRequest,
    ResizeRequest,
    ZonesRequest,
)
from editbook.web.schemas.responses import (
    CaseStatsSchema,
    EquipmentSpecSchema,
    ErrorResponseSchema,
    PlacementResultSchema,
    PlacementSchema,
    ResizeResultSchema,
    ShelfZoneSchema,
    StatusCodeSchema,
    ValidationResultSchema,
    WidthAdjustmentSchema,
    ZoneTableSchema,
)

__all__ = [
    # Requests
    "CaseConfigRequest",
    "ResizeRequest",
    "ZonesRequest",
    # Responses
    "CaseStatsSchema",
    "EquipmentSpecSchema",
    "ErrorResponseSchema",
    "PlacementResultSchema",
    "PlacementSchema",
    "ResizeResultSchema",
    "ShelfZoneSchema",
    "StatusCodeSchema",
    "ValidationResultSchema",
    "WidthAdjustmentSchema",
    "ZoneTableSchema",
]
