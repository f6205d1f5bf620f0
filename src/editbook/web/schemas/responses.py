"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PlacementSchema(BaseModel):
    """One placed address."""

    address_id: str = Field(..., description="Placed address id")
    wing_index: int = Field(..., description="Index in the occupied-wing list")
    wing_position: int = Field(..., description="Slot position 0-3")
    shelf_number: int = Field(..., description="Shelf 1-6")
    start_cell: int = Field(..., description="First cell number used (1-based)")
    cell_size: int = Field(..., description="Number of cells used")


class PlacementResultSchema(BaseModel):
    """Response for address placement."""

    is_valid: bool = Field(..., description="Whether placement ran")
    errors: list[str] = Field(default_factory=list, description="Error messages")
    placements: list[PlacementSchema] = Field(default_factory=list)
    displaced_address_ids: list[str] = Field(default_factory=list)
    placed_count: int = Field(default=0)
    total_count: int = Field(default=0)
    displaced_count: int = Field(default=0)
    summary: str = Field(default="", description="One-line placement summary")


class ValidationResultSchema(BaseModel):
    """Response for case file validation."""

    is_valid: bool = Field(..., description="Whether the case file is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class WidthAdjustmentSchema(BaseModel):
    """Width change for one neighbor cell."""

    cell_id: str
    old_width: int
    new_width: int


class ResizeResultSchema(BaseModel):
    """Response for a resize request."""

    valid: bool = Field(..., description="Whether the resize may be applied")
    adjustments: list[WidthAdjustmentSchema] = Field(default_factory=list)
    max_width: int = Field(..., description="Width the target cell should take")
    message: str | None = None
    violation: str | None = Field(default=None, description="Violation kind, if any")
    unallocated_width: int = Field(
        default=0, description="Freed width no neighbor absorbed"
    )
    applied: bool = False
    config: dict[str, Any] | None = Field(
        default=None, description="Updated configuration when applied"
    )


class ShelfZoneSchema(BaseModel):
    """Usable range of one wing/shelf."""

    wing_index: int
    wing_position: int
    shelf_number: int
    first_free: int
    last_usable: int
    usable_width: int


class StatusCodeSchema(BaseModel):
    """Status-code cells on shelf 1 of the rightmost wing."""

    label: str
    full_name: str
    width: int
    start_cell: int
    end_cell: int


class CaseStatsSchema(BaseModel):
    """Capacity summary."""

    slot_labels: list[str]
    total_cells: int
    reserved_cells: int
    usable_cells: int


class ZoneTableSchema(BaseModel):
    """Response for reserved-zone calculation."""

    zones: list[ShelfZoneSchema] = Field(default_factory=list)
    status_codes: list[StatusCodeSchema] = Field(default_factory=list)
    stats: CaseStatsSchema


class EquipmentSpecSchema(BaseModel):
    """One equipment item."""

    equipment_type: str
    label: str
    description: str
    cells_per_shelf: int
    total_cells: int
    has_desk: bool


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )
