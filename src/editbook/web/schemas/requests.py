"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from editbook.domain.value_objects import MAX_WINGS, EquipmentType


class CaseConfigRequest(BaseModel):
    """Request carrying a full case file configuration."""

    config: dict[str, Any] = Field(..., description="Case file configuration JSON")


class ResizeRequest(BaseModel):
    """Request for resizing one cell of a case."""

    config: dict[str, Any] = Field(..., description="Case file configuration JSON")
    cell_id: str = Field(..., min_length=1, description="Cell to resize")
    new_width: int = Field(..., description="Proposed width in inches")
    apply: bool = Field(
        default=False, description="Return the updated configuration when valid"
    )


class ZonesRequest(BaseModel):
    """Request for reserved zones of a slot selection."""

    slots: list[EquipmentType | None] = Field(
        ...,
        max_length=MAX_WINGS,
        description="Equipment type per slot, left to right; null for an empty slot",
    )
