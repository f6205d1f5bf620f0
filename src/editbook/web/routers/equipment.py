"""Equipment catalog and case creation endpoints."""

from typing import Any

from fastapi import APIRouter, Query

from editbook.application.config import RouteConfig, case_to_config
from editbook.domain.services import create_case
from editbook.domain.value_objects import EQUIPMENT_SPECS
from editbook.web.schemas.requests import ZonesRequest
from editbook.web.schemas.responses import EquipmentSpecSchema

router = APIRouter(prefix="/equipment", tags=["equipment"])


@router.get("", response_model=list[EquipmentSpecSchema])
async def list_equipment() -> list[EquipmentSpecSchema]:
    """List the equipment items a wing slot can hold."""
    return [
        EquipmentSpecSchema(
            equipment_type=equipment_type.value,
            label=spec.label,
            description=spec.description,
            cells_per_shelf=spec.cells_per_shelf,
            total_cells=spec.total_cells,
            has_desk=spec.has_desk,
        )
        for equipment_type, spec in EQUIPMENT_SPECS.items()
    ]


@router.post("/cases")
async def new_case(
    request: ZonesRequest,
    route_id: str = Query(default="default", min_length=1),
) -> dict[str, Any]:
    """Build a case file for a slot selection, reserved cells laid down.

    Raises:
        EquipmentError: If the selection is not a legal case (422).
    """
    case = create_case(request.slots, route_id=route_id)
    config = case_to_config(case, [], route=RouteConfig(route_id=route_id))
    return config.model_dump(mode="json")
