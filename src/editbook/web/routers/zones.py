"""Reserved-zone endpoints."""

from fastapi import APIRouter

from editbook.domain.entities import OccupiedWing
from editbook.domain.services import compute_case_stats, compute_reserved_zones
from editbook.web.schemas.requests import ZonesRequest
from editbook.web.schemas.responses import (
    CaseStatsSchema,
    ShelfZoneSchema,
    StatusCodeSchema,
    ZoneTableSchema,
)

router = APIRouter(prefix="/zones", tags=["zones"])


@router.post("", response_model=ZoneTableSchema)
async def reserved_zones(request: ZonesRequest) -> ZoneTableSchema:
    """Compute usable cell ranges and status-code cells for a slot selection."""
    occupied = [
        OccupiedWing.from_type(position, equipment_type)
        for position, equipment_type in enumerate(request.slots)
        if equipment_type is not None
    ]
    table = compute_reserved_zones(occupied)
    stats = compute_case_stats(request.slots)

    zones = [
        ShelfZoneSchema(
            wing_index=wing_index,
            wing_position=table.wings[wing_index].position,
            shelf_number=shelf_number,
            first_free=zone.first_free,
            last_usable=zone.last_usable,
            usable_width=zone.usable_width,
        )
        for (wing_index, shelf_number), zone in sorted(table.zones.items())
    ]
    return ZoneTableSchema(
        zones=zones,
        status_codes=[
            StatusCodeSchema(
                label=sc.code.label,
                full_name=sc.code.full_name,
                width=sc.code.width,
                start_cell=sc.start_cell,
                end_cell=sc.end_cell,
            )
            for sc in table.status_codes
        ],
        stats=CaseStatsSchema(
            slot_labels=list(stats.slot_labels),
            total_cells=stats.total_cells,
            reserved_cells=stats.reserved_cells,
            usable_cells=stats.usable_cells,
        ),
    )
