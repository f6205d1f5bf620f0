"""Address placement endpoints."""

from fastapi import APIRouter

from editbook.application.config import load_config_from_dict
from editbook.web.dependencies import PlaceCommandDep
from editbook.web.exceptions import CaseCommandError
from editbook.web.schemas.requests import CaseConfigRequest
from editbook.web.schemas.responses import PlacementResultSchema, PlacementSchema

router = APIRouter(prefix="/placements", tags=["placements"])


@router.post("", response_model=PlacementResultSchema)
async def place_addresses(
    request: CaseConfigRequest,
    command: PlaceCommandDep,
) -> PlacementResultSchema:
    """Place the configuration's address list into its wings.

    The full placement list is recomputed on every call.

    Raises:
        ConfigError: If the configuration does not parse (422).
        CaseCommandError: If the case cannot be built (422).
    """
    config = load_config_from_dict(request.config)
    output = command.execute(config)
    if not output.is_valid:
        raise CaseCommandError(output.errors)

    result = output.placement
    return PlacementResultSchema(
        is_valid=True,
        placements=[
            PlacementSchema(
                address_id=p.address_id,
                wing_index=p.wing_index,
                wing_position=p.wing_position,
                shelf_number=p.shelf_number,
                start_cell=p.start_cell,
                cell_size=p.cell_size,
            )
            for p in result.placements
        ],
        displaced_address_ids=list(result.displaced_address_ids),
        placed_count=result.placed_count,
        total_count=result.total_count,
        displaced_count=result.displaced_count,
        summary=result.summary,
    )
