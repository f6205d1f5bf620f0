"""Cell resize endpoints."""

from fastapi import APIRouter

from editbook.application.config import load_config_from_dict
from editbook.application.dtos import ResizeInput
from editbook.web.dependencies import ResizeCommandDep
from editbook.web.exceptions import CaseCommandError, CellNotFoundError
from editbook.web.schemas.requests import ResizeRequest
from editbook.web.schemas.responses import ResizeResultSchema, WidthAdjustmentSchema

router = APIRouter(prefix="/resize", tags=["resize"])


@router.post("", response_model=ResizeResultSchema)
async def resize_cell(
    request: ResizeRequest,
    command: ResizeCommandDep,
) -> ResizeResultSchema:
    """Resolve a resize with neighbor displacement.

    Rejections (reserved cell, width below one inch, clamped expansion)
    are returned in the body with ``valid`` false, not as HTTP errors.
    """
    config = load_config_from_dict(request.config)
    output = command.execute(
        config,
        ResizeInput(cell_id=request.cell_id, new_width=request.new_width),
        apply=request.apply,
    )
    if output.result is None:
        if not output.cell_found:
            raise CellNotFoundError(request.cell_id)
        raise CaseCommandError(output.errors)

    result = output.result
    return ResizeResultSchema(
        valid=result.valid,
        adjustments=[
            WidthAdjustmentSchema(
                cell_id=adj.cell_id, old_width=adj.old_width, new_width=adj.new_width
            )
            for adj in result.adjustments
        ],
        max_width=result.max_width,
        message=result.message,
        violation=result.violation.value if result.violation is not None else None,
        unallocated_width=result.unallocated_width,
        applied=output.applied,
        config=(
            output.config.model_dump(mode="json") if output.config is not None else None
        ),
    )
