"""Case file validation endpoints."""

from fastapi import APIRouter

from editbook.application.config import load_config_from_dict, validate_config
from editbook.web.schemas.requests import CaseConfigRequest
from editbook.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: CaseConfigRequest,
) -> ValidationResultSchema:
    """Validate a case configuration.

    Schema errors are returned as 422 responses; structural violations and
    address list problems come back in the result body.
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        errors=[
            {"message": e.message, "path": e.path, "kind": e.kind}
            for e in result.errors
        ],
        warnings=[
            {"message": w.message, "path": w.path, "suggestion": w.suggestion}
            for w in result.warnings
        ],
    )
