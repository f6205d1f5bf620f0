"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from editbook.application.config import ConfigError
from editbook.domain.services import EquipmentError


class CaseCommandError(Exception):
    """Raised when a case command cannot run on the given configuration."""

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        super().__init__(f"Case command failed: {errors}")


class CellNotFoundError(Exception):
    """Raised when a request names a cell the case does not have."""

    def __init__(self, cell_id: str) -> None:
        self.cell_id = cell_id
        super().__init__(f"Cell not found: {cell_id}")


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": [
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ]
                or None,
            },
        )

    @app.exception_handler(EquipmentError)
    async def equipment_error_handler(
        request: Request, exc: EquipmentError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": str(exc),
                "error_type": "equipment",
                "details": None,
            },
        )

    @app.exception_handler(CaseCommandError)
    async def case_command_error_handler(
        request: Request, exc: CaseCommandError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": "Case command failed",
                "error_type": "case",
                "details": [{"message": e} for e in exc.errors],
            },
        )

    @app.exception_handler(CellNotFoundError)
    async def cell_not_found_handler(
        request: Request, exc: CellNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=404,
            content={
                "error": str(exc),
                "error_type": "not_found",
                "details": {"cell_id": exc.cell_id},
            },
        )
