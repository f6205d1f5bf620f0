"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from editbook.web.exceptions import register_exception_handlers
from editbook.web.routers import (
    equipment_router,
    placements_router,
    resize_router,
    validate_router,
    zones_router,
)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Edit Book Assist API",
        description="REST API for carrier case layout, address placement and cell resizing",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(placements_router, prefix="/api/v1")
    app.include_router(validate_router, prefix="/api/v1")
    app.include_router(resize_router, prefix="/api/v1")
    app.include_router(zones_router, prefix="/api/v1")
    app.include_router(equipment_router, prefix="/api/v1")

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


# Application instance for ASGI servers
app = create_app()
