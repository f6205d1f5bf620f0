"""API routers for the REST API."""

from editbook.web.routers.equipment import router as equipment_router
from editbook.web.routers.placements import router as placements_router
from editbook.web.routers.resize import router as resize_router
from editbook.web.routers.validate import router as validate_router
from editbook.web.routers.zones import router as zones_router

__all__ = [
    "equipment_router",
    "placements_router",
    "resize_router",
    "validate_router",
    "zones_router",
]
