"""API routers for the REST API."""

from cladding.web.routers.export import router as export_router
from cladding.web.routers.layout import router as layout_router
from cladding.web.routers.validate import router as validate_router

__all__ = [
    "export_router",
    "layout_router",
    "validate_router",
]
