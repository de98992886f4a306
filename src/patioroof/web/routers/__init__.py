"""API routers for the REST API."""

from patioroof.web.routers.catalog import router as catalog_router
from patioroof.web.routers.export import router as export_router
from patioroof.web.routers.quote import router as quote_router
from patioroof.web.routers.validate import router as validate_router

__all__ = [
    "catalog_router",
    "export_router",
    "quote_router",
    "validate_router",
]
