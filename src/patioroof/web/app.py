"""FastAPI application factory."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from patioroof import __version__
from patioroof.web.exceptions import register_exception_handlers
from patioroof.web.routers import (
    catalog_router,
    export_router,
    quote_router,
    validate_router,
)

API_PREFIX = "/api/v1"


def create_app(api_prefix: str = API_PREFIX) -> FastAPI:
    """Build the configurator API.

    The quote, validate, catalog and export routers are mounted under
    ``api_prefix``; ``/health`` is served at the root.
    """
    app = FastAPI(
        title="Patio Roof Configurator API",
        description="Structural layout and itemized prices for patio roofs",
        version=__version__,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    for router in (quote_router, validate_router, catalog_router, export_router):
        app.include_router(router, prefix=api_prefix)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "version": __version__}

    return app


# Application instance for ASGI servers
app = create_app()
