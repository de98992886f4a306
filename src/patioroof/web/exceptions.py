"""API error types and the handlers that turn errors into JSON responses.

Every handled error produces ``{"error", "error_type", "details"}``.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from patioroof.application.config import ConfigError
from patioroof.domain.value_objects import (
    ConfigurationError,
    PriceUnavailableError,
    UnknownOptionError,
)


class UnsupportedFormatError(Exception):
    """Raised when an export format is not registered."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def _error_response(
    status_code: int, error: str, error_type: str, details: Any = None
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": error, "error_type": error_type, "details": details},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the domain and configuration error handlers on ``app``."""

    @app.exception_handler(PriceUnavailableError)
    async def price_unavailable_handler(
        request: Request, exc: PriceUnavailableError
    ) -> JSONResponse:
        return _error_response(
            422,
            str(exc),
            "price_unavailable",
            {"table": exc.table, "width": exc.width, "depth": exc.depth},
        )

    @app.exception_handler(ConfigurationError)
    async def configuration_error_handler(
        request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        return _error_response(
            422,
            str(exc),
            "configuration",
            [{"path": f"configuration.{exc.field}", "message": exc.message}],
        )

    @app.exception_handler(UnknownOptionError)
    async def unknown_option_handler(
        request: Request, exc: UnknownOptionError
    ) -> JSONResponse:
        return _error_response(422, str(exc), "unknown_option", {"context": exc.context})

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return _error_response(
            422,
            exc.message,
            exc.error_type,
            [{"path": d.get("path"), "message": d.get("message")} for d in exc.details],
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return _error_response(
            400,
            str(exc),
            "unsupported_format",
            {"format": exc.format_name, "available": exc.available},
        )
