"""Export endpoints."""

from fastapi import APIRouter, Response

from patioroof.infrastructure.exporters import ExporterRegistry
from patioroof.web.dependencies import QuoteCommandDep
from patioroof.web.exceptions import UnsupportedFormatError
from patioroof.web.routers.quote import run_quote
from patioroof.web.schemas.requests import QuoteRequest
from patioroof.web.schemas.responses import ExportFormatsSchema

router = APIRouter(prefix="/export", tags=["export"])

MEDIA_TYPES = {"json": "application/json", "csv": "text/csv"}


@router.get("/formats", response_model=ExportFormatsSchema)
async def export_formats() -> ExportFormatsSchema:
    """List the registered export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/{format_name}")
async def export_quote(
    format_name: str,
    request: QuoteRequest,
    command: QuoteCommandDep,
) -> Response:
    """Export a quote in any registered format.

    Raises:
        UnsupportedFormatError: If the format is not registered.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    output = run_quote(command, request)
    exporter = ExporterRegistry.create(format_name)
    return Response(
        content=exporter.export_string(output),
        media_type=MEDIA_TYPES.get(format_name, "text/plain"),
    )
