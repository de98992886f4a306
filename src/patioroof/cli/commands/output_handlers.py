"""Output handling for the quote CLI: rendering and multi-format export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from patioroof.application.factory import get_factory
from patioroof.infrastructure.exporters import ExporterRegistry, ExportManager
from patioroof.infrastructure.formatters import QuoteFormatter

if TYPE_CHECKING:
    from patioroof.application.dtos import QuoteOutput

__all__ = [
    "emit",
    "handle_multi_format_export",
    "render_quote",
]


def render_quote(output: QuoteOutput, output_format: str) -> str:
    """Render a quote as text or with a registered exporter."""
    if output_format == "text":
        factory = get_factory()
        formatter = QuoteFormatter(
            price_formatter=factory.get_price_formatter(),
            layout_formatter=factory.get_layout_formatter(),
            catalog_formatter=factory.get_catalog_formatter(),
        )
        return formatter.format(output)
    if not ExporterRegistry.is_registered(output_format):
        available = ", ".join(["text", *ExporterRegistry.available_formats()])
        typer.echo(
            f"Error: Unknown format '{output_format}'. Available formats: {available}",
            err=True,
        )
        raise typer.Exit(code=1)
    return ExporterRegistry.create(output_format).export_string(output)


def emit(content: str, output_file: Path | None) -> None:
    """Write ``content`` to ``output_file`` or stdout."""
    if output_file is None:
        typer.echo(content)
        return
    output_file.parent.mkdir(parents=True, exist_ok=True)
    output_file.write_text(content, encoding="utf-8")
    typer.echo(f"Output written to: {output_file}")


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path,
    project_name: str,
    result: QuoteOutput,
) -> dict[str, Path]:
    """Export a quote to a comma-separated list of formats (or "all").

    Returns:
        Mapping of format name to written file path.
    """
    if output_formats_str.lower() == "all":
        formats = ExporterRegistry.available_formats()
    else:
        formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]

    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid or not formats:
        typer.echo(f"Unknown formats: {', '.join(invalid) or '(none given)'}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir)
    try:
        results = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Error: Export failed: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Exported {len(results)} file(s) to {output_dir}:")
    for format_name, path in results.items():
        typer.echo(f"  {format_name}: {path.name}")
    return results
