"""JSON quote exporter.

The document holds the configuration, the billing size, the complete
structural layout and the price breakdown, plus accessories when quoted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from patioroof.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from patioroof.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)

# Schema version of the exported document
SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonQuoteExporter:
    """Exports a quote as a JSON document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, include_layout: bool = True, indent: int = 2) -> None:
        """Initialize the exporter.

        Args:
            include_layout: Whether to include the full structural layout.
            indent: JSON indentation level.
        """
        self.include_layout = include_layout
        self.indent = indent

    def export(self, output: QuoteOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON quote to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        return json.dumps(self.build(output), indent=self.indent)

    def build(self, output: QuoteOutput) -> dict[str, Any]:
        """Build the JSON-compatible document for ``output``."""
        data = output.to_dict()
        if not self.include_layout:
            data.pop("layout")
        return {"schema_version": SCHEMA_VERSION, "currency": "EUR", **data}
