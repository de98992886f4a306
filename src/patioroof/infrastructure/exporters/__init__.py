"""Exporter framework for quotes.

- Exporter Protocol: Interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- csv: Price breakdown as CSV
- json: Configuration, layout and price as JSON

Usage:
    from patioroof.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    exporter = ExporterRegistry.create("json")
"""

from patioroof.infrastructure.exporters.base import (
    ExportManager,
    Exporter,
    ExporterRegistry,
)
from patioroof.infrastructure.exporters.csv_exporter import CsvPriceExporter
from patioroof.infrastructure.exporters.json_exporter import JsonQuoteExporter

__all__ = [
    "CsvPriceExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonQuoteExporter",
]
