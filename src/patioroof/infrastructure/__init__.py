"""Infrastructure layer - formatters and file exporters."""

from .exporters import (
    CsvPriceExporter,
    ExportManager,
    ExporterRegistry,
    JsonQuoteExporter,
)
from .formatters import (
    CatalogFormatter,
    LayoutSummaryFormatter,
    PriceBreakdownFormatter,
    QuoteFormatter,
    format_eur,
)

__all__ = [
    "CatalogFormatter",
    "CsvPriceExporter",
    "ExportManager",
    "ExporterRegistry",
    "JsonQuoteExporter",
    "LayoutSummaryFormatter",
    "PriceBreakdownFormatter",
    "QuoteFormatter",
    "format_eur",
]
