"""CSV price-list exporter.

One row per price line item with its amount, followed by the total. Zero
line items are kept so every export has the same rows.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from patioroof.infrastructure.exporters.base import ExporterRegistry
from patioroof.infrastructure.formatters import PRICE_LABELS

if TYPE_CHECKING:
    from patioroof.application.dtos import QuoteOutput


logger = logging.getLogger(__name__)

CSV_HEADER = ("item", "description", "amount_eur")


@ExporterRegistry.register("csv")
class CsvPriceExporter:
    """Exports the price breakdown of a quote as CSV.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"

    def export(self, output: QuoteOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8", newline="")
        logger.info(f"Exported CSV price list to {path}")

    def export_string(self, output: QuoteOutput) -> str:
        buffer = io.StringIO()
        writer = csv.writer(buffer)
        writer.writerow(CSV_HEADER)
        for key, amount in output.price.line_items.items():
            writer.writerow((key, PRICE_LABELS[key], f"{amount:.2f}"))
        writer.writerow(("total_price", "Total (excl. VAT)", f"{output.price.total_price:.2f}"))
        return buffer.getvalue()
