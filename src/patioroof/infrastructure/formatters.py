"""Plain-text formatters for quotes, layouts and accessory prices."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patioroof.application.dtos import QuoteOutput
    from patioroof.domain.services import AccessoryPrices
    from patioroof.domain.value_objects import PriceBreakdown, StructureLayout


PRICE_LABELS: dict[str, str] = {
    "base_price": "Base frame",
    "roof_covering_price": "Roof covering",
    "freestanding_price": "Free-standing posts",
    "post_length_price": "Post length",
    "post_mounting_price": "Post mounting",
    "mounting_set_price": "Mounting set",
    "side_panel_left_price": "Side panel left",
    "side_panel_right_price": "Side panel right",
    "custom_size_price": "Custom size",
}


def format_eur(amount: float) -> str:
    """Format an amount as EUR with thousands separators, e.g. '1,204.76 EUR'."""
    return f"{amount:,.2f} EUR"


class PriceBreakdownFormatter:
    """Formats a price breakdown as a table.

    Zero line items are left out unless ``show_zero`` is set.
    """

    def __init__(self, show_zero: bool = False) -> None:
        self._show_zero = show_zero

    def format(self, price: PriceBreakdown) -> str:
        lines = [
            "PRICE BREAKDOWN",
            "=" * 44,
        ]
        for key, amount in price.line_items.items():
            if amount == 0 and not self._show_zero:
                continue
            lines.append(f"{PRICE_LABELS[key]:<26} {format_eur(amount):>17}")
        lines.append("-" * 44)
        lines.append(f"{'TOTAL (excl. VAT)':<26} {format_eur(price.total_price):>17}")
        return "\n".join(lines)


class LayoutSummaryFormatter:
    """Formats the key dimensions of a structural layout."""

    def format(self, layout: StructureLayout) -> str:
        slope_deg = math.degrees(layout.roof_panel.slope_angle)
        lines = [
            "STRUCTURE LAYOUT",
            "=" * 44,
            f"Front height:       {layout.front_height:8.3f} m",
            f"Back height:        {layout.back_height:8.3f} m",
            f"Height difference:  {layout.height_difference:8.3f} m",
            f"Roof pitch:         {slope_deg:8.2f} deg",
            f"Rafters:            {len(layout.rafters):8d} ({layout.rafter_count} fields, "
            f"{layout.rafter_spacing:.3f} m spacing)",
            f"Rafter length:      {layout.rafters[0].length:8.3f} m",
            f"Beam length:        {layout.front_beam.length:8.3f} m",
            "",
            "Supports:",
        ]
        for support in layout.post_supports:
            lines.append(
                f"  {support.kind.value:<12} {support.side.value:<6} "
                f"height {support.height:.3f} m"
            )
        if layout.side_panels:
            lines.append("")
            lines.append("Side panels:")
            for panel in layout.side_panels:
                lines.append(
                    f"  {panel.side.value:<6} {panel.panel_type.value:<12} "
                    f"height {panel.height:.3f} m"
                )
        return "\n".join(lines)


class CatalogFormatter:
    """Formats accessory prices."""

    def format(self, accessories: AccessoryPrices) -> str:
        awning = accessories.vertical_front_awning
        lines = [
            "ACCESSORIES",
            "=" * 44,
            f"{'Roof awning ZIP':<26} {format_eur(accessories.roof_awning_zip):>17}",
            f"{'Vertical front awning':<26} "
            f"{(format_eur(awning) if awning is not None else 'n/a'):>17}",
            f"{'Front glazing':<26} {format_eur(accessories.front_glazing):>17}",
            f"{'Lighting':<26} {format_eur(accessories.lighting):>17}",
        ]
        return "\n".join(lines)


class QuoteFormatter:
    """Formats a complete quote: configuration, layout and price."""

    def __init__(
        self,
        price_formatter: PriceBreakdownFormatter | None = None,
        layout_formatter: LayoutSummaryFormatter | None = None,
        catalog_formatter: CatalogFormatter | None = None,
    ) -> None:
        self._price = price_formatter or PriceBreakdownFormatter()
        self._layout = layout_formatter or LayoutSummaryFormatter()
        self._catalog = catalog_formatter or CatalogFormatter()

    def format(self, output: QuoteOutput) -> str:
        config = output.configuration
        header = [
            "PATIO ROOF QUOTE",
            "=" * 44,
            f"Size:       {config.width:g} x {config.depth:g} mm "
            f"(billed as {output.billing_size.width:g} x {output.billing_size.depth:g} mm)",
            f"Gutter:     {config.gutter_height:g} mm, {config.roof_slope.value} deg",
            f"Mounting:   {config.mount_type.value}",
            f"Covering:   {config.roof_covering.value}",
            f"Frame:      {config.frame_color.display_name}",
        ]
        sections = ["\n".join(header), self._layout.format(output.layout), self._price.format(output.price)]
        if output.accessories is not None:
            sections.append(self._catalog.format(output.accessories))
        return "\n\n".join(sections)
