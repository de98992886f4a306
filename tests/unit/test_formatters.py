"""Tests for the plain-text formatters."""

from patioroof.application.commands import QuoteCommand
from patioroof.domain.services import AccessoryCatalog, compute_layout, compute_price
from patioroof.domain.value_objects import Configuration, SidePanelType
from patioroof.infrastructure.formatters import (
    CatalogFormatter,
    LayoutSummaryFormatter,
    PriceBreakdownFormatter,
    QuoteFormatter,
    format_eur,
)


def test_format_eur() -> None:
    assert format_eur(1204.76) == "1,204.76 EUR"
    assert format_eur(0) == "0.00 EUR"
    assert format_eur(12345.5) == "12,345.50 EUR"


class TestPriceBreakdownFormatter:
    def test_hides_zero_items(self, default_config: Configuration) -> None:
        text = PriceBreakdownFormatter().format(compute_price(default_config))

        assert "PRICE BREAKDOWN" in text
        assert "Base frame" in text
        assert "1,204.76 EUR" in text
        assert "Mounting set" not in text
        assert text.splitlines()[-1].startswith("TOTAL (excl. VAT)")
        assert "1,534.76 EUR" in text.splitlines()[-1]

    def test_show_zero(self, default_config: Configuration) -> None:
        text = PriceBreakdownFormatter(show_zero=True).format(compute_price(default_config))
        assert "Mounting set" in text
        assert "Custom size" in text


class TestLayoutSummaryFormatter:
    def test_summary(self, default_config: Configuration) -> None:
        text = LayoutSummaryFormatter().format(compute_layout(default_config))

        assert "STRUCTURE LAYOUT" in text
        assert "2.622 m" in text
        assert "2.200 m" in text
        assert "8 fields" in text
        assert "wall_anchor" in text
        assert "Side panels" not in text

    def test_side_panels_listed(self) -> None:
        layout = compute_layout(Configuration(side_panel_left=SidePanelType.WEDGE))
        text = LayoutSummaryFormatter().format(layout)

        assert "Side panels:" in text
        assert "wedge-clear" in text


class TestCatalogFormatter:
    def test_unavailable_awning(self) -> None:
        text = CatalogFormatter().format(AccessoryCatalog().quote(5000.0, 3000.0, 1700.0))

        assert "ACCESSORIES" in text
        assert "n/a" in text
        assert "2,110.00 EUR" in text


class TestQuoteFormatter:
    def test_sections(self, default_config: Configuration) -> None:
        output = QuoteCommand().execute(default_config, include_accessories=True)
        text = QuoteFormatter().format(output)

        assert text.startswith("PATIO ROOF QUOTE")
        assert "billed as 5000 x 3000 mm" in text
        assert "RAL 7024st Graphite grey" in text
        assert "STRUCTURE LAYOUT" in text
        assert "PRICE BREAKDOWN" in text
        assert "ACCESSORIES" in text

    def test_without_accessories(self, default_config: Configuration) -> None:
        output = QuoteCommand().execute(default_config)
        assert "ACCESSORIES" not in QuoteFormatter().format(output)
