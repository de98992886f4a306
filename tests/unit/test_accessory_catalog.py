"""Unit tests for the accessory catalog."""

import pytest

from patioroof.domain.services import AccessoryCatalog, AccessoryPrices
from patioroof.domain.value_objects import PriceUnavailableError


@pytest.fixture
def catalog() -> AccessoryCatalog:
    return AccessoryCatalog()


class TestRoofAwningZip:
    @pytest.mark.parametrize(
        "width,depth,expected",
        [
            (5000.0, 3000.0, 2110.0),
            (4200.0, 2600.0, 2000.0),
            (3000.0, 1000.0, 1602.0),
            (7060.0, 3500.0, 2483.0),
        ],
    )
    def test_grid_price(
        self, catalog: AccessoryCatalog, width: float, depth: float, expected: float
    ) -> None:
        assert catalog.roof_awning_zip(width, depth) == expected


class TestVerticalFrontAwning:
    def test_reference_widths(self, catalog: AccessoryCatalog) -> None:
        assert catalog.vertical_front_awning(3000.0, 2200.0) == 1124.29
        assert catalog.vertical_front_awning(5000.0, 2200.0) == 1297.14

    def test_clamped_outside_reference_range(self, catalog: AccessoryCatalog) -> None:
        assert catalog.vertical_front_awning(1000.0, 2200.0) == 1124.29
        assert catalog.vertical_front_awning(7000.0, 2200.0) == 1297.14

    def test_interpolated_between_references(self, catalog: AccessoryCatalog) -> None:
        price = catalog.vertical_front_awning(4000.0, 2200.0)
        assert 1124.29 < price < 1297.14

    def test_low_gutter_raises(self, catalog: AccessoryCatalog) -> None:
        # The configurator rejects gutters below 2000 mm, but the catalog
        # can be queried directly.
        with pytest.raises(PriceUnavailableError):
            catalog.vertical_front_awning(5000.0, 1700.0)


class TestFrontGlazingAndLighting:
    @pytest.mark.parametrize("width,expected", [(2500.0, 1076.0), (8000.0, 1965.0)])
    def test_front_glazing(
        self, catalog: AccessoryCatalog, width: float, expected: float
    ) -> None:
        assert catalog.front_glazing(width) == expected

    @pytest.mark.parametrize(
        "width,expected",
        [(5000.0, 175.0), (1000.0, 105.0), (9000.0, 245.0), (4500.0, 157.5)],
    )
    def test_lighting(self, catalog: AccessoryCatalog, width: float, expected: float) -> None:
        assert catalog.lighting(width) == expected


class TestQuote:
    def test_quote_all(self, catalog: AccessoryCatalog) -> None:
        prices = catalog.quote(5000.0, 3000.0, 2200.0)

        assert prices == AccessoryPrices(
            roof_awning_zip=2110.0,
            vertical_front_awning=1297.14,
            front_glazing=1599.0,
            lighting=175.0,
        )

    def test_quote_without_vertical_awning(self, catalog: AccessoryCatalog) -> None:
        prices = catalog.quote(5000.0, 3000.0, 1700.0)

        assert prices.vertical_front_awning is None
        assert prices.to_dict()["vertical_front_awning"] is None
