"""Accessory catalog: add-on prices quoted next to the roof.

Accessory prices are informational and never part of the roof total.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..value_objects import PriceUnavailableError, round_money
from .price_tables import FRONT_GLAZING_PRICES, ROOF_AWNING_ZIP_PRICES

__all__ = [
    "LIGHTING_PRICE_PER_METER",
    "MIN_VERTICAL_AWNING_GUTTER_HEIGHT",
    "AccessoryCatalog",
    "AccessoryPrices",
]

logger = logging.getLogger(__name__)

# Vertical front awning reference row: 2500 mm drop at 3000 and 5000 mm width.
VERTICAL_AWNING_REF_WIDTHS = (3000.0, 5000.0)
VERTICAL_AWNING_REF_PRICES = (1124.29, 1297.14)
MIN_VERTICAL_AWNING_GUTTER_HEIGHT = 1800.0

# LED package per running metre of gutter.
LIGHTING_PRICE_PER_METER = 35.0
LIGHTING_METERS_RANGE = (3.0, 7.0)


@dataclass(frozen=True)
class AccessoryPrices:
    """Accessory prices for one roof size in EUR.

    ``vertical_front_awning`` is None when the gutter height is too low to
    fit the awning.
    """

    roof_awning_zip: float
    vertical_front_awning: float | None
    front_glazing: float
    lighting: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "roof_awning_zip": self.roof_awning_zip,
            "vertical_front_awning": self.vertical_front_awning,
            "front_glazing": self.front_glazing,
            "lighting": self.lighting,
        }


class AccessoryCatalog:
    """Price lookups for the optional accessories."""

    def roof_awning_zip(self, width: float, depth: float) -> float:
        """In-roof ZIP awning, priced from the awning grid."""
        return round_money(ROOF_AWNING_ZIP_PRICES.lookup(width, depth))

    def vertical_front_awning(self, width: float, gutter_height: float) -> float:
        """Vertical front awning, linear in width between the reference sizes.

        Raises:
            PriceUnavailableError: If ``gutter_height`` is below 1800 mm.
        """
        if gutter_height < MIN_VERTICAL_AWNING_GUTTER_HEIGHT:
            raise PriceUnavailableError("vertical_front_awning", width, gutter_height)

        low_w, high_w = VERTICAL_AWNING_REF_WIDTHS
        low_p, high_p = VERTICAL_AWNING_REF_PRICES
        clamped = min(max(width, low_w), high_w)
        ratio = (clamped - low_w) / (high_w - low_w)
        return round_money(low_p + (high_p - low_p) * ratio)

    def front_glazing(self, width: float) -> float:
        """Aluminium front wall with clear 44.2 VSG glass."""
        return round_money(FRONT_GLAZING_PRICES.lookup(width))

    def lighting(self, width: float) -> float:
        """LED lighting along the gutter, billed per metre of width."""
        low, high = LIGHTING_METERS_RANGE
        meters = min(max(width / 1000, low), high)
        return round_money(meters * LIGHTING_PRICE_PER_METER)

    def quote(self, width: float, depth: float, gutter_height: float) -> AccessoryPrices:
        """All accessory prices for a roof size."""
        awning = None
        if gutter_height >= MIN_VERTICAL_AWNING_GUTTER_HEIGHT:
            awning = self.vertical_front_awning(width, gutter_height)
        else:
            logger.debug(
                f"Vertical front awning unavailable at gutter height {gutter_height:g} mm"
            )
        return AccessoryPrices(
            roof_awning_zip=self.roof_awning_zip(width, depth),
            vertical_front_awning=awning,
            front_glazing=self.front_glazing(width),
            lighting=self.lighting(width),
        )
