"""Price value objects."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

CENT = Decimal("0.01")


def round_money(amount: float) -> float:
    """Round an amount to cents, half away from zero.

    The amount goes through its shortest ``repr`` so that binary noise such
    as ``1.005 -> 1.00499999...`` does not flip the rounding direction.
    """
    return float(Decimal(repr(amount)).quantize(CENT, rounding=ROUND_HALF_UP))


class GridPolicy(str, Enum):
    """How a (width, depth) pair is turned into a grid price.

    - SNAP: round up to the billing node and read that cell.
    - BILINEAR: interpolate between the four nodes surrounding the raw,
      range-clamped dimensions.
    """

    SNAP = "snap"
    BILINEAR = "bilinear"


@dataclass(frozen=True)
class BillingSize:
    """Billing grid node a configured size is priced at (mm)."""

    width: float
    depth: float


@dataclass(frozen=True)
class PriceBreakdown:
    """Itemized price of one configuration in EUR, excluding VAT."""

    base_price: float
    roof_covering_price: float
    freestanding_price: float
    post_length_price: float
    post_mounting_price: float
    mounting_set_price: float
    side_panel_left_price: float
    side_panel_right_price: float
    custom_size_price: float
    total_price: float

    @property
    def line_items(self) -> dict[str, float]:
        """All summed sub-fields in display order."""
        return {
            "base_price": self.base_price,
            "roof_covering_price": self.roof_covering_price,
            "freestanding_price": self.freestanding_price,
            "post_length_price": self.post_length_price,
            "post_mounting_price": self.post_mounting_price,
            "mounting_set_price": self.mounting_set_price,
            "side_panel_left_price": self.side_panel_left_price,
            "side_panel_right_price": self.side_panel_right_price,
            "custom_size_price": self.custom_size_price,
        }

    @property
    def is_consistent(self) -> bool:
        """True when the total equals the rounded sum of the line items."""
        return self.total_price == round_money(sum(self.line_items.values()))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        return {**self.line_items, "total_price": self.total_price}
