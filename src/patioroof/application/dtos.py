"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from patioroof.domain.services import AccessoryPrices
from patioroof.domain.value_objects import (
    BillingSize,
    Configuration,
    GridPolicy,
    PriceBreakdown,
    StructureLayout,
)


@dataclass(frozen=True)
class QuoteOutput:
    """Output DTO of a quote: layout and price of one configuration.

    Attributes:
        configuration: The configuration that was quoted.
        layout: Structural layout in metres.
        price: Itemized price in EUR.
        billing_size: Grid node the size was billed at (mm).
        grid_policy: Policy used for the grid lookups.
        accessories: Accessory prices, when requested.
    """

    configuration: Configuration
    layout: StructureLayout
    price: PriceBreakdown
    billing_size: BillingSize
    grid_policy: GridPolicy = GridPolicy.SNAP
    accessories: AccessoryPrices | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        data: dict[str, Any] = {
            "configuration": self.configuration.to_dict(),
            "layout": self.layout.to_dict(),
            "price": self.price.to_dict(),
            "billing_size": {
                "width": self.billing_size.width,
                "depth": self.billing_size.depth,
            },
            "grid_policy": self.grid_policy.value,
        }
        if self.accessories is not None:
            data["accessories"] = self.accessories.to_dict()
        return data
