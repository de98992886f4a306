"""Pricing engine: itemized price of a patio roof configuration.

The base frame and the polycarbonate coverings are priced from (width, depth)
grids; every other option adds a fixed surcharge. Surcharge tables are
exhaustive over their enums, which is checked when this module is imported.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from ..value_objects import (
    BillingSize,
    Configuration,
    DeliveryOption,
    GridPolicy,
    MountType,
    PostLength,
    PostMounting,
    PriceBreakdown,
    RoofCovering,
    SidePanelType,
    UnknownOptionError,
    round_money,
)
from .price_tables import (
    BASE_PRICES,
    IR_GOLD_SURCHARGES,
    POLYCARBONATE_PRICES,
    STANDARD_DEPTHS,
    STANDARD_WIDTHS,
)

__all__ = [
    "CUSTOM_SIZE_SURCHARGE",
    "FLAT_COVERING_PRICES",
    "FREESTANDING_SURCHARGES",
    "MOUNTING_SET_SURCHARGES",
    "POST_LENGTH_SURCHARGES",
    "POST_MOUNTING_SURCHARGES",
    "SIDE_PANEL_SURCHARGES",
    "PricingEngine",
    "compute_price",
    "is_custom_size",
]

logger = logging.getLogger(__name__)


FREESTANDING_SURCHARGES: Mapping[MountType, float] = MappingProxyType(
    {
        MountType.WALL: 0.0,
        MountType.FREESTANDING: 981.0,
    }
)

POST_LENGTH_SURCHARGES: Mapping[PostLength, float] = MappingProxyType(
    {
        PostLength.MM_2500: 0.0,
        PostLength.MM_3000: 90.0,
        PostLength.MM_3500: 180.0,
    }
)

POST_MOUNTING_SURCHARGES: Mapping[PostMounting, float] = MappingProxyType(
    {
        PostMounting.ALU_L: 0.0,
        PostMounting.ALU_U_3: 66.0,
        PostMounting.ALU_U_6: 132.0,
        PostMounting.STEEL_3: 285.0,
        PostMounting.STEEL_6: 570.0,
    }
)

MOUNTING_SET_SURCHARGES: Mapping[DeliveryOption, float] = MappingProxyType(
    {
        DeliveryOption.WITHOUT_MOUNTING_SET: 0.0,
        DeliveryOption.WITH_MOUNTING_SET: 105.0,
    }
)

# Per side.
SIDE_PANEL_SURCHARGES: Mapping[SidePanelType, float] = MappingProxyType(
    {
        SidePanelType.NONE: 0.0,
        SidePanelType.WEDGE: 1010.0,
        SidePanelType.FULL_WALL: 2542.0,
    }
)

# Glass coverings are sold at a flat price regardless of size.
FLAT_COVERING_PRICES: Mapping[RoofCovering, float] = MappingProxyType(
    {
        RoofCovering.VSG_CLEAR: 1488.0,
        RoofCovering.VSG_MATT: 2117.0,
    }
)

CUSTOM_SIZE_SURCHARGE = 100.0


def _check_exhaustive(table: Mapping[Enum, float], enum_type: type[Enum]) -> None:
    missing = set(enum_type) - set(table)
    if missing:
        raise RuntimeError(
            f"{enum_type.__name__} surcharge table misses: "
            f"{sorted(str(m.value) for m in missing)}"
        )


for _table, _enum in (
    (FREESTANDING_SURCHARGES, MountType),
    (POST_LENGTH_SURCHARGES, PostLength),
    (POST_MOUNTING_SURCHARGES, PostMounting),
    (MOUNTING_SET_SURCHARGES, DeliveryOption),
    (SIDE_PANEL_SURCHARGES, SidePanelType),
):
    _check_exhaustive(_table, _enum)
del _table, _enum


def _surcharge(table: Mapping[Enum, float], option: Enum, context: str) -> float:
    try:
        return table[option]
    except KeyError:
        raise UnknownOptionError(option, context) from None


def is_custom_size(width: float, depth: float) -> bool:
    """True when the size is not one of the standard module sizes."""
    return width not in STANDARD_WIDTHS or depth not in STANDARD_DEPTHS


@dataclass(frozen=True)
class PricingEngine:
    """Maps a configuration to its itemized price.

    Attributes:
        policy: How grid prices are read for sizes between grid nodes.
    """

    policy: GridPolicy = GridPolicy.SNAP

    def compute_price(self, config: Configuration) -> PriceBreakdown:
        """Compute the itemized price for ``config``.

        Every line item and the total are rounded to cents; the total is the
        rounded sum of the rounded line items.

        Raises:
            PriceUnavailableError: If a grid has no price for the size.
            UnknownOptionError: If an option has no price rule.
        """
        self._warn_if_outside_grid(config)

        base_price = round_money(
            BASE_PRICES.lookup(config.width, config.depth, self.policy)
        )
        line_items = {
            "base_price": base_price,
            "roof_covering_price": round_money(self.covering_price(config)),
            "freestanding_price": _surcharge(
                FREESTANDING_SURCHARGES, config.mount_type, "mount type"
            ),
            "post_length_price": _surcharge(
                POST_LENGTH_SURCHARGES, config.post_length, "post length"
            ),
            "post_mounting_price": _surcharge(
                POST_MOUNTING_SURCHARGES, config.post_mounting, "post mounting"
            ),
            "mounting_set_price": _surcharge(
                MOUNTING_SET_SURCHARGES, config.delivery_option, "delivery"
            ),
            "side_panel_left_price": _surcharge(
                SIDE_PANEL_SURCHARGES, config.side_panel_left, "side panel"
            ),
            "side_panel_right_price": _surcharge(
                SIDE_PANEL_SURCHARGES, config.side_panel_right, "side panel"
            ),
            "custom_size_price": (
                CUSTOM_SIZE_SURCHARGE if is_custom_size(config.width, config.depth) else 0.0
            ),
        }

        breakdown = PriceBreakdown(
            **line_items,
            total_price=round_money(sum(line_items.values())),
        )
        logger.debug(
            f"Price {config.width:g}x{config.depth:g} mm ({self.policy.value}): "
            f"total {breakdown.total_price:.2f} EUR"
        )
        return breakdown

    def covering_price(self, config: Configuration) -> float:
        """Unrounded price of the roof infill.

        Raises:
            UnknownOptionError: If the covering has no price rule.
        """
        covering = config.roof_covering
        if covering in (RoofCovering.POLYCARBONATE_OPAL, RoofCovering.POLYCARBONATE_CLEAR):
            return POLYCARBONATE_PRICES.lookup(config.width, config.depth, self.policy)
        if covering is RoofCovering.POLYCARBONATE_REFLEX_PEARL:
            return POLYCARBONATE_PRICES.lookup(
                config.width, config.depth, self.policy
            ) + IR_GOLD_SURCHARGES.lookup(config.width, config.depth, self.policy)
        if covering in FLAT_COVERING_PRICES:
            return FLAT_COVERING_PRICES[covering]
        raise UnknownOptionError(covering, "roof covering")

    def billing_size(self, config: Configuration) -> BillingSize:
        """Grid node the configuration's size is billed at."""
        return BillingSize(
            width=BASE_PRICES.billing_width(config.width),
            depth=BASE_PRICES.billing_depth(config.depth),
        )

    def _warn_if_outside_grid(self, config: Configuration) -> None:
        widths, depths = BASE_PRICES.widths, BASE_PRICES.depths
        if (
            widths[0] <= config.width <= widths[-1]
            and depths[0] <= config.depth <= depths[-1]
        ):
            return
        size = self.billing_size(config)
        logger.warning(
            f"Size {config.width:g}x{config.depth:g} mm is outside the billing "
            f"grid, priced as {size.width:g}x{size.depth:g} mm"
        )


_DEFAULT_ENGINE = PricingEngine()


def compute_price(
    config: Configuration, policy: GridPolicy = GridPolicy.SNAP
) -> PriceBreakdown:
    """Compute the itemized price for ``config`` under ``policy``."""
    if policy is GridPolicy.SNAP:
        return _DEFAULT_ENGINE.compute_price(config)
    return PricingEngine(policy=policy).compute_price(config)
