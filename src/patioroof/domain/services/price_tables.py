"""Read-only price grids and the lookup rules shared by pricing and catalog.

A grid maps billing width -> billing depth -> price. Requested sizes are
rounded up to the grid step and clamped into the grid range before the
lookup, so every size inside the configuration domain lands on a node.
"""

from __future__ import annotations

import bisect
import math
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..value_objects import GridPolicy, PriceUnavailableError, UnknownOptionError

__all__ = [
    "BASE_PRICES",
    "FRONT_GLAZING_PRICES",
    "IR_GOLD_SURCHARGES",
    "POLYCARBONATE_PRICES",
    "ROOF_AWNING_ZIP_PRICES",
    "STANDARD_DEPTHS",
    "STANDARD_WIDTHS",
    "PriceGrid",
    "PriceList",
    "snap_to_step",
]


def snap_to_step(value: float, step: float, lower: float, upper: float) -> float:
    """Round ``value`` up to a multiple of ``step`` and clamp to [lower, upper]."""
    snapped = math.ceil(value / step) * step
    return float(min(max(snapped, lower), upper))


def _freeze(rows: Mapping[float, Mapping[float, float]]) -> MappingProxyType:
    return MappingProxyType(
        {float(w): MappingProxyType({float(d): p for d, p in row.items()}) for w, row in rows.items()}
    )


@dataclass(frozen=True)
class PriceGrid:
    """Two-dimensional price grid over (width, depth) in mm.

    Attributes:
        name: Identifier used in error messages.
        rows: Read-only mapping width -> depth -> price.
        width_step: Step the width is rounded up to.
        depth_step: Step the depth is rounded up to.
    """

    name: str
    rows: Mapping[float, Mapping[float, float]]
    width_step: float = 1000.0
    depth_step: float = 500.0

    @property
    def widths(self) -> tuple[float, ...]:
        return tuple(sorted(self.rows))

    @property
    def depths(self) -> tuple[float, ...]:
        return tuple(sorted(next(iter(self.rows.values()))))

    def billing_width(self, width: float) -> float:
        widths = self.widths
        return snap_to_step(width, self.width_step, widths[0], widths[-1])

    def billing_depth(self, depth: float) -> float:
        depths = self.depths
        return snap_to_step(depth, self.depth_step, depths[0], depths[-1])

    def price_at(self, width: float, depth: float) -> float:
        """Read the price stored at an exact grid node.

        Raises:
            PriceUnavailableError: If the node is not in the grid.
        """
        row = self.rows.get(width)
        if row is None or depth not in row:
            raise PriceUnavailableError(self.name, width, depth)
        return row[depth]

    def lookup(
        self, width: float, depth: float, policy: GridPolicy = GridPolicy.SNAP
    ) -> float:
        """Price for a requested size under the given grid policy.

        Args:
            width: Requested width in mm.
            depth: Requested depth in mm.
            policy: SNAP reads the billing node; BILINEAR interpolates between
                the four nodes around the range-clamped size.

        Raises:
            PriceUnavailableError: If a required node is missing.
            UnknownOptionError: If the policy is not handled.
        """
        if policy is GridPolicy.SNAP:
            return self.price_at(self.billing_width(width), self.billing_depth(depth))
        if policy is GridPolicy.BILINEAR:
            return self._interpolate(width, depth)
        raise UnknownOptionError(policy, "grid policy")

    def _interpolate(self, width: float, depth: float) -> float:
        w0, w1, tw = _bracket(self.widths, width)
        d0, d1, td = _bracket(self.depths, depth)

        p00 = self.price_at(w0, d0)
        p01 = self.price_at(w0, d1)
        p10 = self.price_at(w1, d0)
        p11 = self.price_at(w1, d1)

        near = p00 + (p01 - p00) * td
        far = p10 + (p11 - p10) * td
        return near + (far - near) * tw


def _bracket(axis: tuple[float, ...], value: float) -> tuple[float, float, float]:
    """Return the axis nodes around ``value`` and its fraction between them."""
    value = min(max(value, axis[0]), axis[-1])
    upper = bisect.bisect_left(axis, value)
    if axis[upper] == value:
        return value, value, 0.0
    lower_node, upper_node = axis[upper - 1], axis[upper]
    return lower_node, upper_node, (value - lower_node) / (upper_node - lower_node)


@dataclass(frozen=True)
class PriceList:
    """One-dimensional price table keyed by a stepped width in mm."""

    name: str
    prices: Mapping[float, float]
    step: float = 1000.0

    def billing_width(self, width: float) -> float:
        keys = sorted(self.prices)
        return snap_to_step(width, self.step, keys[0], keys[-1])

    def lookup(self, width: float) -> float:
        """Price for ``width`` after rounding up and clamping.

        Raises:
            PriceUnavailableError: If the billing width has no entry.
        """
        key = self.billing_width(width)
        if key not in self.prices:
            raise PriceUnavailableError(self.name, key)
        return self.prices[key]


# Standard module sizes; anything else carries the custom-size surcharge.
STANDARD_WIDTHS: frozenset[float] = frozenset({3000.0, 4000.0, 5000.0, 6000.0})
STANDARD_DEPTHS: frozenset[float] = frozenset(
    {2000.0, 2500.0, 3000.0, 3500.0, 4000.0, 4500.0, 5000.0}
)

_DEPTHS = (2000, 2500, 3000, 3500, 4000, 4500, 5000)

BASE_PRICES = PriceGrid(
    name="base",
    rows=_freeze(
        {
            3000: dict(zip(_DEPTHS, (682.05, 782.05, 882.05, 982.05, 1082.05, 1182.05, 1437.04))),
            4000: dict(zip(_DEPTHS, (811.19, 911.19, 1011.19, 1111.19, 1211.19, 1311.19, 1852.67))),
            5000: dict(zip(_DEPTHS, (1004.76, 1104.76, 1204.76, 1304.76, 1404.76, 1504.76, 2203.86))),
            6000: dict(zip(_DEPTHS, (1133.89, 1233.89, 1333.89, 1433.89, 1533.89, 1633.89, 2555.06))),
        }
    ),
)

POLYCARBONATE_PRICES = PriceGrid(
    name="polycarbonate",
    rows=_freeze(
        {
            3000: dict(zip(_DEPTHS, (132, 165, 198, 231, 264, 297, 330))),
            4000: dict(zip(_DEPTHS, (176, 220, 264, 308, 352, 396, 440))),
            5000: dict(zip(_DEPTHS, (220, 275, 330, 385, 440, 495, 550))),
            6000: dict(zip(_DEPTHS, (264, 330, 396, 462, 528, 594, 660))),
        }
    ),
)

# Extra charge for the IR-gold (reflex pearl) sheets on top of polycarbonate.
IR_GOLD_SURCHARGES = PriceGrid(
    name="ir_gold",
    rows=_freeze(
        {
            3000: dict(zip(_DEPTHS, (42, 52.5, 63, 73.5, 84, 94.5, 105))),
            4000: dict(zip(_DEPTHS, (56, 70, 84, 98, 112, 126, 140))),
            5000: dict(zip(_DEPTHS, (70, 87.5, 105, 122.5, 140, 157.5, 175))),
            6000: dict(zip(_DEPTHS, (84, 105, 126, 147, 168, 189, 210))),
        }
    ),
)

_AWNING_DEPTHS = (2500, 3000, 3500, 4000, 4500, 5000)

ROOF_AWNING_ZIP_PRICES = PriceGrid(
    name="roof_awning_zip",
    rows=_freeze(
        {
            3000: dict(zip(_AWNING_DEPTHS, (1602, 1673, 1746, 1834, 1908, 1979))),
            3500: dict(zip(_AWNING_DEPTHS, (1710, 1790, 1873, 1970, 2053, 2133))),
            4000: dict(zip(_AWNING_DEPTHS, (1810, 1900, 1991, 2097, 2189, 2278))),
            4500: dict(zip(_AWNING_DEPTHS, (1902, 2000, 2101, 2216, 2317, 2416))),
            5000: dict(zip(_AWNING_DEPTHS, (2002, 2110, 2220, 2344, 2454, 2595))),
            5500: dict(zip(_AWNING_DEPTHS, (2112, 2229, 2348, 2481, 2600, 2717))),
            6000: dict(zip(_AWNING_DEPTHS, (2229, 2355, 2483, 2626, 2754, 2879))),
        }
    ),
    width_step=500.0,
)

FRONT_GLAZING_PRICES = PriceList(
    name="front_glazing",
    prices=MappingProxyType(
        {
            1000.0: 577.0,
            2000.0: 820.0,
            3000.0: 1076.0,
            4000.0: 1332.0,
            5000.0: 1599.0,
            6000.0: 1745.0,
            7000.0: 1965.0,
        }
    ),
)
