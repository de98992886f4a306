"""Domain services for layout, pricing and accessories."""

from __future__ import annotations

from .catalog import AccessoryCatalog, AccessoryPrices
from .geometry import ROOF_MATERIALS, GeometryEngine, compute_layout, rafter_count_for_width
from .price_tables import (
    BASE_PRICES,
    FRONT_GLAZING_PRICES,
    IR_GOLD_SURCHARGES,
    POLYCARBONATE_PRICES,
    ROOF_AWNING_ZIP_PRICES,
    STANDARD_DEPTHS,
    STANDARD_WIDTHS,
    PriceGrid,
    PriceList,
)
from .pricing import PricingEngine, compute_price, is_custom_size

__all__ = [
    # Geometry
    "GeometryEngine",
    "ROOF_MATERIALS",
    "compute_layout",
    "rafter_count_for_width",
    # Pricing
    "PricingEngine",
    "compute_price",
    "is_custom_size",
    # Price tables
    "BASE_PRICES",
    "FRONT_GLAZING_PRICES",
    "IR_GOLD_SURCHARGES",
    "POLYCARBONATE_PRICES",
    "ROOF_AWNING_ZIP_PRICES",
    "STANDARD_DEPTHS",
    "STANDARD_WIDTHS",
    "PriceGrid",
    "PriceList",
    # Accessories
    "AccessoryCatalog",
    "AccessoryPrices",
]
