"""Domain layer - core business logic."""

from .services import (
    AccessoryCatalog,
    GeometryEngine,
    PricingEngine,
    compute_layout,
    compute_price,
)
from .value_objects import (
    Configuration,
    ConfigurationError,
    GridPolicy,
    PinnedEdge,
    PriceBreakdown,
    PriceUnavailableError,
    StructureLayout,
    UnknownOptionError,
)

__all__ = [
    "AccessoryCatalog",
    "Configuration",
    "ConfigurationError",
    "GeometryEngine",
    "GridPolicy",
    "PinnedEdge",
    "PriceBreakdown",
    "PriceUnavailableError",
    "PricingEngine",
    "StructureLayout",
    "UnknownOptionError",
    "compute_layout",
    "compute_price",
]
