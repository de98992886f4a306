"""Value objects for the patio roof domain.

This module provides immutable data types used throughout the system.
All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Errors
from ._errors import (
    ConfigurationError,
    PriceUnavailableError,
    UnknownOptionError,
)

# Configuration and its options
from ._configuration import (
    MAX_GUTTER_HEIGHT,
    MAX_WIDTH,
    MIN_DEPTH,
    MIN_GUTTER_HEIGHT,
    MIN_WIDTH,
    RECOMMENDED_GUTTER_HEIGHT,
    Configuration,
    CoveringFamily,
    DeliveryOption,
    FrameColor,
    MountType,
    PostLength,
    PostMounting,
    RoofCovering,
    RoofSlope,
    SidePanelType,
)

# Structural layout
from ._layout import (
    Beam,
    PinnedEdge,
    Point3D,
    PostSupport,
    Rafter,
    RoofMaterial,
    RoofPanel,
    Side,
    SideFrameMember,
    SidePanel,
    StructureLayout,
    SupportKind,
)

# Pricing
from ._pricing import (
    BillingSize,
    GridPolicy,
    PriceBreakdown,
    round_money,
)

__all__ = [
    # Errors
    "ConfigurationError",
    "PriceUnavailableError",
    "UnknownOptionError",
    # Configuration
    "Configuration",
    "CoveringFamily",
    "DeliveryOption",
    "FrameColor",
    "MountType",
    "PostLength",
    "PostMounting",
    "RoofCovering",
    "RoofSlope",
    "SidePanelType",
    "MAX_GUTTER_HEIGHT",
    "MAX_WIDTH",
    "MIN_DEPTH",
    "MIN_GUTTER_HEIGHT",
    "MIN_WIDTH",
    "RECOMMENDED_GUTTER_HEIGHT",
    # Layout
    "Beam",
    "PinnedEdge",
    "Point3D",
    "PostSupport",
    "Rafter",
    "RoofMaterial",
    "RoofPanel",
    "Side",
    "SideFrameMember",
    "SidePanel",
    "StructureLayout",
    "SupportKind",
    # Pricing
    "BillingSize",
    "GridPolicy",
    "PriceBreakdown",
    "round_money",
]
