"""Base enums and shared constants for patio roof configuration schemas.

The option enums are the domain enums themselves. They are ``(str, Enum)``
or ``(int, Enum)`` types, so pydantic validates the JSON values directly.
"""

from enum import Enum

from patioroof.domain.value_objects import (
    DeliveryOption,
    FrameColor,
    GridPolicy,
    MountType,
    PostLength,
    PostMounting,
    RoofCovering,
    RoofSlope,
    SidePanelType,
)

# Supported schema versions for configuration files
# Version 1.0: Initial schema with configuration, pricing, layout and output
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class OutputFormat(str, Enum):
    """Formats a quote can be rendered in."""

    TEXT = "text"
    JSON = "json"
    CSV = "csv"


__all__ = [
    "SUPPORTED_VERSIONS",
    "DeliveryOption",
    "FrameColor",
    "GridPolicy",
    "MountType",
    "OutputFormat",
    "PostLength",
    "PostMounting",
    "RoofCovering",
    "RoofSlope",
    "SidePanelType",
]
