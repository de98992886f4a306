"""Configuration record and its enumerated options."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from ._errors import ConfigurationError, UnknownOptionError


class FrameColor(str, Enum):
    """Powder-coated frame finishes (fine-structure RAL colours)."""

    RAL7016ST = "RAL7016st"
    RAL9007ST = "RAL9007st"
    RAL9005ST = "RAL9005st"
    RAL9010ST = "RAL9010st"
    RAL7035ST = "RAL7035st"
    RAL7024ST = "RAL7024st"

    @property
    def display_name(self) -> str:
        """Human-readable finish name."""
        return _FRAME_COLOR_NAMES[self]

    @property
    def hex_color(self) -> str:
        """Colour hint for renderers."""
        return _FRAME_COLOR_HEX[self]


_FRAME_COLOR_NAMES: dict[FrameColor, str] = {
    FrameColor.RAL7016ST: "RAL 7016st Anthracite grey",
    FrameColor.RAL9007ST: "RAL 9007st Grey aluminium",
    FrameColor.RAL9005ST: "RAL 9005st Jet black",
    FrameColor.RAL9010ST: "RAL 9010st Pure white",
    FrameColor.RAL7035ST: "RAL 7035st Silver grey",
    FrameColor.RAL7024ST: "RAL 7024st Graphite grey",
}

_FRAME_COLOR_HEX: dict[FrameColor, str] = {
    FrameColor.RAL7016ST: "#383e42",
    FrameColor.RAL9007ST: "#8f8f8f",
    FrameColor.RAL9005ST: "#0a0a0a",
    FrameColor.RAL9010ST: "#f8f8f8",
    FrameColor.RAL7035ST: "#c0c0c0",
    FrameColor.RAL7024ST: "#545454",
}


class MountType(str, Enum):
    """How the back (gutter) edge is carried."""

    WALL = "wall"
    FREESTANDING = "freestanding"


class PostLength(int, Enum):
    """Post length on the gutter side in mm."""

    MM_2500 = 2500
    MM_3000 = 3000
    MM_3500 = 3500


class PostMounting(str, Enum):
    """Post base hardware."""

    ALU_L = "alu-l"
    ALU_U_3 = "alu-u-3"
    ALU_U_6 = "alu-u-6"
    STEEL_3 = "steel-3"
    STEEL_6 = "steel-6"


class RoofSlope(int, Enum):
    """Roof pitch in degrees."""

    DEG_5 = 5
    DEG_6 = 6
    DEG_7 = 7
    DEG_8 = 8
    DEG_9 = 9
    DEG_10 = 10


class DeliveryOption(str, Enum):
    """Kit delivery with or without the DIY mounting set."""

    WITH_MOUNTING_SET = "with-mounting-set"
    WITHOUT_MOUNTING_SET = "without-mounting-set"


class CoveringFamily(str, Enum):
    """Roof infill families. The family decides the maximum depth."""

    POLYCARBONATE = "polycarbonate"
    GLASS = "glass"

    @property
    def max_depth(self) -> float:
        """Maximum allowed depth in mm for this family."""
        if self is CoveringFamily.POLYCARBONATE:
            return 3500.0
        if self is CoveringFamily.GLASS:
            return 3000.0
        raise UnknownOptionError(self, "covering family")


class RoofCovering(str, Enum):
    """Roof infill: 16 mm multiwall polycarbonate or 44.2 laminated glass (VSG)."""

    POLYCARBONATE_OPAL = "polycarbonate-opal"
    POLYCARBONATE_CLEAR = "polycarbonate-clear"
    POLYCARBONATE_REFLEX_PEARL = "polycarbonate-reflex-pearl"
    VSG_CLEAR = "vsg-clear"
    VSG_MATT = "vsg-matt"

    @property
    def family(self) -> CoveringFamily:
        """Covering family this infill belongs to."""
        return _COVERING_FAMILIES[self]

    @property
    def max_depth(self) -> float:
        """Maximum allowed depth in mm with this covering."""
        return self.family.max_depth


_COVERING_FAMILIES: dict[RoofCovering, CoveringFamily] = {
    RoofCovering.POLYCARBONATE_OPAL: CoveringFamily.POLYCARBONATE,
    RoofCovering.POLYCARBONATE_CLEAR: CoveringFamily.POLYCARBONATE,
    RoofCovering.POLYCARBONATE_REFLEX_PEARL: CoveringFamily.POLYCARBONATE,
    RoofCovering.VSG_CLEAR: CoveringFamily.GLASS,
    RoofCovering.VSG_MATT: CoveringFamily.GLASS,
}


class SidePanelType(str, Enum):
    """Side infill with clear 44.2 glass.

    - NONE: open side
    - WEDGE: triangular wedge filling only the slope gap (1 field)
    - FULL_WALL: full side wall from ground to roof (3 fields)
    """

    NONE = "none"
    WEDGE = "wedge-clear"
    FULL_WALL = "wall-clear"


# Configuration domain limits (mm)
MIN_WIDTH = 1000.0
MAX_WIDTH = 7060.0
MIN_DEPTH = 1000.0
MIN_GUTTER_HEIGHT = 2000.0
MAX_GUTTER_HEIGHT = 3000.0
RECOMMENDED_GUTTER_HEIGHT = 2200.0


@dataclass(frozen=True)
class Configuration:
    """Immutable snapshot of every customer choice.

    A new instance is created for every edit; use ``with_changes`` to derive
    one. Lengths are in millimetres. Instances are hashable, so they can key
    caches of computed layouts and prices.
    """

    frame_color: FrameColor = FrameColor.RAL7024ST
    width: float = 5000.0
    depth: float = 3000.0
    gutter_height: float = RECOMMENDED_GUTTER_HEIGHT
    mount_type: MountType = MountType.WALL
    post_length: PostLength = PostLength.MM_2500
    post_mounting: PostMounting = PostMounting.ALU_L
    roof_slope: RoofSlope = RoofSlope.DEG_8
    delivery_option: DeliveryOption = DeliveryOption.WITHOUT_MOUNTING_SET
    roof_covering: RoofCovering = RoofCovering.POLYCARBONATE_CLEAR
    side_panel_left: SidePanelType = SidePanelType.NONE
    side_panel_right: SidePanelType = SidePanelType.NONE

    def __post_init__(self) -> None:
        _require_enum("frame_color", self.frame_color, FrameColor)
        _require_enum("mount_type", self.mount_type, MountType)
        _require_enum("post_length", self.post_length, PostLength)
        _require_enum("post_mounting", self.post_mounting, PostMounting)
        _require_enum("roof_slope", self.roof_slope, RoofSlope)
        _require_enum("delivery_option", self.delivery_option, DeliveryOption)
        _require_enum("roof_covering", self.roof_covering, RoofCovering)
        _require_enum("side_panel_left", self.side_panel_left, SidePanelType)
        _require_enum("side_panel_right", self.side_panel_right, SidePanelType)

        if not MIN_WIDTH <= self.width <= MAX_WIDTH:
            raise ConfigurationError(
                "width",
                f"must be between {MIN_WIDTH:g} and {MAX_WIDTH:g} mm",
                self.width,
            )
        max_depth = self.roof_covering.max_depth
        if not MIN_DEPTH <= self.depth <= max_depth:
            raise ConfigurationError(
                "depth",
                f"must be between {MIN_DEPTH:g} and {max_depth:g} mm "
                f"with {self.roof_covering.family.value} covering",
                self.depth,
            )
        if not MIN_GUTTER_HEIGHT <= self.gutter_height <= MAX_GUTTER_HEIGHT:
            raise ConfigurationError(
                "gutter_height",
                f"must be between {MIN_GUTTER_HEIGHT:g} and {MAX_GUTTER_HEIGHT:g} mm",
                self.gutter_height,
            )

    def with_changes(self, **changes: Any) -> Configuration:
        """Return a new configuration with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        return {
            "frame_color": self.frame_color.value,
            "width": self.width,
            "depth": self.depth,
            "gutter_height": self.gutter_height,
            "mount_type": self.mount_type.value,
            "post_length": self.post_length.value,
            "post_mounting": self.post_mounting.value,
            "roof_slope": self.roof_slope.value,
            "delivery_option": self.delivery_option.value,
            "roof_covering": self.roof_covering.value,
            "side_panel_left": self.side_panel_left.value,
            "side_panel_right": self.side_panel_right.value,
        }


def _require_enum(field: str, value: object, enum_type: type[Enum]) -> None:
    if not isinstance(value, enum_type):
        raise ConfigurationError(
            field, f"must be a {enum_type.__name__} member", value
        )
