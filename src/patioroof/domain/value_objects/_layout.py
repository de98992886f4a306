"""Structural layout value objects produced by the geometry engine.

All lengths are in metres and all angles in radians. Positions are the
centres of the members they describe unless stated otherwise.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any

from ..constants import PINNED_RIGHT_EDGE_X
from ._configuration import SidePanelType


class SupportKind(str, Enum):
    """What carries a corner of the roof."""

    FRONT_POST = "front_post"
    BACK_POST = "back_post"
    WALL_ANCHOR = "wall_anchor"


class Side(str, Enum):
    """Lateral side of the assembly, as seen from inside looking out."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point3D:
    """Point in layout space (x lateral, y up, z depth)."""

    x: float
    y: float
    z: float

    def translated(self, dx: float = 0.0, dy: float = 0.0, dz: float = 0.0) -> Point3D:
        """Return this point moved by the given offsets."""
        return Point3D(self.x + dx, self.y + dy, self.z + dz)


@dataclass(frozen=True)
class PinnedEdge:
    """Edge of the assembly that stays fixed while the size changes.

    The right edge is always pinned at ``x``; the structure grows towards -x
    as the width increases. When ``back_z`` is set the back edge line is
    pinned there as well and the structure grows towards +z with depth.
    Otherwise the structure is centred on z = 0.
    """

    x: float = PINNED_RIGHT_EDGE_X
    back_z: float | None = None


@dataclass(frozen=True)
class PostSupport:
    """A vertical support at one corner of the roof.

    For ``WALL_ANCHOR`` supports no standing post exists; the position and
    height describe the facade-mounted anchor the back beam hangs from.
    """

    position: Point3D
    height: float
    kind: SupportKind
    side: Side
    size: float

    @property
    def is_standing(self) -> bool:
        """True when a free-standing post is drawn for this support."""
        return self.kind is not SupportKind.WALL_ANCHOR


@dataclass(frozen=True)
class Beam:
    """Horizontal main beam running along the width."""

    name: str
    position: Point3D
    length: float
    section_width: float
    section_height: float

    @property
    def top(self) -> float:
        """Height of the top surface the rafters rest on."""
        return self.position.y + self.section_height / 2


@dataclass(frozen=True)
class Rafter:
    """Sloped member from the back edge to the front edge."""

    index: int
    x: float
    midpoint: Point3D
    length: float
    angle: float
    section_width: float
    section_height: float


@dataclass(frozen=True)
class RoofMaterial:
    """Material hint for the roof infill."""

    color: str
    opacity: float
    metalness: float


@dataclass(frozen=True)
class RoofPanel:
    """The single planar roof element.

    ``rotation_x`` tilts a plane lying in x/y into the roof pitch;
    ``slope_angle`` is the pitch itself.
    """

    position: Point3D
    rotation_x: float
    slope_angle: float
    width: float
    depth: float
    material: RoofMaterial


@dataclass(frozen=True)
class SideFrameMember:
    """Vertical frame profile holding a side panel."""

    position: Point3D
    height: float


@dataclass(frozen=True)
class SidePanel:
    """Glass infill on one side of the roof.

    ``outline`` lists the polygon corners as (z, y) pairs in the panel's
    own plane, in layout coordinates.
    """

    side: Side
    panel_type: SidePanelType
    position: Point3D
    rotation_y: float
    thickness: float
    depth: float
    height: float
    outline: tuple[tuple[float, float], ...]
    frame_members: tuple[SideFrameMember, SideFrameMember]


@dataclass(frozen=True)
class StructureLayout:
    """Complete structural layout for one configuration."""

    front_height: float
    back_height: float
    height_difference: float
    post_supports: tuple[PostSupport, ...]
    front_beam: Beam
    back_beam: Beam
    rafters: tuple[Rafter, ...]
    roof_panel: RoofPanel
    side_panels: tuple[SidePanel, ...] = field(default_factory=tuple)
    frame_color: str = ""
    rafter_spacing: float = 0.0
    pinned_edge: PinnedEdge = field(default_factory=PinnedEdge)

    @property
    def beams(self) -> tuple[Beam, Beam]:
        """Front and back main beams."""
        return (self.front_beam, self.back_beam)

    @property
    def rafter_count(self) -> int:
        """Number of rafter fields (one less than the number of rafters)."""
        return len(self.rafters) - 1

    def side_panel(self, side: Side) -> SidePanel | None:
        """Return the side panel on ``side``, if any."""
        for panel in self.side_panels:
            if panel.side is side:
                return panel
        return None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to plain JSON-compatible values."""
        data = asdict(self)
        data["rafter_count"] = self.rafter_count
        return _plain(data)


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value
