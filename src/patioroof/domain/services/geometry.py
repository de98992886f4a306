"""Geometry engine: derives the structural layout of a patio roof.

The layout is built in a right-aligned local frame (right edge at x = 0,
depth centred on z = 0) and then moved onto the pinned edge, so resizing
never shifts the anchored side of the structure.

Beam-on-post rule: every beam's top surface sits ``BEAM_TOP_OFFSET`` above
the edge height it carries, and each support reaches exactly up to the
underside of the rafters resting there. The front supports carry the beam
whose top is at the back (gutter) edge height and the back supports carry the
beam whose top is at the front edge height, so front posts are sized from the
back height and back supports from the front height.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType

from ..constants import (
    BEAM_THICKNESS,
    BEAM_TOP_OFFSET,
    MIN_RAFTER_COUNT,
    POST_SIZE,
    RAFTER_HEIGHT,
    RAFTER_SPACING_MM,
    RAFTER_WIDTH,
    ROOF_OVERLAP_FACTOR,
    SIDE_FRAME_FRACTION,
    SIDE_PANEL_OFFSET,
    SIDE_PANEL_THICKNESS,
    WALL_OFFSET,
    mm_to_m,
)
from ..value_objects import (
    Beam,
    Configuration,
    MountType,
    PinnedEdge,
    Point3D,
    PostSupport,
    Rafter,
    RoofCovering,
    RoofMaterial,
    RoofPanel,
    Side,
    SideFrameMember,
    SidePanel,
    SidePanelType,
    StructureLayout,
    SupportKind,
    UnknownOptionError,
)

__all__ = [
    "ROOF_MATERIALS",
    "GeometryEngine",
    "compute_layout",
    "rafter_count_for_width",
]

logger = logging.getLogger(__name__)


ROOF_MATERIALS: MappingProxyType[RoofCovering, RoofMaterial] = MappingProxyType(
    {
        RoofCovering.POLYCARBONATE_OPAL: RoofMaterial("#f0f0f0", 0.5, 0.1),
        RoofCovering.POLYCARBONATE_CLEAR: RoofMaterial("#e8f4f8", 0.15, 0.3),
        RoofCovering.POLYCARBONATE_REFLEX_PEARL: RoofMaterial("#ffd700", 0.3, 0.1),
        RoofCovering.VSG_CLEAR: RoofMaterial("#e8f4f8", 0.1, 0.3),
        RoofCovering.VSG_MATT: RoofMaterial("#d0d0d0", 0.4, 0.3),
    }
)

_missing = set(RoofCovering) - set(ROOF_MATERIALS)
if _missing:
    raise RuntimeError(f"Roof material missing for: {sorted(m.value for m in _missing)}")
del _missing


def rafter_count_for_width(width_mm: float) -> int:
    """Number of rafter fields for a width in mm (one rafter more than fields)."""
    return max(MIN_RAFTER_COUNT, math.floor(width_mm / RAFTER_SPACING_MM))


@dataclass(frozen=True)
class _Frame:
    """Derived heights and edge coordinates shared by all layout steps (local frame)."""

    width: float
    depth: float
    front_height: float
    back_height: float
    front_z: float
    back_z: float
    dx: float
    dz: float

    @property
    def height_difference(self) -> float:
        return self.front_height - self.back_height

    def place(self, x: float, y: float, z: float) -> Point3D:
        """Move a local point onto the pinned edge."""
        return Point3D(x, y, z).translated(dx=self.dx, dz=self.dz)


@dataclass
class GeometryEngine:
    """Computes the structural layout for a configuration.

    The engine is stateless; one instance can serve any number of callers.

    Attributes:
        pinned_edge: Edge kept fixed while width and depth change.
    """

    pinned_edge: PinnedEdge = PinnedEdge()

    def compute_layout(self, config: Configuration) -> StructureLayout:
        """Derive the complete structural layout for ``config``.

        Args:
            config: A validated configuration.

        Returns:
            StructureLayout in metres, placed on the pinned edge.

        Raises:
            UnknownOptionError: If an enumerated option has no geometry rule.
        """
        frame = self._frame(config)

        supports = self._post_supports(config, frame)
        front_beam, back_beam = self._beams(frame)
        rafters, spacing = self._rafters(config, frame)
        roof_panel = self._roof_panel(config, frame)
        side_panels = tuple(
            panel
            for panel in (
                self._side_panel(Side.LEFT, config.side_panel_left, frame),
                self._side_panel(Side.RIGHT, config.side_panel_right, frame),
            )
            if panel is not None
        )

        layout = StructureLayout(
            front_height=frame.front_height,
            back_height=frame.back_height,
            height_difference=frame.height_difference,
            post_supports=supports,
            front_beam=front_beam,
            back_beam=back_beam,
            rafters=rafters,
            roof_panel=roof_panel,
            side_panels=side_panels,
            frame_color=config.frame_color.hex_color,
            rafter_spacing=spacing,
            pinned_edge=self.pinned_edge,
        )
        logger.debug(
            f"Layout {config.width:g}x{config.depth:g} mm @ {config.roof_slope.value} deg: "
            f"front={layout.front_height:.3f} m, back={layout.back_height:.3f} m, "
            f"{len(rafters)} rafters, {len(side_panels)} side panel(s)"
        )
        return layout

    def _frame(self, config: Configuration) -> _Frame:
        width = mm_to_m(config.width)
        depth = mm_to_m(config.depth)
        back_height = mm_to_m(config.gutter_height)
        front_height = back_height + depth * math.tan(math.radians(config.roof_slope.value))

        front_z = depth / 2
        back_z = -depth / 2 - _back_setback(config.mount_type)

        pinned = self.pinned_edge
        dz = 0.0 if pinned.back_z is None else pinned.back_z - back_z
        return _Frame(
            width=width,
            depth=depth,
            front_height=front_height,
            back_height=back_height,
            front_z=front_z,
            back_z=back_z,
            dx=pinned.x,
            dz=dz,
        )

    def _post_supports(
        self, config: Configuration, frame: _Frame
    ) -> tuple[PostSupport, ...]:
        """Four corner supports: front-left, front-right, back-left, back-right."""
        front_height = frame.back_height + BEAM_TOP_OFFSET
        back_height = frame.front_height + BEAM_TOP_OFFSET
        back_kind = _back_support_kind(config.mount_type)

        supports: list[PostSupport] = []
        for z, height, kind in (
            (frame.front_z, front_height, SupportKind.FRONT_POST),
            (frame.back_z, back_height, back_kind),
        ):
            for x, side in ((-frame.width, Side.LEFT), (0.0, Side.RIGHT)):
                supports.append(
                    PostSupport(
                        position=frame.place(x, height / 2, z),
                        height=height,
                        kind=kind,
                        side=side,
                        size=POST_SIZE,
                    )
                )
        return tuple(supports)

    def _beams(self, frame: _Frame) -> tuple[Beam, Beam]:
        length = frame.width + POST_SIZE
        x = -frame.width / 2

        front_top = frame.back_height + BEAM_TOP_OFFSET
        back_top = frame.front_height + BEAM_TOP_OFFSET

        front = Beam(
            name="front",
            position=frame.place(x, front_top - BEAM_THICKNESS / 2, frame.front_z),
            length=length,
            section_width=BEAM_THICKNESS,
            section_height=BEAM_THICKNESS,
        )
        back = Beam(
            name="back",
            position=frame.place(x, back_top - BEAM_THICKNESS / 2, frame.back_z),
            length=length,
            section_width=BEAM_THICKNESS,
            section_height=BEAM_THICKNESS,
        )
        return front, back

    def _rafters(
        self, config: Configuration, frame: _Frame
    ) -> tuple[tuple[Rafter, ...], float]:
        count = rafter_count_for_width(config.width)
        spacing = frame.width / count

        front_y = frame.front_height + BEAM_TOP_OFFSET
        back_y = frame.back_height + BEAM_TOP_OFFSET
        run = frame.front_z - frame.back_z
        rise = front_y - back_y
        length = math.hypot(run, rise)
        angle = math.atan2(rise, run)
        mid_y = (front_y + back_y) / 2
        mid_z = (frame.front_z + frame.back_z) / 2

        rafters = []
        for index in range(count + 1):
            x = -frame.width + index * spacing
            midpoint = frame.place(x, mid_y, mid_z)
            rafters.append(
                Rafter(
                    index=index,
                    x=midpoint.x,
                    midpoint=midpoint,
                    length=length,
                    angle=angle,
                    section_width=RAFTER_WIDTH,
                    section_height=RAFTER_HEIGHT,
                )
            )
        return tuple(rafters), spacing

    def _roof_panel(self, config: Configuration, frame: _Frame) -> RoofPanel:
        setback = _back_setback(config.mount_type)
        run = frame.depth + setback
        slope_angle = math.atan2(frame.height_difference, run)

        material = ROOF_MATERIALS.get(config.roof_covering)
        if material is None:
            raise UnknownOptionError(config.roof_covering, "roof covering")

        return RoofPanel(
            position=frame.place(
                -frame.width / 2,
                (frame.front_height + frame.back_height) / 2 + BEAM_THICKNESS,
                -setback / 2,
            ),
            rotation_x=slope_angle - math.pi / 2,
            slope_angle=slope_angle,
            width=frame.width + POST_SIZE * 2,
            depth=run * ROOF_OVERLAP_FACTOR,
            material=material,
        )

    def _side_panel(
        self, side: Side, panel_type: SidePanelType, frame: _Frame
    ) -> SidePanel | None:
        if panel_type is SidePanelType.NONE:
            return None

        front_z = frame.depth / 2
        back_z = -frame.depth / 2
        front_h = frame.front_height
        back_h = frame.back_height

        if panel_type is SidePanelType.WEDGE:
            height = frame.height_difference
            outline = ((back_z, back_h), (front_z, front_h), (front_z, back_h))
        elif panel_type is SidePanelType.FULL_WALL:
            height = front_h
            outline = ((back_z, 0.0), (front_z, 0.0), (front_z, front_h), (back_z, back_h))
        else:
            raise UnknownOptionError(panel_type, "side panel")

        if side is Side.LEFT:
            x = -frame.width - SIDE_PANEL_OFFSET
            rotation_y = math.pi / 2
        elif side is Side.RIGHT:
            x = SIDE_PANEL_OFFSET
            rotation_y = -math.pi / 2
        else:
            raise UnknownOptionError(side, "side")

        back_member_height = _lerp(back_h, front_h, SIDE_FRAME_FRACTION)
        front_member_height = _lerp(back_h, front_h, 1 - SIDE_FRAME_FRACTION)
        frame_members = (
            SideFrameMember(
                position=frame.place(x, front_member_height / 2, front_z),
                height=front_member_height,
            ),
            SideFrameMember(
                position=frame.place(x, back_member_height / 2, back_z),
                height=back_member_height,
            ),
        )

        return SidePanel(
            side=side,
            panel_type=panel_type,
            position=frame.place(x, (front_h + back_h) / 2 + BEAM_TOP_OFFSET, 0.0),
            rotation_y=rotation_y,
            thickness=SIDE_PANEL_THICKNESS,
            depth=frame.depth,
            height=height,
            outline=tuple((z + frame.dz, y) for z, y in outline),
            frame_members=frame_members,
        )


def _back_setback(mount_type: MountType) -> float:
    """Distance of the back support line behind the back roof edge."""
    if mount_type is MountType.FREESTANDING:
        return 0.0
    if mount_type is MountType.WALL:
        return WALL_OFFSET
    raise UnknownOptionError(mount_type, "mount type")


def _back_support_kind(mount_type: MountType) -> SupportKind:
    if mount_type is MountType.FREESTANDING:
        return SupportKind.BACK_POST
    if mount_type is MountType.WALL:
        return SupportKind.WALL_ANCHOR
    raise UnknownOptionError(mount_type, "mount type")


def _lerp(start: float, end: float, fraction: float) -> float:
    return start + (end - start) * fraction


_DEFAULT_ENGINE = GeometryEngine()


def compute_layout(
    config: Configuration, pinned_edge: PinnedEdge | None = None
) -> StructureLayout:
    """Compute the structural layout for ``config``.

    Args:
        config: A validated configuration.
        pinned_edge: Edge to keep fixed; defaults to the right edge at x = 5.0.
    """
    if pinned_edge is None:
        return _DEFAULT_ENGINE.compute_layout(config)
    return GeometryEngine(pinned_edge=pinned_edge).compute_layout(config)
