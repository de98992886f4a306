"""Named geometry constants shared by the layout, beam and side-panel code.

All configuration inputs arrive in millimetres. The layout is expressed in
metres, and every conversion goes through ``mm_to_m`` so the scale factor
lives in exactly one place. Every length below is already in metres.

Coordinate convention (right-handed, y up):
    x: lateral, the structure extends from the pinned right edge towards -x
    y: vertical, ground at y = 0
    z: depth, front (high, open) edge at +depth/2, back (gutter) edge at -depth/2
"""

from __future__ import annotations

__all__ = [
    "BEAM_THICKNESS",
    "BEAM_TOP_OFFSET",
    "MIN_RAFTER_COUNT",
    "MM_TO_M",
    "PINNED_RIGHT_EDGE_X",
    "POST_SIZE",
    "RAFTER_HEIGHT",
    "RAFTER_SPACING_MM",
    "RAFTER_WIDTH",
    "ROOF_OVERLAP_FACTOR",
    "SIDE_FRAME_FRACTION",
    "SIDE_PANEL_OFFSET",
    "SIDE_PANEL_THICKNESS",
    "WALL_OFFSET",
    "mm_to_m",
]

# Millimetres to metres.
MM_TO_M = 0.001

# Square post cross-section (100 x 100 mm).
POST_SIZE = 0.10

# Height of the rafter resting surface above an edge height. Beams carry
# their top surface here and the posts reach up to it.
BEAM_TOP_OFFSET = POST_SIZE * 0.6

# Square main-beam cross-section.
BEAM_THICKNESS = POST_SIZE * 1.2

# Rafter cross-section (width x height).
RAFTER_WIDTH = POST_SIZE * 0.7
RAFTER_HEIGHT = POST_SIZE * 0.9

# One rafter field per 600 mm of width, never fewer than five fields.
RAFTER_SPACING_MM = 600
MIN_RAFTER_COUNT = 5

# Setback of the facade anchors behind the back edge for wall mounting.
WALL_OFFSET = 0.15

# Roof panel depth is stretched by this factor so it overlaps the beams.
ROOF_OVERLAP_FACTOR = 1.05

# Side panels: glass thickness and outward offset from their edge.
SIDE_PANEL_THICKNESS = 0.10
SIDE_PANEL_OFFSET = 0.05

# Side-panel frame members stop this fraction of the height difference
# short of the edge they stand at.
SIDE_FRAME_FRACTION = 0.3

# The right edge of the assembly stays at this x coordinate.
PINNED_RIGHT_EDGE_X = 5.0


def mm_to_m(value_mm: float) -> float:
    """Convert a millimetre input to layout metres."""
    return value_mm * MM_TO_M
