"""Pricing, layout and output settings schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
)

from patioroof.application.config.schemas.base import GridPolicy, OutputFormat
from patioroof.domain.constants import PINNED_RIGHT_EDGE_X


class PricingConfigSchema(BaseModel):
    """How grid prices are read.

    Attributes:
        grid_policy: "snap" bills the next grid node, "bilinear" interpolates
    """

    model_config = ConfigDict(extra="forbid")

    grid_policy: GridPolicy = GridPolicy.SNAP


class LayoutConfigSchema(BaseModel):
    """Where the structure is anchored in layout space.

    Attributes:
        pinned_x: x coordinate of the right edge in metres
        pinned_back_z: z coordinate of the back edge in metres; the
            structure is centred on z = 0 when omitted
    """

    model_config = ConfigDict(extra="forbid")

    pinned_x: float = PINNED_RIGHT_EDGE_X
    pinned_back_z: float | None = Field(
        default=None, description="Pin the back edge line as well (optional)"
    )


class OutputConfig(BaseModel):
    """Output configuration.

    Attributes:
        format: Output format for the quote
        file: Path to write the output to (stdout when omitted)
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = OutputFormat.TEXT
    file: str | None = None
