"""Schema for the customer's roof configuration."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_validator,
)

from patioroof.application.config.schemas.base import (
    DeliveryOption,
    FrameColor,
    MountType,
    PostLength,
    PostMounting,
    RoofCovering,
    RoofSlope,
    SidePanelType,
)
from patioroof.domain.value_objects import (
    MAX_GUTTER_HEIGHT,
    MAX_WIDTH,
    MIN_DEPTH,
    MIN_GUTTER_HEIGHT,
    MIN_WIDTH,
    RECOMMENDED_GUTTER_HEIGHT,
    CoveringFamily,
)


class RoofConfigSchema(BaseModel):
    """Every customer choice for one patio roof.

    Omitted fields take the configurator's initial values.

    Attributes:
        frame_color: Powder-coated RAL finish
        width: Overall width in mm (1000 to 7060)
        depth: Projection from the wall in mm (1000 to 3500, 3000 with glass)
        gutter_height: Clear height at the gutter edge in mm (2000 to 3000)
        mount_type: Wall-mounted or free-standing
        post_length: Post length in mm
        post_mounting: Post base hardware
        roof_slope: Roof pitch in degrees (5 to 10)
        delivery_option: With or without the DIY mounting set
        roof_covering: Polycarbonate or VSG glass infill
        side_panel_left: Left side infill
        side_panel_right: Right side infill
    """

    model_config = ConfigDict(extra="forbid")

    frame_color: FrameColor = FrameColor.RAL7024ST
    width: float = Field(default=5000.0, ge=MIN_WIDTH, le=MAX_WIDTH)
    depth: float = Field(
        default=3000.0,
        ge=MIN_DEPTH,
        le=CoveringFamily.POLYCARBONATE.max_depth,
    )
    gutter_height: float = Field(
        default=RECOMMENDED_GUTTER_HEIGHT, ge=MIN_GUTTER_HEIGHT, le=MAX_GUTTER_HEIGHT
    )
    mount_type: MountType = MountType.WALL
    post_length: PostLength = PostLength.MM_2500
    post_mounting: PostMounting = PostMounting.ALU_L
    roof_slope: RoofSlope = RoofSlope.DEG_8
    delivery_option: DeliveryOption = DeliveryOption.WITHOUT_MOUNTING_SET
    roof_covering: RoofCovering = RoofCovering.POLYCARBONATE_CLEAR
    side_panel_left: SidePanelType = SidePanelType.NONE
    side_panel_right: SidePanelType = SidePanelType.NONE

    @model_validator(mode="after")
    def validate_depth_for_covering(self) -> "RoofConfigSchema":
        """Glass coverings allow a smaller depth than polycarbonate."""
        max_depth = self.roof_covering.max_depth
        if self.depth > max_depth:
            raise ValueError(
                f"depth {self.depth:g} mm exceeds the maximum of {max_depth:g} mm "
                f"for {self.roof_covering.value}"
            )
        return self
