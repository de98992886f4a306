"""Advisory checks: valid configurations the customer should double-check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from patioroof.domain.services import BASE_PRICES, is_custom_size
from patioroof.domain.value_objects import (
    RECOMMENDED_GUTTER_HEIGHT,
    CoveringFamily,
    RoofSlope,
)

from .base import ValidationResult

if TYPE_CHECKING:
    from patioroof.application.config.schemas import PatioRoofConfiguration

# Polycarbonate sheets drain poorly below this pitch.
MIN_POLYCARBONATE_SLOPE = RoofSlope.DEG_8


class AdvisoryValidator:
    """Non-blocking warnings about height, pitch and billing size."""

    @property
    def name(self) -> str:
        return "advisory"

    def validate(self, config: PatioRoofConfiguration) -> ValidationResult:
        """Collect advisory warnings for a configuration.

        Args:
            config: A schema-valid PatioRoofConfiguration

        Returns:
            ValidationResult containing warnings only
        """
        result = ValidationResult()
        roof = config.configuration

        if roof.gutter_height != RECOMMENDED_GUTTER_HEIGHT:
            result.add_warning(
                path="configuration.gutter_height",
                message=(
                    f"Gutter height {roof.gutter_height:g} mm differs from the "
                    f"recommended {RECOMMENDED_GUTTER_HEIGHT:g} mm"
                ),
                suggestion="Check the clearance under the gutter on site",
            )

        if (
            roof.roof_covering.family is CoveringFamily.POLYCARBONATE
            and roof.roof_slope < MIN_POLYCARBONATE_SLOPE
        ):
            result.add_warning(
                path="configuration.roof_slope",
                message=(
                    f"A {roof.roof_slope.value} deg pitch is flat for polycarbonate; "
                    f"{MIN_POLYCARBONATE_SLOPE.value} deg or more drains better"
                ),
                suggestion=f"Use a roof slope of at least {MIN_POLYCARBONATE_SLOPE.value} deg",
            )

        if is_custom_size(roof.width, roof.depth):
            result.add_warning(
                path="configuration",
                message=(
                    f"{roof.width:g} x {roof.depth:g} mm is a custom size; "
                    "a custom-size surcharge applies"
                ),
                suggestion="Choose a standard module size to avoid the surcharge",
            )

        widths, depths = BASE_PRICES.widths, BASE_PRICES.depths
        if not widths[0] <= roof.width <= widths[-1]:
            result.add_warning(
                path="configuration.width",
                message=(
                    f"Width {roof.width:g} mm is outside the price grid and is "
                    f"billed as {BASE_PRICES.billing_width(roof.width):g} mm"
                ),
            )
        if not depths[0] <= roof.depth <= depths[-1]:
            result.add_warning(
                path="configuration.depth",
                message=(
                    f"Depth {roof.depth:g} mm is outside the price grid and is "
                    f"billed as {BASE_PRICES.billing_depth(roof.depth):g} mm"
                ),
            )

        return result
