"""Unit tests for the Configuration value object and its options."""

import pytest

from patioroof.domain.value_objects import (
    Configuration,
    ConfigurationError,
    CoveringFamily,
    FrameColor,
    MountType,
    PostLength,
    RoofCovering,
    RoofSlope,
    SidePanelType,
    UnknownOptionError,
)


class TestConfigurationDefaults:
    """The initial state of the configurator."""

    def test_defaults(self, default_config: Configuration) -> None:
        assert default_config.frame_color is FrameColor.RAL7024ST
        assert default_config.width == 5000.0
        assert default_config.depth == 3000.0
        assert default_config.gutter_height == 2200.0
        assert default_config.mount_type is MountType.WALL
        assert default_config.post_length is PostLength.MM_2500
        assert default_config.roof_slope is RoofSlope.DEG_8
        assert default_config.roof_covering is RoofCovering.POLYCARBONATE_CLEAR
        assert default_config.side_panel_left is SidePanelType.NONE
        assert default_config.side_panel_right is SidePanelType.NONE

    def test_is_hashable(self, default_config: Configuration) -> None:
        assert hash(default_config) == hash(Configuration())
        assert {default_config: 1}[Configuration()] == 1


class TestConfigurationInvariants:
    """Out-of-domain values are rejected at construction."""

    @pytest.mark.parametrize("width", [999.0, 7061.0, 0.0])
    def test_width_out_of_range(self, width: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Configuration(width=width)
        assert exc_info.value.field == "width"

    @pytest.mark.parametrize("width", [1000.0, 7060.0])
    def test_width_bounds_inclusive(self, width: float) -> None:
        assert Configuration(width=width).width == width

    def test_polycarbonate_allows_3500_depth(self) -> None:
        config = Configuration(depth=3500.0, roof_covering=RoofCovering.POLYCARBONATE_OPAL)
        assert config.depth == 3500.0

    def test_glass_limits_depth_to_3000(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Configuration(depth=3200.0, roof_covering=RoofCovering.VSG_CLEAR)
        assert exc_info.value.field == "depth"
        assert "glass" in str(exc_info.value)

    def test_depth_below_minimum(self) -> None:
        with pytest.raises(ConfigurationError):
            Configuration(depth=900.0)

    @pytest.mark.parametrize("gutter_height", [1999.0, 3001.0])
    def test_gutter_height_out_of_range(self, gutter_height: float) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Configuration(gutter_height=gutter_height)
        assert exc_info.value.field == "gutter_height"

    def test_raw_string_option_rejected(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            Configuration(mount_type="wall")  # type: ignore[arg-type]
        assert exc_info.value.field == "mount_type"

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            Configuration(width=100.0)


class TestConfigurationChanges:
    """Editing produces new snapshots."""

    def test_with_changes_returns_new_instance(self, default_config: Configuration) -> None:
        changed = default_config.with_changes(width=4000.0)

        assert changed.width == 4000.0
        assert default_config.width == 5000.0
        assert changed is not default_config

    def test_with_changes_validates(self, default_config: Configuration) -> None:
        with pytest.raises(ConfigurationError):
            default_config.with_changes(roof_covering=RoofCovering.VSG_MATT, depth=3500.0)

    def test_frozen(self, default_config: Configuration) -> None:
        with pytest.raises(AttributeError):
            default_config.width = 4000.0  # type: ignore[misc]

    def test_to_dict_uses_wire_values(self, default_config: Configuration) -> None:
        data = Configuration(side_panel_left=SidePanelType.WEDGE).to_dict()

        assert data["frame_color"] == "RAL7024st"
        assert data["mount_type"] == "wall"
        assert data["roof_slope"] == 8
        assert data["post_length"] == 2500
        assert data["side_panel_left"] == "wedge-clear"


class TestOptionEnums:
    """Enum helpers."""

    def test_covering_families(self) -> None:
        assert RoofCovering.POLYCARBONATE_REFLEX_PEARL.family is CoveringFamily.POLYCARBONATE
        assert RoofCovering.VSG_MATT.family is CoveringFamily.GLASS

    def test_every_covering_has_max_depth(self) -> None:
        for covering in RoofCovering:
            assert covering.max_depth in (3000.0, 3500.0)

    def test_frame_color_hints(self) -> None:
        assert FrameColor.RAL7016ST.hex_color == "#383e42"
        assert "Anthracite" in FrameColor.RAL7016ST.display_name
        for color in FrameColor:
            assert color.hex_color.startswith("#")

    def test_unknown_option_error_message(self) -> None:
        error = UnknownOptionError(MountType.WALL, "mount type")
        assert "mount type" in str(error)
        assert "'wall'" in str(error)
