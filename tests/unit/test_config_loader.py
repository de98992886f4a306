"""Tests for configuration file loading and schema validation."""

import json
from pathlib import Path

import pytest

from patioroof.application.config import (
    ConfigError,
    PatioRoofConfiguration,
    load_config,
    load_config_from_dict,
)
from patioroof.application.config.loader import _format_json_path
from patioroof.domain.value_objects import (
    GridPolicy,
    MountType,
    RoofCovering,
    RoofSlope,
    SidePanelType,
)


def write_config(tmp_path: Path, data: dict | str) -> Path:
    path = tmp_path / "roof.json"
    if isinstance(data, str):
        path.write_text(data)
    else:
        path.write_text(json.dumps(data))
    return path


class TestLoadConfig:
    """Tests for load_config()."""

    def test_minimal_file_uses_defaults(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, {"schema_version": "1.0"}))

        assert config.configuration.width == 5000.0
        assert config.configuration.depth == 3000.0
        assert config.configuration.roof_covering is RoofCovering.POLYCARBONATE_CLEAR
        assert config.pricing.grid_policy is GridPolicy.SNAP
        assert config.layout.pinned_x == 5.0
        assert config.layout.pinned_back_z is None

    def test_full_file(self, tmp_path: Path) -> None:
        data = {
            "schema_version": "1.0",
            "configuration": {
                "width": 4000,
                "depth": 2500,
                "mount_type": "freestanding",
                "roof_slope": 10,
                "side_panel_left": "wedge-clear",
            },
            "pricing": {"grid_policy": "bilinear"},
            "layout": {"pinned_x": 0.0, "pinned_back_z": 0.0},
            "output": {"format": "json"},
        }
        config = load_config(write_config(tmp_path, data))

        roof = config.configuration
        assert roof.width == 4000.0
        assert roof.mount_type is MountType.FREESTANDING
        assert roof.roof_slope is RoofSlope.DEG_10
        assert roof.side_panel_left is SidePanelType.WEDGE
        assert config.pricing.grid_policy is GridPolicy.BILINEAR
        assert config.layout.pinned_back_z == 0.0

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert exc_info.value.path == tmp_path / "missing.json"

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = write_config(tmp_path, '{"schema_version": "1.0",\n  "configuration": }')

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert "Invalid JSON" in str(error)

    def test_missing_schema_version(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, {"configuration": {}}))

        assert exc_info.value.error_type == "validation"
        assert exc_info.value.details[0]["path"] == "schema_version"

    def test_newer_minor_version_is_accepted(self, tmp_path: Path) -> None:
        config = load_config(write_config(tmp_path, {"schema_version": "1.3"}))

        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, {"schema_version": "2.0"}))

        assert exc_info.value.error_type == "validation"
        assert "Unsupported schema version" in str(exc_info.value)

    def test_width_out_of_range(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "configuration": {"width": 8000}}

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, data))

        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "configuration.width"
        assert error.details[0]["value"] == 8000
        assert "configuration.width" in error.message

    def test_glass_depth_limit(self, tmp_path: Path) -> None:
        data = {
            "schema_version": "1.0",
            "configuration": {"depth": 3500, "roof_covering": "vsg-clear"},
        }

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, data))

        assert "3000" in exc_info.value.message

    def test_polycarbonate_allows_deeper_roof(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "configuration": {"depth": 3500}}
        config = load_config(write_config(tmp_path, data))

        assert config.configuration.depth == 3500.0

    def test_unknown_option_value(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "configuration": {"roof_slope": 12}}

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, data))

        assert exc_info.value.details[0]["path"] == "configuration.roof_slope"

    def test_extra_fields_rejected(self, tmp_path: Path) -> None:
        data = {"schema_version": "1.0", "configuration": {"colour": "red"}}

        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(tmp_path, data))

        assert exc_info.value.details[0]["path"] == "configuration.colour"


class TestSchemaVersion:
    """Tests for schema version handling."""

    def test_newer_minor_version_accepted(self) -> None:
        config = load_config_from_dict({"schema_version": "1.3"})
        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "2.0"})

        assert "Unsupported schema version" in exc_info.value.message

    def test_malformed_version(self) -> None:
        with pytest.raises(ConfigError):
            load_config_from_dict({"schema_version": "one"})


class TestLoadConfigFromDict:
    def test_returns_model(self) -> None:
        config = load_config_from_dict(
            {"schema_version": "1.0", "configuration": {"width": 3000}}
        )

        assert isinstance(config, PatioRoofConfiguration)
        assert config.configuration.width == 3000.0

    def test_validation_error_has_no_path(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict({"schema_version": "1.0", "pricing": {"grid_policy": "cubic"}})

        assert exc_info.value.path is None
        assert exc_info.value.details[0]["path"] == "pricing.grid_policy"


class TestFormatJsonPath:
    @pytest.mark.parametrize(
        "loc,expected",
        [
            (("configuration", "depth"), "configuration.depth"),
            (("items", 0, "width"), "items[0].width"),
            ((0,), "[0]"),
            ((), ""),
        ],
    )
    def test_format(self, loc: tuple, expected: str) -> None:
        assert _format_json_path(loc) == expected
