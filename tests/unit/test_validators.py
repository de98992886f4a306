"""Tests for configuration validators and the validator registry."""

import pytest

from patioroof.application.config import (
    Severity,
    ValidationResult,
    ValidatorRegistry,
    load_config_from_dict,
    validate_config,
)
from patioroof.application.config.validators import (
    AdvisoryValidator,
    DomainValidator,
)


def make_config(**roof):
    return load_config_from_dict({"schema_version": "1.0", "configuration": roof})


class TestValidationResult:
    def test_exit_codes(self) -> None:
        result = ValidationResult()
        assert result.exit_code == 0
        assert result.is_valid

        result.add_warning("configuration", "check this")
        assert result.exit_code == 2
        assert result.is_valid
        assert result.has_warnings

        result.add_error("configuration.width", "too wide", 9000)
        assert result.exit_code == 1
        assert not result.is_valid

    def test_merge(self) -> None:
        first = ValidationResult().add_error("a", "bad")
        second = ValidationResult().add_warning("b", "hmm")

        first.merge(second)

        assert len(first.errors) == 1
        assert len(first.warnings) == 1
        assert [i.severity for i in first.issues] == [Severity.ERROR, Severity.WARNING]


class TestDomainValidator:
    def test_valid_configuration(self) -> None:
        result = DomainValidator().validate(make_config())
        assert result.is_valid
        assert not result.has_warnings

    def test_name(self) -> None:
        assert DomainValidator().name == "domain"


class TestAdvisoryValidator:
    def test_default_has_no_warnings(self) -> None:
        assert AdvisoryValidator().validate(make_config()).exit_code == 0

    def test_gutter_height_warning(self) -> None:
        result = AdvisoryValidator().validate(make_config(gutter_height=2500))

        assert [w.path for w in result.warnings] == ["configuration.gutter_height"]

    def test_flat_polycarbonate_warning(self) -> None:
        result = AdvisoryValidator().validate(make_config(roof_slope=5))
        assert [w.path for w in result.warnings] == ["configuration.roof_slope"]

    def test_flat_glass_is_fine(self) -> None:
        result = AdvisoryValidator().validate(
            make_config(roof_slope=5, roof_covering="vsg-clear")
        )
        assert not result.has_warnings

    def test_custom_size_warning(self) -> None:
        result = AdvisoryValidator().validate(make_config(width=4500))

        assert [w.path for w in result.warnings] == ["configuration"]
        assert "surcharge" in result.warnings[0].message

    def test_outside_grid_warnings(self) -> None:
        result = AdvisoryValidator().validate(make_config(width=7060, depth=1000))
        paths = [w.path for w in result.warnings]

        assert "configuration.width" in paths
        assert "configuration.depth" in paths
        assert "billed as 6000 mm" in " ".join(w.message for w in result.warnings)


class TestValidatorRegistry:
    def test_builtin_validators_registered(self) -> None:
        assert ValidatorRegistry.is_registered("domain")
        assert ValidatorRegistry.is_registered("advisory")
        assert "advisory" in ValidatorRegistry.available()

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError, match="No validator registered"):
            ValidatorRegistry.get("nonexistent")

    def test_disable_skips_validator(self) -> None:
        config = make_config(gutter_height=2500)
        assert validate_config(config).exit_code == 2

        ValidatorRegistry.disable("advisory")
        try:
            assert not ValidatorRegistry.is_enabled("advisory")
            assert validate_config(config).exit_code == 0
        finally:
            ValidatorRegistry.reset_disabled()

        assert ValidatorRegistry.is_enabled("advisory")

    def test_disable_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            ValidatorRegistry.disable("nonexistent")

    def test_validate_single(self) -> None:
        result = ValidatorRegistry.validate_single("advisory", make_config(width=4500))
        assert result.exit_code == 2

    def test_failing_validator_reported_as_error(self) -> None:
        class Exploding:
            @property
            def name(self) -> str:
                return "zz_exploding"

            def validate(self, config):
                raise RuntimeError("boom")

        ValidatorRegistry.register(Exploding())
        try:
            result = validate_config(make_config())
            assert result.exit_code == 1
            assert result.errors[0].path == "validation"
            assert "boom" in result.errors[0].message
        finally:
            ValidatorRegistry._validators.pop("zz_exploding", None)
