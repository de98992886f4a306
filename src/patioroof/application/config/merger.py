"""Configuration merging for CLI override support.

Precedence is CLI args > config file values > defaults. Only CLI arguments
that are not None override configuration values.
"""

from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from patioroof.application.config.loader import ConfigError
from patioroof.application.config.schemas import (
    SUPPORTED_VERSIONS,
    PatioRoofConfiguration,
)


def default_configuration() -> PatioRoofConfiguration:
    """Configuration file equivalent of the configurator's initial state."""
    return PatioRoofConfiguration(schema_version=max(SUPPORTED_VERSIONS))


def merge_config_with_cli(
    config: PatioRoofConfiguration | None,
    *,
    overrides: dict[str, Any] | None = None,
    grid_policy: str | None = None,
    pinned_x: float | None = None,
    pinned_back_z: float | None = None,
    output_format: str | None = None,
    output_file: str | Path | None = None,
) -> PatioRoofConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: Base configuration, or None to start from the defaults
        overrides: Roof configuration fields to override; None values are ignored
        grid_policy: Override for pricing.grid_policy
        pinned_x: Override for layout.pinned_x
        pinned_back_z: Override for layout.pinned_back_z
        output_format: Override for output.format
        output_file: Override for output.file

    Returns:
        A new, re-validated PatioRoofConfiguration

    Raises:
        ConfigError: If the merged values fail validation.

    Example:
        >>> merged = merge_config_with_cli(None, overrides={"width": 4000.0})
        >>> merged.configuration.width
        4000.0
    """
    if config is None:
        config = default_configuration()

    data = config.model_dump(mode="json")

    for field, value in (overrides or {}).items():
        if value is not None:
            data["configuration"][field] = value

    if grid_policy is not None:
        data["pricing"]["grid_policy"] = grid_policy
    if pinned_x is not None:
        data["layout"]["pinned_x"] = pinned_x
    if pinned_back_z is not None:
        data["layout"]["pinned_back_z"] = pinned_back_z
    if output_format is not None:
        data["output"]["format"] = output_format
    if output_file is not None:
        data["output"]["file"] = str(output_file)

    try:
        return PatioRoofConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation_error(e)
