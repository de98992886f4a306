"""Top-level model of a quote configuration file."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)

from patioroof.application.config.schemas.base import SUPPORTED_VERSIONS
from patioroof.application.config.schemas.configuration_schema import (
    RoofConfigSchema,
)
from patioroof.application.config.schemas.settings_schema import (
    LayoutConfigSchema,
    OutputConfig,
    PricingConfigSchema,
)


def _major(version: str) -> int:
    return int(version.split(".", 1)[0])


class PatioRoofConfiguration(BaseModel):
    """A quote configuration file.

    Only ``schema_version`` is required; every section falls back to the
    configurator defaults.

    Example:
        >>> PatioRoofConfiguration(
        ...     schema_version="1.0",
        ...     configuration=RoofConfigSchema(width=4000.0, depth=2500.0),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    configuration: RoofConfigSchema = Field(default_factory=RoofConfigSchema)
    pricing: PricingConfigSchema = Field(default_factory=PricingConfigSchema)
    layout: LayoutConfigSchema = Field(default_factory=LayoutConfigSchema)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept any minor version of a supported major version."""
        if _major(v) not in {_major(supported) for supported in SUPPORTED_VERSIONS}:
            raise ValueError(
                f"Unsupported schema version '{v}'. "
                f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
            )
        return v
