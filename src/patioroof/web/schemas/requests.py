"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from patioroof.application.config.schemas import (
    LayoutConfigSchema,
    PricingConfigSchema,
    RoofConfigSchema,
)


class QuoteRequest(BaseModel):
    """Request for quoting a configuration.

    Every part is optional; omitted parts take the configurator defaults.
    """

    model_config = ConfigDict(extra="forbid")

    configuration: RoofConfigSchema = Field(
        default_factory=RoofConfigSchema, description="Roof configuration"
    )
    pricing: PricingConfigSchema = Field(
        default_factory=PricingConfigSchema, description="Grid lookup settings"
    )
    layout: LayoutConfigSchema = Field(
        default_factory=LayoutConfigSchema, description="Layout anchoring settings"
    )
    include_accessories: bool = Field(
        default=False, description="Also price the optional accessories"
    )


class ConfigValidateRequest(BaseModel):
    """Request for validating a complete configuration file."""

    config: dict[str, Any] = Field(..., description="Configuration file JSON")
