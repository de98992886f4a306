"""Configuration schema models for patio roof configuration files.

- base.py: Shared enums and version constants
- configuration_schema.py: The customer's roof configuration
- settings_schema.py: Pricing, layout and output settings
- root.py: Root configuration model
"""

from patioroof.application.config.schemas.base import (
    SUPPORTED_VERSIONS as SUPPORTED_VERSIONS,
    OutputFormat as OutputFormat,
)
from patioroof.application.config.schemas.configuration_schema import (
    RoofConfigSchema as RoofConfigSchema,
)
from patioroof.application.config.schemas.settings_schema import (
    LayoutConfigSchema as LayoutConfigSchema,
    OutputConfig as OutputConfig,
    PricingConfigSchema as PricingConfigSchema,
)
from patioroof.application.config.schemas.root import (
    PatioRoofConfiguration as PatioRoofConfiguration,
)
