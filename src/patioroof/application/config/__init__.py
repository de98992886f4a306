"""Configuration schema and loading system for patio roof quotes.

JSON-based configuration loading and validation: pydantic models for the
file schema, a loader with categorized errors, CLI override merging,
adapters to the domain and advisory validation.

Public API:
    - PatioRoofConfiguration: Root configuration model
    - RoofConfigSchema: The customer's roof choices
    - PricingConfigSchema, LayoutConfigSchema, OutputConfig: Settings models
    - load_config / load_config_from_dict: Load and validate configuration
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides
    - config_to_domain: Convert to engine inputs
    - validate_config: Run all registered validators

Example:
    >>> from pathlib import Path
    >>> from patioroof.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-roof.json"))
    ...     print(f"{config.configuration.width} x {config.configuration.depth}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from patioroof.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from patioroof.application.config.schemas import (
    SUPPORTED_VERSIONS,
    LayoutConfigSchema,
    OutputConfig,
    OutputFormat,
    PatioRoofConfiguration,
    PricingConfigSchema,
    RoofConfigSchema,
)
from patioroof.application.config.merger import (
    default_configuration,
    merge_config_with_cli,
)
from patioroof.application.config.adapter import (
    config_to_domain,
    schema_to_configuration,
    schema_to_pinned_edge,
)
from patioroof.application.config.validators import (
    Severity,
    ValidationIssue,
    ValidationResult,
    ValidatorRegistry,
)
from patioroof.application.config.validator import validate_config

__all__ = [
    # Loader
    "ConfigError",
    "load_config",
    "load_config_from_dict",
    # Schema
    "SUPPORTED_VERSIONS",
    "LayoutConfigSchema",
    "OutputConfig",
    "OutputFormat",
    "PatioRoofConfiguration",
    "PricingConfigSchema",
    "RoofConfigSchema",
    # Merger
    "default_configuration",
    "merge_config_with_cli",
    # Adapter
    "config_to_domain",
    "schema_to_configuration",
    "schema_to_pinned_edge",
    # Validation
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "ValidatorRegistry",
    "validate_config",
]
