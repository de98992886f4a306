"""Full configuration validation entry point."""

from patioroof.application.config.schemas import PatioRoofConfiguration
from patioroof.application.config.validators import (
    ValidationResult,
    ValidatorRegistry,
)


def validate_config(config: PatioRoofConfiguration) -> ValidationResult:
    """Run every enabled validator against a schema-valid configuration.

    Args:
        config: A PatioRoofConfiguration instance (already validated by pydantic)

    Returns:
        ValidationResult containing any errors or warnings
    """
    return ValidatorRegistry.validate_all(config)
