"""Configuration validation endpoints."""

from fastapi import APIRouter

from patioroof.application.config import load_config_from_dict, validate_config
from patioroof.web.schemas.requests import ConfigValidateRequest
from patioroof.web.schemas.responses import (
    ValidationIssueSchema,
    ValidationResultSchema,
)

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_configuration(
    request: ConfigValidateRequest,
) -> ValidationResultSchema:
    """Validate a configuration file without quoting it.

    Schema violations are reported by the ConfigError handler (422).
    """
    config = load_config_from_dict(request.config)
    result = validate_config(config)

    return ValidationResultSchema(
        is_valid=result.is_valid,
        exit_code=result.exit_code,
        errors=[ValidationIssueSchema(path=e.path, message=e.message) for e in result.errors],
        warnings=[
            ValidationIssueSchema(path=w.path, message=w.message, suggestion=w.suggestion)
            for w in result.warnings
        ],
    )
