"""Pydantic schemas for the REST API."""

from patioroof.web.schemas.requests import ConfigValidateRequest, QuoteRequest
from patioroof.web.schemas.responses import (
    AccessoryPricesSchema,
    BillingSizeSchema,
    ErrorResponseSchema,
    ExportFormatsSchema,
    PriceBreakdownSchema,
    PriceResponseSchema,
    QuoteResponseSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "ConfigValidateRequest",
    "QuoteRequest",
    # Responses
    "AccessoryPricesSchema",
    "BillingSizeSchema",
    "ErrorResponseSchema",
    "ExportFormatsSchema",
    "PriceBreakdownSchema",
    "PriceResponseSchema",
    "QuoteResponseSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
