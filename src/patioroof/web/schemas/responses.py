"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class PriceBreakdownSchema(BaseModel):
    """Itemized price in EUR, excluding VAT."""

    base_price: float
    roof_covering_price: float
    freestanding_price: float
    post_length_price: float
    post_mounting_price: float
    mounting_set_price: float
    side_panel_left_price: float
    side_panel_right_price: float
    custom_size_price: float
    total_price: float


class BillingSizeSchema(BaseModel):
    """Grid node the size is billed at."""

    width: float = Field(..., description="Billing width in mm")
    depth: float = Field(..., description="Billing depth in mm")


class AccessoryPricesSchema(BaseModel):
    """Accessory prices in EUR."""

    roof_awning_zip: float
    vertical_front_awning: float | None = Field(
        default=None, description="None when the gutter is too low"
    )
    front_glazing: float
    lighting: float


class PriceResponseSchema(BaseModel):
    """Response for a price-only quote."""

    price: PriceBreakdownSchema
    billing_size: BillingSizeSchema
    grid_policy: str


class QuoteResponseSchema(PriceResponseSchema):
    """Response for a full quote."""

    configuration: dict[str, Any] = Field(..., description="Quoted configuration")
    layout: dict[str, Any] = Field(..., description="Structural layout in metres")
    accessories: AccessoryPricesSchema | None = None


class ValidationIssueSchema(BaseModel):
    """A single validation error or warning."""

    path: str
    message: str
    suggestion: str | None = None


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    exit_code: int = Field(..., description="0 valid, 1 errors, 2 warnings")
    errors: list[ValidationIssueSchema] = Field(default_factory=list)
    warnings: list[ValidationIssueSchema] = Field(default_factory=list)


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str]


class ErrorResponseSchema(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    error_type: str
    details: Any = None
