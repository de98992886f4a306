"""Quote endpoints: layout and price of a configuration."""

from typing import Any

from fastapi import APIRouter

from patioroof.application.config import schema_to_configuration, schema_to_pinned_edge
from patioroof.application.commands import QuoteCommand
from patioroof.application.dtos import QuoteOutput
from patioroof.web.dependencies import QuoteCommandDep
from patioroof.web.schemas.requests import QuoteRequest
from patioroof.web.schemas.responses import (
    AccessoryPricesSchema,
    BillingSizeSchema,
    PriceBreakdownSchema,
    PriceResponseSchema,
    QuoteResponseSchema,
)

router = APIRouter(prefix="/quote", tags=["quote"])


def run_quote(command: QuoteCommand, request: QuoteRequest) -> QuoteOutput:
    """Convert the request to domain inputs and execute the quote command.

    Domain errors propagate to the registered exception handlers.
    """
    return command.execute(
        schema_to_configuration(request.configuration),
        policy=request.pricing.grid_policy,
        pinned_edge=schema_to_pinned_edge(request.layout),
        include_accessories=request.include_accessories,
    )


def _price_response(output: QuoteOutput) -> dict[str, Any]:
    return {
        "price": PriceBreakdownSchema(**output.price.to_dict()),
        "billing_size": BillingSizeSchema(
            width=output.billing_size.width, depth=output.billing_size.depth
        ),
        "grid_policy": output.grid_policy.value,
    }


@router.post("", response_model=QuoteResponseSchema)
async def quote(request: QuoteRequest, command: QuoteCommandDep) -> QuoteResponseSchema:
    """Quote a configuration: full layout, itemized price and billing size."""
    output = run_quote(command, request)
    accessories = None
    if output.accessories is not None:
        accessories = AccessoryPricesSchema(**output.accessories.to_dict())
    return QuoteResponseSchema(
        **_price_response(output),
        configuration=output.configuration.to_dict(),
        layout=output.layout.to_dict(),
        accessories=accessories,
    )


@router.post("/price", response_model=PriceResponseSchema)
async def quote_price(
    request: QuoteRequest, command: QuoteCommandDep
) -> PriceResponseSchema:
    """Itemized price only."""
    output = run_quote(command, request)
    return PriceResponseSchema(**_price_response(output))


@router.post("/layout")
async def quote_layout(request: QuoteRequest, command: QuoteCommandDep) -> dict[str, Any]:
    """Structural layout only, in metres and radians."""
    output = run_quote(command, request)
    return output.layout.to_dict()
