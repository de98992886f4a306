"""Accessory catalog endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query

from patioroof.web.dependencies import CatalogDep
from patioroof.web.schemas.responses import AccessoryPricesSchema

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=AccessoryPricesSchema)
async def accessory_prices(
    catalog: CatalogDep,
    width: Annotated[float, Query(gt=0, description="Width in mm")] = 5000.0,
    depth: Annotated[float, Query(gt=0, description="Depth in mm")] = 3000.0,
    gutter_height: Annotated[float, Query(gt=0, description="Gutter height in mm")] = 2200.0,
) -> AccessoryPricesSchema:
    """Accessory prices for a roof size."""
    prices = catalog.quote(width, depth, gutter_height)
    return AccessoryPricesSchema(**prices.to_dict())
