"""Pricing endpoint for stay price calculation.

All amounts are whole MNT. check_out is exclusive: the last charged night
is check_out - 1 day.
"""

import datetime as dt

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_pricing_service
from api.models.pricing import PriceCalculationResponse
from shared.services.pricing import PricingService
from shared.utils.formatting import format_price

router = APIRouter(tags=["pricing"])


@router.get(
    "/pricing/calculate",
    summary="Calculate stay price",
    description="""
Calculate the itemized price of a stay at a house.

Each night is charged the house's discount price when the discount applies
on that day (date window and weekday list), otherwise the base rate.

**Notes:**
- Amounts are in MNT
- check_out is exclusive
- A check_out on or before check_in yields an all-zero breakdown
""",
    response_model=PriceCalculationResponse,
    responses={404: {"description": "House not found"}},
)
async def calculate_price(
    house_id: str = Query(..., description="House ID", examples=["house-1"]),
    check_in: dt.date = Query(
        ...,
        description="Check-in date (YYYY-MM-DD)",
        examples=["2025-07-15"],
    ),
    check_out: dt.date = Query(
        ...,
        description="Check-out date (YYYY-MM-DD)",
        examples=["2025-07-18"],
    ),
    service: PricingService = Depends(get_pricing_service),
) -> PriceCalculationResponse:
    """Price a stay night by night."""
    house, breakdown = service.quote_for_house(house_id, check_in, check_out)

    return PriceCalculationResponse(
        house_id=house.id,
        check_in=check_in,
        check_out=check_out,
        nightly_rate=house.price,
        breakdown=breakdown,
        total_price_display=format_price(breakdown.total_price),
    )
