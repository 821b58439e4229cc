"""House and discount endpoints.

Provides REST endpoints for:
- Listing houses with their discount badges
- House details
- Reading, replacing and removing a house's discount rule

Discount status is evaluated against the current moment on every request.
"""

from fastapi import APIRouter, Body, Depends, Path

from api.dependencies import get_house_service
from api.models.houses import DiscountStatusResponse, HouseListResponse, HouseResponse
from shared.models import BookingError, DiscountRule, ErrorCode, House
from shared.services.discounts import (
    get_discount_status,
    is_discount_active,
    validate_discount_rule,
)
from shared.services.houses import HouseService
from shared.utils.formatting import format_price, format_valid_days

router = APIRouter(tags=["houses"])


def _to_house_response(house: House) -> HouseResponse:
    discount = house.discount
    return HouseResponse(
        house=house,
        price_display=format_price(house.price),
        discount_status=get_discount_status(discount),
        discount_active=is_discount_active(discount),
        valid_days_display=format_valid_days(discount.valid_days) if discount else "",
    )


def _to_discount_response(
    house: House, warnings: list[str] | None = None
) -> DiscountStatusResponse:
    discount = house.discount
    return DiscountStatusResponse(
        house_id=house.id,
        discount=discount,
        status=get_discount_status(discount),
        is_active_today=is_discount_active(discount),
        valid_days_display=format_valid_days(discount.valid_days) if discount else "",
        warnings=warnings or [],
    )


def _require_house(service: HouseService, house_id: str) -> House:
    house = service.get_house(house_id)
    if house is None:
        raise BookingError(ErrorCode.HOUSE_NOT_FOUND, {"house_id": house_id})
    return house


@router.get(
    "/houses",
    summary="List houses",
    response_model=HouseListResponse,
)
async def list_houses(
    service: HouseService = Depends(get_house_service),
) -> HouseListResponse:
    """List all houses ordered by house number."""
    houses = [_to_house_response(h) for h in service.list_houses()]
    return HouseListResponse(houses=houses, total_count=len(houses))


@router.get(
    "/houses/{house_id}",
    summary="Get house details",
    response_model=HouseResponse,
    responses={404: {"description": "House not found"}},
)
async def get_house(
    house_id: str = Path(..., description="House ID"),
    service: HouseService = Depends(get_house_service),
) -> HouseResponse:
    """Get a house with its discount state for today."""
    return _to_house_response(_require_house(service, house_id))


@router.get(
    "/houses/{house_id}/discount",
    summary="Get discount status",
    response_model=DiscountStatusResponse,
    responses={404: {"description": "House not found"}},
)
async def get_house_discount(
    house_id: str = Path(..., description="House ID"),
    service: HouseService = Depends(get_house_service),
) -> DiscountStatusResponse:
    """Get a house's discount rule and its lifecycle status."""
    return _to_discount_response(_require_house(service, house_id))


@router.put(
    "/houses/{house_id}/discount",
    summary="Replace discount rule",
    description="""
Replace the discount rule of a house.

A window whose end date is before its start date is rejected. A discount
price that is not below the base rate is accepted with a warning.
""",
    response_model=DiscountStatusResponse,
    responses={
        400: {"description": "Invalid discount date range"},
        404: {"description": "House not found"},
    },
)
async def put_house_discount(
    house_id: str = Path(..., description="House ID"),
    discount: DiscountRule = Body(...),
    service: HouseService = Depends(get_house_service),
) -> DiscountStatusResponse:
    """Validate and store a discount rule."""
    house = _require_house(service, house_id)
    warnings = validate_discount_rule(discount, house.price)

    updated = service.update_discount(house_id, discount)
    if updated is None:
        raise BookingError(ErrorCode.HOUSE_NOT_FOUND, {"house_id": house_id})

    return _to_discount_response(updated, warnings)


@router.delete(
    "/houses/{house_id}/discount",
    summary="Remove discount rule",
    response_model=DiscountStatusResponse,
    responses={404: {"description": "House not found"}},
)
async def delete_house_discount(
    house_id: str = Path(..., description="House ID"),
    service: HouseService = Depends(get_house_service),
) -> DiscountStatusResponse:
    """Remove a house's discount rule."""
    updated = service.update_discount(house_id, None)
    if updated is None:
        raise BookingError(ErrorCode.HOUSE_NOT_FOUND, {"house_id": house_id})
    return _to_discount_response(updated)
