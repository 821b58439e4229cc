"""Pricing service for nightly rate calculation.

A stay ``[check_in, check_out)`` is charged night by night: each night
costs the house's discount price when the discount applies on that day,
otherwise the base nightly rate. The checkout day is never charged.
"""

import math
from typing import TYPE_CHECKING

from shared.models import BookingError, BookingPriceBreakdown, ErrorCode, House
from shared.services.discounts import is_discount_applicable_on, is_discount_usable
from shared.utils.dates import MS_PER_DAY, DateLike, add_days, epoch_ms, to_datetime
from shared.utils.logging import get_logger, log_pricing_operation

if TYPE_CHECKING:
    from .houses import HouseService

logger = get_logger(__name__)


def count_nights(start_date: DateLike, end_date: DateLike) -> int:
    """Whole nights between two moments, rounded up.

    Measured in elapsed time rather than calendar days, so a partial day
    counts as a full night. A reversed or empty span has no nights.
    """
    elapsed_ms = epoch_ms(end_date) - epoch_ms(start_date)
    if elapsed_ms <= 0:
        return 0
    return math.ceil(elapsed_ms / MS_PER_DAY)


def calculate_booking_price(
    start_date: DateLike,
    end_date: DateLike,
    house: House,
) -> BookingPriceBreakdown:
    """Price a stay night by night.

    Never raises on bad spans: an empty stay yields an all-zero breakdown.
    A discount priced above the base rate is honoured and produces a
    negative ``discount_amount``.

    Args:
        start_date: Check-in
        end_date: Check-out (not charged)
        house: House snapshot with base price and optional discount

    Returns:
        Itemized breakdown of the stay
    """
    total_days = count_nights(start_date, end_date)
    if total_days <= 0:
        return BookingPriceBreakdown.zero()

    start = to_datetime(start_date)
    discount = house.discount
    has_discount = is_discount_usable(discount)

    regular_days = 0
    discounted_days = 0
    total_price = 0

    for i in range(total_days):
        night = add_days(start, i)

        if has_discount and is_discount_applicable_on(discount, night):
            total_price += discount.price
            discounted_days += 1
        else:
            total_price += house.price
            regular_days += 1

    base_price = total_days * house.price

    return BookingPriceBreakdown(
        total_days=total_days,
        regular_days=regular_days,
        discounted_days=discounted_days,
        base_price=base_price,
        discount_amount=base_price - total_price,
        total_price=total_price,
    )


class PricingService:
    """Service for pricing stays at stored houses."""

    def __init__(self, houses: "HouseService") -> None:
        """Initialize pricing service.

        Args:
            houses: House repository
        """
        self.houses = houses

    def quote_for_house(
        self,
        house_id: str,
        check_in: DateLike,
        check_out: DateLike,
    ) -> tuple[House, BookingPriceBreakdown]:
        """Look up a house and price a stay there.

        Args:
            house_id: House ID
            check_in: Check-in
            check_out: Check-out

        Returns:
            Tuple of (house, breakdown)

        Raises:
            BookingError: HOUSE_NOT_FOUND if the house does not exist
        """
        house = self.houses.get_house(house_id)
        if house is None:
            log_pricing_operation(
                logger, "calculate_price", house_id=house_id, error="house not found"
            )
            raise BookingError(ErrorCode.HOUSE_NOT_FOUND, {"house_id": house_id})

        breakdown = calculate_booking_price(check_in, check_out, house)
        log_pricing_operation(
            logger,
            "calculate_price",
            house_id=house_id,
            total_days=breakdown.total_days,
            discounted_days=breakdown.discounted_days,
            total_price=breakdown.total_price,
        )
        return house, breakdown
