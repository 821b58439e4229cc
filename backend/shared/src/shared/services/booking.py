"""Booking quote service.

Validates a guest's booking request and prices it. Persisting the booking
and notifying staff happen downstream; the quote's ``total_price`` is what
gets stored on the booking record.

A house whose housekeeping status is ``maintenance`` takes no new quotes,
whatever the stay dates; staff reopen it by changing the status.
"""

from typing import TYPE_CHECKING

from shared.models import BookingError, BookingQuote, ErrorCode, HouseStatus
from shared.utils.dates import DateLike, epoch_ms, to_datetime
from shared.utils.formatting import format_price
from shared.utils.logging import get_logger, log_pricing_operation

from .pricing import calculate_booking_price

if TYPE_CHECKING:
    from .houses import HouseService

logger = get_logger(__name__)


class BookingService:
    """Service for validating and pricing booking requests."""

    def __init__(self, houses: "HouseService") -> None:
        """Initialize booking service.

        Args:
            houses: House repository
        """
        self.houses = houses

    def create_quote(
        self,
        house_id: str,
        check_in: DateLike,
        check_out: DateLike,
        guest_count: int = 1,
    ) -> BookingQuote:
        """Validate a booking request and price the stay.

        Args:
            house_id: House to book
            check_in: Check-in date
            check_out: Check-out date (not charged)
            guest_count: Number of guests

        Returns:
            BookingQuote in pending status

        Raises:
            BookingError: INVALID_DATES, HOUSE_NOT_FOUND, HOUSE_UNAVAILABLE
                or MAX_GUESTS_EXCEEDED
        """
        if epoch_ms(check_out) <= epoch_ms(check_in):
            raise BookingError(
                ErrorCode.INVALID_DATES,
                {
                    "check_in": to_datetime(check_in).isoformat(),
                    "check_out": to_datetime(check_out).isoformat(),
                },
            )

        house = self.houses.get_house(house_id)
        if house is None:
            raise BookingError(ErrorCode.HOUSE_NOT_FOUND, {"house_id": house_id})

        if house.status == HouseStatus.MAINTENANCE:
            raise BookingError(
                ErrorCode.HOUSE_UNAVAILABLE,
                {"house_id": house_id, "status": house.status.value},
            )

        if guest_count > house.capacity:
            raise BookingError(
                ErrorCode.MAX_GUESTS_EXCEEDED,
                {"guest_count": str(guest_count), "capacity": str(house.capacity)},
            )

        breakdown = calculate_booking_price(check_in, check_out, house)
        if breakdown.total_price <= 0:
            raise BookingError(
                ErrorCode.INVALID_DATES,
                {"total_price": str(breakdown.total_price)},
            )

        log_pricing_operation(
            logger,
            "create_quote",
            house_id=house_id,
            total_days=breakdown.total_days,
            discounted_days=breakdown.discounted_days,
            total_price=breakdown.total_price,
            guest_count=guest_count,
        )

        return BookingQuote(
            house_id=house.id,
            house_name=house.name,
            check_in=to_datetime(check_in),
            check_out=to_datetime(check_out),
            guest_count=guest_count,
            breakdown=breakdown,
            total_price_display=format_price(breakdown.total_price),
        )
