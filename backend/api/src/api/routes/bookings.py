"""Booking quote endpoint."""

from fastapi import APIRouter, Depends

from api.dependencies import get_booking_service
from api.models.bookings import BookingQuoteRequest
from shared.models import BookingQuote
from shared.services.booking import BookingService

router = APIRouter(tags=["bookings"])


@router.post(
    "/bookings/quote",
    summary="Quote a booking",
    description="""
Validate a booking request and price it.

Rejects a check-out on or before check-in, unknown houses, houses under
maintenance and parties larger than the house capacity. The returned
`breakdown.total_price` is the amount stored on the booking.
""",
    response_model=BookingQuote,
    responses={
        400: {"description": "Invalid dates or too many guests"},
        404: {"description": "House not found"},
        409: {"description": "House under maintenance"},
    },
)
async def quote_booking(
    request: BookingQuoteRequest,
    service: BookingService = Depends(get_booking_service),
) -> BookingQuote:
    """Create a pending booking quote."""
    return service.create_quote(
        house_id=request.house_id,
        check_in=request.check_in,
        check_out=request.check_out,
        guest_count=request.guest_count,
    )
