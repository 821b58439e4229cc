"""Booking quote model."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .enums import BookingStatus
from .house import BookingPriceBreakdown


class BookingQuote(BaseModel):
    """Priced booking request, ready to be stored as a new booking.

    Only ``breakdown.total_price`` is persisted on the booking record; the
    rest of the breakdown is recomputed whenever the stay changes.
    """

    model_config = ConfigDict(frozen=True)

    house_id: str
    house_name: str
    check_in: datetime
    check_out: datetime
    guest_count: int = Field(..., ge=1)
    status: BookingStatus = BookingStatus.PENDING
    breakdown: BookingPriceBreakdown
    total_price_display: str = Field(..., examples=["₮ 210,000.00"])
