"""Pydantic models for resort booking data entities."""

from .booking import BookingQuote
from .enums import BookingStatus, DiscountStatus, HouseStatus
from .errors import (
    BookingError,
    ErrorCode,
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ToolError,
)
from .house import (
    BookingPriceBreakdown,
    DiscountRule,
    DiscountStatusInfo,
    House,
)

__all__ = [
    # Enums
    "BookingStatus",
    "DiscountStatus",
    "HouseStatus",
    # House
    "House",
    "DiscountRule",
    "DiscountStatusInfo",
    "BookingPriceBreakdown",
    # Booking
    "BookingQuote",
    # Errors
    "BookingError",
    "ErrorCode",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "ToolError",
]
