"""API request/response models."""

from api.models.bookings import BookingQuoteRequest
from api.models.common import ValidationErrorResponse
from api.models.houses import DiscountStatusResponse, HouseListResponse, HouseResponse
from api.models.pricing import PriceCalculationResponse

__all__ = [
    "BookingQuoteRequest",
    "DiscountStatusResponse",
    "HouseListResponse",
    "HouseResponse",
    "PriceCalculationResponse",
    "ValidationErrorResponse",
]
