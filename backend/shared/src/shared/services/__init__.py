"""Backend services for resort booking."""

from .booking import BookingService
from .discounts import (
    get_discount_status,
    is_discount_active,
    is_discount_applicable_on,
    is_discount_usable,
    validate_discount_rule,
)
from .dynamodb import DynamoDBService, get_dynamodb_service, reset_dynamodb_service
from .houses import HouseService
from .pricing import PricingService, calculate_booking_price, count_nights

__all__ = [
    "DynamoDBService",
    "get_dynamodb_service",
    "reset_dynamodb_service",
    "HouseService",
    "BookingService",
    "PricingService",
    "calculate_booking_price",
    "count_nights",
    "get_discount_status",
    "is_discount_active",
    "is_discount_applicable_on",
    "is_discount_usable",
    "validate_discount_rule",
]
