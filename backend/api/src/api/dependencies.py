"""FastAPI dependency injection providers for shared services.

Services are created lazily and cached with @lru_cache so every request
shares the same instances.

Service Dependency Graph:
    DynamoDBService (singleton via get_dynamodb_service)
        └── HouseService
                ├── PricingService
                └── BookingService

Testing:
    Use reset_services() to clear cached instances between tests.
"""

from functools import lru_cache

from shared.services.booking import BookingService
from shared.services.dynamodb import get_dynamodb_service
from shared.services.houses import HouseService
from shared.services.pricing import PricingService


@lru_cache
def get_house_service() -> HouseService:
    """Get cached HouseService instance."""
    return HouseService(db=get_dynamodb_service())


@lru_cache
def get_pricing_service() -> PricingService:
    """Get cached PricingService instance."""
    return PricingService(houses=get_house_service())


@lru_cache
def get_booking_service() -> BookingService:
    """Get cached BookingService instance."""
    return BookingService(houses=get_house_service())


def reset_services() -> None:
    """Clear all cached service instances.

    Also resets the underlying DynamoDB singleton.
    """
    from shared.services.dynamodb import reset_dynamodb_service

    get_house_service.cache_clear()
    get_pricing_service.cache_clear()
    get_booking_service.cache_clear()

    reset_dynamodb_service()
