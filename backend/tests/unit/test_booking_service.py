"""Unit tests for BookingService quote validation and pricing."""

import datetime as dt
from typing import Any

import pytest
from pydantic import ValidationError

from shared.models import (
    BookingError,
    BookingPriceBreakdown,
    BookingQuote,
    BookingStatus,
    ErrorCode,
    House,
)
from shared.services.booking import BookingService

# Monday
CHECK_IN = dt.date(2025, 7, 14)


@pytest.fixture
def service(house_service: Any, seeded_houses: list[House]) -> BookingService:
    return BookingService(houses=house_service)


class TestCreateQuote:
    """Tests for successful quotes."""

    def test_quote_for_week_with_weekend_discount(self, service: BookingService) -> None:
        quote = service.create_quote(
            "house-1", CHECK_IN, CHECK_IN + dt.timedelta(days=7), guest_count=2
        )

        assert quote.house_id == "house-1"
        assert quote.house_name == "Ger 1"
        assert quote.guest_count == 2
        assert quote.status == BookingStatus.PENDING
        assert quote.breakdown.total_days == 7
        assert quote.breakdown.discounted_days == 2
        assert quote.breakdown.total_price == 640000
        assert quote.total_price_display == "₮ 640,000.00"
        assert quote.check_in == dt.datetime(2025, 7, 14)

    def test_guest_count_at_capacity_is_allowed(self, service: BookingService) -> None:
        quote = service.create_quote(
            "house-3", CHECK_IN, CHECK_IN + dt.timedelta(days=1), guest_count=4
        )

        assert quote.breakdown.total_price == 100000


class TestQuoteValidation:
    """Tests for rejected booking requests."""

    @pytest.mark.parametrize("nights", [0, -2])
    def test_check_out_not_after_check_in(self, service: BookingService, nights: int) -> None:
        with pytest.raises(BookingError) as exc_info:
            service.create_quote("house-1", CHECK_IN, CHECK_IN + dt.timedelta(days=nights))

        assert exc_info.value.code == ErrorCode.INVALID_DATES

    def test_unknown_house(self, service: BookingService) -> None:
        with pytest.raises(BookingError) as exc_info:
            service.create_quote("house-404", CHECK_IN, CHECK_IN + dt.timedelta(days=1))

        assert exc_info.value.code == ErrorCode.HOUSE_NOT_FOUND
        assert exc_info.value.details == {"house_id": "house-404"}

    def test_house_under_maintenance(self, service: BookingService) -> None:
        with pytest.raises(BookingError) as exc_info:
            service.create_quote("house-9", CHECK_IN, CHECK_IN + dt.timedelta(days=1))

        assert exc_info.value.code == ErrorCode.HOUSE_UNAVAILABLE

    def test_maintenance_blocks_stays_far_ahead(self, service: BookingService) -> None:
        """The current housekeeping status applies whatever the stay dates."""
        check_in = dt.date(2026, 12, 1)

        with pytest.raises(BookingError) as exc_info:
            service.create_quote("house-9", check_in, check_in + dt.timedelta(days=2))

        assert exc_info.value.code == ErrorCode.HOUSE_UNAVAILABLE
        assert exc_info.value.details == {"house_id": "house-9", "status": "maintenance"}

    def test_too_many_guests(self, service: BookingService) -> None:
        with pytest.raises(BookingError) as exc_info:
            service.create_quote(
                "house-1", CHECK_IN, CHECK_IN + dt.timedelta(days=1), guest_count=5
            )

        assert exc_info.value.code == ErrorCode.MAX_GUESTS_EXCEEDED
        assert exc_info.value.details == {"guest_count": "5", "capacity": "4"}


class TestBookingQuoteModel:
    """Tests for the quote model itself."""

    def test_quotes_are_only_pending(self) -> None:
        assert [s.value for s in BookingStatus] == ["pending"]

        with pytest.raises(ValidationError):
            BookingQuote(
                house_id="house-1",
                house_name="Ger 1",
                check_in=dt.datetime(2025, 7, 14),
                check_out=dt.datetime(2025, 7, 15),
                guest_count=1,
                status="confirmed",
                breakdown=BookingPriceBreakdown(),
                total_price_display="₮ 0.00",
            )
