"""Unit tests for the pricing API route.

Tests for:
- GET /api/pricing/calculate - Nightly price breakdown of a stay
"""

from fastapi.testclient import TestClient
from starlette.status import HTTP_200_OK, HTTP_404_NOT_FOUND, HTTP_422_UNPROCESSABLE_ENTITY

from shared.models import House


class TestCalculatePrice:
    """Tests for GET /api/pricing/calculate endpoint."""

    def test_week_with_weekend_discount(
        self, client: TestClient, seeded_houses: list[House]
    ) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"house_id": "house-1", "check_in": "2025-07-14", "check_out": "2025-07-21"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert data["house_id"] == "house-1"
        assert data["check_in"] == "2025-07-14"
        assert data["nightly_rate"] == 100000
        assert data["currency"] == "MNT"
        assert data["breakdown"] == {
            "total_days": 7,
            "regular_days": 5,
            "discounted_days": 2,
            "base_price": 700000,
            "discount_amount": 60000,
            "total_price": 640000,
        }
        assert data["total_price_display"] == "₮ 640,000.00"

    def test_house_without_discount(self, client: TestClient, seeded_houses: list[House]) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"house_id": "house-3", "check_in": "2025-07-14", "check_out": "2025-07-21"},
        )

        assert response.status_code == HTTP_200_OK
        breakdown = response.json()["breakdown"]
        assert breakdown["discounted_days"] == 0
        assert breakdown["total_price"] == breakdown["base_price"] == 700000

    def test_reversed_dates_give_zero_breakdown(
        self, client: TestClient, seeded_houses: list[House]
    ) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"house_id": "house-1", "check_in": "2025-07-21", "check_out": "2025-07-14"},
        )
        assert response.status_code == HTTP_200_OK

        data = response.json()
        assert set(data["breakdown"].values()) == {0}
        assert data["total_price_display"] == "₮ 0.00"

    def test_unknown_house(self, client: TestClient, seeded_houses: list[House]) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"house_id": "nope", "check_in": "2025-07-14", "check_out": "2025-07-15"},
        )

        assert response.status_code == HTTP_404_NOT_FOUND
        assert response.json()["error_code"] == "ERR_003"

    def test_invalid_date_format(self, client: TestClient, seeded_houses: list[House]) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"house_id": "house-1", "check_in": "14/07/2025", "check_out": "2025-07-15"},
        )

        assert response.status_code == HTTP_422_UNPROCESSABLE_ENTITY
        data = response.json()
        assert data["error_code"] == "ERR_VALIDATION"
        assert data["details"][0]["loc"] == ["query", "check_in"]

    def test_missing_house_id(self, client: TestClient) -> None:
        response = client.get(
            "/api/pricing/calculate",
            params={"check_in": "2025-07-14", "check_out": "2025-07-15"},
        )

        assert response.status_code == HTTP_422_UNPROCESSABLE_ENTITY
