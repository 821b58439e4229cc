"""Pytest configuration and fixtures for the resort booking backend tests.

This module provides reusable fixtures for testing:
- DynamoDB mocking with moto
- Sample houses with and without discount rules
- A FastAPI test client backed by the mocked houses table
"""

import os
import time
from datetime import datetime, timezone
from typing import Any, Callable, Generator

import boto3
import pytest
from moto import mock_aws

# === Environment Setup ===

# Set environment variables for testing before imports
os.environ.setdefault("AWS_DEFAULT_REGION", "eu-west-1")
os.environ.setdefault("DYNAMODB_TABLE_PREFIX", "test-booking")

if not os.environ.get("AWS_PROFILE") and not os.environ.get("AWS_ACCESS_KEY_ID"):
    os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
    os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")

from shared.models import DiscountRule, House, HouseStatus  # noqa: E402

HOUSES_TABLE = "test-booking-houses"


# === Service Singletons ===


@pytest.fixture(autouse=True)
def reset_service_singletons() -> Generator[None, None, None]:
    """Reset cached services before and after each test.

    Tests using mock_aws then get a DynamoDB service created inside the
    mock context rather than one left over from a previous test.
    """
    from api.dependencies import reset_services

    reset_services()
    yield
    reset_services()


# === Time Zone Fixtures ===


@pytest.fixture
def local_timezone() -> Generator[str, None, None]:
    """Run the test with the process local time zone at UTC+8, as in Ulaanbaatar.

    A POSIX TZ string is used so no system time zone database is needed.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    previous = os.environ.get("TZ")
    os.environ["TZ"] = "ULAT-8"
    time.tzset()
    yield "ULAT-8"

    if previous is None:
        del os.environ["TZ"]
    else:
        os.environ["TZ"] = previous
    time.tzset()


# === DynamoDB Fixtures ===


@pytest.fixture
def aws_credentials() -> None:
    """Mocked AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "eu-west-1"


@pytest.fixture
def dynamodb_client(aws_credentials: None) -> Generator[Any, None, None]:
    """Create a mocked DynamoDB client."""
    with mock_aws():
        client = boto3.client("dynamodb", region_name="eu-west-1")
        yield client


@pytest.fixture
def create_tables(dynamodb_client: Any) -> None:
    """Create the houses table."""
    dynamodb_client.create_table(
        TableName=HOUSES_TABLE,
        KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
        AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
        BillingMode="PAY_PER_REQUEST",
    )


@pytest.fixture
def house_service(create_tables: None) -> Any:
    """HouseService bound to the mocked houses table."""
    from shared.services.dynamodb import get_dynamodb_service
    from shared.services.houses import HouseService

    return HouseService(db=get_dynamodb_service())


# === Sample Data Fixtures ===


@pytest.fixture
def make_house() -> Callable[..., House]:
    """Factory for houses with sensible defaults."""

    def _make(
        price: int = 100000,
        discount: DiscountRule | None = None,
        **overrides: Any,
    ) -> House:
        fields: dict[str, Any] = {
            "id": "house-1",
            "name": "Ger 1",
            "house_number": 1,
            "description": "Traditional ger by the river",
            "price": price,
            "capacity": 4,
            "discount": discount,
        }
        fields.update(overrides)
        return House(**fields)

    return _make


@pytest.fixture
def sample_house(make_house: Callable[..., House]) -> House:
    """House at 100,000 MNT per night with no discount."""
    return make_house()


@pytest.fixture
def weekend_discount_house(make_house: Callable[..., House]) -> House:
    """House discounted to 70,000 MNT on Friday and Saturday nights."""
    return make_house(
        discount=DiscountRule(price=70000, valid_days=[5, 6], label="Weekend special"),
    )


@pytest.fixture
def summer_discount_house(make_house: Callable[..., House]) -> House:
    """House discounted from 16 to 17 July 2025 (UTC, inclusive)."""
    return make_house(
        id="house-2",
        name="Family cabin",
        house_number=2,
        capacity=6,
        discount=DiscountRule(
            price=70000,
            is_active=True,
            start_date=datetime(2025, 7, 16, tzinfo=timezone.utc),
            end_date=datetime(2025, 7, 17, tzinfo=timezone.utc),
        ),
    )


@pytest.fixture
def seeded_houses(
    house_service: Any,
    sample_house: House,
    weekend_discount_house: House,
    summer_discount_house: House,
) -> list[House]:
    """Store sample houses in the mocked table.

    ``house-1`` carries the weekend discount; ``house-3`` has no discount
    and ``house-9`` is under maintenance.
    """
    houses = [
        weekend_discount_house,
        summer_discount_house,
        sample_house.model_copy(update={"id": "house-3", "name": "Lakeside", "house_number": 3}),
        sample_house.model_copy(
            update={"id": "house-9", "name": "Old sauna", "house_number": 9, "status": HouseStatus.MAINTENANCE}
        ),
    ]
    for house in houses:
        house_service.save_house(house)
    return houses


# === API Fixtures ===


@pytest.fixture
def client(create_tables: None) -> Any:
    """Create test client for the API backed by the mocked tables."""
    from fastapi.testclient import TestClient

    from api.main import app

    return TestClient(app)
