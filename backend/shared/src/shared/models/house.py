"""House and discount models.

Houses are stored in the document store with camelCase field names
(``isActive``, ``startDate``, ``validDays``); the models accept both the
stored names and their snake_case equivalents. Prices are whole MNT units.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import DiscountStatus, HouseStatus


class DiscountRule(BaseModel):
    """Flat discounted nightly price for a house.

    The rule is inert unless ``price > 0``. ``is_active`` is tri-state:
    ``None`` and ``True`` both mean enabled, only an explicit ``False``
    disables it. Date bounds are inclusive and open-ended when unset.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    price: int = Field(..., description="Discounted nightly rate in MNT")
    is_active: bool | None = Field(
        default=None, description="Explicit False disables the rule"
    )
    start_date: datetime | None = Field(
        default=None, description="First moment the discount applies (inclusive)"
    )
    end_date: datetime | None = Field(
        default=None, description="Last moment the discount applies (inclusive)"
    )
    valid_days: list[int] | None = Field(
        default=None,
        description="Allowed weekdays, 0=Sunday..6=Saturday; empty means every day",
        examples=[[5, 6]],
    )
    label: str | None = Field(default=None, description="Display-only text")

    @field_validator("valid_days", mode="before")
    @classmethod
    def normalize_valid_days(cls, v: Any) -> Any:
        """Accept number sets and Decimal values from DynamoDB."""
        if v is None:
            return v
        if isinstance(v, (set, frozenset)):
            v = sorted(v)
        return [int(day) for day in v]

    @field_validator("valid_days")
    @classmethod
    def validate_weekdays(cls, v: list[int] | None) -> list[int] | None:
        """Weekday indices must be within 0..6."""
        if v is not None:
            for day in v:
                if not 0 <= day <= 6:
                    raise ValueError(f"Weekday index must be 0-6, got {day}")
        return v


class House(BaseModel):
    """A rentable house at the resort."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    name: str
    house_number: int = Field(default=0, ge=0)
    description: str = ""
    price: int = Field(..., gt=0, description="Base nightly rate in MNT")
    capacity: int = Field(default=1, ge=1, description="Maximum number of guests")
    image_url: str | None = None
    status: HouseStatus = HouseStatus.CLEAN
    discount: DiscountRule | None = None
    created_at: datetime | None = None


class BookingPriceBreakdown(BaseModel):
    """Itemized price of a stay.

    Computed on demand and never persisted. ``regular_days`` and
    ``discounted_days`` partition ``total_days``.
    """

    model_config = ConfigDict(frozen=True)

    total_days: int = 0
    regular_days: int = 0
    discounted_days: int = 0
    base_price: int = 0
    discount_amount: int = 0
    total_price: int = 0

    @classmethod
    def zero(cls) -> "BookingPriceBreakdown":
        """Breakdown for an empty or reversed stay."""
        return cls()


class DiscountStatusInfo(BaseModel):
    """Display status of a discount rule."""

    model_config = ConfigDict(frozen=True)

    status: DiscountStatus
    label: str
