"""API models for house and discount endpoints.

House and discount fields are returned in the document store's camelCase
layout so the frontends can use them as is.
"""

from pydantic import BaseModel, ConfigDict, Field

from shared.models import DiscountRule, DiscountStatusInfo, House


class HouseResponse(BaseModel):
    """A house with its discount state evaluated for today."""

    house: House
    price_display: str = Field(
        ...,
        description="Base nightly rate formatted in MNT",
        examples=["₮ 100,000.00"],
    )
    discount_status: DiscountStatusInfo
    discount_active: bool = Field(
        ...,
        description="Whether the discount applies today, weekday included",
    )
    valid_days_display: str = Field(
        default="",
        description="Allowed weekdays, empty when every day is allowed",
        examples=["Баа, Бям"],
    )


class HouseListResponse(BaseModel):
    """All houses ordered by house number."""

    houses: list[HouseResponse]
    total_count: int = Field(..., ge=0)


class DiscountStatusResponse(BaseModel):
    """Discount rule of a house with its current status."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "house_id": "house-1",
                    "discount": {"price": 70000, "validDays": [5, 6]},
                    "status": {"status": "active", "label": "Идэвхтэй"},
                    "is_active_today": False,
                    "valid_days_display": "Баа, Бям",
                    "warnings": [],
                }
            ]
        },
    )

    house_id: str
    discount: DiscountRule | None = None
    status: DiscountStatusInfo
    is_active_today: bool
    valid_days_display: str = ""
    warnings: list[str] = Field(default_factory=list)
