"""API models for pricing endpoints.

All amounts are whole MNT.
"""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field

from shared.models import BookingPriceBreakdown


class PriceCalculationResponse(BaseModel):
    """Itemized price of a stay at a house."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "house_id": "house-1",
                    "check_in": "2025-07-15",
                    "check_out": "2025-07-18",
                    "nightly_rate": 100000,
                    "breakdown": {
                        "total_days": 3,
                        "regular_days": 0,
                        "discounted_days": 3,
                        "base_price": 300000,
                        "discount_amount": 90000,
                        "total_price": 210000,
                    },
                    "total_price_display": "₮ 210,000.00",
                    "currency": "MNT",
                }
            ]
        },
    )

    house_id: str
    check_in: dt.date
    check_out: dt.date
    nightly_rate: int = Field(..., gt=0, description="Base nightly rate in MNT")
    breakdown: BookingPriceBreakdown
    total_price_display: str
    currency: str = Field(default="MNT", description="Currency code (always MNT)")
