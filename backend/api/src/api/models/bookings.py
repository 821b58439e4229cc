"""API models for booking quote endpoints."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class BookingQuoteRequest(BaseModel):
    """Booking request submitted from the booking form."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "house_id": "house-1",
                    "check_in": "2025-07-15",
                    "check_out": "2025-07-18",
                    "guest_count": 2,
                }
            ]
        },
    )

    house_id: str = Field(..., min_length=1)
    check_in: dt.date
    check_out: dt.date
    guest_count: int = Field(default=1, ge=1)
