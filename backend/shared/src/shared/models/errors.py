"""Standard error codes for booking and pricing operations.

Services raise ``BookingError``; the API layer converts it into a
``ToolError`` JSON body with a matching HTTP status.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict


class ErrorCode(str, Enum):
    """Standard error codes."""

    # Booking error codes (ERR_001-ERR_004)
    INVALID_DATES = "ERR_001"
    MAX_GUESTS_EXCEEDED = "ERR_002"
    HOUSE_NOT_FOUND = "ERR_003"
    HOUSE_UNAVAILABLE = "ERR_004"

    # Discount administration (ERR_DISCOUNT_001)
    INVALID_DISCOUNT = "ERR_DISCOUNT_001"


# Human-readable error messages
ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_DATES: "Check-out date must be after check-in date",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Number of guests exceeds the house capacity",
    ErrorCode.HOUSE_NOT_FOUND: "House not found",
    ErrorCode.HOUSE_UNAVAILABLE: "House is temporarily unavailable for booking",
    ErrorCode.INVALID_DISCOUNT: "Discount end date must not be before its start date",
}

# Recovery suggestions for clients
ERROR_RECOVERY: dict[ErrorCode, str] = {
    ErrorCode.INVALID_DATES: "Select a check-out date after the check-in date",
    ErrorCode.MAX_GUESTS_EXCEEDED: "Reduce the number of guests or choose a larger house",
    ErrorCode.HOUSE_NOT_FOUND: "Verify the house ID",
    ErrorCode.HOUSE_UNAVAILABLE: "Choose another house or try again later",
    ErrorCode.INVALID_DISCOUNT: "Correct the discount date range",
}


class ToolError(BaseModel):
    """Standard error response format for failed operations."""

    model_config = ConfigDict(strict=True)

    success: bool = False
    error_code: ErrorCode
    message: str
    recovery: str
    details: Optional[dict[str, str]] = None

    @classmethod
    def from_code(
        cls,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ) -> "ToolError":
        """Create a ToolError from an error code.

        Args:
            code: The error code
            details: Optional additional context about the error

        Returns:
            A ToolError with the message and recovery hint for the code.
        """
        return cls(
            error_code=code,
            message=ERROR_MESSAGES[code],
            recovery=ERROR_RECOVERY[code],
            details=details,
        )


class BookingError(Exception):
    """Exception raised by booking and discount operations."""

    def __init__(
        self,
        code: ErrorCode,
        details: Optional[dict[str, str]] = None,
    ):
        self.code = code
        self.message = ERROR_MESSAGES[code]
        self.recovery = ERROR_RECOVERY[code]
        self.details = details
        super().__init__(self.message)

    def to_tool_error(self) -> ToolError:
        """Convert this exception to a ToolError for API responses."""
        return ToolError.from_code(self.code, self.details)
