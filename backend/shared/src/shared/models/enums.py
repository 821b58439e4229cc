"""Enumeration types for resort booking data models."""

from enum import Enum


class HouseStatus(str, Enum):
    """Housekeeping status of a house."""

    CLEAN = "clean"
    DIRTY = "dirty"
    CLEANING = "cleaning"
    OCCUPIED = "occupied"
    MAINTENANCE = "maintenance"


class BookingStatus(str, Enum):
    """Status of a booking quote.

    Quotes always start pending; later transitions belong to the booking
    store that persists them.
    """

    PENDING = "pending"


class DiscountStatus(str, Enum):
    """Lifecycle state of a house's discount rule relative to now."""

    NONE = "none"
    DISABLED = "disabled"
    SCHEDULED = "scheduled"
    EXPIRED = "expired"
    ACTIVE = "active"
