"""Date helpers shared by the discount evaluator and the pricing engine.

Stays and discount windows arrive as ``datetime``, ``date`` or epoch
milliseconds (the document store's representation). All of them resolve to
local time, so a given moment has the same weekday whatever its type.
Comparisons are done on epoch milliseconds so naive and aware values can
be mixed.
"""

import datetime as dt
from typing import Union

DateLike = Union[dt.datetime, dt.date, int, float]

MS_PER_DAY = 24 * 60 * 60 * 1000


def to_datetime(value: DateLike) -> dt.datetime:
    """Convert a date-like value to a datetime.

    Args:
        value: datetime (returned as is), date (local midnight) or epoch
            milliseconds (naive local time)

    Returns:
        Equivalent datetime
    """
    if isinstance(value, dt.datetime):
        return value
    if isinstance(value, dt.date):
        return dt.datetime.combine(value, dt.time())
    return dt.datetime.fromtimestamp(value / 1000)


def epoch_ms(value: DateLike) -> int:
    """Milliseconds since the Unix epoch. Naive values are local time."""
    return round(to_datetime(value).timestamp() * 1000)


def weekday_index(value: DateLike) -> int:
    """Day of week with 0=Sunday..6=Saturday."""
    return (to_datetime(value).weekday() + 1) % 7


def add_days(value: dt.datetime, days: int) -> dt.datetime:
    """Shift by whole calendar days, keeping the wall-clock time.

    Aware datetimes keep their tzinfo, so a shift across a daylight-saving
    change lands on the same local time of day.
    """
    return value + dt.timedelta(days=days)
