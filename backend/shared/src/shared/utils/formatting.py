"""Display helpers for the resort's fixed locale (mn-MN, MNT)."""

from typing import Iterable

CURRENCY_SYMBOL = "₮"

# 0=Sunday..6=Saturday
WEEKDAY_ABBREVIATIONS = ("Ням", "Дав", "Мяг", "Лха", "Пүр", "Баа", "Бям")


def format_price(amount: int | float) -> str:
    """Render an amount in MNT, e.g. ``₮ 100,000.00``.

    Args:
        amount: Amount in whole MNT

    Returns:
        Amount with currency symbol and grouped thousands
    """
    sign = "-" if amount < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL} {abs(amount):,.2f}"


def format_valid_days(valid_days: Iterable[int] | None) -> str:
    """Render a weekday allow-list as ascending, comma-joined abbreviations.

    Sorted by weekday index, not by locale collation. The input is left
    untouched.

    Args:
        valid_days: Weekday indices, 0=Sunday..6=Saturday

    Returns:
        e.g. ``"Ням, Баа"``, or an empty string for no restriction
    """
    if not valid_days:
        return ""
    return ", ".join(WEEKDAY_ABBREVIATIONS[day] for day in sorted(set(valid_days)))
