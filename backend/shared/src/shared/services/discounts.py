"""Discount eligibility rules.

A house carries at most one ``DiscountRule``. Two questions are asked of it:

- is it usable on a given day (``is_discount_active``), which the pricing
  engine asks once per night of a stay;
- what is its lifecycle state right now (``get_discount_status``), which
  only drives display badges.

Both share ``is_discount_usable`` for the price/enabled checks and
``is_discount_applicable_on`` for the per-day window and weekday checks.
All functions are pure; "now" is injectable.
"""

import datetime as dt

from shared.models.enums import DiscountStatus
from shared.models.errors import BookingError, ErrorCode
from shared.models.house import DiscountRule, DiscountStatusInfo
from shared.utils.dates import DateLike, epoch_ms, weekday_index

DISCOUNT_STATUS_LABELS: dict[DiscountStatus, str] = {
    DiscountStatus.NONE: "Хямдралгүй",
    DiscountStatus.DISABLED: "Идэвхгүй",
    DiscountStatus.SCHEDULED: "Эхлээгүй байна",
    DiscountStatus.EXPIRED: "Хугацаа дууссан",
    DiscountStatus.ACTIVE: "Идэвхтэй",
}


def _now() -> dt.datetime:
    return dt.datetime.now().astimezone()


def is_discount_usable(discount: DiscountRule | None) -> bool:
    """Whether the rule exists, has a positive price and is not disabled.

    Ignores the date window and weekday list.
    """
    if discount is None or discount.price <= 0:
        return False
    return discount.is_active is not False


def is_discount_applicable_on(discount: DiscountRule, moment: DateLike) -> bool:
    """Whether ``moment`` falls inside the rule's window and allowed weekdays.

    Window bounds are inclusive and only checked when set; the weekday list
    only restricts when non-empty.
    """
    moment_ms = epoch_ms(moment)

    if discount.start_date is not None and moment_ms < epoch_ms(discount.start_date):
        return False
    if discount.end_date is not None and moment_ms > epoch_ms(discount.end_date):
        return False

    if discount.valid_days:
        return weekday_index(moment) in discount.valid_days

    return True


def is_discount_active(
    discount: DiscountRule | None,
    reference_day: DateLike | None = None,
) -> bool:
    """Whether the discount can be used on ``reference_day``.

    Args:
        discount: The house's discount rule, if any
        reference_day: Day to evaluate; defaults to now

    Returns:
        True if the rule is usable and applies on that day
    """
    if not is_discount_usable(discount):
        return False
    return is_discount_applicable_on(
        discount, reference_day if reference_day is not None else _now()
    )


def get_discount_status(
    discount: DiscountRule | None,
    now: DateLike | None = None,
) -> DiscountStatusInfo:
    """Lifecycle state of a discount rule relative to the current moment.

    Checks run in order: none, disabled, scheduled, expired, active. The
    weekday list is not considered; a weekday-restricted rule inside its
    window reports ``active`` even on an excluded day.

    Args:
        discount: The house's discount rule, if any
        now: Moment to evaluate against; defaults to now

    Returns:
        Status with its display label
    """
    if discount is None or discount.price <= 0:
        status = DiscountStatus.NONE
    elif discount.is_active is False:
        status = DiscountStatus.DISABLED
    else:
        now_ms = epoch_ms(now if now is not None else _now())
        if discount.start_date is not None and now_ms < epoch_ms(discount.start_date):
            status = DiscountStatus.SCHEDULED
        elif discount.end_date is not None and now_ms > epoch_ms(discount.end_date):
            status = DiscountStatus.EXPIRED
        else:
            status = DiscountStatus.ACTIVE

    return DiscountStatusInfo(status=status, label=DISCOUNT_STATUS_LABELS[status])


def validate_discount_rule(discount: DiscountRule, house_price: int) -> list[str]:
    """Check a discount rule before it is saved on a house.

    A window ending before it starts is rejected. A rule that is not
    actually cheaper than the base rate is allowed, since pricing honours
    it as is, but produces a warning.

    Args:
        discount: Rule submitted by an admin
        house_price: The house's base nightly rate

    Returns:
        Warning messages, empty if none

    Raises:
        BookingError: INVALID_DISCOUNT if the window is reversed
    """
    if (
        discount.start_date is not None
        and discount.end_date is not None
        and epoch_ms(discount.end_date) < epoch_ms(discount.start_date)
    ):
        raise BookingError(
            ErrorCode.INVALID_DISCOUNT,
            {
                "start_date": discount.start_date.isoformat(),
                "end_date": discount.end_date.isoformat(),
            },
        )

    warnings: list[str] = []
    if discount.price <= 0:
        warnings.append("Discount price is not positive; the discount will be ignored")
    elif discount.price >= house_price:
        warnings.append(
            f"Discount price {discount.price} is not below the base price {house_price}"
        )
    return warnings
