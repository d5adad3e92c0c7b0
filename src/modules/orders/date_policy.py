"""Delivery-date policy.

All calendar math runs in the project time zone (``settings.TIME_ZONE``,
Europe/Berlin).  Dates are compared as calendar days; a chosen delivery
date counts from local midnight.

Window: earliest delivery day is tomorrow (today is rejected), latest is
the seasonal cutoff, inclusive.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Protocol

from django.utils import timezone
from django.utils.dateparse import parse_date

from modules.orders.constants import (
    CANCELLATION_CUTOFF_HOURS,
    FALLBACK_DELIVERY_DAYS,
    SEASON_END,
)
from modules.orders.exceptions import DateTooEarly, DateTooLate, InvalidDateFormat


class Schedulable(Protocol):
    date: Optional[date]
    created_at: datetime


def seasonal_cutoff(today: date, configured: Optional[date] = None) -> date:
    """Last deliverable day: *configured* or December 24 of *today*'s year."""
    if configured is not None:
        return configured
    month, day = SEASON_END
    return date(today.year, month, day)


def parse_delivery_date(value: Optional[str]) -> Optional[date]:
    """Parse ``YYYY-MM-DD``; blank means "no date chosen".

    Raises:
        InvalidDateFormat: value is neither blank nor a valid calendar date.
    """
    if value is None or not str(value).strip():
        return None
    try:
        parsed = parse_date(str(value).strip())
    except ValueError:
        parsed = None
    if parsed is None:
        raise InvalidDateFormat(attr="date")
    return parsed


def check_window(
    value: Optional[str], today: date, max_date: Optional[date] = None
) -> Optional[date]:
    """Return the parsed delivery date, or ``None`` when absent.

    Raises:
        InvalidDateFormat, DateTooEarly, DateTooLate
    """
    requested = parse_delivery_date(value)
    if requested is None:
        return None
    if requested < today + timedelta(days=1):
        raise DateTooEarly(attr="date")
    if requested > seasonal_cutoff(today, max_date):
        raise DateTooLate(attr="date")
    return requested


def is_within_window(
    value: Optional[str], today: date, max_date: Optional[date] = None
) -> bool:
    try:
        check_window(value, today, max_date)
    except (InvalidDateFormat, DateTooEarly, DateTooLate):
        return False
    return True


def _local_midnight(day: date) -> datetime:
    return timezone.make_aware(datetime.combine(day, time.min))


def planned_delivery_day(order: Schedulable) -> date:
    if order.date is not None:
        return order.date
    created_day = timezone.localdate(order.created_at)
    return created_day + timedelta(days=FALLBACK_DELIVERY_DAYS)


def planned_delivery_date(order: Schedulable) -> datetime:
    """Chosen date at local midnight, else ``created_at`` + 2 days.

    The fallback keeps the time of day of ``created_at``; only the
    calendar day (``planned_delivery_day``) is used for delivery lists.
    """
    if order.date is not None:
        return _local_midnight(order.date)
    return order.created_at + timedelta(days=FALLBACK_DELIVERY_DAYS)


def cancellation_deadline(order: Schedulable) -> datetime:
    return planned_delivery_date(order) - timedelta(hours=CANCELLATION_CUTOFF_HOURS)


def is_cancelable_now(order: Schedulable, now: datetime) -> bool:
    """``now`` must not be later than 24 hours before planned delivery."""
    return now <= cancellation_deadline(order)
