"""Date utilities shared by the time-windowed components."""

from __future__ import annotations

from datetime import datetime, time, timedelta
import math

WEEKDAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

SECONDS_PER_DAY = 24 * 60 * 60


def resolve_now(now: datetime | None = None) -> datetime:
    """Reference instant for time-relative metrics; the local clock when omitted."""
    return now if now is not None else datetime.now()


def align(value: datetime, reference: datetime) -> datetime:
    """Express `value` on `reference`'s clock (both naive or both in its zone)."""
    if reference.tzinfo is None:
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value
    if value.tzinfo is None:
        return value.replace(tzinfo=reference.tzinfo)
    return value.astimezone(reference.tzinfo)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return datetime.combine(value.date(), time.max, tzinfo=value.tzinfo)


def whole_days_between(earlier: datetime, later: datetime) -> int:
    """Floor of elapsed days from `earlier` to `later`."""
    elapsed = (align(later, earlier) - earlier).total_seconds()
    return math.floor(elapsed / SECONDS_PER_DAY)


def minutes_between(earlier: datetime, later: datetime) -> float:
    return (align(later, earlier) - earlier).total_seconds() / 60.0


def days_before(value: datetime, days: int) -> datetime:
    return value - timedelta(days=days)


def weekday_label(value: datetime) -> str:
    """Short English weekday, e.g. `Mon`."""
    return WEEKDAY_LABELS[value.weekday()]


def month_day_label(value: datetime) -> str:
    """Short month and day, e.g. `Oct 6`."""
    return f"{MONTH_LABELS[value.month - 1]} {value.day}"


def numeric_date_label(value: datetime) -> str:
    """US numeric date, e.g. `10/6/2026`."""
    return f"{value.month}/{value.day}/{value.year}"
