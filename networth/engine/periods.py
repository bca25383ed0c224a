"""
Period Model

Calendar period boundaries and period arithmetic.

A period is identified by its END date (the last calendar day of the
quarter or month). Every other module derives boundaries from here,
so quarter-start and quarter-end can never disagree.
"""

import calendar
from datetime import date, datetime
from typing import Union

from networth.models.period import Granularity


DateLike = Union[date, datetime]

_MONTH_ABBREVIATIONS = [
    "", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]


def as_date(value: DateLike) -> date:
    """Strip the time part of a datetime; pass dates through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(value: DateLike, months: int) -> date:
    """
    Move a date by whole calendar months.

    The day is clamped to the length of the target month
    (Jan 31 + 1 month = Feb 28/29).
    """
    value = as_date(value)
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def _last_month_of_period(month: int, granularity: Granularity) -> int:
    size = granularity.months_per_period
    return ((month - 1) // size + 1) * size


def period_end(value: DateLike, granularity: Granularity = Granularity.QUARTER) -> date:
    """Last calendar day of the period containing `value`."""
    value = as_date(value)
    month = _last_month_of_period(value.month, granularity)
    return date(value.year, month, calendar.monthrange(value.year, month)[1])


def period_start(value: DateLike, granularity: Granularity = Granularity.QUARTER) -> date:
    """First calendar day of the period containing `value`."""
    value = as_date(value)
    month = _last_month_of_period(value.month, granularity) - granularity.months_per_period + 1
    return date(value.year, month, 1)


def add_periods(
    value: DateLike,
    count: int,
    granularity: Granularity = Granularity.QUARTER,
) -> date:
    """End of the period `count` periods away from the one containing `value`."""
    start = period_start(value, granularity)
    return period_end(add_months(start, count * granularity.months_per_period), granularity)


def generate_periods(
    start: DateLike,
    end: DateLike,
    granularity: Granularity = Granularity.QUARTER,
) -> list[date]:
    """
    Period-end dates from the period containing `start` through the
    period containing `end`, inclusive, with no gaps.

    If `start` is after `end`, the result is the single period covering `end`.
    """
    first = period_end(start, granularity)
    last = period_end(end, granularity)
    if first > last:
        return [last]

    periods = []
    current = first
    while current <= last:
        periods.append(current)
        current = add_periods(current, 1, granularity)
    return periods


def period_label(value: DateLike, granularity: Granularity = Granularity.QUARTER) -> str:
    """Human label for a period: "Q1 2024" or "Jan 2024"."""
    end = period_end(value, granularity)
    if granularity is Granularity.QUARTER:
        return f"Q{(end.month - 1) // 3 + 1} {end.year}"
    return f"{_MONTH_ABBREVIATIONS[end.month]} {end.year}"
