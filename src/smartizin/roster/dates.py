"""Resolve day headers to concrete calendar dates."""

from datetime import date, timedelta
from typing import Mapping, Optional

from smartizin.config import DEFAULT_MONTH, REFERENCE_YEAR
from smartizin.roster.models import DayDescriptor


def calendar_date(year: int, month: int, day: int) -> date:
    """Build a date from a zero-based month, rolling out-of-range days into the adjacent month.

    Day 31 of a 30-day month becomes the 1st of the next month and day 0 the
    last day of the previous month, so every header gets a date.
    """
    year += month // 12
    month %= 12
    return date(year, month + 1, 1) + timedelta(days=day - 1)


def resolve_date(
    descriptor: DayDescriptor,
    context_month: Optional[int] = None,
    timestamp_mapping: Optional[Mapping[int, int]] = None,
    year: int = REFERENCE_YEAR,
    default_month: int = DEFAULT_MONTH,
) -> date:
    """Return the date a header refers to.

    Priority: explicit month, timestamp mapping for the day number, context
    month, then the default month.
    """
    if descriptor.month is not None:
        month = descriptor.month
    elif timestamp_mapping and descriptor.day_number in timestamp_mapping:
        month = timestamp_mapping[descriptor.day_number]
    elif context_month is not None:
        month = context_month
    else:
        month = default_month
    return calendar_date(year, month, descriptor.day_number)
