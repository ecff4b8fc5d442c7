"""Infer the "today" anchor separating completed duty from upcoming duty.

Rosters carry no explicit today marker, so the anchor is derived from the
shape of the schedule and the caller-supplied current date. The first
applicable rule wins:

1. Historical roster (everything before ``now``): the day before the first
   working day with flights, else the day before the earliest day.
2. Last non-working day: the day after it when working days follow;
   otherwise the day before the first working day with flights.
3. Roster spanning several months: two days before the earliest day, so
   every day counts as upcoming.
4. Single month: ``now`` when it is near the schedule and before the first
   working day; else the day before the first working day; else ``now``
   moved into the schedule's month.
"""

import logging
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from smartizin.roster.dates import calendar_date
from smartizin.roster.models import Day

logger = logging.getLogger(__name__)

NEAR_TODAY_DAYS = 3


def _as_date(value) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def _first_working_with_flights(days: Sequence[Day]) -> Optional[Day]:
    return next((d for d in days if d.is_working_day and d.flights), None)


def _first_working(days: Sequence[Day]) -> Optional[Day]:
    return next((d for d in days if d.is_working_day), None)


def _historical_anchor(days: Sequence[Day]) -> date:
    first = _first_working_with_flights(days)
    if first is not None:
        return first.date - timedelta(days=1)
    return days[0].date - timedelta(days=1)


def _boundary_anchor(days: Sequence[Day]) -> Optional[date]:
    off_index = next(
        (i for i in range(len(days) - 1, -1, -1) if not days[i].is_working_day), None
    )
    if off_index is None:
        return None
    if any(d.is_working_day for d in days[off_index + 1:]):
        return days[off_index].date + timedelta(days=1)
    # Day off closes the roster: the cycle is already over
    first = _first_working_with_flights(days)
    if first is not None:
        return first.date - timedelta(days=1)
    return None


def _single_month_anchor(days: Sequence[Day], now: date) -> date:
    first = _first_working(days)
    near_today = any(abs((d.date - now).days) <= NEAR_TODAY_DAYS for d in days)
    if near_today and first is not None and now < first.date:
        return now
    if first is not None:
        return first.date - timedelta(days=1)

    schedule_start = days[0].date
    if (now.year, now.month) != (schedule_start.year, schedule_start.month):
        return calendar_date(schedule_start.year, schedule_start.month - 1, now.day)
    return now


def detect_today_anchor(days: Sequence[Day], now) -> date:
    """Return the anchor date for days sorted by date."""
    now = _as_date(now)
    if not days:
        return now

    if days[-1].date < now:
        anchor = _historical_anchor(days)
        logger.debug("Historical roster, anchor %s", anchor)
        return anchor

    anchor = _boundary_anchor(days)
    if anchor is not None:
        logger.debug("Anchor %s from last day off", anchor)
        return anchor

    months = {(d.date.year, d.date.month) for d in days}
    if len(months) > 1:
        anchor = days[0].date - timedelta(days=2)
        logger.debug("Cross-month roster without day off, anchor %s", anchor)
        return anchor

    anchor = _single_month_anchor(days, now)
    logger.debug("Single-month roster, anchor %s", anchor)
    return anchor
