"""Select the upcoming days reported in the leave request."""

import logging
from datetime import date
from typing import List, Optional, Sequence

from smartizin.config import HOME_BASE
from smartizin.roster.models import CycleInfo, Day, Period

logger = logging.getLogger(__name__)


def future_flight_days(days: Sequence[Day], anchor: date) -> List[Day]:
    """Working, flight-carrying days after the anchor."""
    return [
        d
        for d in days
        if d.date > anchor and d.is_working_day and not d.skipped_for_flights and d.flights
    ]


def build_period(
    days: Sequence[Day], anchor: date, cycle: CycleInfo, home_base: str = HOME_BASE
) -> Optional[Period]:
    """Upcoming days up to and including the first return to home base.

    Returns None when no upcoming day carries flights.
    """
    period_days: List[Day] = []
    for d in future_flight_days(days, anchor):
        period_days.append(d)
        last = d.last_flight
        if last is not None and last.destination == home_base:
            break

    if not period_days:
        logger.debug("No upcoming flight days after %s", anchor)
        return None

    return Period(
        days=period_days,
        start_label=period_days[0].label,
        ordinal_label=cycle.ordinal_label,
        completed_cycle_days_tomorrow=cycle.tomorrow_ordinal,
        anchor=anchor,
    )
