"""Reconcile resolved dates with timestamps and order the day set."""

import logging
from typing import Iterable, List, Mapping

from smartizin.config import REFERENCE_YEAR
from smartizin.roster.dates import calendar_date
from smartizin.roster.models import Day, HeaderForm

logger = logging.getLogger(__name__)


def correct_schedule(
    days: Iterable[Day], timestamp_mapping: Mapping[int, int], year: int = REFERENCE_YEAR
) -> int:
    """Move simple-header days to the month their timestamps say. Returns the number of corrections."""
    corrections = 0
    for day in days:
        if day.form is not HeaderForm.SIMPLE:
            continue
        month = timestamp_mapping.get(day.day_number)
        if month is None or month == day.date.month - 1:
            continue
        corrected = calendar_date(year, month, day.day_number)
        if corrected == day.date:
            continue
        logger.debug("Correcting %s: %s -> %s", day.label, day.date.isoformat(), corrected.isoformat())
        day.date = corrected
        corrections += 1
    return corrections


def sort_days(days: Iterable[Day]) -> List[Day]:
    """Sort by date; on equal dates "August 01 Fri" headers come before "01 Fri"."""
    return sorted(days, key=lambda d: (d.date, 0 if d.is_explicit else 1))
