"""Detect the schedule's month context from month names in the text."""

import logging
from typing import Iterable, List

from smartizin.config import DEFAULT_MONTH
from smartizin.reference.months import find_month
from smartizin.roster.models import ScheduleContext

logger = logging.getLogger(__name__)


def detect_schedule_context(lines: Iterable[str], default_month: int = DEFAULT_MONTH) -> ScheduleContext:
    """Pick the context month for headers that only print a day number.

    The first month name in reading order wins, unless several distinct
    months appear, in which case the smallest month index is used.
    """
    seen: List[int] = []
    for line in lines:
        month = find_month(line)
        if month is not None and month not in seen:
            seen.append(month)

    if not seen:
        return ScheduleContext(context_month=default_month)

    context_month = seen[0]
    if len(seen) > 1:
        # No December -> January wraparound
        context_month = min(seen)
        logger.debug("Cross-month roster %s, using month %d as context", seen, context_month)

    return ScheduleContext(
        context_month=context_month,
        has_multiple_months=len(seen) > 1,
        months=tuple(seen),
    )
