"""Count the working days already flown in the current work cycle."""

from datetime import date
from typing import Sequence

from smartizin.reference.months import ordinal_label
from smartizin.roster.models import CycleInfo, Day


def find_cycle_start(days: Sequence[Day], anchor: date) -> int:
    """Index right after the last day off on or before the anchor (0 if none)."""
    last_off = -1
    for i, d in enumerate(days):
        if d.date <= anchor and not d.is_working_day:
            last_off = i
    return last_off + 1


def count_completed_working_days(days: Sequence[Day], start: int, anchor: date) -> int:
    return sum(1 for d in days[start:] if d.date <= anchor and d.is_working_day)


def account_cycle(days: Sequence[Day], anchor: date) -> CycleInfo:
    """Work out which working day of the cycle tomorrow is."""
    start = find_cycle_start(days, anchor)
    completed = count_completed_working_days(days, start, anchor)
    tomorrow = completed + 1
    return CycleInfo(
        cycle_start_index=start,
        completed_working_days=completed,
        tomorrow_ordinal=tomorrow,
        ordinal_label=ordinal_label(tomorrow),
    )
