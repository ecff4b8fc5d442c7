"""Extract absolute DD/MM/YYYY timestamps to pin day numbers to months."""

import logging
import re
from typing import Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)

# 29/07/2025 21:30
_DIRECT_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2})")
# Rest : 28:55 (01/08/2025 05:00)
_REST_RE = re.compile(
    r"Rest\s*:\s*\d{1,2}:\d{2}\s*\((\d{1,2})/(\d{1,2})/(\d{4})\s+(\d{1,2}):(\d{2})\)"
)
# 01/08/2025
_GENERAL_RE = re.compile(r"(\d{1,2})/(\d{1,2})/(\d{4})")


def _match_timestamps(line: str) -> List[Tuple[int, int]]:
    """Return (day, zero-based month) pairs found on the line, in recording order.

    The direct and Rest shapes are both recorded; a bare date only counts when
    neither of them matched.
    """
    matches = [m for m in (_DIRECT_RE.search(line), _REST_RE.search(line)) if m is not None]
    if not matches:
        bare = _GENERAL_RE.search(line)
        if bare is not None:
            matches = [bare]
    found = []
    for m in matches:
        day, month = int(m.group(1)), int(m.group(2))
        if 1 <= month <= 12:
            found.append((day, month - 1))
    return found


def extract_timestamp_mapping(lines: Iterable[str]) -> Dict[int, int]:
    """Map day-of-month to zero-based month from timestamps found in the lines.

    A later timestamp for the same day number replaces an earlier one.
    """
    mapping: Dict[int, int] = {}
    for line in lines:
        for day, month in _match_timestamps(line):
            previous = mapping.get(day)
            if previous is not None and previous != month:
                logger.debug(
                    "Timestamp for day %d moves month %d -> %d (%r)", day, previous, month, line
                )
            mapping[day] = month
    logger.debug("Timestamp mapping: %s", mapping)
    return mapping
