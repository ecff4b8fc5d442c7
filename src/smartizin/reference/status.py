"""Parse duty-status codes printed on roster lines."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DayKind(str, Enum):
    """How a roster day counts towards the work cycle and route reporting."""

    WORKING = "working"
    NON_WORKING = "non_working"  # day off, breaks the duty cycle
    WORKING_NO_FLIGHT = "working_no_flight"  # simulator/training, counts as duty


@dataclass(frozen=True)
class ParsedDutyStatus:
    """Duty-status code found on a line."""

    kind: DayKind
    code: str


NON_WORKING_CODES: tuple[str, ...] = ("OFF", "DO", "S/L")
WORKING_NO_FLIGHT_CODES: tuple[str, ...] = ("R2T2", "R1T2", "R3T2", "SA1", "SA2")

# Codes must stand alone as a token; "DO" inside "DOH" is not a day off.
_CODE_RE = {
    code: re.compile(rf"(?<![A-Z0-9/]){re.escape(code)}(?![A-Z0-9/])")
    for code in NON_WORKING_CODES + WORKING_NO_FLIGHT_CODES
}

# R2T2 0800 CGK CGK 1200 - training sortie laid out like a flight record
_TRAINING_FLIGHT_RE = re.compile(r"^(R\d+T\d+)\s+(\d{4})\s+([A-Z]{3})\s+([A-Z]{3})\s+(\d{4})$")


def parse_duty_status(line: Optional[str]) -> Optional[ParsedDutyStatus]:
    """Classify a roster line as a duty-status code. Returns None for anything else.

    Non-working codes win over working-no-flight codes when both appear.
    """
    if not line or not isinstance(line, str):
        return None

    s = line.strip()
    if not s:
        return None

    for code in NON_WORKING_CODES:
        if _CODE_RE[code].search(s):
            return ParsedDutyStatus(kind=DayKind.NON_WORKING, code=code)
    for code in WORKING_NO_FLIGHT_CODES:
        if _CODE_RE[code].search(s):
            return ParsedDutyStatus(kind=DayKind.WORKING_NO_FLIGHT, code=code)
    return None


def parse_training_flight(line: Optional[str]) -> Optional[ParsedDutyStatus]:
    """Match a training sortie printed in flight-record shape."""
    if not line:
        return None
    m = _TRAINING_FLIGHT_RE.match(line.strip())
    if not m:
        return None
    return ParsedDutyStatus(kind=DayKind.WORKING_NO_FLIGHT, code=m.group(1))
