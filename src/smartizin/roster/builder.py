"""Build roster days from OCR lines in a single sequential pass."""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from smartizin.config import DEFAULT_MONTH, MONTH_LOOKBACK, REFERENCE_YEAR
from smartizin.reference.months import MONTH_NAME_PATTERN, month_index, standalone_month
from smartizin.reference.status import DayKind, parse_duty_status, parse_training_flight
from smartizin.roster.dates import resolve_date
from smartizin.roster.models import (
    Day,
    DayDescriptor,
    Flight,
    HeaderForm,
    ScheduleContext,
)

logger = logging.getLogger(__name__)

_WEEKDAYS = "Mon|Tue|Wed|Thu|Fri|Sat|Sun"

# "29 Tue"
SIMPLE_HEADER_RE = re.compile(rf"^(\d{{1,2}})\s+({_WEEKDAYS})$", re.IGNORECASE)
# "August 01 Fri"
EXPLICIT_HEADER_RE = re.compile(
    rf"^({MONTH_NAME_PATTERN})\s+(\d{{1,2}})\s+({_WEEKDAYS})$", re.IGNORECASE
)
# "IU856 0730 CGK BTH 0910"
FLIGHT_RE = re.compile(r"^([A-Z0-9]{2,})\s+(\d{4})\s+([A-Z]{3})\s+([A-Z]{3})\s+(\d{4})$")
# "IU831" followed by "1200 BKS CGK 1315"
FLIGHT_CODE_RE = re.compile(r"^([A-Z0-9]{2,})$")
FLIGHT_DETAILS_RE = re.compile(r"^(\d{4})\s+([A-Z]{3})\s+([A-Z]{3})\s+(\d{4})$")


class LineKind(str, Enum):
    """What a single roster line is."""

    EXPLICIT_HEADER = "explicit_header"
    SIMPLE_HEADER = "simple_header"
    NON_WORKING = "non_working"
    WORKING_NO_FLIGHT = "working_no_flight"
    TRAINING_FLIGHT = "training_flight"
    FLIGHT = "flight"
    FLIGHT_CODE = "flight_code"
    FLIGHT_DETAILS = "flight_details"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ClassifiedLine:
    """A roster line tagged with its kind and the captured fields."""

    kind: LineKind
    groups: Tuple[str, ...] = ()


def classify_line(line: str) -> ClassifiedLine:
    """Tag a line; headers first, then duty-status codes, then flight shapes."""
    m = EXPLICIT_HEADER_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.EXPLICIT_HEADER, m.groups())
    m = SIMPLE_HEADER_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.SIMPLE_HEADER, m.groups())

    status = parse_duty_status(line)
    if status is not None:
        if status.kind is DayKind.NON_WORKING:
            return ClassifiedLine(LineKind.NON_WORKING, (status.code,))
        return ClassifiedLine(LineKind.WORKING_NO_FLIGHT, (status.code,))
    training = parse_training_flight(line)
    if training is not None:
        return ClassifiedLine(LineKind.TRAINING_FLIGHT, (training.code,))

    m = FLIGHT_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.FLIGHT, m.groups())
    m = FLIGHT_CODE_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.FLIGHT_CODE, m.groups())
    m = FLIGHT_DETAILS_RE.match(line)
    if m:
        return ClassifiedLine(LineKind.FLIGHT_DETAILS, m.groups())
    return ClassifiedLine(LineKind.UNKNOWN)


_STATUS_KINDS = {
    LineKind.NON_WORKING: DayKind.NON_WORKING,
    LineKind.WORKING_NO_FLIGHT: DayKind.WORKING_NO_FLIGHT,
    LineKind.TRAINING_FLIGHT: DayKind.WORKING_NO_FLIGHT,
}


class DayBuilder:
    """Accumulates Day records keyed by their raw header label."""

    def __init__(
        self,
        lines: Sequence[str],
        timestamp_mapping: Mapping[int, int],
        context: ScheduleContext,
        year: int = REFERENCE_YEAR,
        default_month: int = DEFAULT_MONTH,
        month_lookback: int = MONTH_LOOKBACK,
    ):
        self.lines = list(lines)
        self.timestamp_mapping = dict(timestamp_mapping)
        self.context = context
        self.year = year
        self.default_month = default_month
        self.month_lookback = month_lookback
        self._days: Dict[str, Day] = {}

    def build(self) -> List[Day]:
        """Run the pass and return days in order of first appearance."""
        self._days = {}
        current: Optional[Day] = None
        for index, line in enumerate(self.lines):
            current = self._consume(index, line, current)
        if current is not None:
            current.drop_pending_flight()
        return list(self._days.values())

    def _consume(self, index: int, line: str, current: Optional[Day]) -> Optional[Day]:
        """Apply one line and return the day that is current afterwards."""
        classified = classify_line(line)
        kind = classified.kind

        if kind is LineKind.EXPLICIT_HEADER:
            return self._switch(current, self._explicit_day(classified.groups))
        if kind is LineKind.SIMPLE_HEADER:
            return self._switch(current, self._simple_day(index, classified.groups))

        if current is None:
            logger.debug("Ignoring line before first day header: %r", line)
            return None

        if kind in _STATUS_KINDS:
            day_kind = _STATUS_KINDS[kind]
            logger.debug("%s marked %s by %r", current.label, day_kind.value, line)
            current.kind = day_kind
        elif kind is LineKind.FLIGHT:
            current.add_flight(Flight(*classified.groups))
        elif kind is LineKind.FLIGHT_CODE:
            current.stage_flight_code(classified.groups[0])
        elif kind is LineKind.FLIGHT_DETAILS:
            flight = current.complete_split_flight(*classified.groups)
            if flight is None:
                logger.debug("Flight details without a staged code on %s: %r", current.label, line)
        else:
            logger.debug("Unrecognized line: %r", line)
        return current

    def _switch(self, current: Optional[Day], day: Day) -> Day:
        if current is not None and current is not day:
            current.drop_pending_flight()
        return day

    def _explicit_day(self, groups: Tuple[str, ...]) -> Day:
        month_name, day_str, weekday = groups
        label = f"{month_name} {day_str} {weekday}"
        descriptor = DayDescriptor(
            day_number=int(day_str),
            month=month_index(month_name),
            weekday=weekday,
        )
        return self._locate(label, descriptor, HeaderForm.EXPLICIT_MONTH, self.context.context_month)

    def _simple_day(self, index: int, groups: Tuple[str, ...]) -> Day:
        day_str, weekday = groups
        label = f"{day_str} {weekday}"
        descriptor = DayDescriptor(day_number=int(day_str), weekday=weekday)

        context_month = self.context.context_month
        if descriptor.day_number not in self.timestamp_mapping:
            local = self._recent_month(index)
            if local is not None and local != context_month:
                logger.debug(
                    "%s uses nearby month %d instead of context %d", label, local, context_month
                )
                context_month = local
        return self._locate(label, descriptor, HeaderForm.SIMPLE, context_month)

    def _recent_month(self, index: int) -> Optional[int]:
        """Month named on its own line within the lookback window above index."""
        for j in range(index - 1, max(0, index - self.month_lookback) - 1, -1):
            month = standalone_month(self.lines[j])
            if month is not None:
                return month
        return None

    def _locate(
        self, label: str, descriptor: DayDescriptor, form: HeaderForm, context_month: int
    ) -> Day:
        existing = self._days.get(label)
        if existing is not None:
            logger.debug("Reusing day %s", label)
            return existing
        day = Day(
            label=label,
            day_number=descriptor.day_number,
            date=resolve_date(
                descriptor,
                context_month=context_month,
                timestamp_mapping=self.timestamp_mapping,
                year=self.year,
                default_month=self.default_month,
            ),
            form=form,
        )
        logger.debug("New day %s -> %s", label, day.date.isoformat())
        self._days[label] = day
        return day


def build_days(
    lines: Sequence[str],
    timestamp_mapping: Mapping[int, int],
    context: ScheduleContext,
    year: int = REFERENCE_YEAR,
    default_month: int = DEFAULT_MONTH,
    month_lookback: int = MONTH_LOOKBACK,
) -> List[Day]:
    """Build days from lines; see DayBuilder."""
    return DayBuilder(
        lines,
        timestamp_mapping,
        context,
        year=year,
        default_month=default_month,
        month_lookback=month_lookback,
    ).build()
