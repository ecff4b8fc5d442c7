"""Data models for roster parsing."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Dict, List, Optional, Tuple

from smartizin.reference.status import DayKind


@dataclass(frozen=True)
class Flight:
    """Flight record as printed on the roster (OCR-literal strings)."""

    code: str
    departure_time: str  # "HHMM"
    origin: str
    destination: str
    arrival_time: str  # "HHMM"

    def route(self) -> str:
        """Return route as ORIGIN-DESTINATION."""
        return f"{self.origin}-{self.destination}"


class HeaderForm(str, Enum):
    """Shape of the day header a Day was created from."""

    SIMPLE = "simple"  # "29 Tue"
    EXPLICIT_MONTH = "explicit_month"  # "August 01 Fri"


class SplitState(str, Enum):
    """Staging state for a flight code printed on its own line."""

    IDLE = "idle"
    AWAITING_DETAILS = "awaiting_details"


@dataclass
class Day:
    """One roster day, mutated while the roster is being parsed."""

    label: str
    day_number: int
    date: date
    form: HeaderForm = HeaderForm.SIMPLE
    flights: List[Flight] = field(default_factory=list)
    kind: DayKind = DayKind.WORKING
    split_state: SplitState = SplitState.IDLE
    pending_flight_code: Optional[str] = None

    @property
    def is_working_day(self) -> bool:
        return self.kind is not DayKind.NON_WORKING

    @property
    def skipped_for_flights(self) -> bool:
        return self.kind is not DayKind.WORKING

    @property
    def is_explicit(self) -> bool:
        return self.form is HeaderForm.EXPLICIT_MONTH

    @property
    def last_flight(self) -> Optional[Flight]:
        return self.flights[-1] if self.flights else None

    def add_flight(self, flight: Flight) -> None:
        self.flights.append(flight)

    def stage_flight_code(self, code: str) -> None:
        """Hold a flight code until its time/route line shows up."""
        self.pending_flight_code = code
        self.split_state = SplitState.AWAITING_DETAILS

    def complete_split_flight(
        self, departure_time: str, origin: str, destination: str, arrival_time: str
    ) -> Optional[Flight]:
        """Combine the staged code with a details line. Returns None if nothing is staged."""
        if self.split_state is not SplitState.AWAITING_DETAILS or not self.pending_flight_code:
            return None
        flight = Flight(
            code=self.pending_flight_code,
            departure_time=departure_time,
            origin=origin,
            destination=destination,
            arrival_time=arrival_time,
        )
        self.add_flight(flight)
        self.drop_pending_flight()
        return flight

    def drop_pending_flight(self) -> None:
        self.pending_flight_code = None
        self.split_state = SplitState.IDLE


@dataclass(frozen=True)
class DayDescriptor:
    """What a day header tells us about its date."""

    day_number: int
    month: Optional[int] = None  # zero-based, only for "August 01 Fri" headers
    weekday: Optional[str] = None


@dataclass(frozen=True)
class ScheduleContext:
    """Month context detected from month names in the roster text."""

    context_month: int
    has_multiple_months: bool = False
    months: Tuple[int, ...] = ()


@dataclass(frozen=True)
class CycleInfo:
    """Position of tomorrow within the current work cycle."""

    cycle_start_index: int
    completed_working_days: int
    tomorrow_ordinal: int
    ordinal_label: str


@dataclass
class Period:
    """Upcoming travel period reported in the leave request."""

    days: List[Day]
    start_label: str
    ordinal_label: str
    completed_cycle_days_tomorrow: int
    anchor: Optional[date] = None

    @property
    def start_date(self) -> date:
        return self.days[0].date

    @property
    def end_date(self) -> date:
        return self.days[-1].date

    def to_dataframe(self):
        """Convert to pandas DataFrame, one row per flight."""
        import pandas as pd

        columns = [
            "date",
            "label",
            "flight",
            "origin",
            "destination",
            "etd",
            "eta",
        ]
        rows = [
            {
                "date": d.date,
                "label": d.label,
                "flight": f.code,
                "origin": f.origin,
                "destination": f.destination,
                "etd": f.departure_time,
                "eta": f.arrival_time,
            }
            for d in self.days
            for f in d.flights
        ]
        if not rows:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(rows, columns=columns)


@dataclass
class RosterAnalysis:
    """All intermediate results of one roster parse."""

    lines: List[str] = field(default_factory=list)
    timestamp_mapping: Dict[int, int] = field(default_factory=dict)
    context: Optional[ScheduleContext] = None
    days: List[Day] = field(default_factory=list)
    anchor: Optional[date] = None
    cycle: Optional[CycleInfo] = None
    period: Optional[Period] = None

    def to_dataframe(self):
        """Convert parsed days to pandas DataFrame, one row per day."""
        import pandas as pd

        columns = [
            "label",
            "date",
            "kind",
            "working",
            "skipped",
            "flights",
            "future",
        ]
        if not self.days:
            return pd.DataFrame(columns=columns)
        return pd.DataFrame(
            [
                {
                    "label": d.label,
                    "date": d.date,
                    "kind": d.kind.value,
                    "working": d.is_working_day,
                    "skipped": d.skipped_for_flights,
                    "flights": " ".join(f"{f.code}:{f.route()}" for f in d.flights),
                    "future": self.anchor is not None and d.date > self.anchor,
                }
                for d in self.days
            ],
            columns=columns,
        )
