"""Render a parsed period for the leave-request message and summary display."""

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Tuple

import pandas as pd

from smartizin.reference.months import indonesian_month
from smartizin.roster.models import Flight, Period


def format_date_id(d: date) -> str:
    """Format as 'D <Indonesian month> YYYY', e.g. '1 Agustus 2025'."""
    return f"{d.day} {indonesian_month(d.month - 1)} {d.year}"


def format_flight(f: Flight) -> str:
    """Format as 'CODE ORIGIN-DESTINATION (ETD time)'."""
    return f"{f.code} {f.route()} (ETD {f.departure_time})"


@dataclass
class PeriodSummary:
    """Figures shown on the review screen and quoted in the message."""

    start_label: str = ""
    start_date: str = ""
    day_count: int = 0
    ordinal_label: str = ""
    tomorrow_ordinal: int = 0
    routes: List[Tuple[str, List[str]]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "start_label": self.start_label,
            "start_date": self.start_date,
            "day_count": self.day_count,
            "ordinal_label": self.ordinal_label,
            "tomorrow_ordinal": self.tomorrow_ordinal,
            "routes": [{"date": d, "flights": flights} for d, flights in self.routes],
        }

    def routes_dataframe(self) -> pd.DataFrame:
        """Return routes as DataFrame (one row per flight)."""
        if not self.routes:
            return pd.DataFrame(columns=["date", "flight"])
        return pd.DataFrame(
            [{"date": d, "flight": f} for d, flights in self.routes for f in flights]
        )


def summarize(period: Period) -> PeriodSummary:
    """Build the summary figures for a period."""
    return PeriodSummary(
        start_label=period.start_label,
        start_date=format_date_id(period.start_date),
        day_count=len(period.days),
        ordinal_label=period.ordinal_label,
        tomorrow_ordinal=period.completed_cycle_days_tomorrow,
        routes=[
            (format_date_id(d.date), [format_flight(f) for f in d.flights])
            for d in period.days
        ],
    )


def render_route_lines(period: Period) -> str:
    """Route block of the leave request: a 'Pada tanggal' heading per day, then its flights."""
    blocks = []
    for d in period.days:
        lines = [f"Pada tanggal {format_date_id(d.date)}:"]
        lines.extend(f"- {format_flight(f)}" for f in d.flights)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
