"""Unit tests for roster models."""

from datetime import date

from smartizin.reference import DayKind
from smartizin.roster.models import (
    Day,
    Flight,
    HeaderForm,
    Period,
    RosterAnalysis,
    SplitState,
)


def _make_flight(
    code: str = "IU856",
    origin: str = "CGK",
    destination: str = "BTH",
) -> Flight:
    return Flight(
        code=code,
        departure_time="0730",
        origin=origin,
        destination=destination,
        arrival_time="0910",
    )


class TestFlight:
    """Tests for Flight model."""

    def test_route(self) -> None:
        assert _make_flight().route() == "CGK-BTH"


class TestDay:
    """Tests for Day flags and split-flight staging."""

    def test_defaults_to_working(self) -> None:
        day = Day(label="30 Wed", day_number=30, date=date(2025, 7, 30))
        assert day.kind is DayKind.WORKING
        assert day.is_working_day is True
        assert day.skipped_for_flights is False
        assert day.form is HeaderForm.SIMPLE
        assert day.last_flight is None

    def test_non_working_is_skipped(self) -> None:
        day = Day(label="29 Tue", day_number=29, date=date(2025, 7, 29), kind=DayKind.NON_WORKING)
        assert day.is_working_day is False
        assert day.skipped_for_flights is True

    def test_working_no_flight_is_skipped_but_working(self) -> None:
        day = Day(
            label="29 Tue",
            day_number=29,
            date=date(2025, 7, 29),
            kind=DayKind.WORKING_NO_FLIGHT,
        )
        assert day.is_working_day is True
        assert day.skipped_for_flights is True

    def test_split_flight_completes(self) -> None:
        day = Day(label="30 Wed", day_number=30, date=date(2025, 7, 30))
        day.stage_flight_code("IU831")
        assert day.split_state is SplitState.AWAITING_DETAILS
        assert day.pending_flight_code == "IU831"

        flight = day.complete_split_flight("1200", "BKS", "CGK", "1315")
        assert flight == Flight("IU831", "1200", "BKS", "CGK", "1315")
        assert day.flights == [flight]
        assert day.split_state is SplitState.IDLE
        assert day.pending_flight_code is None

    def test_split_details_without_code_ignored(self) -> None:
        day = Day(label="30 Wed", day_number=30, date=date(2025, 7, 30))
        assert day.complete_split_flight("1200", "BKS", "CGK", "1315") is None
        assert day.flights == []


class TestPeriod:
    """Tests for Period helpers."""

    def test_to_dataframe_one_row_per_flight(self) -> None:
        d1 = Day(label="30 Wed", day_number=30, date=date(2025, 7, 30))
        d1.add_flight(_make_flight("IU856", "CGK", "BTH"))
        d1.add_flight(_make_flight("IU857", "BTH", "KNO"))
        d2 = Day(label="31 Thu", day_number=31, date=date(2025, 7, 31))
        d2.add_flight(_make_flight("IU858", "KNO", "CGK"))
        period = Period(
            days=[d1, d2],
            start_label="30 Wed",
            ordinal_label="kedua",
            completed_cycle_days_tomorrow=2,
        )

        df = period.to_dataframe()
        assert len(df) == 3
        assert list(df["flight"]) == ["IU856", "IU857", "IU858"]
        assert list(df["label"]) == ["30 Wed", "30 Wed", "31 Thu"]
        assert period.start_date == date(2025, 7, 30)
        assert period.end_date == date(2025, 7, 31)


class TestRosterAnalysis:
    """Tests for RosterAnalysis.to_dataframe."""

    def test_empty(self) -> None:
        df = RosterAnalysis().to_dataframe()
        assert df.empty
        assert "label" in df.columns

    def test_future_flag_uses_anchor(self) -> None:
        days = [
            Day(label="29 Tue", day_number=29, date=date(2025, 7, 29), kind=DayKind.NON_WORKING),
            Day(label="30 Wed", day_number=30, date=date(2025, 7, 30)),
        ]
        df = RosterAnalysis(days=days, anchor=date(2025, 7, 29)).to_dataframe()
        assert list(df["future"]) == [False, True]
        assert list(df["kind"]) == ["non_working", "working"]
