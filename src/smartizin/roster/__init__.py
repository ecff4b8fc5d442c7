"""Roster OCR text to flight schedule package."""

from smartizin.roster.models import (
    CycleInfo,
    Day,
    DayDescriptor,
    Flight,
    HeaderForm,
    Period,
    RosterAnalysis,
    ScheduleContext,
    SplitState,
)
from smartizin.roster.service import RosterService, parse_schedule

__all__ = [
    "CycleInfo",
    "Day",
    "DayDescriptor",
    "Flight",
    "HeaderForm",
    "Period",
    "RosterAnalysis",
    "RosterService",
    "ScheduleContext",
    "SplitState",
    "parse_schedule",
]
