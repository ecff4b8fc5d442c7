"""Reference tables for month names, ordinals, and duty-status codes."""

from smartizin.reference.months import (
    INDONESIAN_MONTHS,
    MONTHS,
    ORDINALS,
    find_month,
    indonesian_month,
    month_index,
    ordinal_label,
    standalone_month,
)
from smartizin.reference.status import (
    NON_WORKING_CODES,
    WORKING_NO_FLIGHT_CODES,
    DayKind,
    ParsedDutyStatus,
    parse_duty_status,
    parse_training_flight,
)

__all__ = [
    "INDONESIAN_MONTHS",
    "MONTHS",
    "NON_WORKING_CODES",
    "ORDINALS",
    "WORKING_NO_FLIGHT_CODES",
    "DayKind",
    "ParsedDutyStatus",
    "find_month",
    "indonesian_month",
    "month_index",
    "ordinal_label",
    "parse_duty_status",
    "parse_training_flight",
    "standalone_month",
]
