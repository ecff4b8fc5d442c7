"""Roster parsing settings, overridable through environment variables."""

import os
from dataclasses import dataclass
from typing import Optional

HOME_BASE = "CGK"
REFERENCE_YEAR = 2025
DEFAULT_MONTH = 6  # July, zero-based
MONTH_LOOKBACK = 10


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass
class RosterSettings:
    """Knobs for the roster parser.

    reference_year is fixed rather than read from the roster; rosters are
    assumed to fall within one calendar year.
    """

    home_base: str = HOME_BASE
    reference_year: int = REFERENCE_YEAR
    default_month: int = DEFAULT_MONTH  # zero-based, July
    month_lookback: int = MONTH_LOOKBACK

    def __post_init__(self):
        self.home_base = self.home_base.upper().strip()
        if not 0 <= self.default_month <= 11:
            raise ValueError(f"default_month must be 0-11, got {self.default_month}")

    @classmethod
    def from_env(cls, home_base: Optional[str] = None, reference_year: Optional[int] = None) -> "RosterSettings":
        """Read ROSTER_HOME_BASE, ROSTER_REFERENCE_YEAR and ROSTER_DEFAULT_MONTH; arguments win."""
        return cls(
            home_base=home_base or os.environ.get("ROSTER_HOME_BASE", "") or HOME_BASE,
            reference_year=reference_year or _env_int("ROSTER_REFERENCE_YEAR", REFERENCE_YEAR),
            default_month=_env_int("ROSTER_DEFAULT_MONTH", DEFAULT_MONTH),
        )
