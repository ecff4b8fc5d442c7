"""Roster service - runs the parsing passes from OCR text to a reportable period."""

import logging
from datetime import date
from typing import Iterable, Optional

from smartizin.config import RosterSettings
from smartizin.roster.anchor import detect_today_anchor
from smartizin.roster.builder import build_days
from smartizin.roster.context import detect_schedule_context
from smartizin.roster.corrector import correct_schedule, sort_days
from smartizin.roster.cycle import account_cycle
from smartizin.roster.models import Period, RosterAnalysis
from smartizin.roster.period import build_period
from smartizin.roster.text import merge_ocr_texts, normalize_lines
from smartizin.roster.timestamps import extract_timestamp_mapping

logger = logging.getLogger(__name__)


class RosterService:
    """Orchestrates the roster passes for one OCR text blob at a time."""

    def __init__(self, settings: Optional[RosterSettings] = None):
        self.settings = settings or RosterSettings()

    def analyze(self, text: str, now: date) -> RosterAnalysis:
        """Run every pass and keep the intermediate results."""
        s = self.settings
        lines = normalize_lines(text)
        mapping = extract_timestamp_mapping(lines)
        context = detect_schedule_context(lines, default_month=s.default_month)

        days = build_days(
            lines,
            mapping,
            context,
            year=s.reference_year,
            default_month=s.default_month,
            month_lookback=s.month_lookback,
        )
        corrections = correct_schedule(days, mapping, year=s.reference_year)
        days = sort_days(days)

        analysis = RosterAnalysis(
            lines=lines,
            timestamp_mapping=mapping,
            context=context,
            days=days,
        )
        if not days:
            logger.info("No day headers found in %d lines", len(lines))
            return analysis

        anchor = detect_today_anchor(days, now)
        cycle = account_cycle(days, anchor)
        analysis.anchor = anchor
        analysis.cycle = cycle
        analysis.period = build_period(days, anchor, cycle, home_base=s.home_base)

        logger.info(
            "Parsed %d days (%d corrected), anchor %s, tomorrow is duty day %d, period %s",
            len(days),
            corrections,
            anchor.isoformat(),
            cycle.tomorrow_ordinal,
            f"{len(analysis.period.days)} days" if analysis.period else "empty",
        )
        return analysis

    def parse(self, text: str, now: date) -> Optional[Period]:
        """Return the upcoming travel period, or None if none can be derived."""
        return self.analyze(text, now).period

    def parse_texts(self, texts: Iterable[str], now: date) -> Optional[Period]:
        """Parse the recognized text of several roster photos as one roster."""
        return self.parse(merge_ocr_texts(texts), now)


def parse_schedule(text: str, now: date, settings: Optional[RosterSettings] = None) -> Optional[Period]:
    """Parse roster OCR text into the upcoming travel period."""
    return RosterService(settings).parse(text, now)
