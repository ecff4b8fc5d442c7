"""Pytest configuration and shared roster fixtures."""

import sys
from pathlib import Path

import pytest

# Ensure src is on path when running tests without installed package
src = Path(__file__).resolve().parent.parent / "src"
if src.exists() and str(src) not in sys.path:
    sys.path.insert(0, str(src))


# Day off, then an out-and-back pairing returning to CGK
SCENARIO_LINES = [
    "29 Tue",
    "OFF",
    "30 Wed",
    "IU856 0730 CGK BTH 0910",
    "31 Thu",
    "IU857 1200 BTH CGK 1340",
    "01/08/2025 05:00",
]

# Roster photographed across a month boundary, no day off
CROSS_MONTH_LINES = [
    "July",
    "30 Wed",
    "IU701 0700 CGK DPS 0850",
    "31 Thu",
    "IU702 0800 DPS CGK 0950",
    "August 01 Fri",
    "IU703 0700 CGK KNO 0920",
    "02 Sat",
    "IU704 0700 KNO CGK 0920",
    "Rest : 28:55 (02/08/2025 21:30)",
]


@pytest.fixture
def scenario_text() -> str:
    return "\n".join(SCENARIO_LINES)


@pytest.fixture
def cross_month_text() -> str:
    return "\n".join(CROSS_MONTH_LINES)
