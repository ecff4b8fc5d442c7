"""Month name and ordinal lookups used by the roster parser and message rendering."""

import re
from typing import Optional

# Zero-based month index, as printed on English rosters
MONTHS: dict[str, int] = {
    "january": 0,
    "february": 1,
    "march": 2,
    "april": 3,
    "may": 4,
    "june": 5,
    "july": 6,
    "august": 7,
    "september": 8,
    "october": 9,
    "november": 10,
    "december": 11,
}

INDONESIAN_MONTHS: list[str] = [
    "Januari",
    "Februari",
    "Maret",
    "April",
    "Mei",
    "Juni",
    "Juli",
    "Agustus",
    "September",
    "Oktober",
    "November",
    "Desember",
]

# "hari ke-" labels for the working day tomorrow represents
ORDINALS: list[str] = ["pertama", "kedua", "ketiga", "keempat", "kelima", "keenam"]

MONTH_NAME_PATTERN = "|".join(name.capitalize() for name in MONTHS)

_MONTH_ANYWHERE_RE = re.compile(rf"\b({MONTH_NAME_PATTERN})\b", re.IGNORECASE)
_MONTH_ONLY_RE = re.compile(rf"^({MONTH_NAME_PATTERN})$", re.IGNORECASE)


def month_index(name: Optional[str]) -> Optional[int]:
    """Zero-based index for an English month name. Returns None if not a month."""
    if not name:
        return None
    return MONTHS.get(name.strip().lower())


def find_month(line: str) -> Optional[int]:
    """Index of the first month name appearing anywhere in the line."""
    m = _MONTH_ANYWHERE_RE.search(line)
    if not m:
        return None
    return month_index(m.group(1))


def standalone_month(line: str) -> Optional[int]:
    """Index of the month when the line consists of a month name only."""
    m = _MONTH_ONLY_RE.match(line.strip())
    if not m:
        return None
    return month_index(m.group(1))


def indonesian_month(index: int) -> str:
    """Indonesian name for a zero-based month index."""
    return INDONESIAN_MONTHS[index % 12]


def ordinal_label(number: int) -> str:
    """Indonesian ordinal for a 1-based working day number; out of range falls back to 'pertama'."""
    if 1 <= number <= len(ORDINALS):
        return ORDINALS[number - 1]
    return ORDINALS[0]
