"""Split raw OCR text into roster lines."""

import re
from typing import Iterable, List

_LINE_BREAK_RE = re.compile(r"\r?\n")


def normalize_lines(text: str) -> List[str]:
    """Return trimmed, non-empty lines of the OCR text."""
    if not text:
        return []
    return [line.strip() for line in _LINE_BREAK_RE.split(text) if line.strip()]


def merge_ocr_texts(texts: Iterable[str]) -> str:
    """Join the recognized text of several roster photos into one blob."""
    return "\n".join(t for t in texts if t)
