"""
Line normalization and header/noise classification for OCR schedule text.
"""
import re
from dataclasses import dataclass
from typing import List

# Lines this short are OCR debris ("|", "--", "a.")
MIN_LINE_LENGTH = 3

HEADER_KEYWORDS = ("schedule", "week", "employee", "name", "position", "total", "hours")

# Presence of "HH:MM ... - ... HH:MM" vetoes the header keywords
_TIME_RANGE_LIKE_RE = re.compile(r"(\d{1,2}:\d{2}).*[-–—].*(\d{1,2}:\d{2})")

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass
class RawLine:
    """One normalized input line and its 0-based position among kept lines."""
    text: str
    index: int


def normalize_lines(text: str) -> List[RawLine]:
    """
    Split on line breaks, trim, collapse internal whitespace, drop lines of
    2 characters or fewer. Order is preserved; blank input gives [].
    """
    lines = []
    for raw in _LINE_BREAK_RE.split(text or ""):
        line = _WHITESPACE_RE.sub(" ", raw.strip())
        if len(line) < MIN_LINE_LENGTH:
            continue
        lines.append(RawLine(text=line, index=len(lines)))
    return lines


def has_time_range(line: str) -> bool:
    return bool(_TIME_RANGE_LIKE_RE.search(line or ""))


def is_header_line(line: str) -> bool:
    """
    True for schedule titles and column labels: the line names a header
    keyword and carries no HH:MM-HH:MM range. A real range wins over keywords
    ("Total Hours: 9:00 - 5:00" is a shift candidate).
    """
    lower = (line or "").lower()
    if not any(k in lower for k in HEADER_KEYWORDS):
        return False
    return not has_time_range(line)
