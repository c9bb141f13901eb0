"""
Call-scoped parse context: year hint and week date map, derived once per parse.
"""
import datetime
import re
from dataclasses import dataclass
from typing import Dict, List, Optional

from loguru import logger

from .date_utils import build_week_date_map
from .lines import RawLine

DEFAULT_POSITION = "Barista"
DEFAULT_LOCATION = "Starbucks"

# Only the top of the sheet is trusted for the year (title / week header)
YEAR_HINT_LINES = 5

_NUMERIC_DATE_YEAR_RE = re.compile(r"\b\d{1,2}[/\-.]\d{1,2}[/\-.](\d{4})\b")

# "09/01/2025 - 09/07/2025"
WEEK_RANGE_RE = re.compile(r"(\d{1,2}/\d{1,2}/\d{4})\s*[-–—]\s*(\d{1,2}/\d{1,2}/\d{4})")


@dataclass(frozen=True)
class ParseContext:
    """
    Inference aids for one extract_shifts() call. Built fresh per call and
    passed down explicitly; never stored on a shared object.
    """
    year_hint: int
    today: datetime.date
    week_date_map: Optional[Dict[str, str]] = None
    default_position: str = DEFAULT_POSITION
    default_location: str = DEFAULT_LOCATION

    def week_date_for(self, weekday_name: str) -> Optional[str]:
        """Look up a weekday (full or abbreviated, any case) in the week map."""
        if not self.week_date_map or not weekday_name:
            return None
        key = weekday_name.strip().lower()
        return self.week_date_map.get(key) or self.week_date_map.get(key[:3])


def derive_year_hint(lines: List[RawLine], today: datetime.date) -> int:
    """First 4-digit year of a numeric date in the first few lines, else today's year."""
    for line in lines[:YEAR_HINT_LINES]:
        m = _NUMERIC_DATE_YEAR_RE.search(line.text)
        if m:
            return int(m.group(1))
    return today.year


def derive_week_date_map(text: str) -> Optional[Dict[str, str]]:
    """Weekday -> date map from a "MM/DD/YYYY - MM/DD/YYYY" header, if the text has one."""
    m = WEEK_RANGE_RE.search(text or "")
    if not m:
        return None
    try:
        start = datetime.datetime.strptime(m.group(1), "%m/%d/%Y").date()
    except ValueError:
        logger.debug(f"Week header start date is not a valid date: {m.group(1)!r}")
        return None
    return build_week_date_map(start)


def build_context(
    text: str,
    lines: List[RawLine],
    today: Optional[datetime.date] = None,
    default_position: Optional[str] = None,
    default_location: Optional[str] = None,
) -> ParseContext:
    """Derive the ParseContext for one call from the raw text and its normalized lines."""
    today = today or datetime.date.today()
    ctx = ParseContext(
        year_hint=derive_year_hint(lines, today),
        today=today,
        week_date_map=derive_week_date_map(text),
        default_position=default_position or DEFAULT_POSITION,
        default_location=default_location or DEFAULT_LOCATION,
    )
    logger.debug(
        f"Parse context: year_hint={ctx.year_hint}, "
        f"week_map={'yes' if ctx.week_date_map else 'no'}"
    )
    return ctx
