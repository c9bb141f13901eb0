"""
Date handling: date token normalization to yyyy-MM-dd, weekday names, week date maps.
"""
import datetime
import re
from typing import Dict, Optional

# Tried in order; first template that gives a valid calendar date wins.
DATE_FORMATS = (
    "%m/%d/%Y",
    "%m-%d-%Y",
    "%m.%d.%Y",
    "%m/%d/%y",
    "%m-%d-%y",
    "%m.%d.%y",
    "%Y-%m-%d",
    "%b %d %Y",
    "%B %d %Y",
    "%b %d, %Y",
    "%B %d, %Y",
)

# Monday=0 ... Sunday=6, same as datetime.date.weekday()
WEEKDAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")

# Full names before abbreviations so "Monday" is not cut to "Mon"
WEEKDAY_RE = re.compile(
    r"(?<![A-Za-z])(monday|tuesday|wednesday|thursday|friday|saturday|sunday"
    r"|tues|thurs|mon|tue|wed|thu|fri|sat|sun)(?![A-Za-z])",
    re.IGNORECASE,
)

MONTH_NAMES = (
    "january|february|march|april|may|june|july|august|september|october|november|december"
    "|jan|feb|mar|apr|jun|jul|aug|sept|sep|oct|nov|dec"
)
MONTH_NAME_RE = re.compile(
    r"(?<![A-Za-z])(" + MONTH_NAMES + r")\.?(?![A-Za-z])",
    re.IGNORECASE,
)

_FOUR_DIGIT_YEAR_RE = re.compile(r"\b\d{4}\b")
# "9/1" or "09-01": month and day only
_MONTH_DAY_RE = re.compile(r"^(\d{1,2})([/\-.])(\d{1,2})$")


def weekday_index(name: str) -> Optional[int]:
    """'Mon' / 'monday' / 'THURS' -> 0..6. None if not a weekday."""
    if not name:
        return None
    prefix = name.strip().lower()[:3]
    if len(prefix) < 3:
        return None
    for i, day in enumerate(WEEKDAYS):
        if day.startswith(prefix):
            return i
    return None


def find_weekday(text: str) -> Optional[str]:
    """First weekday name or abbreviation in text, as written. None if absent."""
    if not text:
        return None
    m = WEEKDAY_RE.search(text)
    return m.group(1) if m else None


def _clean_month_token(token: str) -> str:
    """'Sept. 1' -> 'Sep 1': strptime only knows 3-letter and full month names."""
    def repl(m):
        word = m.group(1)
        return word[:3] if word.lower() == "sept" else word
    return MONTH_NAME_RE.sub(repl, token)


def normalize_date(token: str, year_hint: Optional[int] = None) -> Optional[str]:
    """
    Normalize a date token to yyyy-MM-dd. Returns None if no template fits.
    Tokens with a month name but no 4-digit year, and bare month/day tokens,
    get year_hint appended before the templates are tried.
    """
    if not token or not isinstance(token, str):
        return None
    s = re.sub(r"\s+", " ", token.strip())
    if MONTH_NAME_RE.search(s):
        s = _clean_month_token(s)
        if year_hint and not _FOUR_DIGIT_YEAR_RE.search(s):
            s = f"{s} {year_hint}"
    elif year_hint:
        md = _MONTH_DAY_RE.match(s)
        if md:
            s = f"{md.group(1)}{md.group(2)}{md.group(3)}{md.group(2)}{year_hint}"
    for fmt in DATE_FORMATS:
        try:
            d = datetime.datetime.strptime(s, fmt).date()
        except ValueError:
            continue
        return d.isoformat()
    return None


def next_date_for_weekday(name: str, today: datetime.date) -> Optional[str]:
    """Next occurrence of the weekday on or after today, as yyyy-MM-dd."""
    target = weekday_index(name)
    if target is None:
        return None
    delta = (target - today.weekday() + 7) % 7
    return (today + datetime.timedelta(days=delta)).isoformat()


def build_week_date_map(start: datetime.date) -> Dict[str, str]:
    """
    Seven consecutive dates from start, keyed by full and 3-letter weekday
    names (lowercase). E.g. start=2025-09-01 -> {"monday": "2025-09-01", "mon": ...}.
    """
    week = {}
    for offset in range(7):
        d = start + datetime.timedelta(days=offset)
        name = WEEKDAYS[d.weekday()]
        week[name] = d.isoformat()
        week[name[:3]] = d.isoformat()
    return week
