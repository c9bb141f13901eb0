"""
Field extractors: time range, date, position, location.
Each tries the current line first, then a bounded scan of neighboring lines.
All matching is stateless: module-level patterns are only used through
search()/match(), never iterated with a shared position.
"""
import re
from typing import List, Optional, Tuple

from . import date_utils, time_utils
from .context import ParseContext
from .lines import RawLine

# Lines scanned backward for a date when the shift line has none
DATE_LOOKBACK = 5
# Lines scanned forward for "@ Position" / "1234 - Store" detail lines
DETAIL_LOOKAHEAD = 3
# Lines before/after the shift line checked by the location context scan
LOCATION_CONTEXT_BEFORE = 3
LOCATION_CONTEXT_AFTER = 2

_SEP = r"\s*(?:-|–|—|to)\s*"
_MER = r"[ap]\.?m\.?(?![a-z])"

# Ordered: exact HH:MM pairs first, then looser hour-only forms.
TIME_RANGE_PATTERNS = (
    # 7:00AM-3:00PM, 7:00 - 15:00, 7:00am to 3:00pm
    re.compile(
        r"(?<![\d:])(?P<start>\d{1,2}:\d{2})(?:\s*(?P<smer>" + _MER + r"))?"
        + _SEP
        + r"(?P<end>\d{1,2}:\d{2})(?:\s*(?P<emer>" + _MER + r"))?",
        re.IGNORECASE,
    ),
    # 9am-5pm, 7-3pm, 6:30am-2pm
    re.compile(
        r"(?<![\d:/.\-#])(?P<start>\d{1,2}(?::\d{2})?)(?:\s*(?P<smer>" + _MER + r"))?"
        + _SEP
        + r"(?P<end>\d{1,2}(?::\d{2})?)\s*(?P<emer>" + _MER + r")",
        re.IGNORECASE,
    ),
    # 9-5, 6:30-2
    re.compile(
        r"(?<![\d:/.\-#])(?P<start>\d{1,2}(?::\d{2})?)"
        + _SEP
        + r"(?P<end>\d{1,2}(?::\d{2})?)(?![\d:/.\-])",
        re.IGNORECASE,
    ),
)

# A line that is itself a "date - date" range is a week header, not a shift date
_DATE_RANGE_LINE_RE = re.compile(
    r"\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}\s*(?:[-–—]|to)\s*\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4}",
    re.IGNORECASE,
)

_WEEKDAY = date_utils.WEEKDAY_RE.pattern

# Tried in order on a single line
DATE_TOKEN_PATTERNS = (
    # 2025-09-01
    re.compile(r"(?<!\d)(?P<token>\d{4}-\d{1,2}-\d{1,2})(?!\d)"),
    # 09/01/2025, 9-1-25, 12.25.2024
    re.compile(r"(?<![\d/\-.:])(?P<token>\d{1,2}[/\-.]\d{1,2}[/\-.]\d{2,4})(?!\d)"),
    # Monday Sep 1, Mon. September 1st, 2025
    re.compile(
        _WEEKDAY + r"\.?,?\s+(?P<token>(?:" + date_utils.MONTH_NAMES + r")\.?\s+\d{1,2})"
        r"(?:st|nd|rd|th)?(?:,?\s+(?P<year>\d{4}))?(?!\d)",
        re.IGNORECASE,
    ),
    # Monday 9/1, Mon 12.25
    re.compile(_WEEKDAY + r"\.?,?\s*(?P<token>\d{1,2}[/.]\d{1,2})(?![\d/.])", re.IGNORECASE),
)

POSITION_KEYWORD_RE = re.compile(
    r"\b(barista|supervisor|manager|opener|closer|mid|morning|evening|overnight|shift)\b",
    re.IGNORECASE,
)

# "@ Barista"; OCR often reads the @ as © or ® and adds stray marks before it
POSITION_MARKER_RE = re.compile(
    r"^[\s|•·*~_'\"`.,:;()\[\]]*[@©®]\s*([A-Za-z][A-Za-z /&'\-]*)"
)

# "1234 - Main Street Mall", "|#0457 — Downtown"
STORE_LINE_RE = re.compile(r"^[^\w\s]{0,3}\s*#?\s*(\d{3,6})\s*[-–—:]\s*([A-Za-z][^\d|@]*)")

# "Tue 9-5 #0457 - Downtown": store after the times on the shift line itself
INLINE_STORE_RE = re.compile(r"#\s*(\d{3,6})\s*[-–—:]\s*([A-Za-z][^\d|@]*)")

LOCATION_KEYWORD_RE = re.compile(
    r"\bstore\s*#?\s*\d+"
    r"|#\d+"
    r"|(?<![\d:])\b\d+\s+\w+\s+(?:ave|avenue|st|street|rd|road|blvd|boulevard)\b\.?",
    re.IGNORECASE,
)

_TRAILING_NOISE = " .,;:-–—|'\"`"


# --- Time -------------------------------------------------------------------

def _minutes(hhmm: str) -> int:
    return time_utils.parse_time(hhmm)


def _hour_of(token: str) -> int:
    return int(token.split(":", 1)[0])


def extract_time_range(line: str) -> Optional[Tuple[str, str]]:
    """
    First time-range pattern whose both ends normalize wins. Returns
    (start, end) as HH:MM 24-hour, or None.
    """
    if not line:
        return None
    for pattern in TIME_RANGE_PATTERNS:
        m = pattern.search(line)
        if not m:
            continue
        groups = m.groupdict()
        start = time_utils.normalize_time_token(groups["start"], groups.get("smer"))
        end = time_utils.normalize_time_token(groups["end"], groups.get("emer"))
        if not start or not end:
            continue
        # "2:00-10:00": start went PM by the 1-7 rule, so an unmarked 8-11 end is PM too
        if not groups.get("emer") and 8 <= _hour_of(groups["end"]) <= 11:
            if _minutes(end) < _minutes(start):
                end = time_utils.format_time(_minutes(end) + 12 * 60)
        return start, end
    return None


# --- Date -------------------------------------------------------------------

def is_date_range_line(line: str) -> bool:
    return bool(_DATE_RANGE_LINE_RE.search(line or ""))


def find_date_in_line(line: str, year_hint: Optional[int] = None) -> Optional[str]:
    """
    Explicit date on the line itself, normalized to yyyy-MM-dd. Week-range
    header lines are skipped. Tokens no template accepts are ignored.
    """
    if not line or is_date_range_line(line):
        return None
    for pattern in DATE_TOKEN_PATTERNS:
        m = pattern.search(line)
        if not m:
            continue
        token = m.group("token")
        year = m.groupdict().get("year")
        if year:
            token = f"{token} {year}"
        date = date_utils.normalize_date(token, year_hint)
        if date:
            return date
    return None


def extract_date(lines: List[RawLine], index: int, ctx: ParseContext) -> Optional[str]:
    """
    Resolve the shift date for lines[index]:
    1. weekday on the line + week date map
    2. explicit date on the line
    3. the same two checks on up to DATE_LOOKBACK preceding lines, nearest first
    4. weekday on the line -> next occurrence on or after ctx.today
    """
    line = lines[index].text
    weekday = date_utils.find_weekday(line)

    if weekday and ctx.week_date_map:
        date = ctx.week_date_for(weekday)
        if date:
            return date

    date = find_date_in_line(line, ctx.year_hint)
    if date:
        return date

    for j in range(index - 1, max(-1, index - 1 - DATE_LOOKBACK), -1):
        prev = lines[j].text
        if ctx.week_date_map:
            prev_weekday = date_utils.find_weekday(prev)
            if prev_weekday and ctx.week_date_for(prev_weekday):
                return ctx.week_date_for(prev_weekday)
        date = find_date_in_line(prev, ctx.year_hint)
        if date:
            return date

    if weekday:
        return date_utils.next_date_for_weekday(weekday, ctx.today)
    return None


# --- Position / location ----------------------------------------------------

def _clean_value(s: str) -> str:
    return s.strip().strip(_TRAILING_NOISE).strip()


def _following_detail_lines(lines: List[RawLine], index: int) -> List[str]:
    """Up to DETAIL_LOOKAHEAD lines after index, stopping at the next shift line."""
    out = []
    for line in lines[index + 1 : index + 1 + DETAIL_LOOKAHEAD]:
        if extract_time_range(line.text):
            break
        out.append(line.text)
    return out


def _position_marker(line: str) -> Optional[str]:
    m = POSITION_MARKER_RE.match(line)
    if not m:
        return None
    value = _clean_value(m.group(1))
    return value or None


def extract_position(lines: List[RawLine], index: int, ctx: ParseContext) -> str:
    """'@ Role' on this line or a following detail line, else a role keyword, else the default."""
    line = lines[index].text
    position = _position_marker(line)
    if position:
        return position
    for following in _following_detail_lines(lines, index):
        position = _position_marker(following)
        if position:
            return position
    m = POSITION_KEYWORD_RE.search(line)
    if m:
        return m.group(1).capitalize()
    return ctx.default_position


def _store_name(line: str) -> Optional[str]:
    m = STORE_LINE_RE.match(line)
    if not m:
        return None
    value = _clean_value(m.group(2))
    return value or None


def _inline_store_name(line: str) -> Optional[str]:
    m = INLINE_STORE_RE.search(line)
    if not m:
        return None
    return _clean_value(m.group(2)) or None


def _location_keyword(line: str) -> Optional[str]:
    m = LOCATION_KEYWORD_RE.search(line)
    if not m:
        return None
    return _clean_value(m.group(0)) or None


def extract_location(lines: List[RawLine], index: int, ctx: ParseContext) -> str:
    """
    Location for lines[index], first hit wins:
    store-number line (this line, then following detail lines), keyword or
    address on this line, either form on nearby lines, then the default.
    """
    line = lines[index].text
    location = _store_name(line) or _inline_store_name(line)
    if location:
        return location
    for following in _following_detail_lines(lines, index):
        location = _store_name(following)
        if location:
            return location

    location = _location_keyword(line)
    if location:
        return location

    lo = max(0, index - LOCATION_CONTEXT_BEFORE)
    hi = min(len(lines), index + LOCATION_CONTEXT_AFTER + 1)
    for near in lines[lo:hi]:
        if near.index == index:
            continue
        location = _store_name(near.text) or _location_keyword(near.text)
        if location:
            return location
    return ctx.default_location
