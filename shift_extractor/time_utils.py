"""
Time handling: OCR time tokens to 24-hour HH:MM, meridiem rules, shift duration.
"""
import re
from typing import Optional

# Time format: HH:MM 24-hour, zero-padded
TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")

# Hour-only or hour:minute token, e.g. "7", "7:30"
TOKEN_RE = re.compile(r"^(\d{1,2})(?::(\d{1,2}))?$")


def parse_time(s: str) -> Optional[int]:
    """Parse HH:MM or H:MM to minutes since midnight. Returns None if invalid."""
    if not s or not isinstance(s, str):
        return None
    s = s.strip()
    m = TIME_RE.match(s)
    if not m:
        return None
    h, mn = int(m.group(1)), int(m.group(2))
    if h < 0 or h > 23 or mn < 0 or mn > 59:
        return None
    return h * 60 + mn


def format_time(minutes: int) -> str:
    """Minutes since midnight to HH:MM 24-hour. Handles next-day (e.g. 24*60+30 -> 00:30)."""
    if minutes < 0:
        minutes = 0
    minutes = minutes % (24 * 60)
    h, mn = divmod(minutes, 60)
    return f"{h:02d}:{mn:02d}"


def _clean_meridiem(meridiem: Optional[str]) -> str:
    """'P.M.' / 'pm' / ' Pm ' -> 'pm'. Empty string when absent."""
    if not meridiem:
        return ""
    return meridiem.replace(".", "").strip().lower()


def normalize_time_token(token: str, meridiem: Optional[str] = None) -> Optional[str]:
    """
    Normalize one OCR time token ("7", "7:00", "12:30") to HH:MM 24-hour.
    With a meridiem: PM adds 12 unless already 12, AM turns 12 into 0.
    Without one: hours 1-7 are taken as PM, 8-12 stay as written (12 = noon).
    Returns None if the token is not a valid time after conversion.
    """
    if not token:
        return None
    m = TOKEN_RE.match(token.strip())
    if not m:
        return None
    hours = int(m.group(1))
    minutes = int(m.group(2)) if m.group(2) is not None else 0

    mer = _clean_meridiem(meridiem)
    if mer:
        if hours < 1 or hours > 12:
            return None
        if mer == "pm" and hours != 12:
            hours += 12
        if mer == "am" and hours == 12:
            hours = 0
    elif 1 <= hours <= 7:
        # Retail shifts rarely start before 8 AM; an unmarked 1-7 is afternoon.
        hours += 12

    if hours > 23 or minutes > 59:
        return None
    return f"{hours:02d}:{minutes:02d}"


def total_minutes(start_min: int, end_min: int) -> int:
    """Total shift minutes. Handles midnight crossover (end < start => next day)."""
    if end_min >= start_min:
        return end_min - start_min
    return (24 * 60 - start_min) + end_min


def duration_display(start: str, end: str) -> str:
    """'07:00', '15:00' -> '8:00'. Empty string if either side is not HH:MM."""
    start_min = parse_time(start)
    end_min = parse_time(end)
    if start_min is None or end_min is None:
        return ""
    h, m = divmod(total_minutes(start_min, end_min), 60)
    return f"{h}:{m:02d}"
