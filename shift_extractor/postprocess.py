"""
Post-processing: drop duplicate shifts, order the rest.
"""
from functools import cmp_to_key
from typing import List, Optional, TYPE_CHECKING

from . import date_utils

if TYPE_CHECKING:
    from .parser import ShiftRecord


def dedupe_shifts(shifts: List["ShiftRecord"]) -> List["ShiftRecord"]:
    """Keep the first shift for each (date, start_time, end_time)."""
    seen = set()
    unique = []
    for s in shifts:
        key = (s.date, s.start_time, s.end_time)
        if key in seen:
            continue
        seen.add(key)
        unique.append(s)
    return unique


def weekday_in_text(shift: "ShiftRecord") -> Optional[int]:
    """Weekday index (Monday=0) named in the shift's original line, if any."""
    name = date_utils.find_weekday(shift.original_line)
    return date_utils.weekday_index(name) if name else None


def _cmp(a: str, b: str) -> int:
    return (a > b) - (a < b)


def compare_shifts(a: "ShiftRecord", b: "ShiftRecord") -> int:
    """
    Weekday written on the line first (when both lines name different
    weekdays), then ISO date, then start time.
    """
    wa, wb = weekday_in_text(a), weekday_in_text(b)
    if wa is not None and wb is not None and wa != wb:
        return wa - wb
    if a.date != b.date:
        return _cmp(a.date, b.date)
    return _cmp(a.start_time, b.start_time)


def post_process(shifts: List["ShiftRecord"]) -> List["ShiftRecord"]:
    """Dedupe, then sort with compare_shifts. Input order breaks remaining ties."""
    return sorted(dedupe_shifts(shifts), key=cmp_to_key(compare_shifts))
