"""
Calendar event payloads for extracted shifts. Plain dicts; sending them to a
calendar service is the caller's job.
"""
from typing import Any, Dict, Iterable, List, Sequence

from .parser import ShiftRecord

# Green in the common calendar palette
EVENT_COLOR_ID = "10"


def to_iso_datetime(date: str, time: str) -> str:
    """'2025-09-01', '07:00' -> '2025-09-01T07:00:00' (zone carried separately)."""
    return f"{date}T{time}:00"


def build_event(
    shift: ShiftRecord,
    time_zone: str,
    title_prefix: str = "Starbucks Shift",
    reminder_minutes: Sequence[int] = (30, 10),
) -> Dict[str, Any]:
    """One calendar event for a shift."""
    return {
        "summary": f"{title_prefix} - {shift.location}",
        "description": shift.notes or title_prefix,
        "location": shift.location,
        "start": {"dateTime": to_iso_datetime(shift.date, shift.start_time), "timeZone": time_zone},
        "end": {"dateTime": to_iso_datetime(shift.date, shift.end_time), "timeZone": time_zone},
        "colorId": EVENT_COLOR_ID,
        "reminders": {
            "useDefault": False,
            "overrides": [{"method": "popup", "minutes": m} for m in reminder_minutes],
        },
    }


def build_events(
    shifts: Iterable[ShiftRecord],
    time_zone: str,
    title_prefix: str = "Starbucks Shift",
    reminder_minutes: Sequence[int] = (30, 10),
) -> List[Dict[str, Any]]:
    return [build_event(s, time_zone, title_prefix, reminder_minutes) for s in shifts]
