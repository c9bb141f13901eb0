"""
Unit tests for calendar event payloads.
"""

from shift_extractor.calendar_events import build_event, build_events, to_iso_datetime
from shift_extractor.parser import ShiftRecord


def _shift(**kwargs):
    fields = dict(
        date="2025-09-01",
        start_time="07:00",
        end_time="15:00",
        position="Barista",
        location="Main Street Mall",
        notes="Monday 7:00AM-3:00PM",
        original_line="Monday 7:00AM-3:00PM",
    )
    fields.update(kwargs)
    return ShiftRecord(**fields)


class TestBuildEvent:

    def test_iso_datetime(self):
        assert to_iso_datetime("2025-09-01", "07:00") == "2025-09-01T07:00:00"

    def test_event_fields(self):
        event = build_event(_shift(), time_zone="America/Edmonton")

        assert event["summary"] == "Starbucks Shift - Main Street Mall"
        assert event["description"] == "Monday 7:00AM-3:00PM"
        assert event["location"] == "Main Street Mall"
        assert event["start"] == {"dateTime": "2025-09-01T07:00:00", "timeZone": "America/Edmonton"}
        assert event["end"] == {"dateTime": "2025-09-01T15:00:00", "timeZone": "America/Edmonton"}
        assert event["reminders"]["useDefault"] is False
        assert [o["minutes"] for o in event["reminders"]["overrides"]] == [30, 10]

    def test_empty_notes_use_title(self):
        event = build_event(_shift(notes=""), time_zone="UTC", title_prefix="Work")
        assert event["description"] == "Work"
        assert event["summary"] == "Work - Main Street Mall"

    def test_build_events(self):
        events = build_events([_shift(), _shift(date="2025-09-02")], time_zone="UTC", reminder_minutes=[15])

        assert len(events) == 2
        assert events[1]["start"]["dateTime"] == "2025-09-02T07:00:00"
        assert events[1]["reminders"]["overrides"] == [{"method": "popup", "minutes": 15}]
