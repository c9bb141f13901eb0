"""
Unit tests for dedupe and ordering.
"""

from shift_extractor.parser import ShiftRecord
from shift_extractor.postprocess import compare_shifts, dedupe_shifts, post_process, weekday_in_text


def _shift(date, start, end, line):
    return ShiftRecord(date, start, end, "Barista", "Starbucks", line, line)


class TestDedupe:

    def test_keeps_first_occurrence(self):
        a = _shift("2025-09-01", "09:00", "17:00", "Mon 9-5")
        b = _shift("2025-09-01", "09:00", "17:00", "Monday 9:00-17:00")
        c = _shift("2025-09-01", "09:00", "13:00", "Mon 9-1")

        assert dedupe_shifts([a, b, c]) == [a, c]


class TestOrdering:

    def test_weekday_in_text(self):
        assert weekday_in_text(_shift("2025-09-02", "09:00", "17:00", "Tuesday 9-5")) == 1
        assert weekday_in_text(_shift("2025-09-02", "09:00", "17:00", "Sunset Blvd 9-5")) is None

    def test_weekday_beats_calendar_date(self):
        """A line naming Monday sorts before one naming Tuesday, whatever the dates say."""
        tue = _shift("2025-09-02", "09:00", "17:00", "Tue 9-5")
        mon = _shift("2025-09-08", "09:00", "17:00", "Mon 9-5")

        assert post_process([tue, mon]) == [mon, tue]

    def test_falls_back_to_date_then_start(self):
        late = _shift("2025-09-02", "13:00", "17:00", "09/02/2025 1-5")
        early = _shift("2025-09-02", "08:00", "12:00", "09/02/2025 8-12")
        before = _shift("2025-09-01", "09:00", "17:00", "09/01/2025 9-5")

        assert post_process([late, early, before]) == [before, early, late]

    def test_same_weekday_uses_date(self):
        a = _shift("2025-09-08", "09:00", "17:00", "Mon 9-5")
        b = _shift("2025-09-01", "09:00", "17:00", "Monday 9-5")

        assert compare_shifts(a, b) > 0
        assert post_process([a, b]) == [b, a]

    def test_one_side_without_weekday(self):
        a = _shift("2025-09-03", "09:00", "17:00", "Wed 9-5")
        b = _shift("2025-09-02", "09:00", "17:00", "09/02/2025 9-5")

        assert compare_shifts(a, b) > 0
