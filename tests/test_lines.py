"""
Unit tests for line normalization and header classification.
"""

import pytest

from shift_extractor.lines import RawLine, has_time_range, is_header_line, normalize_lines


class TestNormalizeLines:

    def test_trims_collapses_and_drops_short_lines(self):
        text = "  a  \r\n  Mon   9-5  \n\nxy\nabc"

        lines = normalize_lines(text)

        assert lines == [RawLine("Mon 9-5", 0), RawLine("abc", 1)]

    @pytest.mark.parametrize("text", ["", "   ", "\n\r\n", "ab\n.."])
    def test_blank_input(self, text):
        assert normalize_lines(text) == []

    def test_keeps_order(self):
        lines = normalize_lines("third line\nfirst line\nsecond line")
        assert [l.text for l in lines] == ["third line", "first line", "second line"]
        assert [l.index for l in lines] == [0, 1, 2]


class TestHeaderClassification:

    @pytest.mark.parametrize("line", [
        "Employee Schedule",
        "Week 36",
        "Name Position Hours",
        "TOTAL 32.5",
    ])
    def test_headers(self, line):
        assert is_header_line(line) is True

    def test_time_range_vetoes_keywords(self):
        """A real HH:MM range makes the line a shift candidate despite 'hours'."""
        assert is_header_line("Total Hours: 9:00 - 5:00") is False

    @pytest.mark.parametrize("line", [
        "Mon 9:00-5:00",
        "@ Barista",
        "1234 - Main Street Mall",
    ])
    def test_non_headers(self, line):
        assert is_header_line(line) is False

    def test_has_time_range(self):
        assert has_time_range("7:00AM — 3:00PM")
        assert not has_time_range("9-5")
