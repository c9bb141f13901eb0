"""
Pytest configuration and fixtures for shift extractor tests.
"""

import datetime
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shift_extractor.config import Settings


# =============================================================================
# Dates
# =============================================================================

@pytest.fixture
def today() -> datetime.date:
    """A fixed 'now': Wednesday 2025-09-03."""
    return datetime.date(2025, 9, 3)


# =============================================================================
# Sample schedules
# =============================================================================

@pytest.fixture
def week_header_schedule() -> str:
    return (
        "09/01/2025 - 09/07/2025\n"
        "Monday 7:00AM-3:00PM\n"
        "@ Barista\n"
        "1234 - Main Street Mall\n"
    )


@pytest.fixture
def ocr_week_schedule() -> str:
    """A noisier week: header rows, CRLF, stray marks, shifts out of order."""
    return (
        "Employee Schedule - Week of\r\n"
        "09/08/2025 - 09/14/2025\r\n"
        "Name   Position    Hours\r\n"
        "Wed 11:00-7:00\r\n"
        "|© Shift Supervisor\r\n"
        "'0457 — Downtown Plaza\r\n"
        "Mon 9:00AM - 5:00PM\r\n"
        "@ Barista\r\n"
        "\r\n"
        "..\r\n"
        "Fri 10:00 to 6:00 closer\r\n"
        "Total hours 24\r\n"
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(max_input_chars=500, time_zone="America/Toronto")
