"""
Application settings loaded from environment.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Tuple

from .context import DEFAULT_LOCATION, DEFAULT_POSITION


def _split_csv(value: str) -> List[str]:
    return [v.strip() for v in (value or "").split(",") if v.strip()]


@dataclass(frozen=True)
class Settings:
    """Settings for the CLI and web API. Never holds per-parse state."""

    # Placeholders when a shift has no position/location
    default_position: str = DEFAULT_POSITION
    default_location: str = DEFAULT_LOCATION

    # Calendar payloads
    time_zone: str = "America/Edmonton"
    event_title_prefix: str = "Starbucks Shift"
    reminder_minutes: Tuple[int, ...] = (30, 10)

    # Callers bound input length; the parser itself does not
    max_input_chars: int = 20000

    cors_origins: Tuple[str, ...] = ("http://localhost:3000", "http://127.0.0.1:3000")

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables."""
        reminders = _split_csv(os.getenv("SHIFT_REMINDER_MINUTES", ""))
        origins = _split_csv(os.getenv("SHIFT_CORS_ORIGINS", ""))
        return cls(
            default_position=os.getenv("SHIFT_DEFAULT_POSITION", cls.default_position),
            default_location=os.getenv("SHIFT_DEFAULT_LOCATION", cls.default_location),
            time_zone=os.getenv("SHIFT_TIME_ZONE", cls.time_zone),
            event_title_prefix=os.getenv("SHIFT_EVENT_TITLE_PREFIX", cls.event_title_prefix),
            reminder_minutes=tuple(int(m) for m in reminders) if reminders else cls.reminder_minutes,
            max_input_chars=int(os.getenv("SHIFT_MAX_INPUT_CHARS", cls.max_input_chars)),
            cors_origins=tuple(origins) if origins else cls.cors_origins,
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings.from_env()
