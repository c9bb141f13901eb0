"""
FastAPI backend for the schedule-to-calendar web app.
"""
from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger
from pydantic import BaseModel

# Import from parent - run from project root
import sys
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from shift_extractor.api_data import build_api_response, shift_from_dict
from shift_extractor.calendar_events import build_events
from shift_extractor.config import Settings, get_settings
from shift_extractor.lines import normalize_lines
from shift_extractor.parser import extract_shifts, load_schedule_text

load_dotenv()

app = FastAPI(title="Shift Extractor", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ParseScheduleRequest(BaseModel):
    text: Any = None
    defaultLocation: Optional[str] = None
    defaultPosition: Optional[str] = None


class CalendarEventsRequest(BaseModel):
    shifts: List[Dict[str, Any]]
    timeZone: Optional[str] = None


def _parse_response(text: str, settings: Settings, position: Optional[str], location: Optional[str], source: Optional[str] = None):
    if len(text) > settings.max_input_chars:
        raise HTTPException(413, f"Text longer than {settings.max_input_chars} characters")
    shifts = extract_shifts(
        text,
        default_position=position or settings.default_position,
        default_location=location or settings.default_location,
    )
    return build_api_response(shifts, len(normalize_lines(text)), source=source)


@app.get("/api/health")
def health():
    return {"status": "ok"}


@app.post("/api/parse-schedule")
def parse_schedule(body: ParseScheduleRequest, settings: Settings = Depends(get_settings)):
    """Parse OCR text into shifts."""
    if not body.text or not isinstance(body.text, str) or not body.text.strip():
        raise HTTPException(400, "No text")
    try:
        return _parse_response(body.text, settings, body.defaultPosition, body.defaultLocation)
    except HTTPException:
        raise
    except Exception:
        logger.exception("parse-schedule failed")
        raise HTTPException(500, "Parser failed")


@app.post("/api/process")
async def process_schedule(
    schedule_file: UploadFile = File(...),
    default_position: str = Form(default=""),
    default_location: str = Form(default=""),
    settings: Settings = Depends(get_settings),
):
    """Upload schedule text (TXT from OCR) or a PDF export."""
    suffix = Path(schedule_file.filename or "").suffix.lower()
    if suffix not in (".txt", ".pdf"):
        raise HTTPException(400, "Schedule file must be TXT or PDF")

    # Client filename is only reported back as "source", never used as a path
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / f"schedule{suffix}"
        with open(path, "wb") as f:
            f.write(await schedule_file.read())
        try:
            text = load_schedule_text(path)
        except (OSError, ValueError):
            logger.exception(f"could not read upload {schedule_file.filename!r}")
            raise HTTPException(400, "Could not read schedule file")

    return _parse_response(
        text,
        settings,
        default_position or None,
        default_location or None,
        source=schedule_file.filename,
    )


@app.post("/api/calendar-events")
def calendar_events(body: CalendarEventsRequest, settings: Settings = Depends(get_settings)):
    """Calendar event payloads for (reviewed) shifts. Nothing is sent anywhere."""
    try:
        shifts = [shift_from_dict(s) for s in body.shifts]
    except KeyError as e:
        raise HTTPException(400, f"Shift missing field: {e.args[0]}")
    events = build_events(
        shifts,
        time_zone=body.timeZone or settings.time_zone,
        title_prefix=settings.event_title_prefix,
        reminder_minutes=settings.reminder_minutes,
    )
    return {"events": events}
