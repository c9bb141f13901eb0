"""
Produce JSON-serializable structures for the web API.
Keys are camelCase to match the review UI and calendar submission path.
"""
from typing import Any, Dict, List, Optional

from .parser import ShiftRecord


def shift_to_dict(s: ShiftRecord, shift_id: str) -> Dict[str, Any]:
    return {
        "id": shift_id,
        "date": s.date,
        "startTime": s.start_time,
        "endTime": s.end_time,
        "location": s.location,
        "position": s.position,
        "notes": s.notes or "",
    }


def shift_from_dict(d: Dict[str, Any]) -> ShiftRecord:
    """Inverse of shift_to_dict for shifts the UI sends back (possibly edited)."""
    notes = d.get("notes") or ""
    return ShiftRecord(
        date=d["date"],
        start_time=d["startTime"],
        end_time=d["endTime"],
        position=d.get("position") or "",
        location=d.get("location") or "",
        notes=notes,
        original_line=notes,
    )


def build_summary(lines_read: int, shifts: List[ShiftRecord]) -> Dict[str, Any]:
    dates = sorted({s.date for s in shifts})
    return {
        "lines_read": lines_read,
        "extracted": len(shifts),
        "first_date": dates[0] if dates else None,
        "last_date": dates[-1] if dates else None,
    }


def build_api_response(
    shifts: List[ShiftRecord],
    lines_read: int,
    source: Optional[str] = None,
) -> Dict[str, Any]:
    """Build JSON-serializable response for the web API. ids are 1-based, in output order."""
    response = {
        "shifts": [shift_to_dict(s, str(i + 1)) for i, s in enumerate(shifts)],
        "summary": build_summary(lines_read, shifts),
    }
    if source:
        response["source"] = source
    return response
