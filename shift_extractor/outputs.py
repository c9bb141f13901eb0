"""
Outputs: human-readable shift listing, run summary, CSV and Excel exports.
"""
import csv
import datetime
from pathlib import Path
from typing import List

from . import time_utils
from .parser import ShiftRecord

EXPORT_COLUMNS = ["date", "start_time", "end_time", "position", "location", "notes"]


def _weekday_label(date: str) -> str:
    try:
        return datetime.date.fromisoformat(date).strftime("%a")
    except ValueError:
        return ""


def format_shifts_output(shifts: List[ShiftRecord]) -> str:
    """Human-readable listing for checking the extraction before it goes to a calendar."""
    lines = []
    for s in shifts:
        duration = time_utils.duration_display(s.start_time, s.end_time)
        lines.append(f"{_weekday_label(s.date)} {s.date}  {s.start_time}–{s.end_time} ({duration})")
        lines.append(f"  Position: {s.position}")
        lines.append(f"  Location: {s.location}")
        lines.append(f"  Source:   {s.notes}")
        lines.append("")
    if shifts:
        lines.append(f"Total shifts: {len(shifts)}")
    return "\n".join(lines).rstrip()


def format_run_summary(lines_read: int, extracted: int) -> str:
    """Run summary text."""
    return (
        f"Lines read: {lines_read}\n"
        f"Shifts extracted: {extracted}"
    )


def _export_row(s: ShiftRecord) -> List[str]:
    return [s.date, s.start_time, s.end_time, s.position, s.location, s.notes]


def write_shifts_csv(path: Path, shifts: List[ShiftRecord]) -> None:
    """Shifts CSV: date, start_time, end_time, position, location, notes."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        w = csv.writer(f)
        w.writerow(EXPORT_COLUMNS)
        for s in shifts:
            w.writerow(_export_row(s))


def write_shifts_xlsx(path: Path, shifts: List[ShiftRecord], sheet_name: str = "shifts") -> None:
    """Same columns as the CSV, one sheet."""
    try:
        import openpyxl
    except ImportError:
        raise RuntimeError("openpyxl required for Excel. pip install openpyxl")
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = sheet_name
    ws.append(EXPORT_COLUMNS)
    for s in shifts:
        ws.append(_export_row(s))
    wb.save(path)
    wb.close()
