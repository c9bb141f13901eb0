"""
OCR schedule parser. Turns free text from a photographed work schedule into
ordered, deduplicated shift records.
"""
import datetime
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

from .context import ParseContext, build_context
from .extractors import extract_date, extract_location, extract_position, extract_time_range
from .lines import RawLine, is_header_line, normalize_lines
from .postprocess import post_process


@dataclass
class ShiftRecord:
    """One extracted shift. date is yyyy-MM-dd; times are HH:MM 24-hour."""
    date: str
    start_time: str
    end_time: str
    position: str
    location: str
    notes: str           # trimmed source line, verbatim
    original_line: str   # same text; post-processing reads weekdays from it

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def parse_line(lines: List[RawLine], index: int, ctx: ParseContext) -> Optional[ShiftRecord]:
    """
    Assemble a shift from lines[index], or None if the line is a header, has no
    time range, or no date can be resolved. Position and location never block.
    """
    line = lines[index].text
    if is_header_line(line):
        logger.debug(f"line {index}: header, skipped: {line!r}")
        return None

    times = extract_time_range(line)
    if not times:
        return None

    date = extract_date(lines, index, ctx)
    if not date:
        logger.debug(f"line {index}: time range but no date, skipped: {line!r}")
        return None

    start_time, end_time = times
    return ShiftRecord(
        date=date,
        start_time=start_time,
        end_time=end_time,
        position=extract_position(lines, index, ctx),
        location=extract_location(lines, index, ctx),
        notes=line,
        original_line=line,
    )


def extract_shifts(
    text: str,
    today: Optional[datetime.date] = None,
    default_position: Optional[str] = None,
    default_location: Optional[str] = None,
) -> List[ShiftRecord]:
    """
    Extract shifts from OCR text. Blank or shift-free text gives [].
    Raises TypeError if text is not a string; never raises for messy lines.
    today fixes "now" for weekday and year inference (defaults to the current date).
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, got {type(text).__name__}")

    lines = normalize_lines(text)
    if not lines:
        return []

    ctx = build_context(
        text,
        lines,
        today=today,
        default_position=default_position,
        default_location=default_location,
    )
    shifts = []
    for line in lines:
        shift = parse_line(lines, line.index, ctx)
        if shift is not None:
            shifts.append(shift)

    result = post_process(shifts)
    logger.info(f"Extracted {len(result)} shift(s) from {len(lines)} line(s)")
    return result


def extract_text_from_pdf(pdf_path: Path) -> str:
    """
    Text of every page of a PDF schedule, pages joined by newlines.
    Uses pdfplumber extract_text() which returns lines in reading order.
    """
    try:
        import pdfplumber
    except ImportError:
        raise RuntimeError("pdfplumber is required for PDF input. pip install pdfplumber")
    try:
        with pdfplumber.open(pdf_path) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise ValueError(f"Could not read PDF {Path(pdf_path).name}: {e}") from e
    return "\n".join(pages)


def extract_text_from_text_file(path: Path) -> str:
    """Read a plain text file (OCR output saved to disk)."""
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def load_schedule_text(path: Path) -> str:
    """Load schedule text from .txt or .pdf."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(str(path))
    suf = path.suffix.lower()
    if suf == ".pdf":
        return extract_text_from_pdf(path)
    if suf in (".txt", ".text", ""):
        return extract_text_from_text_file(path)
    raise ValueError(f"Unsupported schedule file type: {suf} (expected .txt or .pdf)")
