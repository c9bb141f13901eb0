"""
Orchestrate: load schedule text, extract shifts, write exports.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

from .config import Settings, get_settings
from .lines import normalize_lines
from .outputs import (
    format_run_summary,
    format_shifts_output,
    write_shifts_csv,
    write_shifts_xlsx,
)
from .parser import ShiftRecord, extract_shifts, load_schedule_text

EXPORT_FORMATS = ("csv", "xlsx")


class InputTooLargeError(ValueError):
    """Schedule text is longer than the configured max_input_chars."""


@dataclass
class RunResult:
    shifts_output_text: str
    summary_text: str
    export_path: Optional[Path]
    lines_read: int
    shifts: List[ShiftRecord] = field(default_factory=list)


def check_input_size(text: str, settings: Settings) -> None:
    if len(text) > settings.max_input_chars:
        raise InputTooLargeError(
            f"Schedule text is {len(text)} characters; limit is {settings.max_input_chars}"
        )


def run(
    schedule_path: Path,
    out_dir: Optional[Path] = None,
    default_position: Optional[str] = None,
    default_location: Optional[str] = None,
    export_format: str = "csv",
    settings: Optional[Settings] = None,
) -> RunResult:
    """
    Load schedule text (.txt or .pdf), extract shifts, write shifts.<format>
    to out_dir if set. Returns RunResult with listing and summary.
    """
    if export_format not in EXPORT_FORMATS:
        raise ValueError(f"export_format must be one of {EXPORT_FORMATS}, got {export_format!r}")
    settings = settings or get_settings()

    text = load_schedule_text(schedule_path)
    check_input_size(text, settings)

    shifts = extract_shifts(
        text,
        default_position=default_position or settings.default_position,
        default_location=default_location or settings.default_location,
    )
    lines_read = len(normalize_lines(text))

    export_path = None
    if out_dir:
        out_dir = Path(out_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        export_path = out_dir / f"shifts.{export_format}"
        if export_format == "xlsx":
            write_shifts_xlsx(export_path, shifts)
        else:
            write_shifts_csv(export_path, shifts)
        logger.info(f"Wrote {len(shifts)} shift(s) to {export_path}")

    return RunResult(
        shifts_output_text=format_shifts_output(shifts),
        summary_text=format_run_summary(lines_read=lines_read, extracted=len(shifts)),
        export_path=export_path,
        lines_read=lines_read,
        shifts=shifts,
    )
