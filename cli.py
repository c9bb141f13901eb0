#!/usr/bin/env python3
"""
Shift Extractor CLI
Read OCR text (or a PDF export) of a work schedule, list the shifts found.
"""
import argparse
import json
import sys
from pathlib import Path

from loguru import logger

# Run from project root or with module path
try:
    from shift_extractor.run import run
    from shift_extractor.api_data import build_api_response
except ImportError:
    sys.path.insert(0, str(Path(__file__).resolve().parent))
    from shift_extractor.run import run
    from shift_extractor.api_data import build_api_response


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Shift Extractor — pull dated work shifts out of OCR schedule text.",
    )
    parser.add_argument(
        "schedule",
        type=Path,
        help="Schedule text (TXT with OCR output, or PDF)",
    )
    parser.add_argument(
        "--out-dir",
        type=Path,
        default=None,
        help="Output directory for the shifts export",
    )
    parser.add_argument(
        "--format",
        choices=("csv", "xlsx"),
        default="csv",
        help="Export format when --out-dir is set (default: csv)",
    )
    parser.add_argument(
        "--position",
        type=str,
        default=None,
        help="Position to use when a shift names none",
    )
    parser.add_argument(
        "--location",
        type=str,
        default=None,
        help="Location to use when a shift names none",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print shifts as JSON (same shape as the web API) instead of text",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-line parsing decisions to stderr",
    )
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    if not args.schedule.exists():
        print(f"Error: schedule file not found: {args.schedule}", file=sys.stderr)
        return 1

    try:
        result = run(
            schedule_path=args.schedule,
            out_dir=args.out_dir,
            default_position=args.position,
            default_location=args.location,
            export_format=args.format,
        )
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(build_api_response(result.shifts, result.lines_read), indent=2))
        return 0

    print(result.summary_text)
    print()
    if result.shifts_output_text:
        print("--- SHIFTS ---")
        print(result.shifts_output_text)
    else:
        print("--- SHIFTS: none found ---")

    if result.export_path:
        print()
        print(f"Exported: {result.export_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
