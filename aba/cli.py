"""CLI entry point: inspect an ABA file and write JSON/TXT reports."""
from __future__ import annotations

from pathlib import Path
from typing import Sequence
import argparse
import logging

from .analyzer import Analyzer
from .errors import ABAError
from .reader import Reader
from .reporter import Reporter
from .utils import (
    InspectionSummary,
    ValidationStatus,
    configure_logging,
)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="ABA direct entry file inspector")
    parser.add_argument("input", help="ABA file to inspect")
    parser.add_argument(
        "--reports-dir",
        type=Path,
        help="Base directory for reports (default: current directory)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat warnings as errors when computing the exit code",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(getattr(logging, args.log_level.upper(), logging.INFO))

    logger = logging.getLogger(__name__)

    input_path = Path(args.input).expanduser().resolve()
    try:
        with input_path.open("rb") as handle:
            reader = Reader(handle)
            records = reader.read_all()
    except OSError as exc:
        logger.error("Could not open %s: %s", input_path, exc)
        return 2
    except ABAError as exc:
        logger.error("Could not read %s: %s", input_path, exc)
        return 2

    analysis = Analyzer().analyze(reader, records)

    header = {}
    if reader.header is not None:
        header = {
            "bank": reader.header.bank_name,
            "user_name": reader.header.user_name,
            "apca_id": reader.header.apca_id,
            "description": reader.header.description,
            "processing_date": (
                reader.header.processing_date.isoformat() if reader.header.processing_date else None
            ),
            "sequence_number": reader.header.sequence_number,
        }

    summary = InspectionSummary(
        source_path=input_path,
        newline=reader.newline,
        content=analysis.section,
        record_counters=analysis.record_counters,
        totalizers=analysis.totalizers,
        header=header,
    )

    base_dir = args.reports_dir.resolve() if args.reports_dir else Path.cwd()
    report_paths = Reporter().render(summary, base_dir)

    print("Reports generated:")
    print(f"- JSON: {report_paths.json_path}")
    print(f"- TXT: {report_paths.txt_path}")

    status = summary.content.status
    if status is ValidationStatus.ERROR:
        return 2
    if status is ValidationStatus.WARN:
        return 2 if args.strict else 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
