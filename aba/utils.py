"""Shared constants and helpers for the ABA codec."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional
import logging

RECORD_LENGTH = 120
HEADER_CODE = "0"
DETAIL_CODE = "1"
TRAILER_CODE = "7"

LF = "\n"
CRLF = "\r\n"

TRAILER_BSB = "999-999"

DEBIT = "13"  # Externally initiated debit item
CREDIT = "50"  # Externally initiated credit item
AGSI = "51"  # Australian Government Security Interest
FAMILY_ALLOWANCE = "52"
PAY = "53"
PENSION = "54"
ALLOTMENT = "55"
DIVIDEND = "56"
NOTE_INTEREST = "57"  # Debenture/Note Interest

TRANSACTION_CODES = frozenset(
    {
        DEBIT,
        CREDIT,
        AGSI,
        FAMILY_ALLOWANCE,
        PAY,
        PENSION,
        ALLOTMENT,
        DIVIDEND,
        NOTE_INTEREST,
    }
)
CREDIT_FAMILY_PREFIX = "5"

# W/X: dividend to a (non-)treaty resident, Y: interest to a non-resident,
# N: new or varied BSB/account/name.
INDICATORS = frozenset({"", "W", "X", "Y", "N"})


class IssueSeverity(str, Enum):
    """Enumeration of analysis severities."""

    WARNING = "warning"
    CRITICAL = "critical"


class ValidationStatus(str, Enum):
    """High-level status for analysis sections."""

    OK = "OK"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass
class ValidationIssue:
    """Container for individual analysis issues."""

    severity: IssueSeverity
    message: str
    line_number: Optional[int] = None
    record_type: Optional[str] = None


@dataclass
class SectionReport:
    """Summary for an analysis section."""

    status: ValidationStatus
    issues: list[ValidationIssue] = field(default_factory=list)


@dataclass
class RecordCounters:
    """Track record counts for a decoded file."""

    total: int
    headers: int
    details: int
    trailers: int
    dropped: int = 0


@dataclass
class Totalizers:
    """Totals recomputed from details next to the ones the trailer declares."""

    credit_total: int
    debit_total: int
    net_total: int
    trailer_credit_total: Optional[int] = None
    trailer_debit_total: Optional[int] = None
    trailer_net_total: Optional[int] = None


@dataclass
class InspectionSummary:
    """Aggregate inspection outcome for reporting."""

    source_path: Path
    newline: str
    content: SectionReport
    record_counters: RecordCounters
    totalizers: Totalizers
    header: dict = field(default_factory=dict)


def ensure_reports_dir(base_dir: Path) -> Path:
    """Ensure that the reports directory exists."""

    reports_dir = base_dir / "reports"
    reports_dir.mkdir(parents=True, exist_ok=True)
    return reports_dir


def write_text(path: Path, content: str) -> None:
    """Persist text content to disk ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def write_json(path: Path, payload: dict) -> None:
    """Persist JSON content to disk with UTF-8 encoding."""

    import json

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logger when the CLI runs."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def detect_newline(data: bytes) -> str:
    """Detect newline type used in the byte buffer."""

    if b"\r\n" in data:
        return "CRLF"
    if b"\n" in data:
        return "LF"
    return "NONE"


def strip_bom(data: bytes) -> bytes:
    """Remove UTF-8 BOM when present."""

    bom = b"\xef\xbb\xbf"
    if data.startswith(bom):
        return data[len(bom) :]
    return data


def strip_terminator(line: str) -> str:
    """Drop a trailing LF or CRLF from a decoded line."""

    if line.endswith(CRLF):
        return line[: -len(CRLF)]
    if line.endswith(LF):
        return line[: -len(LF)]
    return line


def compute_status(issues: list[ValidationIssue]) -> ValidationStatus:
    """Compute section status based on collected issues."""

    if any(issue.severity is IssueSeverity.CRITICAL for issue in issues):
        return ValidationStatus.ERROR
    if any(issue.severity is IssueSeverity.WARNING for issue in issues):
        return ValidationStatus.WARN
    return ValidationStatus.OK


__all__ = [
    "AGSI",
    "ALLOTMENT",
    "CREDIT",
    "CREDIT_FAMILY_PREFIX",
    "CRLF",
    "DEBIT",
    "DETAIL_CODE",
    "DIVIDEND",
    "FAMILY_ALLOWANCE",
    "HEADER_CODE",
    "INDICATORS",
    "InspectionSummary",
    "IssueSeverity",
    "LF",
    "NOTE_INTEREST",
    "PAY",
    "PENSION",
    "RECORD_LENGTH",
    "RecordCounters",
    "SectionReport",
    "TRAILER_BSB",
    "TRAILER_CODE",
    "TRANSACTION_CODES",
    "Totalizers",
    "ValidationIssue",
    "ValidationStatus",
    "compute_status",
    "configure_logging",
    "detect_newline",
    "ensure_reports_dir",
    "strip_bom",
    "strip_terminator",
    "write_json",
    "write_text",
]
