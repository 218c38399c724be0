"""Cross-check a decoded ABA file against the totals its trailer declares."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence
import logging

from .reader import Reader
from .record import DetailRecord
from .trailer import Trailer
from .utils import (
    DETAIL_CODE,
    HEADER_CODE,
    INDICATORS,
    TRAILER_BSB,
    TRAILER_CODE,
    IssueSeverity,
    RecordCounters,
    SectionReport,
    Totalizers,
    ValidationIssue,
    compute_status,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Outcome of the consistency analysis."""

    section: SectionReport
    totalizers: Totalizers
    record_counters: RecordCounters


class Analyzer:
    """Validate header presence, detail totals and trailer consistency."""

    def analyze(self, reader: Reader, records: Sequence[DetailRecord]) -> AnalysisResult:
        issues: List[ValidationIssue] = []

        credit_total = sum(record.amount for record in records if record.is_credit)
        debit_total = sum(record.amount for record in records if record.is_debit)
        net_total = max(credit_total - debit_total, 0)

        for line_number in reader.dropped_lines:
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message="Invalid detail record ignored",
                    line_number=line_number,
                    record_type=DETAIL_CODE,
                )
            )

        for index, record in enumerate(records):
            if record.indicator not in INDICATORS:
                issues.append(
                    ValidationIssue(
                        severity=IssueSeverity.WARNING,
                        message=f"Record {index}: unknown indicator '{record.indicator}'",
                        record_type=DETAIL_CODE,
                    )
                )

        if reader.header is None:
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.CRITICAL,
                    message="File has no descriptive record (0)",
                    record_type=HEADER_CODE,
                )
            )

        totalizers = Totalizers(credit_total=credit_total, debit_total=debit_total, net_total=net_total)
        detail_lines = len(records) + len(reader.dropped_lines)

        trailer = reader.trailer
        if trailer is None:
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.CRITICAL,
                    message="File has no total record (7)",
                    record_type=TRAILER_CODE,
                )
            )
        else:
            totalizers.trailer_credit_total = trailer.credit_total
            totalizers.trailer_debit_total = trailer.debit_total
            totalizers.trailer_net_total = trailer.net_total
            self._check_trailer(trailer, totalizers, detail_lines, issues)

        counters = RecordCounters(
            total=reader.line_count,
            headers=1 if reader.header is not None else 0,
            details=len(records),
            trailers=1 if trailer is not None else 0,
            dropped=len(reader.dropped_lines),
        )

        section = SectionReport(status=compute_status(issues), issues=issues)
        logger.info("Analysis finished with status %s (%d issues)", section.status.value, len(issues))
        return AnalysisResult(section=section, totalizers=totalizers, record_counters=counters)

    def _check_trailer(
        self,
        trailer: Trailer,
        totalizers: Totalizers,
        detail_lines: int,
        issues: List[ValidationIssue],
    ) -> None:
        if trailer.bsb != TRAILER_BSB:
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message=f"Trailer: BSB filler is '{trailer.bsb}' (expected {TRAILER_BSB})",
                    record_type=TRAILER_CODE,
                )
            )

        if trailer.record_count != detail_lines:
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.CRITICAL,
                    message=(
                        "Trailer: record count does not match "
                        f"(expected={detail_lines}, found={trailer.record_count})"
                    ),
                    record_type=TRAILER_CODE,
                )
            )

        declared = (trailer.credit_total, trailer.debit_total, trailer.net_total)
        if declared == (0, 0, 0) and (totalizers.credit_total or totalizers.debit_total):
            # Files for banks that don't summarise batches carry zero totals.
            issues.append(
                ValidationIssue(
                    severity=IssueSeverity.WARNING,
                    message="Trailer: batch totals omitted",
                    record_type=TRAILER_CODE,
                )
            )
            return

        for label, expected, found in (
            ("credit total", totalizers.credit_total, trailer.credit_total),
            ("debit total", totalizers.debit_total, trailer.debit_total),
            ("net total", totalizers.net_total, trailer.net_total),
        ):
            if expected != found:
                issues.append(
                    ValidationIssue(
                        severity=IssueSeverity.CRITICAL,
                        message=f"Trailer: {label} does not match (expected={expected}, found={found})",
                        record_type=TRAILER_CODE,
                    )
                )


__all__ = ["Analyzer", "AnalysisResult"]
