"""Generate inspection reports for ABA files."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List
import datetime as _dt

from .utils import (
    InspectionSummary,
    IssueSeverity,
    ensure_reports_dir,
    write_json,
    write_text,
)


@dataclass
class ReportPaths:
    """Location for generated artifacts."""

    json_path: Path
    txt_path: Path


class Reporter:
    """Materialize inspection results into human-readable reports."""

    def render(self, summary: InspectionSummary, base_dir: Path) -> ReportPaths:
        reports_dir = ensure_reports_dir(base_dir)
        stem = summary.source_path.stem
        target_dir = reports_dir / stem
        target_dir.mkdir(parents=True, exist_ok=True)
        timestamp = _dt.datetime.now().strftime("%Y%m%d%H%M%S")
        json_path = target_dir / f"{stem}.{timestamp}.json"
        txt_path = target_dir / f"{stem}.{timestamp}.txt"

        write_json(json_path, self._build_json(summary))
        write_text(txt_path, self._build_text(summary))

        return ReportPaths(json_path=json_path, txt_path=txt_path)

    def _build_json(self, summary: InspectionSummary) -> Dict[str, object]:
        return {
            "file": summary.source_path.name,
            "source": str(summary.source_path),
            "header": summary.header,
            "validation": {
                "content": summary.content.status.value,
                "errors": self._collect_messages(summary, IssueSeverity.CRITICAL),
                "warnings": self._collect_messages(summary, IssueSeverity.WARNING),
                "total_lines": summary.record_counters.total,
                "details": summary.record_counters.details,
                "dropped": summary.record_counters.dropped,
                "newline": summary.newline,
            },
            "totals": {
                "credit": summary.totalizers.credit_total,
                "debit": summary.totalizers.debit_total,
                "net": summary.totalizers.net_total,
                "trailer_credit": summary.totalizers.trailer_credit_total,
                "trailer_debit": summary.totalizers.trailer_debit_total,
                "trailer_net": summary.totalizers.trailer_net_total,
            },
        }

    def _build_text(self, summary: InspectionSummary) -> str:
        lines: List[str] = []
        lines.append(f"File: {summary.source_path.name}")
        lines.append(f"Source: {summary.source_path}")
        lines.append("")
        if summary.header:
            lines.append("[Header]")
            lines.extend(f"- {key}: {value}" for key, value in summary.header.items())
            lines.append("")
        lines.append("[Validation]")
        lines.append(f"- Content: {summary.content.status.value}")
        lines.append(f"- Total lines: {summary.record_counters.total}")
        lines.append(f"- Details: {summary.record_counters.details}")
        lines.append(f"- Dropped: {summary.record_counters.dropped}")
        lines.append(f"- Newline: {summary.newline}")
        lines.append("")

        criticals = self._collect_messages(summary, IssueSeverity.CRITICAL)
        warnings = self._collect_messages(summary, IssueSeverity.WARNING)

        if criticals:
            lines.append("[Errors]")
            lines.extend(f"- {msg}" for msg in criticals)
            lines.append("")
        if warnings:
            lines.append("[Warnings]")
            lines.extend(f"- {msg}" for msg in warnings)
            lines.append("")

        totals = summary.totalizers
        lines.append("[Totals]")
        lines.append(f"- Credit: {totals.credit_total}")
        lines.append(f"- Debit: {totals.debit_total}")
        lines.append(f"- Net: {totals.net_total}")
        lines.append(
            "- Trailer net: "
            + (str(totals.trailer_net_total) if totals.trailer_net_total is not None else "not present")
        )

        return "\n".join(lines) + "\n"

    def _collect_messages(self, summary: InspectionSummary, severity: IssueSeverity) -> List[str]:
        messages: List[str] = []
        for issue in summary.content.issues:
            if issue.severity is severity:
                message = issue.message
                if issue.line_number is not None:
                    message = f"Line {issue.line_number}: {message}"
                messages.append(message)
        return messages


__all__ = ["Reporter", "ReportPaths"]
