"""Markdown table output formatter for license compliance reports."""

from __future__ import annotations

from license_checker.models.report import ClassifiedPackage, ReportState
from license_checker.output.base import ReportFormatter


class TableReportFormatter(ReportFormatter):
    """Format classification results as a Markdown document.

    Sections appear in fixed order (violations, unknown, allowed) and are
    left out when their bucket is empty. The same text is used as the body
    of tracking issues.
    """

    def format_report(self, state: ReportState) -> str:
        """Format the buckets as Markdown.

        Args:
            state: Final classification buckets.

        Returns:
            Markdown string.
        """
        summary = state.summary
        lines: list[str] = [
            "# License Compliance Report",
            "",
            f"**Total Dependencies:** {summary.total}",
            f"**License Violations:** {summary.violations}",
            f"**Allowed Licenses:** {summary.allowed}",
            f"**Unknown Licenses:** {summary.unknown}",
            "",
        ]

        if state.violations:
            lines.extend(
                self._format_section(
                    "❌ License Violations", state.violations, "❌ BLOCKED"
                )
            )
            lines.append("")

        if state.unknown:
            lines.extend(
                self._format_section(
                    "⚠️ Unknown Licenses", state.unknown, "⚠️ REVIEW REQUIRED"
                )
            )
            lines.append("")

        if state.allowed:
            lines.extend(
                self._format_section("✅ Allowed Licenses", state.allowed, "✅ ALLOWED")
            )

        return "\n".join(lines) + "\n"

    def _format_section(
        self,
        title: str,
        packages: tuple[ClassifiedPackage, ...],
        status: str,
    ) -> list[str]:
        """Format one bucket as a Markdown table.

        Args:
            title: Section heading text.
            packages: Packages in the bucket, in classification order.
            status: Status glyph and label for every row.

        Returns:
            List of Markdown lines.
        """
        lines = [
            f"## {title}",
            "",
            "| Package | License | Status |",
            "|---------|---------|--------|",
        ]
        for pkg in packages:
            lines.append(
                f"| {_escape_cell(pkg.name)} | {_escape_cell(pkg.license)} | {status} |"
            )
        return lines


def _escape_cell(value: str) -> str:
    """Escape pipes so a cell value cannot break the table."""
    return value.replace("|", "\\|")
