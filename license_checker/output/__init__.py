"""Output formatters for license-checker."""

from __future__ import annotations

from license_checker.models.report import OutputFormat
from license_checker.output.base import ReportFormatter
from license_checker.output.report_json import JsonReportFormatter
from license_checker.output.report_sarif import SarifReportFormatter
from license_checker.output.report_table import TableReportFormatter
from license_checker.output.terminal import TerminalSummaryFormatter

REPORT_FORMATTERS: dict[OutputFormat, type[ReportFormatter]] = {
    OutputFormat.TABLE: TableReportFormatter,
    OutputFormat.JSON: JsonReportFormatter,
    OutputFormat.SARIF: SarifReportFormatter,
}


def get_report_formatter(output_format: OutputFormat) -> ReportFormatter:
    """Create the formatter for an output format.

    Args:
        output_format: Parsed output format.

    Returns:
        A new formatter instance.
    """
    return REPORT_FORMATTERS[output_format]()


__all__ = [
    "JsonReportFormatter",
    "REPORT_FORMATTERS",
    "ReportFormatter",
    "SarifReportFormatter",
    "TableReportFormatter",
    "TerminalSummaryFormatter",
    "get_report_formatter",
]
