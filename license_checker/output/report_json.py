"""JSON output formatter for license compliance reports."""

from __future__ import annotations

import json
from typing import Any

from license_checker.models.report import ClassifiedPackage, ReportState
from license_checker.output.base import ReportFormatter, format_timestamp


class JsonReportFormatter(ReportFormatter):
    """Format classification results as JSON.

    The document holds the generation timestamp, bucket counts and the
    three buckets verbatim, for programmatic processing in CI.
    """

    def format_report(self, state: ReportState) -> str:
        """Format the buckets as a JSON string.

        Args:
            state: Final classification buckets.

        Returns:
            Pretty-printed JSON string.
        """
        return json.dumps(self._build_output(state), indent=2, ensure_ascii=False)

    def _build_output(self, state: ReportState) -> dict[str, Any]:
        return {
            "timestamp": format_timestamp(self._now()),
            "summary": state.summary.model_dump(),
            "violations": self._build_packages(state.violations),
            "allowed": self._build_packages(state.allowed),
            "unknown": self._build_packages(state.unknown),
        }

    def _build_packages(
        self, packages: tuple[ClassifiedPackage, ...]
    ) -> list[dict[str, Any]]:
        return [pkg.model_dump(by_alias=True) for pkg in packages]
