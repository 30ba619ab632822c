"""SARIF output formatter for license compliance reports."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Callable, Optional

from license_checker import __version__
from license_checker.constants import PACKAGE_MANIFEST, TOOL_INFORMATION_URI, TOOL_NAME
from license_checker.models.report import ClassifiedPackage, ReportState
from license_checker.output.base import ReportFormatter

SARIF_VERSION = "2.1.0"
SARIF_SCHEMA = "https://schemastore.azurewebsites.net/schemas/json/sarif-2.1.0.json"
RULE_ID = "license-violation"

LICENSE_VIOLATION_RULE: dict[str, Any] = {
    "id": RULE_ID,
    "name": "Blocked License Detected",
    "shortDescription": {"text": "Package uses a blocked license"},
    "fullDescription": {
        "text": "This package uses a license that has been marked as blocked."
    },
    "help": {
        "text": "Consider replacing this package or getting approval for the license."
    },
}


class SarifReportFormatter(ReportFormatter):
    """Format violations as a SARIF 2.1.0 log for code scanning upload.

    Only violations produce results. Locations point at line 1, column 1
    of the manifest since license findings have no source position.
    """

    def __init__(
        self,
        now: Optional[Callable[[], datetime]] = None,
        manifest_uri: str = PACKAGE_MANIFEST,
    ) -> None:
        """Initialize the formatter.

        Args:
            now: Clock (unused by SARIF output, kept for a uniform interface).
            manifest_uri: Artifact URI results point at.
        """
        super().__init__(now)
        self._manifest_uri = manifest_uri

    def format_report(self, state: ReportState) -> str:
        """Format violations as a SARIF JSON string.

        Args:
            state: Final classification buckets.

        Returns:
            Pretty-printed SARIF JSON string.
        """
        rules = [dict(LICENSE_VIOLATION_RULE)] if state.violations else []
        results = [self._build_result(pkg) for pkg in state.violations]

        document = {
            "version": SARIF_VERSION,
            "$schema": SARIF_SCHEMA,
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": TOOL_NAME,
                            "version": __version__,
                            "informationUri": TOOL_INFORMATION_URI,
                            "rules": rules,
                        }
                    },
                    "results": results,
                }
            ],
        }
        return json.dumps(document, indent=2, ensure_ascii=False)

    def _build_result(self, pkg: ClassifiedPackage) -> dict[str, Any]:
        return {
            "ruleId": RULE_ID,
            "level": "error",
            "message": {
                "text": f"Package '{pkg.name}' uses blocked license '{pkg.license}'"
            },
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {"uri": self._manifest_uri},
                        "region": {"startLine": 1, "startColumn": 1},
                    }
                }
            ],
        }
