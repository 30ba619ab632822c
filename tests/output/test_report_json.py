"""Tests for the JSON report formatter."""

import json
from datetime import datetime, timezone

from license_checker.models.report import ClassifiedPackage, ReportState
from license_checker.output.base import format_timestamp
from license_checker.output.report_json import JsonReportFormatter

FIXED_NOW = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)


def _pkg(name: str, license_str: str, normalized: str) -> ClassifiedPackage:
    return ClassifiedPackage(name=name, license=license_str, normalized_license=normalized)


def _formatter() -> JsonReportFormatter:
    return JsonReportFormatter(now=lambda: FIXED_NOW)


class TestFormatTimestamp:
    """Tests for format_timestamp function."""

    def test_milliseconds_and_zulu(self) -> None:
        """Test ISO-8601 UTC formatting with millisecond precision."""
        assert format_timestamp(FIXED_NOW) == "2024-05-06T07:08:09.123Z"

    def test_converts_to_utc(self) -> None:
        """Test that aware datetimes in other zones are converted."""
        from datetime import timedelta

        local = datetime(2024, 1, 1, 2, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_timestamp(local) == "2024-01-01T00:00:00.000Z"


class TestJsonReportFormatter:
    """Tests for JsonReportFormatter class."""

    def test_top_level_keys(self) -> None:
        """Test the document schema."""
        data = json.loads(_formatter().format_report(ReportState()))

        assert set(data) == {"timestamp", "summary", "violations", "allowed", "unknown"}
        assert data["timestamp"] == "2024-05-06T07:08:09.123Z"

    def test_summary(self) -> None:
        """Test summary counts."""
        state = ReportState(
            violations=(_pkg("b", "GPL-3.0", "GPL30"),),
            allowed=(_pkg("a", "MIT", "MIT"),),
            unknown=(_pkg("c", "", ""), _pkg("d", "Unknown", "UNKNOWN")),
        )

        data = json.loads(_formatter().format_report(state))

        assert data["summary"] == {"total": 4, "violations": 1, "allowed": 1, "unknown": 2}

    def test_total_matches_bucket_lengths(self) -> None:
        """Test that total equals the sum of bucket array lengths."""
        state = ReportState(
            violations=(_pkg("b", "GPL-3.0", "GPL30"),),
            unknown=(_pkg("c", "", ""),),
        )

        data = json.loads(_formatter().format_report(state))

        assert data["summary"]["total"] == (
            len(data["violations"]) + len(data["allowed"]) + len(data["unknown"])
        )

    def test_buckets_verbatim(self) -> None:
        """Test that bucket entries carry name, license and normalizedLicense."""
        state = ReportState(violations=(_pkg("b", "GPL-3.0", "GPL30"),))

        data = json.loads(_formatter().format_report(state))

        assert data["violations"] == [
            {"name": "b", "license": "GPL-3.0", "normalizedLicense": "GPL30"}
        ]
        assert data["allowed"] == []
        assert data["unknown"] == []

    def test_bucket_order_preserved(self) -> None:
        """Test that entries keep classification order."""
        state = ReportState(
            allowed=(_pkg("zeta", "MIT", "MIT"), _pkg("alpha", "MIT", "MIT"))
        )

        data = json.loads(_formatter().format_report(state))

        assert [p["name"] for p in data["allowed"]] == ["zeta", "alpha"]

    def test_pretty_printed(self) -> None:
        """Test output is indented for readability."""
        output = _formatter().format_report(ReportState())

        assert '\n  "summary": {' in output

    def test_default_clock(self) -> None:
        """Test that the default clock produces a parseable timestamp."""
        data = json.loads(JsonReportFormatter().format_report(ReportState()))

        assert data["timestamp"].endswith("Z")
        datetime.strptime(data["timestamp"], "%Y-%m-%dT%H:%M:%S.%fZ")
