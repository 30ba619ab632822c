"""Tests for configuration and policy models."""

from pathlib import Path

import pytest

from license_checker.exceptions import ConfigurationError
from license_checker.models.config import CheckerConfig, split_tokens
from license_checker.models.dependency import DependencyEntry, PackageManager
from license_checker.models.policy import PolicySet
from license_checker.models.report import OutputFormat


class TestSplitTokens:
    """Tests for split_tokens function."""

    def test_splits_and_trims(self) -> None:
        """Test comma splitting with whitespace trimming."""
        assert split_tokens("MIT, Apache-2.0 ,ISC") == ["MIT", "Apache-2.0", "ISC"]

    def test_drops_empty_items(self) -> None:
        """Test that empty items are discarded."""
        assert split_tokens("MIT,, ,ISC,") == ["MIT", "ISC"]

    def test_empty_string(self) -> None:
        """Test that an empty string yields no tokens."""
        assert split_tokens("") == []


class TestCheckerConfig:
    """Tests for CheckerConfig model."""

    def test_defaults(self) -> None:
        """Test default configuration values."""
        config = CheckerConfig()

        assert config.allowed_licenses == [
            "MIT",
            "Apache-2.0",
            "BSD-2-Clause",
            "BSD-3-Clause",
            "ISC",
            "0BSD",
        ]
        assert config.blocked_licenses == ["GPL-3.0", "AGPL-3.0", "GPL-2.0", "LGPL-3.0"]
        assert config.fail_on_blocked is True
        assert config.include_dev_dependencies is False
        assert config.output_format is OutputFormat.TABLE
        assert config.create_issue is False
        assert config.package_manager is PackageManager.AUTO

    def test_comma_separated_licenses(self) -> None:
        """Test that license lists accept comma-separated strings."""
        config = CheckerConfig.model_validate(
            {"allowed_licenses": "MIT, ISC", "blocked_licenses": "GPL-3.0"}
        )
        assert config.allowed_licenses == ["MIT", "ISC"]
        assert config.blocked_licenses == ["GPL-3.0"]

    def test_list_licenses_trimmed(self) -> None:
        """Test that list entries are trimmed and empty ones dropped."""
        config = CheckerConfig.model_validate({"allowed_licenses": [" MIT ", ""]})
        assert config.allowed_licenses == ["MIT"]

    def test_output_format_case_insensitive(self) -> None:
        """Test that output format is parsed case-insensitively."""
        config = CheckerConfig.model_validate({"output_format": "SARIF"})
        assert config.output_format is OutputFormat.SARIF

    def test_invalid_output_format(self) -> None:
        """Test that an invalid output format is a configuration error."""
        with pytest.raises(ConfigurationError):
            CheckerConfig.model_validate({"output_format": "html"})

    def test_package_manager_case_insensitive(self) -> None:
        """Test that package manager names are lowercased."""
        config = CheckerConfig.model_validate({"package_manager": "Yarn"})
        assert config.package_manager is PackageManager.YARN

    def test_policy(self) -> None:
        """Test that policy exposes raw tokens."""
        config = CheckerConfig.model_validate(
            {"allowed_licenses": ["mit"], "blocked_licenses": ["GPL-3.0"]}
        )
        assert config.policy == PolicySet(allowed=("mit",), blocked=("GPL-3.0",))

    @pytest.mark.parametrize(
        ("output_format", "filename"),
        [
            ("table", "license-report.md"),
            ("json", "license-report.json"),
            ("sarif", "license-report.sarif"),
        ],
    )
    def test_report_path(self, tmp_path: Path, output_format: str, filename: str) -> None:
        """Test report path extension follows the format."""
        config = CheckerConfig.model_validate(
            {"output_format": output_format, "project_dir": tmp_path}
        )
        assert config.report_path == tmp_path / filename

    def test_report_dir_overrides_project_dir(self, tmp_path: Path) -> None:
        """Test that report_dir takes precedence for the report path."""
        config = CheckerConfig(project_dir=tmp_path, report_dir=tmp_path / "out")
        assert config.report_path == tmp_path / "out" / "license-report.md"


class TestPolicySet:
    """Tests for PolicySet model."""

    def test_stores_raw_tokens(self) -> None:
        """Test that tokens are not normalized on construction."""
        policy = PolicySet(allowed=("apache 2.0",), blocked=())
        assert policy.allowed == ("apache 2.0",)

    def test_overlapping(self) -> None:
        """Test detection of tokens present in both sets."""
        policy = PolicySet(allowed=("MIT", "ISC"), blocked=("GPL-3.0", "MIT"))
        assert policy.overlapping == ["MIT"]

    def test_no_overlap(self) -> None:
        """Test that disjoint sets have no overlap."""
        assert PolicySet(allowed=("MIT",), blocked=("GPL",)).overlapping == []


class TestDependencyEntry:
    """Tests for DependencyEntry model."""

    def test_from_mapping_keeps_order(self) -> None:
        """Test that entries follow mapping order."""
        entries = DependencyEntry.from_mapping({"b": "1.0.0", "a": "unknown"})
        assert [(e.name, e.version) for e in entries] == [
            ("b", "1.0.0"),
            ("a", "unknown"),
        ]

    def test_from_empty_mapping(self) -> None:
        """Test that an empty mapping yields no entries."""
        assert DependencyEntry.from_mapping({}) == []
