"""Configuration Pydantic models for license-checker."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from license_checker.constants import (
    DEFAULT_ALLOWED_LICENSES,
    DEFAULT_BLOCKED_LICENSES,
    REPORT_BASENAME,
)
from license_checker.models.dependency import PackageManager
from license_checker.models.policy import PolicySet
from license_checker.models.report import OutputFormat


def split_tokens(value: str) -> list[str]:
    """Split a comma-separated input into trimmed, non-empty tokens.

    Args:
        value: Raw comma-separated string, e.g. "MIT, Apache-2.0,".

    Returns:
        List of tokens in input order.
    """
    return [item.strip() for item in value.split(",") if item.strip()]


class CheckerConfig(BaseModel):
    """Configuration for a license check run.

    Values come from the YAML config file, command line options and
    GitHub Actions inputs, merged by the config loader.
    """

    model_config = {"extra": "forbid"}

    allowed_licenses: list[str] = Field(
        default_factory=lambda: split_tokens(DEFAULT_ALLOWED_LICENSES),
        description="License tokens that are acceptable.",
    )
    blocked_licenses: list[str] = Field(
        default_factory=lambda: split_tokens(DEFAULT_BLOCKED_LICENSES),
        description="License tokens that count as violations.",
    )
    fail_on_blocked: bool = Field(
        default=True,
        description="Fail the run after reporting when violations exist.",
    )
    include_dev_dependencies: bool = Field(
        default=False,
        description="Include development dependencies in the scan.",
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TABLE,
        description="Report format: json, table or sarif.",
    )
    create_issue: bool = Field(
        default=False,
        description="Open a tracking issue when violations exist.",
    )
    package_manager: PackageManager = Field(
        default=PackageManager.AUTO,
        description="npm, yarn, pnpm or auto.",
    )
    github_token: Optional[str] = Field(
        default=None,
        description="Token used for issue creation.",
    )
    repository: Optional[str] = Field(
        default=None,
        description="Repository in owner/name form for issue creation.",
    )
    api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API.",
    )
    project_dir: Path = Field(
        default_factory=Path.cwd,
        description="Directory holding package.json and node_modules.",
    )
    report_dir: Optional[Path] = Field(
        default=None,
        description="Directory the report is written to (default: project_dir).",
    )

    @field_validator("allowed_licenses", "blocked_licenses", mode="before")
    @classmethod
    def _split_comma_separated(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_tokens(value)
        if isinstance(value, (list, tuple)):
            return [str(item).strip() for item in value if str(item).strip()]
        return value

    @field_validator("output_format", mode="before")
    @classmethod
    def _parse_output_format(cls, value: Any) -> Any:
        if isinstance(value, str):
            return OutputFormat.parse(value)
        return value

    @field_validator("package_manager", mode="before")
    @classmethod
    def _lowercase_package_manager(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @property
    def policy(self) -> PolicySet:
        """Allowed and blocked tokens as a PolicySet."""
        return PolicySet(
            allowed=tuple(self.allowed_licenses),
            blocked=tuple(self.blocked_licenses),
        )

    @property
    def report_path(self) -> Path:
        """Where the rendered report is persisted."""
        directory = self.report_dir if self.report_dir is not None else self.project_dir
        return directory / f"{REPORT_BASENAME}.{self.output_format.extension}"
