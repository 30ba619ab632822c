"""Pydantic data models for license-checker."""

from license_checker.models.config import CheckerConfig, split_tokens
from license_checker.models.dependency import DependencyEntry, PackageManager
from license_checker.models.policy import PolicySet
from license_checker.models.report import (
    Bucket,
    ClassifiedPackage,
    OutputFormat,
    ReportState,
    ReportSummary,
)

__all__ = [
    "Bucket",
    "CheckerConfig",
    "ClassifiedPackage",
    "DependencyEntry",
    "OutputFormat",
    "PackageManager",
    "PolicySet",
    "ReportState",
    "ReportSummary",
    "split_tokens",
]
