"""License analysis logic for license-checker."""

from license_checker.analysis.classifier import (
    categorize_license,
    classify_dependencies,
    classify_license,
    matches_policy,
    normalize_license,
)

__all__ = [
    "categorize_license",
    "classify_dependencies",
    "classify_license",
    "matches_policy",
    "normalize_license",
]
