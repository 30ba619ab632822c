"""License classification against allowed and blocked policy tokens."""

from __future__ import annotations

import re
from typing import Iterable

from license_checker.models.policy import PolicySet
from license_checker.models.report import Bucket, ClassifiedPackage, ReportState

_STRIPPED_CHARS = re.compile(r"[\s\-_.]")


def normalize_license(license_str: str) -> str:
    """Uppercase a license string and strip whitespace, '-', '_' and '.'.

    Args:
        license_str: Raw license string, e.g. "Apache-2.0".

    Returns:
        Normalized form, e.g. "APACHE20".
    """
    return _STRIPPED_CHARS.sub("", license_str.upper())


def matches_policy(license_str: str, tokens: Iterable[str]) -> bool:
    """Check a license against policy tokens.

    Matches on an exact raw token, or when the normalized token occurs
    anywhere inside the normalized license. Substring matching is loose:
    "MIT-0" matches "MIT" and "GPL-2.0-or-later" matches "GPL-2.0".

    Args:
        license_str: License string as resolved.
        tokens: Raw policy tokens; normalized here on every call.

    Returns:
        True if any token matches.
    """
    normalized = normalize_license(license_str)
    return any(
        license_str == token or normalize_license(token) in normalized
        for token in tokens
    )


def categorize_license(
    package_name: str,
    license_str: str,
    policy: PolicySet,
) -> tuple[Bucket, ClassifiedPackage]:
    """Decide which bucket a package belongs in.

    Blocked wins over allowed; anything matching neither is unknown.

    Args:
        package_name: Package name.
        license_str: Resolved license string.
        policy: Allowed and blocked tokens.

    Returns:
        Tuple of the target bucket and the classified package.
    """
    package = ClassifiedPackage(
        name=package_name,
        license=license_str,
        normalized_license=normalize_license(license_str),
    )

    if matches_policy(license_str, policy.blocked):
        return Bucket.VIOLATIONS, package
    if matches_policy(license_str, policy.allowed):
        return Bucket.ALLOWED, package
    return Bucket.UNKNOWN, package


def classify_license(
    state: ReportState,
    package_name: str,
    license_str: str,
    policy: PolicySet,
) -> ReportState:
    """Classify one package and return the state with it appended.

    Args:
        state: Buckets so far.
        package_name: Package name.
        license_str: Resolved license string.
        policy: Allowed and blocked tokens.

    Returns:
        New ReportState with exactly one package added.
    """
    bucket, package = categorize_license(package_name, license_str, policy)
    return state.with_package(bucket, package)


def classify_dependencies(
    licenses: Iterable[tuple[str, str]],
    policy: PolicySet,
    state: ReportState | None = None,
) -> ReportState:
    """Classify (package name, license) pairs in order.

    Args:
        licenses: Pairs of package name and resolved license.
        policy: Allowed and blocked tokens.
        state: Starting state (empty if omitted).

    Returns:
        Final ReportState.
    """
    result = state if state is not None else ReportState()
    for package_name, license_str in licenses:
        result = classify_license(result, package_name, license_str, policy)
    return result
