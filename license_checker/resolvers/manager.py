"""Package manager auto-detection."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import structlog

from license_checker.constants import PACKAGE_MANIFEST
from license_checker.exceptions import NoPackageManagerFoundError
from license_checker.models.dependency import PackageManager

log = structlog.get_logger("license_checker.manager")

# Lockfiles checked in priority order
LOCKFILES: list[tuple[str, PackageManager]] = [
    ("yarn.lock", PackageManager.YARN),
    ("pnpm-lock.yaml", PackageManager.PNPM),
    ("package-lock.json", PackageManager.NPM),
    (PACKAGE_MANIFEST, PackageManager.NPM),
]


def detect_package_manager(
    configured: Optional[Union[PackageManager, str]],
    project_dir: Path,
) -> PackageManager:
    """Determine which package manager lists the project's dependencies.

    An explicit, non-auto configuration wins. Otherwise yarn.lock selects
    yarn, then pnpm-lock.yaml selects pnpm, then package-lock.json or
    package.json selects npm.

    Args:
        configured: Configured manager, "auto" or None.
        project_dir: Project root to look for lockfiles in.

    Returns:
        The package manager to use (never AUTO).

    Raises:
        NoPackageManagerFoundError: If nothing identifies a manager.
    """
    if configured is not None:
        manager = PackageManager(configured)
        if manager is not PackageManager.AUTO:
            return manager

    for filename, manager in LOCKFILES:
        if (project_dir / filename).exists():
            log.debug("package manager detected", manager=manager.value, marker=filename)
            return manager

    raise NoPackageManagerFoundError(
        "No supported package manager found (npm, yarn, or pnpm)"
    )
