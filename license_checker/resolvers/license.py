"""Installed-package license resolver."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import structlog

from license_checker.constants import (
    LICENSE_CONTENT_LIMIT,
    LICENSE_FILES,
    MODULES_DIR,
    PACKAGE_MANIFEST,
    UNKNOWN_LICENSE,
)
from license_checker.exceptions import LicenseResolutionError

log = structlog.get_logger("license_checker.license")

# Upper-case needle and resulting identifier, checked in order
CONTENT_PATTERNS: list[tuple[str, str]] = [
    ("MIT LICENSE", "MIT"),
    ("APACHE LICENSE", "Apache-2.0"),
    ("BSD LICENSE", "BSD-3-Clause"),
    ("GPL", "GPL"),
    ("MOZILLA PUBLIC LICENSE", "MPL-2.0"),
]


def detect_license_from_content(content: str) -> str:
    """Identify a license from the head of a license file.

    Case-insensitive substring search; the first pattern that matches wins.

    Args:
        content: License file text.

    Returns:
        License identifier, or "Unknown" when nothing matches.
    """
    upper_content = content.upper()
    for needle, license_id in CONTENT_PATTERNS:
        if needle in upper_content:
            return license_id
    return UNKNOWN_LICENSE


def extract_license_from_manifest(manifest: dict[str, Any]) -> Optional[str]:
    """Extract the declared license from a package.json mapping.

    Handles the string form, the legacy {"type": ...} object and the
    legacy "licenses" array. An empty "license" counts as absent.

    Args:
        manifest: Parsed package.json.

    Returns:
        License string, "Unknown" when a license object or array entry has
        no usable type, or None when the manifest declares nothing.
    """
    declared = manifest.get("license")
    if declared:
        if isinstance(declared, str):
            return declared
        return _license_type(declared)

    licenses = manifest.get("licenses")
    if isinstance(licenses, list) and licenses and licenses[0]:
        return _license_type(licenses[0])

    return None


def _license_type(entry: Any) -> str:
    """Return the "type" of a legacy license object, or "Unknown"."""
    if isinstance(entry, dict):
        license_type = entry.get("type")
        if isinstance(license_type, str) and license_type:
            return license_type
    return UNKNOWN_LICENSE


class LicenseResolver:
    """Resolves the license of packages installed under node_modules.

    Resolution order:
    1. "license" field of the installed package.json
    2. first entry of the legacy "licenses" array
    3. content of the first conventional license file found
    4. "Unknown"

    resolve() never raises.
    """

    def __init__(self, modules_dir: Path) -> None:
        """Initialize with the node_modules directory.

        Args:
            modules_dir: Directory packages are installed into.
        """
        self._modules_dir = modules_dir

    @classmethod
    def for_project(cls, project_dir: Path) -> LicenseResolver:
        """Create a resolver for a project's node_modules."""
        return cls(project_dir / MODULES_DIR)

    def package_dir(self, package_name: str) -> Path:
        """Installation directory of a package (scoped names nest)."""
        return self._modules_dir / package_name

    def resolve(self, package_name: str) -> str:
        """Resolve the license string for a package.

        Args:
            package_name: Installed package name, e.g. "lodash" or "@scope/pkg".

        Returns:
            License string, or "Unknown" when it cannot be determined.
        """
        try:
            return self._resolve(package_name)
        except OSError as e:
            log.debug("license resolution failed", package=package_name, error=str(e))
            return UNKNOWN_LICENSE

    def _resolve(self, package_name: str) -> str:
        package_dir = self.package_dir(package_name)

        try:
            manifest = self._read_manifest(package_dir)
        except LicenseResolutionError as e:
            log.debug("skipping unreadable manifest", package=package_name, error=str(e))
            manifest = None

        if manifest is not None:
            declared = extract_license_from_manifest(manifest)
            if declared is not None:
                return declared

        for filename in LICENSE_FILES:
            license_path = package_dir / filename
            if not license_path.is_file():
                continue
            try:
                content = self._read_head(license_path)
            except LicenseResolutionError as e:
                log.debug("unreadable license file", package=package_name, error=str(e))
                return UNKNOWN_LICENSE
            return detect_license_from_content(content)

        return UNKNOWN_LICENSE

    def _read_manifest(self, package_dir: Path) -> Optional[dict[str, Any]]:
        """Read the package's package.json, or None if it does not exist.

        Raises:
            LicenseResolutionError: If the manifest exists but is unreadable.
        """
        manifest_path = package_dir / PACKAGE_MANIFEST
        if not manifest_path.is_file():
            return None
        try:
            text = manifest_path.read_text(encoding="utf-8", errors="replace")
            manifest = json.loads(text)
        except (OSError, ValueError) as e:
            raise LicenseResolutionError(f"Cannot read '{manifest_path}': {e}") from e
        return manifest if isinstance(manifest, dict) else None

    def _read_head(self, path: Path) -> str:
        """Read at most LICENSE_CONTENT_LIMIT characters of a text file.

        Raises:
            LicenseResolutionError: If the file cannot be read.
        """
        try:
            with path.open(encoding="utf-8", errors="replace") as handle:
                return handle.read(LICENSE_CONTENT_LIMIT)
        except (OSError, ValueError) as e:
            raise LicenseResolutionError(f"Cannot read '{path}': {e}") from e
