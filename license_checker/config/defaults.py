"""Default configuration values for license-checker."""

from __future__ import annotations

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-checker.yaml", ".license-checker.yml"]

# GitHub Actions exposes each action input as INPUT_<NAME>, name uppercased
ACTION_INPUT_ENV = {
    "allowed_licenses": "INPUT_ALLOWED-LICENSES",
    "blocked_licenses": "INPUT_BLOCKED-LICENSES",
    "fail_on_blocked": "INPUT_FAIL-ON-BLOCKED",
    "include_dev_dependencies": "INPUT_INCLUDE-DEV-DEPENDENCIES",
    "output_format": "INPUT_OUTPUT-FORMAT",
    "create_issue": "INPUT_CREATE-ISSUE",
    "package_manager": "INPUT_PACKAGE-MANAGER",
    "github_token": "INPUT_GITHUB-TOKEN",
}
