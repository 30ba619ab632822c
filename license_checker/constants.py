"""Constants for license-checker."""

# Exit codes
EXIT_SUCCESS = 0  # No violations, or violations without fail-on-blocked
EXIT_VIOLATIONS = 1  # Blocked licenses found and fail-on-blocked is set
EXIT_ERROR = 2  # Run failed before completing

DEFAULT_ALLOWED_LICENSES = "MIT,Apache-2.0,BSD-2-Clause,BSD-3-Clause,ISC,0BSD"
DEFAULT_BLOCKED_LICENSES = "GPL-3.0,AGPL-3.0,GPL-2.0,LGPL-3.0"

# Sentinel license when nothing could be determined
UNKNOWN_LICENSE = "Unknown"

# Sentinel version for yarn tree nodes (yarn list does not expose one reliably)
UNKNOWN_VERSION = "unknown"

PACKAGE_MANIFEST = "package.json"
MODULES_DIR = "node_modules"

# Checked in order; the first existing file wins
LICENSE_FILES = ["LICENSE", "LICENSE.txt", "LICENSE.md", "LICENCE", "COPYING"]

# Only the head of a license file is inspected
LICENSE_CONTENT_LIMIT = 500

REPORT_BASENAME = "license-report"

TOOL_NAME = "License Checker"
TOOL_INFORMATION_URI = "https://github.com/marketplace/actions/license-checker"
