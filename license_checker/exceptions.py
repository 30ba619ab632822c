"""Custom exceptions for license-checker."""


class LicenseCheckerError(Exception):
    """Base exception for all license-checker errors."""

    pass


class ConfigurationError(LicenseCheckerError):
    """Exception raised when configuration is invalid."""

    pass


class NoPackageManagerFoundError(LicenseCheckerError):
    """Exception raised when no supported package manager can be detected."""

    pass


class DependencyListingError(LicenseCheckerError):
    """Exception raised when dependencies cannot be listed."""

    pass


class LicenseResolutionError(LicenseCheckerError):
    """Exception raised when a single package's license cannot be read.

    Never escapes the license resolver; the package degrades to Unknown.
    """

    pass


class IssueCreationError(LicenseCheckerError):
    """Exception raised when a tracking issue cannot be created."""

    pass


class PolicyViolationError(LicenseCheckerError):
    """Exception raised when blocked licenses are found and the run must fail."""

    def __init__(self, violations_count: int) -> None:
        self.violations_count = violations_count
        super().__init__(
            f"License compliance check failed: {violations_count} violation(s) found"
        )
