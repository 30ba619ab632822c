"""Tests for custom exceptions."""

import pytest

from license_checker.exceptions import (
    ConfigurationError,
    DependencyListingError,
    IssueCreationError,
    LicenseCheckerError,
    LicenseResolutionError,
    NoPackageManagerFoundError,
    PolicyViolationError,
)


class TestExceptionHierarchy:
    """Tests for exception hierarchy."""

    def test_base_is_exception(self) -> None:
        """Test that LicenseCheckerError inherits from Exception."""
        assert issubclass(LicenseCheckerError, Exception)

    @pytest.mark.parametrize(
        "error_class",
        [
            ConfigurationError,
            NoPackageManagerFoundError,
            DependencyListingError,
            LicenseResolutionError,
            IssueCreationError,
            PolicyViolationError,
        ],
    )
    def test_inherits_from_base(self, error_class: type) -> None:
        """Test that every error is a LicenseCheckerError."""
        assert issubclass(error_class, LicenseCheckerError)

    def test_message_preserved(self) -> None:
        """Test that errors carry their message."""
        with pytest.raises(LicenseCheckerError, match="Command not found: npm"):
            raise DependencyListingError("Command not found: npm")


class TestPolicyViolationError:
    """Tests for PolicyViolationError."""

    def test_message(self) -> None:
        """Test the failure message includes the count."""
        error = PolicyViolationError(3)

        assert str(error) == "License compliance check failed: 3 violation(s) found"

    def test_count_attribute(self) -> None:
        """Test that the count is available to callers."""
        assert PolicyViolationError(1).violations_count == 1
