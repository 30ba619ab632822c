"""Classification and report state models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from license_checker.exceptions import ConfigurationError


class Bucket(str, Enum):
    """Classification outcome for a package."""

    VIOLATIONS = "violations"
    ALLOWED = "allowed"
    UNKNOWN = "unknown"


class OutputFormat(str, Enum):
    """Report output formats."""

    TABLE = "table"
    JSON = "json"
    SARIF = "sarif"

    @classmethod
    def parse(cls, value: str) -> OutputFormat:
        """Parse a format name case-insensitively.

        Args:
            value: Format name as supplied by the user.

        Returns:
            The matching OutputFormat.

        Raises:
            ConfigurationError: If the name is not a supported format.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"Output format must be one of: {choices} (got '{value}')"
            ) from None

    @property
    def extension(self) -> str:
        """File extension of the persisted report."""
        return {
            OutputFormat.TABLE: "md",
            OutputFormat.JSON: "json",
            OutputFormat.SARIF: "sarif",
        }[self]


class ClassifiedPackage(BaseModel):
    """A package with its resolved license, placed in exactly one bucket."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    name: str = Field(description="Package name")
    license: str = Field(description="License string as resolved")
    normalized_license: str = Field(
        alias="normalizedLicense",
        description="Uppercased license with whitespace, '-', '_' and '.' removed",
    )


class ReportSummary(BaseModel):
    """Bucket counts for a finished classification."""

    model_config = {"extra": "forbid", "frozen": True}

    total: int
    violations: int
    allowed: int
    unknown: int


class ReportState(BaseModel):
    """The three classification buckets.

    Instances are immutable; classification produces a new state per
    package via with_package().
    """

    model_config = {"extra": "forbid", "frozen": True}

    violations: tuple[ClassifiedPackage, ...] = ()
    allowed: tuple[ClassifiedPackage, ...] = ()
    unknown: tuple[ClassifiedPackage, ...] = ()

    @computed_field  # type: ignore[prop-decorator]
    @property
    def summary(self) -> ReportSummary:
        """Counts per bucket, with total as their sum."""
        return ReportSummary(
            total=len(self.violations) + len(self.allowed) + len(self.unknown),
            violations=len(self.violations),
            allowed=len(self.allowed),
            unknown=len(self.unknown),
        )

    @property
    def has_violations(self) -> bool:
        """Check whether any package landed in the violations bucket."""
        return len(self.violations) > 0

    def bucket(self, bucket: Bucket) -> tuple[ClassifiedPackage, ...]:
        """Return the packages in a bucket."""
        return getattr(self, bucket.value)  # type: ignore[no-any-return]

    def with_package(self, bucket: Bucket, package: ClassifiedPackage) -> ReportState:
        """Return a new state with package appended to bucket.

        Args:
            bucket: Target bucket.
            package: The classified package.

        Returns:
            New ReportState; self is left unchanged.
        """
        return self.model_copy(
            update={bucket.value: self.bucket(bucket) + (package,)}
        )
