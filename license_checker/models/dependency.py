"""Dependency-related Pydantic models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class PackageManager(str, Enum):
    """Supported JavaScript package managers."""

    NPM = "npm"
    YARN = "yarn"
    PNPM = "pnpm"
    AUTO = "auto"


class DependencyEntry(BaseModel):
    """A single installed package, as produced by the tree normalizer."""

    model_config = {"extra": "forbid", "frozen": True}

    name: str = Field(description="Package name")
    version: str = Field(description="Installed version, or 'unknown'")

    @classmethod
    def from_mapping(cls, dependencies: dict[str, str]) -> list[DependencyEntry]:
        """Build entries from a flat name-to-version mapping, keeping order.

        Args:
            dependencies: Mapping returned by the dependency lister.

        Returns:
            One entry per package name.
        """
        return [
            cls(name=name, version=str(version))
            for name, version in dependencies.items()
        ]
