"""Policy-related Pydantic models for license-checker."""

from __future__ import annotations

from pydantic import BaseModel, Field


class PolicySet(BaseModel):
    """Allowed and blocked license tokens.

    Tokens are kept exactly as configured. They are normalized on each
    comparison by the classifier, never here. A token may appear in both
    collections; the classifier then treats it as blocked.
    """

    model_config = {"extra": "forbid", "frozen": True}

    allowed: tuple[str, ...] = Field(
        default=(), description="License tokens that are acceptable"
    )
    blocked: tuple[str, ...] = Field(
        default=(), description="License tokens that count as violations"
    )

    @property
    def overlapping(self) -> list[str]:
        """Tokens configured as both allowed and blocked."""
        blocked = set(self.blocked)
        return [token for token in self.allowed if token in blocked]
