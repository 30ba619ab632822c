"""Shared report formatter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, Optional

from license_checker.models.report import ReportState


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2024-01-02T03:04:05.678Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


class ReportFormatter(ABC):
    """Renders a finished classification into a report string.

    Formatters only read the state they are given.
    """

    def __init__(self, now: Optional[Callable[[], datetime]] = None) -> None:
        """Initialize the formatter.

        Args:
            now: Clock used for generation timestamps (default: utc_now).
        """
        self._now = now if now is not None else utc_now

    @abstractmethod
    def format_report(self, state: ReportState) -> str:
        """Render the report.

        Args:
            state: Final classification buckets.

        Returns:
            The rendered report.
        """
