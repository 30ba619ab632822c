"""External process execution for package manager listing commands."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Optional, Protocol, Sequence

import structlog

from license_checker.exceptions import DependencyListingError

log = structlog.get_logger("license_checker.process")

# Matches the 10 MiB output buffer package listings are allowed to produce
MAX_OUTPUT_BYTES = 10 * 1024 * 1024


class ProcessRunner(Protocol):
    """Runs a command and returns its standard output."""

    def run(self, args: Sequence[str], cwd: Path) -> str:
        """Run args in cwd.

        Raises:
            DependencyListingError: On a missing executable, nonzero exit
                or timeout.
        """
        ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.run."""

    def __init__(self, timeout: Optional[float] = None) -> None:
        """Initialize the runner.

        Args:
            timeout: Seconds before the command is killed (None waits forever).
        """
        self._timeout = timeout

    def run(self, args: Sequence[str], cwd: Path) -> str:
        """Run a command and capture its standard output as text.

        Args:
            args: Command and arguments.
            cwd: Working directory.

        Returns:
            Captured standard output.

        Raises:
            DependencyListingError: If the command cannot run, exits nonzero,
                times out, or produces too much output.
        """
        command = " ".join(args)
        log.info("running command", command=command, cwd=str(cwd))
        try:
            completed = subprocess.run(
                list(args),
                cwd=cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise DependencyListingError(f"Command not found: {args[0]}") from e
        except subprocess.TimeoutExpired as e:
            raise DependencyListingError(
                f"Command timed out after {self._timeout}s: {command}"
            ) from e
        except OSError as e:
            raise DependencyListingError(f"Cannot run '{command}': {e}") from e

        if completed.returncode != 0:
            stderr = completed.stderr.strip().splitlines()
            detail = stderr[-1] if stderr else f"exit status {completed.returncode}"
            raise DependencyListingError(f"Command failed: {command}: {detail}")

        if len(completed.stdout.encode("utf-8")) > MAX_OUTPUT_BYTES:
            raise DependencyListingError(
                f"Command output exceeds {MAX_OUTPUT_BYTES} bytes: {command}"
            )

        return completed.stdout
