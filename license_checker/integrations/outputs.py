"""Step outputs for the hosting CI platform."""

from __future__ import annotations

import os
import uuid
from pathlib import Path
from typing import Optional

import structlog

from license_checker.exceptions import ConfigurationError

log = structlog.get_logger("license_checker.outputs")

GITHUB_OUTPUT_ENV = "GITHUB_OUTPUT"


class ActionOutputs:
    """Collects named outputs and publishes them to GITHUB_OUTPUT.

    Without an output file the values are only kept in memory, which is
    what local runs and tests see.
    """

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the collector.

        Args:
            output_file: File to append outputs to. Defaults to the path in
                the GITHUB_OUTPUT environment variable, if any.
        """
        if output_file is None and os.environ.get(GITHUB_OUTPUT_ENV):
            output_file = Path(os.environ[GITHUB_OUTPUT_ENV])
        self._output_file = output_file
        self.values: dict[str, str] = {}

    def set(self, name: str, value: object) -> None:
        """Set an output value.

        Booleans are written as 'true'/'false', everything else with str().

        Args:
            name: Output name, e.g. "violations-count".
            value: Output value.

        Raises:
            ConfigurationError: If the output file cannot be written.
        """
        text = str(value).lower() if isinstance(value, bool) else str(value)
        self.values[name] = text
        log.debug("output set", name=name, value=text)

        if self._output_file is None:
            return

        try:
            with self._output_file.open("a", encoding="utf-8") as handle:
                if "\n" in text:
                    delimiter = f"ghadelimiter_{uuid.uuid4()}"
                    handle.write(f"{name}<<{delimiter}\n{text}\n{delimiter}\n")
                else:
                    handle.write(f"{name}={text}\n")
        except OSError as e:
            raise ConfigurationError(
                f"Cannot write to file '{self._output_file}': {e}"
            ) from e
