"""Shared fixtures for license-checker tests."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide CI variables of the machine running the tests."""
    for name in list(os.environ):
        if name.startswith(("INPUT_", "GITHUB_", "LICENSE_CHECKER_")):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Drop logging configuration left behind by CLI invocations."""
    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def install_package(tmp_path: Path) -> Callable[..., Path]:
    """Create a fake installed package under tmp_path/node_modules.

    Returns a factory taking the package name, an optional package.json
    mapping and optional {filename: content} license files.
    """

    def _install(
        name: str,
        manifest: dict[str, Any] | None = None,
        files: dict[str, str] | None = None,
    ) -> Path:
        package_dir = tmp_path / "node_modules" / name
        package_dir.mkdir(parents=True, exist_ok=True)
        if manifest is not None:
            (package_dir / "package.json").write_text(json.dumps(manifest))
        for filename, content in (files or {}).items():
            (package_dir / filename).write_text(content)
        return package_dir

    return _install
