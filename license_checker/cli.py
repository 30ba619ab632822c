"""CLI entry point for license-checker."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Optional

import click
from rich.console import Console

from license_checker import __version__
from license_checker.config import ACTION_INPUT_ENV, load_config
from license_checker.constants import EXIT_ERROR, EXIT_SUCCESS, EXIT_VIOLATIONS
from license_checker.checker import run_check
from license_checker.exceptions import LicenseCheckerError, PolicyViolationError
from license_checker.integrations.outputs import ActionOutputs
from license_checker.logging import setup_logging

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """License Checker - Enforce license policy on JavaScript dependencies.

    Lists a project's npm, yarn or pnpm dependencies, resolves each
    package's license, classifies it against allowed and blocked lists,
    and writes a compliance report.

    \b
    Examples:
        license-checker check
        license-checker check --output-format sarif
        license-checker check --blocked-licenses "GPL-3.0,AGPL-3.0"
    """
    pass


@main.command()
@click.option(
    "--allowed-licenses",
    envvar=ACTION_INPUT_ENV["allowed_licenses"],
    default=None,
    help="Comma-separated allowed license tokens.",
)
@click.option(
    "--blocked-licenses",
    envvar=ACTION_INPUT_ENV["blocked_licenses"],
    default=None,
    help="Comma-separated blocked license tokens.",
)
@click.option(
    "--fail-on-blocked",
    envvar=ACTION_INPUT_ENV["fail_on_blocked"],
    metavar="true|false",
    default=None,
    help="Exit with failure when blocked licenses are found (default: true).",
)
@click.option(
    "--include-dev-dependencies",
    envvar=ACTION_INPUT_ENV["include_dev_dependencies"],
    metavar="true|false",
    default=None,
    help="Include development dependencies (default: false).",
)
@click.option(
    "--output-format",
    envvar=ACTION_INPUT_ENV["output_format"],
    type=click.Choice(["table", "json", "sarif"], case_sensitive=False),
    default=None,
    help="Report format (default: table).",
)
@click.option(
    "--create-issue",
    envvar=ACTION_INPUT_ENV["create_issue"],
    metavar="true|false",
    default=None,
    help="Open a GitHub issue when violations are found (default: false).",
)
@click.option(
    "--package-manager",
    envvar=ACTION_INPUT_ENV["package_manager"],
    type=click.Choice(["npm", "yarn", "pnpm", "auto"], case_sensitive=False),
    default=None,
    help="Package manager to list dependencies with (default: auto).",
)
@click.option(
    "--github-token",
    envvar=[ACTION_INPUT_ENV["github_token"], "GITHUB_TOKEN"],
    default=None,
    help="Token used to create issues.",
)
@click.option(
    "--repository",
    envvar="GITHUB_REPOSITORY",
    default=None,
    help="Repository (owner/name) issues are created in.",
)
@click.option(
    "--api-url",
    envvar="GITHUB_API_URL",
    default=None,
    help="GitHub REST API base URL.",
)
@click.option(
    "--project-dir",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    help="Project directory (default: current directory).",
)
@click.option(
    "--report-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write the report to (default: project directory).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: INFO, or LICENSE_CHECKER_LOG_LEVEL).",
)
def check(
    allowed_licenses: Optional[str],
    blocked_licenses: Optional[str],
    fail_on_blocked: Optional[str],
    include_dev_dependencies: Optional[str],
    output_format: Optional[str],
    create_issue: Optional[str],
    package_manager: Optional[str],
    github_token: Optional[str],
    repository: Optional[str],
    api_url: Optional[str],
    project_dir: Optional[str],
    report_dir: Optional[str],
    config_path: Optional[str],
    log_level: Optional[str],
) -> None:
    """Check dependency licenses against the license policy.

    Options fall back to GitHub Actions inputs (INPUT_<NAME>) and then to
    a .license-checker.yaml file in the project directory.

    \b
    Examples:
        license-checker check
        license-checker check --output-format json
        license-checker check --package-manager yarn --include-dev-dependencies true
        license-checker check --fail-on-blocked false --create-issue true
        license-checker check --config custom-config.yaml
    """
    setup_logging(level=log_level)

    overrides: dict[str, Any] = {
        "allowed_licenses": allowed_licenses,
        "blocked_licenses": blocked_licenses,
        "fail_on_blocked": fail_on_blocked,
        "include_dev_dependencies": include_dev_dependencies,
        "output_format": output_format,
        "create_issue": create_issue,
        "package_manager": package_manager,
        "github_token": github_token,
        "repository": repository,
        "api_url": api_url,
        "project_dir": project_dir,
        "report_dir": report_dir,
    }
    search_dir = Path(project_dir) if project_dir else None

    try:
        # Validate everything before any scanning starts
        config = load_config(config_path, overrides=overrides, search_dir=search_dir)

        result = run_check(config, outputs=ActionOutputs(), console=_console)

        if result.report_path is not None:
            _console.print(f"[green]Report written to {result.report_path}[/green]")
        else:
            _console.print("[yellow]No dependencies found[/yellow]")
        sys.exit(EXIT_SUCCESS)

    except PolicyViolationError as e:
        _display_error(e)
        sys.exit(EXIT_VIOLATIONS)
    except LicenseCheckerError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _display_error(error: LicenseCheckerError) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    _error_console.print(f"[red bold]Error: {error_type}: {error}[/red bold]")


if __name__ == "__main__":
    main()
