"""License check orchestration: list, resolve, classify, report."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple, Optional

import structlog
from rich.console import Console

from license_checker.analysis.classifier import classify_license
from license_checker.exceptions import (
    ConfigurationError,
    IssueCreationError,
    PolicyViolationError,
)
from license_checker.integrations.github import (
    GitHubIssueCreator,
    IssueCreator,
    issue_body,
    issue_title,
)
from license_checker.integrations.outputs import ActionOutputs
from license_checker.models.config import CheckerConfig
from license_checker.models.dependency import DependencyEntry, PackageManager
from license_checker.models.report import ReportState
from license_checker.output import TerminalSummaryFormatter, get_report_formatter
from license_checker.output.report_table import TableReportFormatter
from license_checker.resolvers.dependency import DependencyLister
from license_checker.resolvers.license import LicenseResolver
from license_checker.resolvers.manager import detect_package_manager
from license_checker.resolvers.process import ProcessRunner

log = structlog.get_logger("license_checker.checker")


class CheckResult(NamedTuple):
    """Outcome of a completed license check.

    Attributes:
        state: Final classification buckets.
        package_manager: Manager the dependencies were listed with.
        report: Rendered report, or None when there was nothing to check.
        report_path: Where the report was written, or None.
    """

    state: ReportState
    package_manager: PackageManager
    report: Optional[str]
    report_path: Optional[Path]


def list_dependencies(
    config: CheckerConfig,
    runner: Optional[ProcessRunner] = None,
) -> tuple[PackageManager, list[DependencyEntry]]:
    """Detect the package manager and list the project's dependencies.

    Args:
        config: Run configuration.
        runner: Process runner for the listing command.

    Returns:
        Tuple of the package manager used and the dependencies found.

    Raises:
        NoPackageManagerFoundError: If no package manager can be detected.
        DependencyListingError: If listing and the manifest fallback both fail.
    """
    manager = detect_package_manager(config.package_manager, config.project_dir)
    log.info("package manager selected", package_manager=manager.value)

    lister = DependencyLister(
        manager,
        config.project_dir,
        include_dev=config.include_dev_dependencies,
        runner=runner,
    )
    return manager, DependencyEntry.from_mapping(lister.list_dependencies())


def classify_entries(
    entries: list[DependencyEntry],
    config: CheckerConfig,
    resolver: Optional[LicenseResolver] = None,
) -> ReportState:
    """Resolve and classify dependencies one at a time, in listing order.

    Args:
        entries: Dependencies to check.
        config: Run configuration holding the policy.
        resolver: License resolver (defaults to the project's node_modules).

    Returns:
        Final classification buckets.
    """
    license_resolver = resolver or LicenseResolver.for_project(config.project_dir)
    policy = config.policy
    state = ReportState()
    for entry in entries:
        license_str = license_resolver.resolve(entry.name)
        log.debug("license resolved", package=entry.name, license=license_str)
        state = classify_license(state, entry.name, license_str, policy)
    return state


def write_report(report: str, path: Path) -> None:
    """Persist a rendered report.

    Raises:
        ConfigurationError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report, encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot write to file '{path}': {e}") from e
    log.info("license report saved", path=str(path))


def publish_outputs(
    outputs: ActionOutputs,
    state: ReportState,
    report_path: Optional[Path],
) -> None:
    """Set the step outputs for a finished classification."""
    summary = state.summary
    outputs.set("violations-count", summary.violations)
    outputs.set("allowed-count", summary.allowed)
    outputs.set("unknown-count", summary.unknown)
    if report_path is not None:
        outputs.set("report-path", str(report_path))
    outputs.set("has-violations", state.has_violations)


def open_violation_issue(state: ReportState, issue_creator: IssueCreator) -> None:
    """Create a tracking issue for violations; failures are only logged."""
    if not state.has_violations:
        log.info("no license violations found, skipping issue creation")
        return

    title = issue_title(len(state.violations))
    body = issue_body(TableReportFormatter().format_report(state))
    try:
        issue = issue_creator.create_issue(title, body)
    except IssueCreationError as e:
        log.warning("failed to create issue", error=str(e))
        return
    log.info("created issue", number=issue.number, url=issue.url)


def run_check(
    config: CheckerConfig,
    runner: Optional[ProcessRunner] = None,
    resolver: Optional[LicenseResolver] = None,
    issue_creator: Optional[IssueCreator] = None,
    outputs: Optional[ActionOutputs] = None,
    console: Optional[Console] = None,
) -> CheckResult:
    """Run a full license check.

    The report is written and outputs are set before any policy failure
    is raised.

    Args:
        config: Validated run configuration.
        runner: Process runner for the listing command.
        resolver: License resolver.
        issue_creator: Issue creator used when create_issue is set.
        outputs: Step outputs collector.
        console: Optional Rich Console the run summary is printed to.

    Returns:
        CheckResult for the run.

    Raises:
        NoPackageManagerFoundError: If no package manager can be detected.
        DependencyListingError: If dependencies cannot be listed at all.
        ConfigurationError: If the report cannot be written.
        PolicyViolationError: If fail_on_blocked is set and violations exist.
    """
    step_outputs = outputs if outputs is not None else ActionOutputs()
    policy = config.policy
    log.info("allowed licenses", licenses=", ".join(policy.allowed))
    log.info("blocked licenses", licenses=", ".join(policy.blocked))
    if policy.overlapping:
        log.warning(
            "licenses are both allowed and blocked; blocked takes precedence",
            licenses=", ".join(policy.overlapping),
        )

    manager, entries = list_dependencies(config, runner)

    if not entries:
        log.warning("no dependencies found")
        state = ReportState()
        publish_outputs(step_outputs, state, None)
        return CheckResult(
            state=state, package_manager=manager, report=None, report_path=None
        )

    log.info("checking dependencies", count=len(entries))
    state = classify_entries(entries, config, resolver)

    report = get_report_formatter(config.output_format).format_report(state)
    report_path = config.report_path
    write_report(report, report_path)

    publish_outputs(step_outputs, state, report_path)

    if console is not None:
        TerminalSummaryFormatter(console=console).print_summary(state)

    for pkg in state.violations:
        log.warning("license violation", package=pkg.name, license=pkg.license)
    for pkg in state.unknown:
        log.warning("unknown license", package=pkg.name, license=pkg.license)

    if config.create_issue and state.has_violations:
        creator = issue_creator or GitHubIssueCreator(
            config.github_token, config.repository, config.api_url
        )
        open_violation_issue(state, creator)

    result = CheckResult(
        state=state, package_manager=manager, report=report, report_path=report_path
    )

    if config.fail_on_blocked and state.has_violations:
        raise PolicyViolationError(len(state.violations))

    log.info("license check completed successfully")
    return result
