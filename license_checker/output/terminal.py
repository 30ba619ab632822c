"""Terminal summary formatter using Rich."""

from __future__ import annotations

from typing import Optional

from rich.console import Console
from rich.table import Table

from license_checker.models.report import ClassifiedPackage, ReportState


class TerminalSummaryFormatter:
    """Print a run summary to the terminal.

    Shows bucket counts, then lists violations and packages whose
    license needs review. Allowed packages are only counted.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the formatter with a Rich console.

        Args:
            console: Optional Rich Console instance. If not provided,
                a new Console will be created.
        """
        self._console = console if console is not None else Console()

    def print_summary(self, state: ReportState) -> None:
        """Display the summary for a finished classification.

        Args:
            state: Final classification buckets.
        """
        summary = state.summary
        self._console.print("\n[bold]=== License Check Summary ===[/bold]")
        self._console.print(f"Total packages: {summary.total}")
        self._console.print(f"[green]✅ Allowed:[/green] {summary.allowed}")
        self._console.print(f"[red]❌ Violations:[/red] {summary.violations}")
        self._console.print(f"[yellow]⚠️  Unknown:[/yellow] {summary.unknown}")

        if state.violations:
            self._print_packages(
                f"Found {summary.violations} license violation(s)",
                state.violations,
                "red",
            )
        if state.unknown:
            self._print_packages(
                f"Found {summary.unknown} package(s) with unknown licenses",
                state.unknown,
                "yellow",
            )

    def _print_packages(
        self,
        title: str,
        packages: tuple[ClassifiedPackage, ...],
        color: str,
    ) -> None:
        self._console.print(f"\n[bold {color}]{title}[/bold {color}]")
        table = Table()
        table.add_column("Package", style="cyan", no_wrap=True)
        table.add_column("License", style=color)
        for pkg in packages:
            table.add_row(pkg.name, pkg.license)
        self._console.print(table)
