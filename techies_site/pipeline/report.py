"""Run report threaded through every pipeline stage.

A :class:`RunReport` replaces process-wide warning and error counters. Each
stage creates one, records recoverable problems on it while it works, and
returns it to the caller, which decides how to present it and which exit
status to use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import Console
from rich.markup import escape
from rich.table import Table


@dataclass
class RunReport:
    """Accumulated outcome of a single stage run.

    Attributes
    ----------
    stage : str
        Short stage name used in log lines and summary titles.
    warnings : list[str]
        Non-fatal quality problems (missing source documents, broken asset
        references, legacy remnants).
    errors : list[str]
        Fatal integrity failures. A non-empty list fails the run.
    counts : dict[str, int]
        Named tallies shown in the summary (pages written, files checked).
    """

    stage: str
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    counts: dict[str, int] = field(default_factory=dict)

    def warn(self, message: str, logger: logging.Logger | None = None) -> None:
        """Record a warning and log it at WARNING level."""
        self.warnings.append(message)
        (logger or logging.getLogger(__name__)).warning(message)

    def error(self, message: str, logger: logging.Logger | None = None) -> None:
        """Record an error and log it at ERROR level."""
        self.errors.append(message)
        (logger or logging.getLogger(__name__)).error(message)

    def check(
        self, condition: bool, message: str, logger: logging.Logger | None = None
    ) -> bool:
        """Record ``message`` as an error unless ``condition`` holds.

        Returns
        -------
        bool
            The value of ``condition``.
        """
        if not condition:
            self.error(message, logger)
        return condition

    def count(self, name: str, value: int = 1) -> None:
        """Add ``value`` to the tally called ``name``."""
        self.counts[name] = self.counts.get(name, 0) + value

    @property
    def error_count(self) -> int:
        """Number of errors recorded so far."""
        return len(self.errors)

    @property
    def warning_count(self) -> int:
        """Number of warnings recorded so far."""
        return len(self.warnings)

    @property
    def ok(self) -> bool:
        """True when no fatal error was recorded."""
        return not self.errors


def print_report(
    report: RunReport, console: Console | None = None, *, show_details: bool = True
) -> None:
    r"""Print a summary table and, optionally, every warning and error.

    Parameters
    ----------
    report : RunReport
        Report to render.
    console : Console | None, optional
        Rich console to print to; a new one is created when omitted.
    show_details : bool, optional
        When True, list each warning and error beneath the table.

    Examples
    --------
    >>> report = RunReport("verify")
    >>> report.count("HTML files")
    >>> print_report(report)  # doctest: +SKIP
    """
    console = console or Console()
    table = Table(
        title=f"{report.stage} summary", show_header=True, header_style="bold blue"
    )
    table.add_column("Item", style="bold")
    table.add_column("Count", justify="right")
    for name, value in report.counts.items():
        table.add_row(name, str(value))
    table.add_row("Errors", str(report.error_count), style="red" if report.errors else None)
    table.add_row(
        "Warnings", str(report.warning_count), style="yellow" if report.warnings else None
    )
    console.print(table)
    if not show_details:
        return
    for message in report.errors:
        console.print(f"  [red]ERROR[/red]: {escape(message)}", markup=True, highlight=False)
    for message in report.warnings:
        console.print(f"  [yellow]WARN[/yellow]: {escape(message)}", markup=True, highlight=False)
