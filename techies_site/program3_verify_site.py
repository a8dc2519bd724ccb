"""Program 3: Verify the generated site against the intermediate store.

Prints a full report and a final error/warning tally. The process exits
with status 1 if and only if at least one fatal check failed; warnings
(broken asset references, legacy remnants) never fail the run.

Usage
-----
python -m techies_site.program3_verify_site --data-dir ... --output-dir ...
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from techies_site.config import LOG_FILENAME_VERIFY_SITE
from techies_site.exceptions import AppError
from techies_site.logging_setup import configure_logging, flush_and_close_log_handlers
from techies_site.pipeline.report import print_report
from techies_site.pipeline.settings import SiteSettings
from techies_site.pipeline.verifier import run_from_config

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the verification step."""
    parser = argparse.ArgumentParser(
        description="Verify the generated site is complete and consistent."
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Store directory.")
    parser.add_argument(
        "--output-dir", type=Path, default=None, help="Generated site to verify."
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run verification from CLI arguments and return the exit status."""
    args = parse_arguments(argv)
    configure_logging(args.log_level, LOG_FILENAME_VERIFY_SITE)
    console = Console()
    try:
        settings = SiteSettings(data_dir=args.data_dir, output_dir=args.output_dir)
        report = run_from_config(settings)
    except AppError as exc:
        logger.error("Verification aborted: %s", exc)
        console.print(f"[red]Verification aborted:[/red] {escape(str(exc))}", highlight=False)
        return 1
    print_report(report, console)
    return 0 if report.ok else 1


def cli() -> None:  # pragma: no cover - console script entry
    status = main()
    flush_and_close_log_handlers()
    sys.exit(status)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    cli()
