"""Program 1: Extract legacy HTML into the intermediate store.

Reads the rendered legacy site (homepage listing, per-person documents and
the ``category/`` tree) and writes ``people.json`` and ``categories.json``.

Usage
-----
python -m techies_site.program1_extract --site-dir ... --data-dir ... [--log-level ...]
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console

from techies_site.config import LOG_FILENAME_EXTRACT
from techies_site.exceptions import AppError
from techies_site.logging_setup import configure_logging, flush_and_close_log_handlers
from techies_site.pipeline.extractor import run_extraction
from techies_site.pipeline.report import print_report
from techies_site.pipeline.settings import SiteSettings

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the extraction step."""
    parser = argparse.ArgumentParser(
        description="Extract people and categories from the legacy site."
    )
    parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Root of the rendered legacy site.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory to write people.json and categories.json to.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run extraction from CLI arguments.

    Returns
    -------
    int
        Process exit status: ``0`` on success, ``1`` if the run aborted.
    """
    args = parse_arguments(argv)
    configure_logging(args.log_level, LOG_FILENAME_EXTRACT)
    try:
        settings = SiteSettings(legacy_site_dir=args.site_dir, data_dir=args.data_dir)
        logger.info(
            "Starting extraction: site=%s data=%s",
            settings.legacy_site_dir,
            settings.data_dir,
        )
        result = run_extraction(settings.legacy_site_dir, settings.data_dir)
    except AppError as exc:
        logger.error("Extraction aborted: %s", exc)
        return 1
    print_report(result.report, Console())
    return 0


def cli() -> None:  # pragma: no cover - console script entry
    status = main()
    flush_and_close_log_handlers()
    sys.exit(status)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    cli()
