"""Program 2: Build the static site from the intermediate store.

Loads ``people.json`` and ``categories.json``, renders every page through the
templates and writes a clean-URL tree, replacing any previous output.

Usage
-----
python -m techies_site.program2_build_site --data-dir ... --template-dir ... --output-dir ...
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from rich.console import Console

from techies_site.config import LOG_FILENAME_BUILD_SITE
from techies_site.exceptions import AppError
from techies_site.logging_setup import configure_logging, flush_and_close_log_handlers
from techies_site.pipeline.report import print_report
from techies_site.pipeline.settings import SiteSettings
from techies_site.pipeline.website_generator import run_from_config

logger = logging.getLogger(__name__)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments for the build step."""
    parser = argparse.ArgumentParser(
        description="Generate the static site from the intermediate store."
    )
    parser.add_argument("--data-dir", type=Path, default=None, help="Store directory.")
    parser.add_argument(
        "--template-dir", type=Path, default=None, help="Page template directory."
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory; its previous contents are removed.",
    )
    parser.add_argument(
        "--site-dir",
        type=Path,
        default=None,
        help="Legacy site root to copy assets and favicon from.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=os.environ.get("LOG_LEVEL", "INFO"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the site build from CLI arguments.

    Returns
    -------
    int
        ``0`` when the site was written, ``1`` on a structural failure.
    """
    args = parse_arguments(argv)
    configure_logging(args.log_level, LOG_FILENAME_BUILD_SITE)
    try:
        settings = SiteSettings(
            legacy_site_dir=args.site_dir,
            data_dir=args.data_dir,
            template_dir=args.template_dir,
            output_dir=args.output_dir,
        )
        logger.info("Starting site build: %r", settings)
        report = run_from_config(settings)
    except AppError as exc:
        logger.error("Build aborted: %s", exc)
        return 1
    print_report(report, Console())
    return 0


def cli() -> None:  # pragma: no cover - console script entry
    status = main()
    flush_and_close_log_handlers()
    sys.exit(status)


if __name__ == "__main__":  # pragma: no cover - CLI entry
    cli()
