"""Verification runner: check a rendered tree against the store.

The verifier re-reads the intermediate store, then runs every check family
over the output tree and returns one :class:`RunReport`. It never mutates
anything. A run fails if and only if the report carries at least one error;
warnings never fail it.

Examples
--------
>>> from pathlib import Path
>>> from techies_site.pipeline.verifier.runner import verify_site
>>> report = verify_site(Path("data"), Path("_output"))  # doctest: +SKIP
>>> report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
from pathlib import Path

from techies_site.config import VERIFIED_STYLESHEET

from ..report import RunReport
from ..settings import SiteSettings
from ..store import load_store
from ..website_generator.renderer import FIXED_PAGES
from .checks import (
    check_asset_references,
    check_category_pages,
    check_homepage,
    check_legacy_remnants,
    check_person_pages,
    check_required_files,
    find_html_files,
)

logger = logging.getLogger(__name__)


def verify_site(data_dir: Path, output_dir: Path) -> RunReport:
    r"""Run every verification check and return the aggregated report.

    Parameters
    ----------
    data_dir : Path
        Store directory holding ``people.json`` and ``categories.json``.
    output_dir : Path
        Rendered site to verify.

    Returns
    -------
    RunReport
        Errors for integrity and structural failures, warnings for broken
        asset references and legacy remnants, plus counts of what was checked.

    Raises
    ------
    StructuralFailureError
        If a store document is missing.
    """
    report = RunReport("verify")
    people, categories = load_store(data_dir)

    logger.info("Checking person pages...")
    check_person_pages(output_dir, people, report)

    logger.info("Checking category pages...")
    known_post_ids = {person.post_id for person in people}
    check_category_pages(output_dir, categories, known_post_ids, report)

    logger.info("Checking static pages...")
    check_required_files(output_dir, [page.slug for page in FIXED_PAGES], report)

    logger.info("Checking homepage completeness...")
    check_homepage(output_dir, people, report)

    html_files = find_html_files(output_dir) if output_dir.is_dir() else []
    logger.info("Checking asset references...")
    references = check_asset_references(
        output_dir, html_files, output_dir / VERIFIED_STYLESHEET, report
    )

    logger.info("Checking for legacy remnants...")
    check_legacy_remnants(output_dir, html_files, report)

    report.count("HTML files", len(html_files))
    report.count("Asset references", len(references))
    logger.info(
        "Verification complete: %d errors, %d warnings",
        report.error_count,
        report.warning_count,
    )
    return report


def run_from_config(settings: SiteSettings | None = None) -> RunReport:
    """Verify using :class:`SiteSettings` paths."""
    settings = settings or SiteSettings()
    return verify_site(settings.data_dir, settings.output_dir)


__all__ = ["run_from_config", "verify_site"]
