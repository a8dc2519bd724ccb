"""Generate the static site from the intermediate store.

This module provides the headless runner for the build stage. It wipes the
previous output tree, copies the static collaborators (asset trees, favicon,
robots policy) and writes every rendered page. The run is reproducible from
the store and templates alone: two runs over unchanged inputs produce
byte-identical trees.

Usage Examples
--------------
Typical programmatic usage with config defaults::

    from techies_site.pipeline.website_generator.runner import run_from_config
    report = run_from_config()
    assert report.ok

Explicit path usage::

    from pathlib import Path
    from techies_site.pipeline.website_generator.runner import build_site

    build_site(
        data_dir=Path("data"),
        template_dir=Path("templates"),
        output_dir=Path("_output"),
        legacy_site_dir=Path("legacy_site"),
    )
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from techies_site.config import (
    ASSETS_DIRNAME,
    FAVICON_FILENAME,
    MEDIA_DIRNAME,
    ROBOTS_FILENAME,
    ROBOTS_TXT,
)
from techies_site.fs_utils import safe_rmtree

from ..report import RunReport
from ..settings import SiteSettings
from ..store import load_store
from .renderer import load_site_templates, render_site, write_page

logger = logging.getLogger(__name__)


def copy_static_files(legacy_site_dir: Path, output_dir: Path, report: RunReport) -> None:
    """Copy asset trees and the favicon, and write the robots policy.

    Missing sources are reported as warnings; the verifier decides whether
    their absence is fatal.
    """
    for dirname in (ASSETS_DIRNAME, MEDIA_DIRNAME):
        source = legacy_site_dir / dirname
        if source.is_dir():
            logger.info("Copying %s/", dirname)
            shutil.copytree(source, output_dir / dirname)
        else:
            report.warn(f"Static directory not found: {source}", logger)
    favicon = legacy_site_dir / FAVICON_FILENAME
    if favicon.is_file():
        shutil.copyfile(favicon, output_dir / FAVICON_FILENAME)
    else:
        report.warn(f"Favicon not found: {favicon}", logger)
    (output_dir / ROBOTS_FILENAME).write_text(ROBOTS_TXT, encoding="utf-8")


def build_site(
    data_dir: Path,
    template_dir: Path,
    output_dir: Path,
    legacy_site_dir: Path | None = None,
) -> RunReport:
    r"""Render the whole site from the store into ``output_dir``.

    Parameters
    ----------
    data_dir : Path
        Store directory holding ``people.json`` and ``categories.json``.
    template_dir : Path
        Directory holding page templates and partials.
    output_dir : Path
        Destination tree; wiped before writing.
    legacy_site_dir : Path | None, optional
        Source of the static asset trees and favicon. When ``None`` only the
        robots policy is written besides the pages.

    Returns
    -------
    RunReport
        Page counts and any warnings about missing static sources.

    Raises
    ------
    StructuralFailureError
        If a store document or template is missing, or ``output_dir`` is
        not safe to wipe.
    DataValidationError
        If the store does not follow the record contract.
    """
    report = RunReport("build")
    logger.info("Loading data...")
    people, categories = load_store(data_dir)
    logger.info("Loading templates...")
    templates = load_site_templates(template_dir)

    logger.info("Preparing output directory...")
    protected = [data_dir, template_dir]
    if legacy_site_dir is not None:
        protected.append(legacy_site_dir)
    safe_rmtree(output_dir, protected)
    output_dir.mkdir(parents=True, exist_ok=True)

    if legacy_site_dir is not None:
        copy_static_files(legacy_site_dir, output_dir, report)
    else:
        (output_dir / ROBOTS_FILENAME).write_text(ROBOTS_TXT, encoding="utf-8")

    logger.info("Generating pages...")
    for page in render_site(templates, people, categories):
        write_page(page, output_dir)
        logger.info("  /%s", page.path.parent.as_posix().strip("."))
        report.count("Pages")
    report.count("Person pages", len(people))
    report.count("Category pages", len(categories))
    logger.info("Output: %s", output_dir)
    return report


def run_from_config(settings: SiteSettings | None = None) -> RunReport:
    """Build the site using :class:`SiteSettings` paths."""
    settings = settings or SiteSettings()
    return build_site(
        settings.data_dir,
        settings.template_dir,
        settings.output_dir,
        settings.legacy_site_dir,
    )


__all__ = ["build_site", "copy_static_files", "run_from_config"]
