"""Extraction runner: legacy HTML -> intermediate store.

This module orchestrates the three extraction passes and the cross-merge:

1. The listing pass reads the legacy homepage for the canonical person order,
   the authoritative short titles and the category filter names.
2. The per-entity pass applies :data:`~.rules.PERSON_RULES` to each person's
   own document. A missing document drops the person with a warning.
3. The category pass reads the ``category/`` tree.

Listing titles override anything found on the person page, and a person
whose page yields no post id (``0``) takes the listing's id. Duplicate slugs
or post ids are dropped so both stay unique across the collection.

Examples
--------
>>> from pathlib import Path
>>> from techies_site.pipeline.extractor.runner import run_extraction
>>> result = run_extraction(Path("legacy_site"), Path("data"))  # doctest: +SKIP
>>> result.report.ok  # doctest: +SKIP
True
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from techies_site.config import INDEX_FILENAME
from techies_site.exceptions import StructuralFailureError

from ..models import CategoryRecord, PersonRecord
from ..report import RunReport
from ..store import save_store
from .categories import parse_categories
from .listing import ListingEntry, parse_category_filter, parse_listing
from .markers import read_document
from .rules import DocumentContext, apply_rules

logger = logging.getLogger(__name__)


@dataclass
class ExtractionResult:
    """People, categories and the report of one extraction run."""

    people: list[PersonRecord]
    categories: list[CategoryRecord]
    report: RunReport


def parse_person_page(slug: str, html: str) -> PersonRecord:
    """Apply the person rules to one document and build a record."""
    values = apply_rules(DocumentContext(slug=slug, html=html))
    return PersonRecord(slug=slug, **values)


def extract_people(
    site_root: Path, entries: list[ListingEntry], report: RunReport
) -> list[PersonRecord]:
    r"""Run the per-entity pass for every listing entry and cross-merge.

    Parameters
    ----------
    site_root : Path
        Root of the legacy site; person documents live at ``{slug}/index.html``.
    entries : list[ListingEntry]
        Listing cards in canonical order.
    report : RunReport
        Receives a warning per skipped entry.

    Returns
    -------
    list[PersonRecord]
        People in listing order, without the skipped entries.
    """
    people: list[PersonRecord] = []
    seen_slugs: set[str] = set()
    seen_post_ids: set[int] = set()
    for entry in entries:
        if entry.slug in seen_slugs:
            report.warn(f"{entry.slug}: duplicate listing entry, skipping", logger)
            report.count("Skipped people")
            continue
        page_path = site_root / entry.slug / INDEX_FILENAME
        if not page_path.is_file():
            report.warn(f"{entry.slug}/{INDEX_FILENAME} not found, skipping", logger)
            report.count("Skipped people")
            continue
        person = parse_person_page(entry.slug, read_document(page_path))
        person.title = entry.title
        if not person.post_id:
            person.post_id = entry.post_id
        if person.post_id in seen_post_ids:
            report.warn(
                f"{entry.slug}: post id {person.post_id} already taken, skipping",
                logger,
            )
            report.count("Skipped people")
            continue
        seen_slugs.add(person.slug)
        seen_post_ids.add(person.post_id)
        people.append(person)
        logger.info("  %s... OK", entry.slug)
    return people


def report_incomplete_people(people: list[PersonRecord], report: RunReport) -> None:
    """Warn about people whose page lacked a hero image or interview content."""
    for person in people:
        issues = []
        if not person.hero_image:
            issues.append("no hero_image")
        if not person.interview_content:
            issues.append("no interview_content")
        if issues:
            report.warn(f"{person.slug}: {', '.join(issues)}", logger)


def extract_site(site_root: Path) -> ExtractionResult:
    """Run all extraction passes over ``site_root`` without writing anything.

    Raises
    ------
    StructuralFailureError
        If the listing document is missing.
    """
    report = RunReport("extract")
    listing_path = site_root / INDEX_FILENAME
    if not listing_path.is_file():
        raise StructuralFailureError(
            f"Listing document not found: {listing_path}",
            context={"path": str(listing_path)},
        )
    listing_html = read_document(listing_path)

    logger.info("Parsing homepage...")
    entries = parse_listing(listing_html)
    logger.info("  Found %d people on homepage", len(entries))

    logger.info("Parsing person pages...")
    people = extract_people(site_root, entries, report)

    logger.info("Parsing categories...")
    categories = parse_categories(site_root, parse_category_filter(listing_html))
    logger.info("  Found %d categories", len(categories))

    report_incomplete_people(people, report)
    report.count("Listing entries", len(entries))
    report.count("People", len(people))
    report.count("Categories", len(categories))
    return ExtractionResult(people=people, categories=categories, report=report)


def run_extraction(site_root: Path, data_dir: Path) -> ExtractionResult:
    """Extract ``site_root`` and persist the result to the store in ``data_dir``."""
    result = extract_site(site_root)
    save_store(data_dir, result.people, result.categories)
    return result


__all__ = [
    "ExtractionResult",
    "extract_people",
    "extract_site",
    "parse_person_page",
    "report_incomplete_people",
    "run_extraction",
]
