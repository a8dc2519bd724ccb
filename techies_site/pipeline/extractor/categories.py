"""Category pass over the legacy ``category/`` tree."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path

from techies_site.config import (
    CATEGORY_DIRNAME,
    CATEGORY_FEED_SLUG,
    FEED_TITLE_PREFIX,
    INDEX_FILENAME,
)

from ..models import CategoryRecord
from .markers import extract_match, find_all_ints, read_document

logger = logging.getLogger(__name__)

POST_ID_PATTERN = re.compile(r'<div id="post-(\d+)"')
FEED_TITLE_PATTERN = re.compile(re.escape(FEED_TITLE_PREFIX) + r'([^"]+?) Category Feed')


def parse_category_page(
    slug: str, html: str, filter_names: Mapping[str, str] | None = None
) -> CategoryRecord:
    """Build a category record from its legacy index document.

    The display name comes from the listing filter bar when available,
    otherwise from the syndication feed title, otherwise the slug.

    Examples
    --------
    >>> page = '<link title="Techies &raquo; Developer Category Feed" /><div id="post-7">'
    >>> parse_category_page("developer", page)
    CategoryRecord(slug='developer', display_name='Developer', post_ids=[7])
    >>> parse_category_page("developer", page, {"developer": "Developers"}).display_name
    'Developers'
    """
    display_name = (filter_names or {}).get(slug) or extract_match(html, FEED_TITLE_PATTERN)
    return CategoryRecord(
        slug=slug,
        display_name=display_name or slug,
        post_ids=find_all_ints(html, POST_ID_PATTERN),
    )


def parse_categories(
    site_root: Path, filter_names: Mapping[str, str] | None = None
) -> list[CategoryRecord]:
    r"""Parse every category grouping document under ``site_root/category``.

    The reserved ``feed`` entry and directories without an index document
    are skipped. The result is sorted by slug, independent of directory
    listing order.

    Parameters
    ----------
    site_root : Path
        Root of the legacy site.
    filter_names : Mapping[str, str] | None, optional
        Display names from the listing filter bar, keyed by slug.

    Returns
    -------
    list[CategoryRecord]
        Categories sorted by slug; empty when no category tree exists.
    """
    category_dir = site_root / CATEGORY_DIRNAME
    if not category_dir.is_dir():
        logger.info("No category directory at %s", category_dir)
        return []
    categories: list[CategoryRecord] = []
    for entry in category_dir.iterdir():
        if not entry.is_dir() or entry.name == CATEGORY_FEED_SLUG:
            continue
        page_path = entry / INDEX_FILENAME
        if not page_path.is_file():
            logger.debug("Skipping %s: no %s", entry, INDEX_FILENAME)
            continue
        category = parse_category_page(
            entry.name, read_document(page_path), filter_names
        )
        logger.info("  category %s: %d members", category.slug, len(category.post_ids))
        categories.append(category)
    categories.sort(key=lambda category: category.slug)
    return categories
