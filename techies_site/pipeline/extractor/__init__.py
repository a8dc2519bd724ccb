"""Extractor pipeline package.

Reads the rendered legacy site and produces the ``PersonRecord`` and
``CategoryRecord`` collections persisted to the intermediate store.

Consumers should import from this package rather than from submodules:

>>> from techies_site.pipeline.extractor import run_extraction, parse_listing
"""

from .categories import parse_categories, parse_category_page
from .listing import ListingEntry, parse_category_filter, parse_listing
from .rules import PERSON_RULES, DocumentContext, ExtractionRule, apply_rules
from .runner import (
    ExtractionResult,
    extract_people,
    extract_site,
    parse_person_page,
    run_extraction,
)

__all__ = [
    "DocumentContext",
    "ExtractionResult",
    "ExtractionRule",
    "ListingEntry",
    "PERSON_RULES",
    "apply_rules",
    "extract_people",
    "extract_site",
    "parse_categories",
    "parse_category_filter",
    "parse_category_page",
    "parse_listing",
    "parse_person_page",
    "run_extraction",
]
