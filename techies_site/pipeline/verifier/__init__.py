"""Verifier pipeline package.

Asserts that a rendered output tree is a complete, faithful projection of
the intermediate store. Checks live in ``checks``; ``runner`` loads the
store and aggregates every finding into one report.
"""

from .checks import (
    check_asset_references,
    check_category_pages,
    check_homepage,
    check_legacy_remnants,
    check_person_pages,
    check_required_files,
    find_html_files,
)
from .runner import run_from_config, verify_site

__all__ = [
    "check_asset_references",
    "check_category_pages",
    "check_homepage",
    "check_legacy_remnants",
    "check_person_pages",
    "check_required_files",
    "find_html_files",
    "run_from_config",
    "verify_site",
]
