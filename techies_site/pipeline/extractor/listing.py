"""Listing pass over the legacy homepage.

The homepage carries one gallery card per person, in the canonical site
order, and a category filter bar with the most reliable category display
names. Cards that do not match the expected shape are skipped silently; a
match never runs on into the next card.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from .markers import normalize_text

CARD_PATTERN = re.compile(
    r'<div id="post-(\d+)"[^>]*class="techie-gallery[^"]*"[^>]*>\s*'
    r'<a[^>]*href="/([^"]+?)/"[^>]*>(?:(?!<div id="post-)[\s\S])*?'
    r'<p class="name">([^<]+)</p>\s*'
    r'<p class="title">([^<]*)</p>'
)
CATEGORY_FILTER_PATTERN = re.compile(
    r'<li id="([^"]*)" class="cat-item"><a href="[^"]*">([^<]+)</a></li>'
)


@dataclass(frozen=True)
class ListingEntry:
    """One gallery card of the listing document."""

    post_id: int
    slug: str
    name: str
    title: str


def parse_listing(html: str) -> list[ListingEntry]:
    """Return the listing cards in document order.

    Examples
    --------
    >>> card = ('<div id="post-42" class="techie-gallery col-xs-6">'
    ...         '<a class="techie-thumbnail" href="/ada/">'
    ...         '<p class="name">Ada</p> <p class="title">Engineer&nbsp</p></a></div>')
    >>> parse_listing(card)
    [ListingEntry(post_id=42, slug='ada', name='Ada', title='Engineer')]
    """
    return [
        ListingEntry(
            post_id=int(post_id),
            slug=slug,
            name=name.strip(),
            title=normalize_text(title),
        )
        for post_id, slug, name, title in CARD_PATTERN.findall(html)
    ]


def parse_category_filter(html: str) -> dict[str, str]:
    """Map category slug to display name from the listing's filter bar."""
    return {slug: name for slug, name in CATEGORY_FILTER_PATTERN.findall(html)}
