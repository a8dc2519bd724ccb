"""Named extraction rules for legacy person documents.

Each field of a :class:`~techies_site.pipeline.models.PersonRecord` that is
read from the person's own page is described by one :class:`ExtractionRule`:
a field name, a function over a shared :class:`DocumentContext` returning an
optional value, and the default used on a miss. Keeping one rule per field
confines the fragility of marker matching to a single small function that
can be tested on its own.

Examples
--------
>>> ctx = DocumentContext(slug="ada", html="<link rel='shortlink' href='/?p=42' />")
>>> extract_post_id(ctx)
42
>>> apply_rules(ctx, PERSON_RULES)["post_id"]
42
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from techies_site.config import MEDIA_DIRNAME, PORTRAITS_SUBDIR, THUMBNAILS_SUBDIR

from ..models import NavLink, PersonalLink
from .markers import extract_between, extract_match, extract_region, normalize_text

# Start markers of the bounded regions on a person page
YEARS_MARKER = '<li class="icon years">'
ROLE_MARKER = '<li class="icon role">'
LOCATION_MARKER = '<li class="icon location">'
DATE_MARKER = '<li class="icon date">'
LIST_ITEM_END = "</li>"
ABSTRACT_MARKER = '<div class="col-md-6 abstract">'
ABSTRACT_SIBLINGS = ('\n  </div>\n</div>\n<div class="row">',)
CONTENT_MARKER = '<div class="col-xs-12 col-md-6 post">'
CONTENT_SIBLINGS = ('\n  </div>\n  <div class="col-xs-12 col-md-3 photo">',)
REGION_FALLBACK_END = "</div>"
LINKS_MARKER = '<div class="personal-links">'

SHORTLINK_PATTERN = re.compile(r"href='/?[?]p=(\d+)'")
HERO_IMAGE_PATTERN = re.compile(
    r'<div class="featured-image[^"]*">\s*<img src="/'
    + re.escape(f"{MEDIA_DIRNAME}/{PORTRAITS_SUBDIR}/")
    + r'([^"]+)"'
)
THUMBNAIL_PATTERN = re.compile(
    r'<div class="col-xs-12 col-md-3 photo">\s*<img src="/'
    + re.escape(f"{MEDIA_DIRNAME}/{THUMBNAILS_SUBDIR}/")
    + r'([^"]+)"'
)
NAME_PATTERN = re.compile(r'<div class="techie-name col-md-12">\s*([\s\S]*?)\s*</div>')
META_TEXT_PATTERN = re.compile(r'<p class="text">([^<]*)</p>')
ROLE_TEXT_PATTERN = re.compile(r'<p class="col-xs-12 col-md-8 text">([^<]*)</p>')
PERSONAL_LINK_PATTERN = re.compile(r'<li><a href="([^"]+)">([^<]+)</a></li>')
PREV_PATTERN = re.compile(r"<link rel='prev' title='([^']+)' href='/([^']+)/' />")
NEXT_PATTERN = re.compile(r"<link rel='next' title='([^']+)' href='/([^']+)/' />")


@dataclass(frozen=True)
class DocumentContext:
    """A legacy document together with the slug it was loaded for."""

    slug: str
    html: str

    def between(self, start_marker: str, end_marker: str) -> str | None:
        """Text between two literal markers in the document."""
        return extract_between(self.html, start_marker, end_marker)

    def match(self, pattern: str | re.Pattern[str]) -> str | None:
        """First capture group of ``pattern`` in the document."""
        return extract_match(self.html, pattern)


@dataclass(frozen=True)
class ExtractionRule:
    """Extract one record field from a document.

    Attributes
    ----------
    field : str
        Record field the value is stored under.
    extract : Callable[[DocumentContext], Any | None]
        Returns the value, or ``None`` when the document does not carry it.
    default : Callable[[], Any]
        Factory for the value used on a miss.
    """

    field: str
    extract: Callable[[DocumentContext], Any | None]
    default: Callable[[], Any] = str


def _meta_field(
    start_marker: str, text_pattern: re.Pattern[str] = META_TEXT_PATTERN
) -> Callable[[DocumentContext], str | None]:
    """Build a rule reading the first text element of a meta list item."""

    def extract(ctx: DocumentContext) -> str | None:
        block = ctx.between(start_marker, LIST_ITEM_END)
        if block is None:
            return None
        value = extract_match(block, text_pattern)
        return normalize_text(value) if value is not None else None

    return extract


def extract_post_id(ctx: DocumentContext) -> int | None:
    """Legacy numeric id from the shortlink."""
    value = ctx.match(SHORTLINK_PATTERN)
    return int(value) if value else None


def extract_hero_image(ctx: DocumentContext) -> str | None:
    """Portrait filename from the featured image."""
    return ctx.match(HERO_IMAGE_PATTERN)


def extract_name(ctx: DocumentContext) -> str | None:
    """Display name from the name banner, whitespace-normalized."""
    value = ctx.match(NAME_PATTERN)
    return normalize_text(value) if value is not None else None


def extract_thumbnail(ctx: DocumentContext) -> str | None:
    """Thumbnail filename from the photo column."""
    return ctx.match(THUMBNAIL_PATTERN)


def extract_abstract(ctx: DocumentContext) -> str | None:
    """Abstract HTML, bounded by the row that follows it."""
    return extract_region(ctx.html, ABSTRACT_MARKER, ABSTRACT_SIBLINGS, REGION_FALLBACK_END)


def extract_interview_content(ctx: DocumentContext) -> str | None:
    """Interview body, bounded by the photo column that follows it."""
    return extract_region(ctx.html, CONTENT_MARKER, CONTENT_SIBLINGS, REGION_FALLBACK_END)


def extract_personal_links(ctx: DocumentContext) -> list[PersonalLink] | None:
    """Ordered links from the personal-links section; ``None`` if it is absent."""
    section = ctx.between(LINKS_MARKER, "</div>")
    if section is None:
        return None
    return [
        PersonalLink(url=url, label=label)
        for url, label in PERSONAL_LINK_PATTERN.findall(section)
    ]


def _nav_link(pattern: re.Pattern[str]) -> Callable[[DocumentContext], NavLink | None]:
    def extract(ctx: DocumentContext) -> NavLink | None:
        match = pattern.search(ctx.html)
        if not match:
            return None
        return NavLink(name=match.group(1), slug=match.group(2))

    return extract


PERSON_RULES: tuple[ExtractionRule, ...] = (
    ExtractionRule("post_id", extract_post_id, int),
    ExtractionRule("hero_image", extract_hero_image),
    ExtractionRule("name", extract_name),
    ExtractionRule("thumbnail", extract_thumbnail),
    ExtractionRule("years_in_tech", _meta_field(YEARS_MARKER)),
    ExtractionRule("role", _meta_field(ROLE_MARKER, ROLE_TEXT_PATTERN)),
    ExtractionRule("location", _meta_field(LOCATION_MARKER)),
    ExtractionRule("interview_date", _meta_field(DATE_MARKER)),
    ExtractionRule("abstract", extract_abstract),
    ExtractionRule("personal_links", extract_personal_links, list),
    ExtractionRule("interview_content", extract_interview_content),
    ExtractionRule("prev", _nav_link(PREV_PATTERN), lambda: None),
    ExtractionRule("next", _nav_link(NEXT_PATTERN), lambda: None),
)


def apply_rules(
    ctx: DocumentContext, rules: Sequence[ExtractionRule] = PERSON_RULES
) -> dict[str, Any]:
    """Run ``rules`` in order and return a field -> value mapping.

    A rule that misses contributes its default, so the mapping always has
    one entry per rule.
    """
    values: dict[str, Any] = {}
    for rule in rules:
        value = rule.extract(ctx)
        values[rule.field] = value if value is not None else rule.default()
    return values
