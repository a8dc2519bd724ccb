"""HTML fragment builders for the page renderers.

Everything that repeats on a page (gallery cards, list items, relation
links) is assembled here into a single string which the renderer then
substitutes into a template placeholder. Field values are passed through
verbatim; they are HTML fragments already.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum

from techies_site.config import MEDIA_DIRNAME, THUMBNAILS_SUBDIR

from ..models import CategoryRecord, NavLink, PersonalLink, PersonRecord

THUMBNAIL_URL_PREFIX = f"/{MEDIA_DIRNAME}/{THUMBNAILS_SUBDIR}/"
HOMEPAGE_CARD_SEPARATOR = "\n\n  <!-- end loop -->\n  "
CATEGORY_CARD_SEPARATOR = "\n\n<!-- end loop -->\n"


class ActiveNav(Enum):
    """Which fixed-page navigation entry renders as active."""

    NONE = "none"
    ABOUT = "about"
    SUBMIT = "submit"

    def context(self) -> dict[str, str]:
        """Placeholder values for the navigation partial.

        Examples
        --------
        >>> ActiveNav.ABOUT.context()
        {'ABOUT_ACTIVE': 'active', 'SUBMIT_ACTIVE': ''}
        """
        return {
            "ABOUT_ACTIVE": "active" if self is ActiveNav.ABOUT else "",
            "SUBMIT_ACTIVE": "active" if self is ActiveNav.SUBMIT else "",
        }


def canonical_link(path: str) -> str:
    """Canonical ``<link>`` for a root-relative page path."""
    return f'<link rel="canonical" href="{path}" />'


def stylesheet_link(href: str) -> str:
    """Extra stylesheet ``<link>`` appended to a page head."""
    return f"<link rel='stylesheet' href='{href}' type='text/css' media='all' />"


def relation_link(rel: str, target: NavLink) -> str:
    """Render a prev/next ``<link>`` for a neighbouring person."""
    return f"<link rel='{rel}' title='{target.name}' href='/{target.slug}/' />"


def person_head_extra(person: PersonRecord) -> str:
    """Canonical link plus prev/next relation links when present."""
    lines = [canonical_link(person.canonical_path)]
    if person.prev:
        lines.append(relation_link("prev", person.prev))
    if person.next:
        lines.append(relation_link("next", person.next))
    return "\n".join(lines)


def fixed_page_head_extra(slug: str, stylesheets: Sequence[str] = ()) -> str:
    """Canonical link for a fixed page followed by any extra stylesheets."""
    return "\n".join([canonical_link(f"/{slug}/"), *map(stylesheet_link, stylesheets)])


def personal_links_html(links: Iterable[PersonalLink]) -> str:
    """Serialize the ordered personal links into list items."""
    return "\n".join(
        f'        <li><a href="{link.url}">{link.label}</a></li>' for link in links
    )


def category_list_html(categories: Iterable[CategoryRecord]) -> str:
    """Category filter list for the homepage, one item per line."""
    return "\n".join(
        f'              <li id="{category.slug}" class="cat-item">'
        f'<a href="{category.canonical_path}">{category.display_name}</a></li>'
        for category in categories
    )


def category_list_inline_html(categories: Iterable[CategoryRecord]) -> str:
    """Category filter list for category pages, on a single line."""
    return "".join(
        f"<li id={category.slug} class='cat-item'>"
        f"<a href='{category.canonical_path}'>{category.display_name}</a></li>"
        for category in categories
    )


def homepage_card(person: PersonRecord) -> str:
    """Gallery card for the homepage; ``title`` is the listing title."""
    return (
        f'  <div id="post-{person.post_id}" class="techie-gallery col-xs-6 col-sm-4 col-md-3">\n'
        f'    <a class="techie-thumbnail" href="{person.canonical_path}">\n'
        f'      <img src="{THUMBNAIL_URL_PREFIX}{person.thumbnail}" width="280px" height="390px">\n'
        f'      <div class="techie-info">\n'
        f'        <p class="name">{person.name}</p>\n'
        f'        <p class="title">{person.title}&nbsp</p>\n'
        f"      </div>\n"
        f"    </a>\n"
        f"  </div>"
    )


def category_card(person: PersonRecord) -> str:
    """Gallery card for a category page."""
    return (
        f'  <div id="post-{person.post_id}" class="techie-gallery col-lg-3 col-md-4 col-sm-6">\n'
        f'    <a class="techie-thumbnail" href="{person.canonical_path}">\n'
        f'      <img src="{THUMBNAIL_URL_PREFIX}{person.thumbnail}" width="280px" height="390px">\n'
        f'      <p class="name">{person.name}</p>\n'
        f'      <p class="title">{person.title}&nbsp;</p>\n'
        f"    </a>\n"
        f"  </div>"
    )


def homepage_cards_html(people: Iterable[PersonRecord]) -> str:
    """Join homepage gallery cards in the given order."""
    return HOMEPAGE_CARD_SEPARATOR.join(homepage_card(person) for person in people)


def category_cards_html(people: Iterable[PersonRecord]) -> str:
    """Join category gallery cards in the given order."""
    return CATEGORY_CARD_SEPARATOR.join(category_card(person) for person in people)
