"""Page rendering for the static Techies site.

This module turns store records into finished HTML documents, one function
per page kind. Each returns a :class:`RenderedPage` with its clean-URL
output path; nothing here touches the output tree, which keeps rendering
deterministic and easy to test.

Output path convention
----------------------
- ``index.html`` for the homepage
- ``{slug}/index.html`` for each person
- ``category/{slug}/index.html`` for each category
- ``about/index.html`` and ``submit/index.html`` for the fixed pages

Examples
--------
>>> from pathlib import Path
>>> from techies_site.pipeline.website_generator.renderer import load_site_templates
>>> templates = load_site_templates(Path("templates"))  # doctest: +SKIP
>>> page = render_person_page(templates, person)  # doctest: +SKIP
>>> page.path  # doctest: +SKIP
PurePosixPath('ada/index.html')
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from techies_site.config import (
    ABOUT_TEMPLATE,
    CATEGORY_DIRNAME,
    CATEGORY_TEMPLATE,
    HOMEPAGE_TEMPLATE,
    INDEX_FILENAME,
    PARTIAL_TEMPLATES,
    PERSON_TEMPLATE,
    SUBMIT_EXTRA_STYLESHEET,
    SUBMIT_TEMPLATE,
)

from ..models import CategoryRecord, PersonRecord
from .fragments import (
    ActiveNav,
    category_cards_html,
    category_list_html,
    category_list_inline_html,
    fixed_page_head_extra,
    homepage_cards_html,
    person_head_extra,
    personal_links_html,
)
from .templating import TemplateSet


@dataclass(frozen=True)
class RenderedPage:
    """A finished document and its path relative to the output root."""

    path: PurePosixPath
    html: str


@dataclass(frozen=True)
class FixedPage:
    """A static informational page with no per-record data."""

    slug: str
    template: str
    active_nav: ActiveNav
    stylesheets: tuple[str, ...] = ()


FIXED_PAGES: tuple[FixedPage, ...] = (
    FixedPage("about", "about", ActiveNav.ABOUT),
    FixedPage("submit", "submit", ActiveNav.SUBMIT, (SUBMIT_EXTRA_STYLESHEET,)),
)


def load_site_templates(template_dir: Path) -> TemplateSet:
    """Load every partial and page template the site needs.

    Raises
    ------
    StructuralFailureError
        If any template is missing.
    """
    names = dict(PARTIAL_TEMPLATES)
    names.update(
        {
            "person": PERSON_TEMPLATE,
            "homepage": HOMEPAGE_TEMPLATE,
            "category": CATEGORY_TEMPLATE,
            "about": ABOUT_TEMPLATE,
            "submit": SUBMIT_TEMPLATE,
        }
    )
    return TemplateSet(template_dir, names)


def page_path(*segments: str) -> PurePosixPath:
    """Clean-URL document path: one directory per page holding ``index.html``."""
    return PurePosixPath(*segments, INDEX_FILENAME)


def _layout_context(
    templates: TemplateSet, head_extra: str, active_nav: ActiveNav = ActiveNav.NONE
) -> dict[str, str]:
    """Placeholder values shared by every page kind."""
    return {
        "HEAD": templates.render("head", {"HEAD_EXTRA": head_extra}),
        "NAV": templates.render("nav", active_nav.context()),
        "FOOTER": templates["footer"],
        "SCRIPTS": templates["scripts"],
    }


def render_person_page(templates: TemplateSet, person: PersonRecord) -> RenderedPage:
    """Render a person's page from every field of the record."""
    context = _layout_context(templates, person_head_extra(person))
    context.update(
        {
            "NAME": person.name,
            "TITLE": person.title,
            "HERO_IMAGE": person.hero_image,
            "THUMBNAIL": person.thumbnail,
            "YEARS_IN_TECH": person.years_in_tech,
            "ROLE": person.role,
            "LOCATION": person.location,
            "INTERVIEW_DATE": person.interview_date,
            "ABSTRACT": person.abstract,
            "PERSONAL_LINKS": personal_links_html(person.personal_links),
            "INTERVIEW_CONTENT": person.interview_content,
        }
    )
    return RenderedPage(page_path(person.slug), templates.render("person", context))


def render_homepage(
    templates: TemplateSet,
    people: Sequence[PersonRecord],
    categories: Sequence[CategoryRecord],
) -> RenderedPage:
    """Render the homepage: every category and every person, in store order."""
    context = _layout_context(templates, "")
    context.update(
        {
            "CATEGORY_LIST": category_list_html(categories),
            "GALLERY_CARDS": homepage_cards_html(people),
        }
    )
    return RenderedPage(
        PurePosixPath(INDEX_FILENAME), templates.render("homepage", context)
    )


def resolve_members(
    category: CategoryRecord, people_by_post_id: Mapping[int, PersonRecord]
) -> list[PersonRecord]:
    """Resolve ``post_ids`` to people in display order, dropping dangling ids."""
    return [
        people_by_post_id[post_id]
        for post_id in category.post_ids
        if post_id in people_by_post_id
    ]


def render_category_page(
    templates: TemplateSet,
    category: CategoryRecord,
    categories: Sequence[CategoryRecord],
    people_by_post_id: Mapping[int, PersonRecord],
) -> RenderedPage:
    """Render one category page with the cards of its resolvable members."""
    context = _layout_context(templates, "")
    context.update(
        {
            "CATEGORY_NAME": category.display_name,
            "CATEGORY_LIST_INLINE": category_list_inline_html(categories),
            "GALLERY_CARDS": category_cards_html(
                resolve_members(category, people_by_post_id)
            ),
        }
    )
    return RenderedPage(
        page_path(CATEGORY_DIRNAME, category.slug),
        templates.render("category", context),
    )


def render_fixed_page(templates: TemplateSet, page: FixedPage) -> RenderedPage:
    """Render an informational page with its navigation entry active."""
    context = _layout_context(
        templates, fixed_page_head_extra(page.slug, page.stylesheets), page.active_nav
    )
    return RenderedPage(page_path(page.slug), templates.render(page.template, context))


def render_site(
    templates: TemplateSet,
    people: Sequence[PersonRecord],
    categories: Sequence[CategoryRecord],
) -> Iterable[RenderedPage]:
    """Yield every page of the site: people, homepage, categories, fixed pages."""
    for person in people:
        yield render_person_page(templates, person)
    yield render_homepage(templates, people, categories)
    people_by_post_id = {person.post_id: person for person in people}
    for category in categories:
        yield render_category_page(templates, category, categories, people_by_post_id)
    for page in FIXED_PAGES:
        yield render_fixed_page(templates, page)


def write_page(page: RenderedPage, output_root: Path) -> Path:
    r"""Write ``page`` under ``output_root``, creating its directory.

    Returns
    -------
    Path
        The written file.
    """
    target = output_root.joinpath(*page.path.parts)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(page.html, encoding="utf-8")
    return target
