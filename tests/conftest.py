"""Pytest configuration and shared fixtures.

- Forces ``DISABLE_FILE_LOGS=1`` to avoid writing log files during tests.
- Ensures the project root is available on ``sys.path`` for imports.
- Provides builders for a miniature legacy site and for store records.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("DISABLE_FILE_LOGS", "1")  # Avoid creating log files during tests

# Ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)

from techies_site.pipeline.models import (  # noqa: E402
    CategoryRecord,
    NavLink,
    PersonalLink,
    PersonRecord,
)

TEMPLATE_DIR = ROOT / "templates"

LONG_CONTENT = (
    "<p><strong>How did you get started?</strong> I took apart the family radio "
    "when I was nine and never quite put it back together.</p>\n"
    "<p>After that it was one machine after another.</p>"
)


def legacy_card(post_id: int, slug: str, name: str, title: str) -> str:
    """One homepage gallery card in the legacy markup."""
    return (
        f'  <div id="post-{post_id}" class="techie-gallery col-xs-6 col-sm-4 col-md-3">\n'
        f'    <a class="techie-thumbnail" href="/{slug}/">\n'
        f'      <img src="/d1lhy388c2xgxf/thumbnails/{slug}.jpg" width="280px" height="390px">\n'
        f'      <div class="techie-info">\n'
        f'        <p class="name">{name}</p>\n'
        f'        <p class="title">{title}&nbsp</p>\n'
        f"      </div>\n"
        f"    </a>\n"
        f"  </div>\n"
    )


def legacy_listing(cards: list[str], categories: dict[str, str] | None = None) -> str:
    """A legacy homepage with gallery cards and a category filter bar."""
    filter_bar = "".join(
        f'<li id="{slug}" class="cat-item"><a href="/category/{slug}/">{name}</a></li>\n'
        for slug, name in (categories or {}).items()
    )
    return (
        "<html><head><title>Techies</title></head><body>\n"
        f'<ul class="categories">\n{filter_bar}</ul>\n'
        '<div class="row gallery">\n'
        + "".join(cards)
        + "</div>\n</body></html>\n"
    )


def legacy_person_page(
    post_id: int | None,
    slug: str,
    name: str,
    *,
    role: str = "Staff  Engineer",
    content: str = LONG_CONTENT,
    prev: tuple[str, str] | None = None,
    next: tuple[str, str] | None = None,
) -> str:
    """A legacy person document with every marker the extractor reads."""
    head = ["<html><head>", "<title>" + name + " | Techies</title>"]
    if post_id is not None:
        head.append(f"<link rel='shortlink' href='/?p={post_id}' />")
    if prev:
        head.append(f"<link rel='prev' title='{prev[0]}' href='/{prev[1]}/' />")
    if next:
        head.append(f"<link rel='next' title='{next[0]}' href='/{next[1]}/' />")
    head.append("</head><body>")
    return "\n".join(head) + (
        '\n<div class="row">\n'
        '  <div class="featured-image col-md-12">\n'
        f'    <img src="/d1lhy388c2xgxf/portraits/{slug}-hero.jpg" alt="" />\n'
        "  </div>\n"
        '  <div class="techie-name col-md-12">\n'
        f"    {name}\n"
        "  </div>\n"
        "</div>\n"
        '<div class="row">\n'
        '  <div class="col-md-6">\n'
        '    <ul class="meta">\n'
        '      <li class="icon years"><p class="label">Years</p><p class="text">12</p></li>\n'
        '      <li class="icon role"><p class="label">Role</p>'
        f'<p class="col-xs-12 col-md-8 text">{role}</p></li>\n'
        '      <li class="icon location"><p class="text"> London </p></li>\n'
        '      <li class="icon date"><p class="text">May 2016</p></li>\n'
        "    </ul>\n"
        "  </div>\n"
        '  <div class="col-md-6 abstract">\n'
        "    <p>Builds <em>compilers</em> for fun.</p>\n"
        "  </div>\n"
        "</div>\n"
        '<div class="row">\n'
        '  <div class="col-xs-12 col-md-3 links">\n'
        '    <div class="personal-links"><ul>\n'
        '<li><a href="https://example.org/">Website</a></li>\n'
        '<li><a href="https://blog.example.org/">Blog</a></li>\n'
        "</ul></div>\n"
        "  </div>\n"
        '  <div class="col-xs-12 col-md-6 post">\n'
        f"    {content}\n"
        "  </div>\n"
        '  <div class="col-xs-12 col-md-3 photo">\n'
        f'    <img src="/d1lhy388c2xgxf/thumbnails/{slug}.jpg" alt="" />\n'
        "  </div>\n"
        "</div>\n</body></html>\n"
    )


def legacy_category_page(display_name: str, post_ids: list[int]) -> str:
    cards = "".join(
        f'<div id="post-{post_id}" class="techie-gallery col-lg-3">x</div>\n'
        for post_id in post_ids
    )
    return (
        "<html><head>"
        f'<link rel="alternate" type="application/rss+xml" '
        f'title="Techies &raquo; {display_name} Category Feed" href="/feed/" />'
        f"</head><body>\n{cards}</body></html>\n"
    )


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def legacy_site(tmp_path: Path) -> Path:
    """A two-person legacy site with two categories and static files."""
    site = tmp_path / "legacy_site"
    write_file(
        site / "index.html",
        legacy_listing(
            [
                legacy_card(42, "ada", "Ada", "Engineer"),
                legacy_card(7, "grace", "Grace", "Admiral"),
            ],
            {"backend": "Back End", "frontend": "Front End"},
        ),
    )
    write_file(
        site / "ada" / "index.html",
        legacy_person_page(42, "ada", "Ada", next=("Grace", "grace")),
    )
    write_file(
        site / "grace" / "index.html",
        legacy_person_page(None, "grace", "Grace", prev=("Ada", "ada")),
    )
    write_file(site / "category" / "backend" / "index.html", legacy_category_page("Backend", [42]))
    write_file(
        site / "category" / "frontend" / "index.html",
        legacy_category_page("Frontend", [42, 99]),
    )
    write_file(site / "category" / "feed" / "index.html", legacy_category_page("Feed", [1]))
    write_file(site / "assets" / "css" / "techies.css", "body { background: url('/assets/images/bg.png'); }\n")
    write_file(site / "assets" / "images" / "bg.png", "png")
    write_file(site / "assets" / "images" / "techies-logo.png", "png")
    write_file(site / "assets" / "css" / "bootstrap.min.css", "")
    write_file(site / "assets" / "css" / "wpgform.css", "")
    write_file(site / "assets" / "js" / "jquery.min.js", "")
    write_file(site / "assets" / "js" / "techies.js", "")
    for slug in ("ada", "grace"):
        write_file(site / "d1lhy388c2xgxf" / "portraits" / f"{slug}-hero.jpg", "jpg")
        write_file(site / "d1lhy388c2xgxf" / "thumbnails" / f"{slug}.jpg", "jpg")
    write_file(site / "favicon.ico", "ico")
    return site


@pytest.fixture
def template_dir() -> Path:
    """The templates shipped with the project."""
    return TEMPLATE_DIR


@pytest.fixture
def ada() -> PersonRecord:
    return PersonRecord(
        slug="ada",
        post_id=42,
        name="Ada",
        title="Engineer",
        role="Staff Engineer",
        location="London",
        years_in_tech="12",
        interview_date="May 2016",
        hero_image="ada-hero.jpg",
        thumbnail="ada.jpg",
        abstract="<p>Builds compilers.</p>",
        interview_content=LONG_CONTENT,
        personal_links=[
            PersonalLink("https://example.org/", "Website"),
            PersonalLink("https://blog.example.org/", "Blog"),
        ],
        next=NavLink(name="Grace", slug="grace"),
    )


@pytest.fixture
def grace() -> PersonRecord:
    return PersonRecord(
        slug="grace",
        post_id=7,
        name="Grace",
        title="Admiral",
        hero_image="grace-hero.jpg",
        thumbnail="grace.jpg",
        interview_content="<p>Short.</p>",
        prev=NavLink(name="Ada", slug="ada"),
    )


@pytest.fixture
def categories() -> list[CategoryRecord]:
    return [
        CategoryRecord(slug="backend", display_name="Back End", post_ids=[42]),
        CategoryRecord(slug="frontend", display_name="Front End", post_ids=[42, 99]),
    ]
