"""Tests for the per-field extraction rules."""

from conftest import LONG_CONTENT, legacy_person_page

from techies_site.pipeline.extractor.rules import (
    PERSON_RULES,
    DocumentContext,
    ExtractionRule,
    apply_rules,
    extract_abstract,
    extract_hero_image,
    extract_interview_content,
    extract_name,
    extract_personal_links,
    extract_post_id,
    extract_thumbnail,
)
from techies_site.pipeline.models import NavLink, PersonalLink


def _ctx(html: str) -> DocumentContext:
    return DocumentContext(slug="ada", html=html)


def test_person_rules_on_full_document():
    html = legacy_person_page(42, "ada", "Ada", prev=("Bob", "bob"), next=("Grace", "grace"))
    values = apply_rules(_ctx(html))
    assert values["post_id"] == 42
    assert values["name"] == "Ada"
    assert values["hero_image"] == "ada-hero.jpg"
    assert values["thumbnail"] == "ada.jpg"
    assert values["years_in_tech"] == "12"
    assert values["role"] == "Staff Engineer"
    assert values["location"] == "London"
    assert values["interview_date"] == "May 2016"
    assert values["abstract"] == "<p>Builds <em>compilers</em> for fun.</p>"
    assert values["interview_content"] == LONG_CONTENT
    assert values["personal_links"] == [
        PersonalLink("https://example.org/", "Website"),
        PersonalLink("https://blog.example.org/", "Blog"),
    ]
    assert values["prev"] == NavLink(name="Bob", slug="bob")
    assert values["next"] == NavLink(name="Grace", slug="grace")


def test_rules_cover_every_page_field_once():
    fields = [rule.field for rule in PERSON_RULES]
    assert len(fields) == len(set(fields))
    assert "title" not in fields
    assert "slug" not in fields


def test_empty_document_yields_defaults():
    values = apply_rules(_ctx("<html></html>"))
    assert values["post_id"] == 0
    assert values["name"] == ""
    assert values["abstract"] == ""
    assert values["personal_links"] == []
    assert values["prev"] is None
    assert values["next"] is None


def test_post_id_accepts_relative_shortlink():
    assert extract_post_id(_ctx("<link rel='shortlink' href='?p=12' />")) == 12
    assert extract_post_id(_ctx("<link rel='shortlink' href='/?p=12' />")) == 12
    assert extract_post_id(_ctx("<link rel='shortlink' href='/p/12' />")) is None


def test_name_is_normalized():
    html = '<div class="techie-name col-md-12">\n   Ada&nbsp;\n  Lovelace </div>'
    assert extract_name(_ctx(html)) == "Ada Lovelace"


def test_images_require_media_prefix():
    html = (
        '<div class="featured-image col-md-12"><img src="/uploads/x.jpg"></div>'
        '<div class="col-xs-12 col-md-3 photo"><img src="/uploads/y.jpg"></div>'
    )
    assert extract_hero_image(_ctx(html)) is None
    assert extract_thumbnail(_ctx(html)) is None


def test_content_with_nested_divs_survives():
    content = "<div class='q'><p>Q?</p></div>\n<p>A.</p>"
    html = legacy_person_page(1, "ada", "Ada", content=content)
    assert extract_interview_content(_ctx(html)) == content


def test_regions_fall_back_to_first_closing_div():
    html = (
        '<div class="col-md-6 abstract"><p>short</p></div>'
        '<div class="col-xs-12 col-md-6 post"><p>body</p></div>'
    )
    assert extract_abstract(_ctx(html)) == "<p>short</p>"
    assert extract_interview_content(_ctx(html)) == "<p>body</p>"


def test_personal_links_section_without_links():
    html = '<div class="personal-links"><ul></ul></div>'
    assert extract_personal_links(_ctx(html)) == []
    assert extract_personal_links(_ctx("<p>none</p>")) is None


def test_apply_rules_uses_custom_rules_and_defaults():
    rules = (
        ExtractionRule("slug_upper", lambda ctx: ctx.slug.upper()),
        ExtractionRule("missing", lambda ctx: None, lambda: "fallback"),
    )
    assert apply_rules(_ctx(""), rules) == {"slug_upper": "ADA", "missing": "fallback"}
