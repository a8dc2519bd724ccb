"""Tests for the listing pass and the category pass."""

from pathlib import Path

from conftest import legacy_card, legacy_category_page, legacy_listing, write_file

from techies_site.pipeline.extractor.categories import parse_categories, parse_category_page
from techies_site.pipeline.extractor.listing import (
    ListingEntry,
    parse_category_filter,
    parse_listing,
)


def test_parse_listing_in_document_order():
    html = legacy_listing(
        [legacy_card(7, "grace", "Grace", "Admiral"), legacy_card(42, "ada", "Ada", "Engineer")]
    )
    assert parse_listing(html) == [
        ListingEntry(post_id=7, slug="grace", name="Grace", title="Admiral"),
        ListingEntry(post_id=42, slug="ada", name="Ada", title="Engineer"),
    ]


def test_parse_listing_skips_malformed_cards():
    malformed = '<div id="post-5" class="techie-gallery"><a href="/x/"><p class="name">X</p></a></div>'
    html = legacy_listing([malformed, legacy_card(42, "ada", "Ada", "Engineer")])
    assert [entry.slug for entry in parse_listing(html)] == ["ada"]


def test_parse_listing_empty_title():
    html = legacy_listing([legacy_card(1, "sam", "Sam", "")])
    assert parse_listing(html)[0].title == ""


def test_parse_category_filter():
    html = legacy_listing([], {"backend": "Back End", "qa": "Quality"})
    assert parse_category_filter(html) == {"backend": "Back End", "qa": "Quality"}


def test_category_display_name_resolution_order():
    page = legacy_category_page("Developer", [3, 1])
    assert parse_category_page("dev", page, {"dev": "Developers"}).display_name == "Developers"
    assert parse_category_page("dev", page, {}).display_name == "Developer"
    assert parse_category_page("dev", "<div id=\"post-1\">").display_name == "dev"


def test_category_post_ids_keep_document_order():
    record = parse_category_page("dev", legacy_category_page("Developer", [3, 1, 2]))
    assert record.post_ids == [3, 1, 2]


def test_parse_categories_skips_feed_and_sorts(tmp_path: Path):
    root = tmp_path / "site"
    write_file(root / "category" / "zeta" / "index.html", legacy_category_page("Zeta", [1]))
    write_file(root / "category" / "alpha" / "index.html", legacy_category_page("Alpha", [2]))
    write_file(root / "category" / "feed" / "index.html", legacy_category_page("Feed", [3]))
    (root / "category" / "empty").mkdir()
    write_file(root / "category" / "notes.txt", "not a category")

    categories = parse_categories(root)

    assert [category.slug for category in categories] == ["alpha", "zeta"]
    assert categories[0].display_name == "Alpha"


def test_parse_categories_without_tree(tmp_path: Path):
    assert parse_categories(tmp_path) == []
