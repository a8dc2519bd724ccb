"""Tests for the JSON intermediate store."""

from pathlib import Path

import pytest

from techies_site.exceptions import DataValidationError, StructuralFailureError
from techies_site.pipeline.models import PersonRecord
from techies_site.pipeline.store import load_categories, load_people, load_store, save_store


def test_save_and_load_preserve_order(tmp_path: Path, ada, grace, categories):
    data_dir = tmp_path / "nested" / "data"
    people_path, categories_path = save_store(data_dir, [grace, ada], categories)

    assert people_path.name == "people.json"
    assert categories_path.name == "categories.json"
    people, loaded_categories = load_store(data_dir)
    assert people == [grace, ada]
    assert loaded_categories == categories


def test_store_is_pretty_printed_utf8(tmp_path: Path):
    save_store(tmp_path, [PersonRecord(slug="jose", post_id=1, name="José")], [])
    text = (tmp_path / "people.json").read_text(encoding="utf-8")
    assert "José" in text
    assert text.endswith("\n")
    assert '\n  {\n    "slug": "jose"' in text


def test_missing_documents_are_structural_failures(tmp_path: Path):
    with pytest.raises(StructuralFailureError):
        load_people(tmp_path)
    (tmp_path / "people.json").write_text("[]", encoding="utf-8")
    with pytest.raises(StructuralFailureError):
        load_store(tmp_path)


def test_invalid_json_is_structural_failure(tmp_path: Path):
    (tmp_path / "categories.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(StructuralFailureError):
        load_categories(tmp_path)


def test_non_list_document_rejected(tmp_path: Path):
    (tmp_path / "people.json").write_text('{"slug": "ada"}', encoding="utf-8")
    with pytest.raises(DataValidationError):
        load_people(tmp_path)
