"""Intermediate store: JSON persistence of the people and category collections.

The store is the only hand-off point between extraction and rendering. It
is written in full by the extractor and read in full by the renderer and the
verifier; a missing document is a structural failure.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from techies_site.config import CATEGORIES_FILENAME, PEOPLE_FILENAME
from techies_site.exceptions import DataValidationError, StructuralFailureError

from .models import CategoryRecord, PersonRecord

logger = logging.getLogger(__name__)


def save_store(
    data_dir: Path,
    people: Sequence[PersonRecord],
    categories: Sequence[CategoryRecord],
) -> tuple[Path, Path]:
    """Write both collections as pretty-printed JSON documents.

    Parameters
    ----------
    data_dir : Path
        Store directory; created when missing.
    people : Sequence[PersonRecord]
        People in canonical (listing) order.
    categories : Sequence[CategoryRecord]
        Categories in slug order.

    Returns
    -------
    tuple[Path, Path]
        Paths of the people and categories documents.
    """
    data_dir.mkdir(parents=True, exist_ok=True)
    people_path = data_dir / PEOPLE_FILENAME
    categories_path = data_dir / CATEGORIES_FILENAME
    _write_json(people_path, [person.to_dict() for person in people])
    _write_json(categories_path, [category.to_dict() for category in categories])
    logger.info("Wrote %s (%d people)", people_path, len(people))
    logger.info("Wrote %s (%d categories)", categories_path, len(categories))
    return people_path, categories_path


def load_people(data_dir: Path) -> list[PersonRecord]:
    """Load the people collection, preserving stored order."""
    return [
        PersonRecord.from_dict(item)
        for item in _read_json_list(data_dir / PEOPLE_FILENAME)
    ]


def load_categories(data_dir: Path) -> list[CategoryRecord]:
    """Load the category collection, preserving stored order."""
    return [
        CategoryRecord.from_dict(item)
        for item in _read_json_list(data_dir / CATEGORIES_FILENAME)
    ]


def load_store(data_dir: Path) -> tuple[list[PersonRecord], list[CategoryRecord]]:
    r"""Load both collections from ``data_dir``.

    Raises
    ------
    StructuralFailureError
        If either document is missing or is not valid JSON.
    DataValidationError
        If a record does not follow the store contract.
    """
    return load_people(data_dir), load_categories(data_dir)


def _write_json(path: Path, payload: list[dict[str, Any]]) -> None:
    path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2) + "\n", encoding="utf-8"
    )


def _read_json_list(path: Path) -> list[Any]:
    if not path.is_file():
        raise StructuralFailureError(
            f"Store document not found: {path}", context={"path": str(path)}
        )
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise StructuralFailureError(
            f"Store document is not valid JSON: {path}: {exc}",
            context={"path": str(path)},
        ) from exc
    if not isinstance(payload, list):
        raise DataValidationError(
            f"Store document must hold a JSON array: {path}",
            context={"path": str(path)},
        )
    return payload
