"""Individual verification checks over a rendered output tree.

Every check reads files, never writes, and records its findings on the
:class:`~techies_site.pipeline.report.RunReport` it is given. Integrity
mismatches are errors; broken asset references and legacy remnants are
warnings. No check stops early: all findings are collected.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterable, Sequence
from pathlib import Path

from techies_site.config import (
    CATEGORY_DIRNAME,
    CONTENT_SNIPPET_LENGTH,
    CONTENT_SNIPPET_MIN_LENGTH,
    FAVICON_FILENAME,
    INDEX_FILENAME,
    LEGACY_REMNANTS,
    LOCAL_ASSET_PREFIXES,
    ROBOTS_FILENAME,
)

from ..models import CategoryRecord, PersonRecord
from ..report import RunReport

logger = logging.getLogger(__name__)

_PREFIX_ALTERNATION = "|".join(re.escape(prefix) for prefix in LOCAL_ASSET_PREFIXES)
HTML_REFERENCE_PATTERN = re.compile(
    r"""(?:src|href)=["'](/(?:""" + _PREFIX_ALTERNATION + r""")[^"']+)["']"""
)
CSS_URL_PATTERN = re.compile(
    r"""url\(['"]?(/(?:""" + _PREFIX_ALTERNATION + r""")[^'")]+)['"]?\)"""
)


def _read_text(path: Path) -> str:
    # copied legacy files (stylesheets) are not guaranteed to be UTF-8
    return path.read_text(encoding="utf-8", errors="replace")


def _read(path: Path) -> str | None:
    if not path.is_file():
        return None
    return _read_text(path)


def check_person_pages(
    output_dir: Path, people: Sequence[PersonRecord], report: RunReport
) -> None:
    """Each person page exists and carries the record's identifying values."""
    for person in people:
        html = _read(output_dir / person.slug / INDEX_FILENAME)
        if not report.check(
            html is not None, f"Missing: {person.slug}/{INDEX_FILENAME}", logger
        ):
            continue
        report.check(
            person.name in html,
            f'{person.slug}: name "{person.name}" not found in output',
            logger,
        )
        report.check(
            person.hero_image in html,
            f'{person.slug}: hero image "{person.hero_image}" not found in output',
            logger,
        )
        report.check(
            person.thumbnail in html,
            f'{person.slug}: thumbnail "{person.thumbnail}" not found in output',
            logger,
        )
        if len(person.interview_content) > CONTENT_SNIPPET_MIN_LENGTH:
            snippet = person.interview_content[:CONTENT_SNIPPET_LENGTH]
            report.check(
                snippet in html,
                f"{person.slug}: interview content not found in output",
                logger,
            )


def check_category_pages(
    output_dir: Path,
    categories: Sequence[CategoryRecord],
    known_post_ids: Collection[int],
    report: RunReport,
) -> None:
    """Each category page exists and carries a card for every listed post id.

    Notes
    -----
    Only ids that resolve to a known person are required: dangling ids are
    dropped at render time and are not integrity failures.
    """
    for category in categories:
        relative = f"{CATEGORY_DIRNAME}/{category.slug}/{INDEX_FILENAME}"
        html = _read(output_dir / CATEGORY_DIRNAME / category.slug / INDEX_FILENAME)
        if not report.check(html is not None, f"Missing: {relative}", logger):
            continue
        for post_id in category.post_ids:
            if post_id not in known_post_ids:
                continue
            report.check(
                f'id="post-{post_id}"' in html,
                f"{CATEGORY_DIRNAME}/{category.slug}: missing post-{post_id}",
                logger,
            )


def check_homepage(
    output_dir: Path, people: Sequence[PersonRecord], report: RunReport
) -> None:
    """The homepage references every person's card and canonical link."""
    html = _read(output_dir / INDEX_FILENAME)
    if not report.check(html is not None, f"Missing: {INDEX_FILENAME}", logger):
        return
    for person in people:
        report.check(
            person.card_marker in html,
            f"Homepage missing: post-{person.post_id} ({person.slug})",
            logger,
        )
        report.check(
            f'href="{person.canonical_path}"' in html,
            f"Homepage missing link to: {person.slug}",
            logger,
        )


def check_required_files(
    output_dir: Path, fixed_pages: Iterable[str], report: RunReport
) -> None:
    """Fixed pages, the favicon and the robots policy must all exist."""
    required = [f"{slug}/{INDEX_FILENAME}" for slug in fixed_pages]
    required += [FAVICON_FILENAME, ROBOTS_FILENAME]
    for relative in required:
        report.check(
            (output_dir / relative).is_file(), f"Missing: {relative}", logger
        )


def find_html_files(output_dir: Path) -> list[Path]:
    """Every ``.html`` document under ``output_dir``, in sorted order."""
    return sorted(path for path in output_dir.rglob("*.html") if path.is_file())


def _strip_suffixes(reference: str) -> str:
    return reference.split("?", 1)[0].split("#", 1)[0]


def check_asset_references(
    output_dir: Path,
    html_files: Iterable[Path],
    stylesheet: Path | None,
    report: RunReport,
) -> set[str]:
    r"""Confirm every local root-relative resource reference resolves to a file.

    Parameters
    ----------
    output_dir : Path
        Root of the rendered tree; references resolve against it.
    html_files : Iterable[Path]
        Documents to scan for ``src=`` and ``href=`` references.
    stylesheet : Path | None
        Stylesheet to scan for ``url()`` references, if it exists.
    report : RunReport
        Receives one warning per unresolved reference.

    Returns
    -------
    set[str]
        The distinct references checked.
    """
    checked: set[str] = set()

    def resolve(reference: str, source: str) -> None:
        reference = _strip_suffixes(reference)
        if reference in checked:
            return
        checked.add(reference)
        if not (output_dir / reference.lstrip("/")).exists():
            report.warn(
                f"{source} references {reference} but file not found in output", logger
            )

    for path in html_files:
        source = path.relative_to(output_dir).as_posix()
        for reference in HTML_REFERENCE_PATTERN.findall(_read_text(path)):
            resolve(reference, source)
    if stylesheet is not None and stylesheet.is_file():
        for reference in CSS_URL_PATTERN.findall(_read_text(stylesheet)):
            resolve(reference, stylesheet.name)
    return checked


def check_legacy_remnants(
    output_dir: Path, html_files: Iterable[Path], report: RunReport
) -> None:
    """Warn about every document still carrying a legacy-platform artifact."""
    for path in html_files:
        html = _read_text(path)
        source = path.relative_to(output_dir).as_posix()
        for needle, description in LEGACY_REMNANTS.items():
            if needle in html:
                report.warn(f"{source} {description}", logger)
