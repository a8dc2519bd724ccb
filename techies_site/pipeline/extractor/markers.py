"""Literal-marker text primitives for reading legacy HTML.

The legacy pages are generated by a CMS theme with stable markup, so fields
are located by literal start markers and the next expected boundary rather
than by a DOM parse. Every helper returns ``None`` when a marker is absent;
callers decide what a miss means.
"""

from __future__ import annotations

import re
from pathlib import Path

_NBSP_PATTERN = re.compile(r"&nbsp;?")
_WHITESPACE_PATTERN = re.compile(r"\s+")


def extract_between(text: str, start_marker: str, end_marker: str) -> str | None:
    """Return the text strictly between ``start_marker`` and the next ``end_marker``.

    Parameters
    ----------
    text : str
        Document or region to search.
    start_marker : str
        Literal opening marker; the first occurrence is used.
    end_marker : str
        Literal closing marker searched for after the opening marker.

    Returns
    -------
    str | None
        Enclosed text, or ``None`` if either marker is missing.

    Examples
    --------
    >>> extract_between('<li class="a">x</li>', '<li class="a">', '</li>')
    'x'
    >>> extract_between('abc', '<li>', '</li>') is None
    True
    """
    start = text.find(start_marker)
    if start == -1:
        return None
    after_start = start + len(start_marker)
    end = text.find(end_marker, after_start)
    if end == -1:
        return None
    return text[after_start:end]


def extract_match(text: str, pattern: str | re.Pattern[str]) -> str | None:
    """Return the first capture group of the first match, or ``None``."""
    match = re.search(pattern, text)
    return match.group(1) if match else None


def extract_region(
    text: str,
    start_marker: str,
    sibling_markers: tuple[str, ...],
    fallback_end: str | None = None,
) -> str | None:
    """Return a long-form region closed by the nearest known sibling boundary.

    The region starts right after ``start_marker``. Its end is the nearest
    occurrence of any of ``sibling_markers`` (literal markup of the element
    expected to follow the region). When none is found the region ends at
    the first ``fallback_end``; with no fallback the region is a miss.

    Examples
    --------
    >>> html = '<div class="a">\\n<p>x</p>\\n  </div>\\n<div class="b">'
    >>> extract_region(html, '<div class="a">', ('\\n  </div>\\n<div class="b">',))
    '<p>x</p>'
    >>> extract_region('<div class="a"><p>y</p></div>', '<div class="a">', ('<nav>',), '</div>')
    '<p>y</p>'
    """
    start = text.find(start_marker)
    if start == -1:
        return None
    after_start = start + len(start_marker)
    candidates = [
        index
        for index in (text.find(marker, after_start) for marker in sibling_markers)
        if index != -1
    ]
    if candidates:
        end = min(candidates)
    elif fallback_end is not None:
        end = text.find(fallback_end, after_start)
        if end == -1:
            return None
    else:
        return None
    return text[after_start:end].strip()


def find_all_ints(text: str, pattern: str | re.Pattern[str]) -> list[int]:
    """Return every first-group match of ``pattern`` converted to ``int``, in order."""
    return [int(match.group(1)) for match in re.finditer(pattern, text)]


def normalize_text(value: str) -> str:
    """Collapse whitespace and drop ``&nbsp`` entities from a short text field.

    Examples
    --------
    >>> normalize_text('  Staff&nbsp;\\n  Engineer&nbsp')
    'Staff Engineer'
    """
    return _WHITESPACE_PATTERN.sub(" ", _NBSP_PATTERN.sub(" ", value)).strip()


def read_document(path: Path) -> str:
    """Read a legacy document as UTF-8, replacing undecodable bytes with U+FFFD."""
    return path.read_text(encoding="utf-8", errors="replace")
