"""Templating utilities for static page generation.

This module handles template file loading and context-driven rendering.
Templates are plain text with ``{{NAME}}`` placeholders; there are no loops
or conditionals. Repeated markup (gallery cards, link lists) is assembled by
the caller as a single string before it is substituted.

Boundaries
----------
- Does not write to disk; only reads template files.
- Rendering is literal, single-pass and non-escaping: substituted values are
  never re-scanned for placeholders, and placeholder-like text whose name is
  not in the context is left untouched.

Examples
--------
>>> render_template("<h1>{{NAME}}</h1>{{UNKNOWN}}", {"NAME": "Ada"})
'<h1>Ada</h1>{{UNKNOWN}}'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from pathlib import Path

from techies_site.exceptions import StructuralFailureError

PLACEHOLDER_PATTERN = re.compile(r"\{\{([A-Z0-9_]+)\}\}")


def load_template(path: Path) -> str:
    r"""Read the contents of a template file as a string.

    Parameters
    ----------
    path : Path
        Path to the template file to be loaded.

    Returns
    -------
    str
        Contents of the template file.

    Raises
    ------
    StructuralFailureError
        If the file does not exist or cannot be read.
    """
    try:
        with path.open("r", encoding="utf-8") as fh:
            return fh.read()
    except OSError as exc:
        raise StructuralFailureError(
            f"Template not readable: {path}: {exc}", context={"path": str(path)}
        ) from exc


def render_template(template_content: str, context: Mapping[str, str]) -> str:
    """Replace every recognized placeholder with its context value.

    Parameters
    ----------
    template_content : str
        The template text containing ``{{PLACEHOLDERS}}``.
    context : Mapping[str, str]
        Mapping from placeholder names to their precomputed string values.

    Returns
    -------
    str
        The rendered text.
    """

    def replace_func(match: re.Match[str]) -> str:
        name = match.group(1)
        if name in context:
            return context[name]
        return match.group(0)

    return PLACEHOLDER_PATTERN.sub(replace_func, template_content)


class TemplateSet:
    """Templates of one site build, loaded once and keyed by name.

    Parameters
    ----------
    template_dir : Path
        Directory holding the templates.
    names : Mapping[str, str]
        Template key -> path relative to ``template_dir``.

    Raises
    ------
    StructuralFailureError
        If any named template is missing.
    """

    def __init__(self, template_dir: Path, names: Mapping[str, str]) -> None:
        self.template_dir = template_dir
        self._templates = {
            key: load_template(template_dir / relative)
            for key, relative in names.items()
        }

    def __getitem__(self, key: str) -> str:
        return self._templates[key]

    def render(self, key: str, context: Mapping[str, str]) -> str:
        """Render the template stored under ``key`` with ``context``."""
        return render_template(self._templates[key], context)
