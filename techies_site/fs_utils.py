"""Filesystem utilities to validate and safely remove the output tree.

The site build wipes its output directory before every run. These helpers
make sure that wipe can never reach the filesystem root, the project root,
or a directory holding pipeline inputs.

Functions
---------
- ``create_safe_path``: Validate and stamp a path as safe for removal.
- ``safe_rmtree``: Remove a validated directory tree.
"""

from __future__ import annotations

import logging
import shutil
from collections.abc import Iterable
from pathlib import Path
from typing import NewType

from techies_site import config as _config
from techies_site.exceptions import StructuralFailureError

logger = logging.getLogger(__name__)

# NewType used as a static "seal" to indicate the path is validated for removal.
_ValidatedPath = NewType("_ValidatedPath", Path)


def create_safe_path(
    path_to_validate: Path, protected: Iterable[Path] = ()
) -> _ValidatedPath:
    r"""Validate and stamp a Path as safe for destructive operations.

    Checks performed:
    - Never allows deletion of the filesystem root or the user's home.
    - Never allows deletion of ``PROJECT_ROOT`` itself.
    - Never allows deletion of a directory that is, or contains, one of the
      ``protected`` paths (legacy site, store, templates).

    Parameters
    ----------
    path_to_validate : Path
        The directory path to be validated for safe removal.
    protected : Iterable[Path], optional
        Input locations the removal must not reach.

    Returns
    -------
    _ValidatedPath
        The path, stamped for safe usage by removal helpers.

    Raises
    ------
    StructuralFailureError
        If the path fails any of the checks.

    Examples
    --------
    >>> from pathlib import Path
    >>> create_safe_path(Path("/"))  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
      ...
    StructuralFailureError: STRUCTURAL_FAILURE: Refusing to remove '/'.
    """
    target_path = Path(path_to_validate).resolve()
    forbidden = {
        Path(target_path.anchor),
        Path.home().resolve(),
        _config.PROJECT_ROOT.resolve(),
    }
    if target_path in forbidden:
        raise StructuralFailureError(
            f"Refusing to remove '{target_path}'.", context={"path": str(target_path)}
        )
    for protected_path in protected:
        resolved = Path(protected_path).resolve()
        if resolved == target_path or resolved.is_relative_to(target_path):
            raise StructuralFailureError(
                f"Refusing to remove '{target_path}': it contains '{resolved}'.",
                context={"path": str(target_path), "protected": str(resolved)},
            )
    return _ValidatedPath(target_path)


def safe_rmtree(safe_path: _ValidatedPath | Path, protected: Iterable[Path] = ()) -> None:
    r"""Remove a directory tree after validating it with :func:`create_safe_path`.

    Parameters
    ----------
    safe_path : Path or _ValidatedPath
        The target directory.
    protected : Iterable[Path], optional
        Input locations the removal must not reach.

    Notes
    -----
    If the path does not exist, the function is a no-op.
    """
    validated = create_safe_path(Path(safe_path), protected)
    if validated.exists():
        logger.info("Removing previous output tree: %s", validated)
        shutil.rmtree(validated)
    else:
        logger.debug("Path '%s' does not exist; nothing to remove.", validated)


__all__ = ["create_safe_path", "safe_rmtree"]
