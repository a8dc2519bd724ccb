"""Runtime path settings for the pipeline stages.

This module provides :class:`SiteSettings`, which resolves the directories
each stage reads from and writes to. Defaults come from
:mod:`techies_site.config`; a project ``.env`` file and the process
environment may override them, and command-line flags override both.

Examples
--------
>>> from techies_site.pipeline.settings import SiteSettings
>>> settings = SiteSettings()
>>> settings.output_dir.name
'_output'
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

import techies_site.config as _project_config
from techies_site.exceptions import ConfigurationError


class SiteSettings:
    r"""Directory configuration shared by extraction, build and verification.

    Attributes
    ----------
    legacy_site_dir : Path
        Root of the rendered legacy site (``index.html``, person and
        ``category/`` directories, ``assets/`` and media trees).
    data_dir : Path
        Directory holding the intermediate store documents.
    template_dir : Path
        Directory holding page templates and ``partials/``.
    output_dir : Path
        Directory the static site is rendered into.

    Notes
    -----
    Environment variables: ``TECHIES_LEGACY_SITE_DIR``, ``TECHIES_DATA_DIR``,
    ``TECHIES_TEMPLATE_DIR`` and ``TECHIES_OUTPUT_DIR``.
    """

    def __init__(
        self,
        legacy_site_dir: Path | str | None = None,
        data_dir: Path | str | None = None,
        template_dir: Path | str | None = None,
        output_dir: Path | str | None = None,
    ) -> None:
        env_path = Path(_project_config.ENV_FILE)
        if env_path.exists():
            load_dotenv(env_path, override=False)
        self.legacy_site_dir: Path = self._resolve(
            legacy_site_dir, "TECHIES_LEGACY_SITE_DIR", _project_config.LEGACY_SITE_DIR
        )
        self.data_dir: Path = self._resolve(
            data_dir, "TECHIES_DATA_DIR", _project_config.DATA_DIR
        )
        self.template_dir: Path = self._resolve(
            template_dir, "TECHIES_TEMPLATE_DIR", _project_config.TEMPLATE_DIR
        )
        self.output_dir: Path = self._resolve(
            output_dir, "TECHIES_OUTPUT_DIR", _project_config.OUTPUT_DIR
        )

    @staticmethod
    def _resolve(explicit: Path | str | None, env_name: str, default: Path) -> Path:
        if explicit is not None:
            value = str(explicit)
        else:
            value = os.getenv(env_name, "") or str(default)
        if not value.strip():
            raise ConfigurationError(
                f"Empty path configured for {env_name}", context={"env": env_name}
            )
        return Path(value)

    def __repr__(self) -> str:
        return (
            f"SiteSettings(legacy_site_dir={self.legacy_site_dir!s}, "
            f"data_dir={self.data_dir!s}, template_dir={self.template_dir!s}, "
            f"output_dir={self.output_dir!s})"
        )
