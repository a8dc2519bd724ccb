"""Tests for SiteSettings path resolution."""

from pathlib import Path

import pytest

import techies_site.config as config
from techies_site.exceptions import ConfigurationError
from techies_site.pipeline.settings import SiteSettings

ENV_NAMES = (
    "TECHIES_LEGACY_SITE_DIR",
    "TECHIES_DATA_DIR",
    "TECHIES_TEMPLATE_DIR",
    "TECHIES_OUTPUT_DIR",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch, tmp_path):
    for name in ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config, "ENV_FILE", tmp_path / "missing.env")


def test_defaults_come_from_config():
    settings = SiteSettings()
    assert settings.legacy_site_dir == config.LEGACY_SITE_DIR
    assert settings.data_dir == config.DATA_DIR
    assert settings.template_dir == config.TEMPLATE_DIR
    assert settings.output_dir == config.OUTPUT_DIR


def test_environment_overrides_defaults(monkeypatch, tmp_path):
    monkeypatch.setenv("TECHIES_OUTPUT_DIR", str(tmp_path / "site"))
    assert SiteSettings().output_dir == tmp_path / "site"


def test_explicit_argument_overrides_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TECHIES_DATA_DIR", str(tmp_path / "env"))
    assert SiteSettings(data_dir=tmp_path / "arg").data_dir == tmp_path / "arg"


def test_env_file_is_loaded(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(f"TECHIES_TEMPLATE_DIR={tmp_path / 'tpl'}\n", encoding="utf-8")
    monkeypatch.setattr(config, "ENV_FILE", env_file)
    # load_dotenv writes into os.environ; register the key so monkeypatch restores it
    monkeypatch.setenv("TECHIES_TEMPLATE_DIR", "")
    monkeypatch.delenv("TECHIES_TEMPLATE_DIR")

    assert SiteSettings().template_dir == tmp_path / "tpl"


def test_empty_path_is_configuration_error():
    with pytest.raises(ConfigurationError):
        SiteSettings(output_dir="  ")


def test_repr_names_every_directory(tmp_path):
    text = repr(SiteSettings(output_dir=tmp_path))
    assert "output_dir=" in text and str(tmp_path) in text
