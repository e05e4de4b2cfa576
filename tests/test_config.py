"""Tests for configuration module."""

from pathlib import Path

import pytest

from revision_queries.config import AppConfig, ResourceConfig, Settings, load_settings
from revision_queries.resources import FIXTURES_DIR


@pytest.fixture
def clean_env(monkeypatch):
    for key in ["REVISION_QUERIES_FIXTURES_DIR", "LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_resource_config_defaults_to_bundled_fixtures(clean_env):
    config = ResourceConfig()
    assert config.fixtures_dir == ""
    assert config.locator().root == FIXTURES_DIR
    assert "soup04.json" in config.locator().names()


def test_resource_config_points_locator_at_env_dir(clean_env, tmp_path: Path):
    (tmp_path / "local.json").write_text("{}", encoding="utf-8")
    clean_env.setenv("REVISION_QUERIES_FIXTURES_DIR", str(tmp_path))
    locator = ResourceConfig().locator()
    assert locator.root == tmp_path.resolve()
    assert locator.names() == ["local.json"]


def test_resource_config_explicit_dir_wins_over_env(clean_env, tmp_path: Path):
    clean_env.setenv("REVISION_QUERIES_FIXTURES_DIR", "/nowhere")
    config = ResourceConfig(fixtures_dir=str(tmp_path))
    assert config.locator().root == tmp_path.resolve()


def test_app_config_log_level_default(clean_env):
    assert AppConfig().log_level == "INFO"


def test_app_config_log_level_from_env(clean_env):
    clean_env.setenv("LOG_LEVEL", "warning")
    assert AppConfig().log_level == "warning"


def test_settings_are_frozen(clean_env):
    settings = Settings()
    with pytest.raises(AttributeError):
        settings.app = AppConfig(log_level="DEBUG")


def test_load_settings_reads_current_environment(clean_env, tmp_path: Path):
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("REVISION_QUERIES_FIXTURES_DIR", str(tmp_path))
    settings = load_settings()
    assert isinstance(settings, Settings)
    assert settings.app.log_level == "debug"
    assert settings.resources.locator().root == tmp_path.resolve()
