from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the jokes_api package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from jokes_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def clean_env(monkeypatch):
    for name in ("APP_ENV", "JOKES_FILE", "JOKES_HOST", "JOKES_PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    core_config.get_settings.cache_clear()
    yield monkeypatch
    core_config.get_settings.cache_clear()


def test_defaults(clean_env):
    settings = core_config.get_settings()
    assert settings.app_env == "dev"
    assert settings.jokes_file == core_config.DEFAULT_JOKES_FILE
    assert settings.host == "127.0.0.1"
    assert settings.port == 8000
    assert settings.log_level == "info"


def test_reads_environment(clean_env, tmp_path):
    clean_env.setenv("APP_ENV", "PROD")
    clean_env.setenv("JOKES_FILE", str(tmp_path / "jokes.json"))
    clean_env.setenv("JOKES_PORT", "9090")
    clean_env.setenv("LOG_LEVEL", "DEBUG")

    settings = core_config.get_settings()

    assert settings.app_env == "prod"
    assert settings.jokes_file == tmp_path / "jokes.json"
    assert settings.port == 9090
    assert settings.log_level == "debug"


def test_invalid_port_falls_back(clean_env):
    clean_env.setenv("JOKES_PORT", "http")
    assert core_config.get_settings().port == 8000
