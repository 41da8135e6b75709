# tests/test_settings.py
"""
Settings Tests - Unit Tests for Configuration and Validators

This module tests the Settings model and the validation functions it uses.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fixer.config.settings (Settings and get_settings for testing)
- fixer.shared.validators (validation functions for testing)
"""
import os
import subprocess
import sys
from pathlib import Path

import pytest

from pydantic import ValidationError

import fixer
from fixer.config.settings import Settings, get_settings
from fixer.shared.validators import (
    validate_access_key,
    validate_base_url,
    validate_currency_code,
)


class TestValidators:
    @pytest.mark.parametrize("code, valid", [
        ("EUR", True),
        ("SEK", True),
        ("eur", False),
        ("EURO", False),
        ("", False),
        ("E1R", False),
    ])
    def test_currency_code(self, code, valid):
        assert validate_currency_code(code) is valid

    @pytest.mark.parametrize("key, valid", [
        ("", True),
        ("0123456789abcdef", True),
        ("short", True),
        ("abc123", True),
        ("has a space in it", False),
    ])
    def test_access_key(self, key, valid):
        assert validate_access_key(key) is valid

    @pytest.mark.parametrize("url, valid", [
        ("http://data.fixer.io/api", True),
        ("https://api.exchangeratesapi.io", True),
        ("http://127.0.0.1:8080", True),
        ("ftp://example.com", False),
        ("example.com", False),
        ("http://[::1", False),
        ("http://host:99999", False),
        ("", False),
    ])
    def test_base_url(self, url, valid):
        assert validate_base_url(url) is valid


class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("FIXER_ACCESS_KEY", "FIXER_BASE_URL", "FIXER_USER_AGENT", "FIXER_TIMEOUT_SECONDS", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        cfg = Settings(_env_file=None)

        assert cfg.access_key == ""
        assert cfg.base_url == ""
        assert cfg.user_agent == ""
        assert cfg.timeout_seconds == 20.0
        assert cfg.log_level == "INFO"

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("FIXER_ACCESS_KEY", "abcdef123456")
        monkeypatch.setenv("FIXER_BASE_URL", "https://api.exchangeratesapi.io")
        monkeypatch.setenv("FIXER_TIMEOUT_SECONDS", "7.5")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        cfg = Settings(_env_file=None)

        assert cfg.access_key == "abcdef123456"
        assert cfg.base_url == "https://api.exchangeratesapi.io"
        assert cfg.timeout_seconds == 7.5
        assert cfg.log_level == "DEBUG"

    def test_invalid_base_url(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FIXER_BASE_URL="not-a-url")

    def test_invalid_access_key(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FIXER_ACCESS_KEY="abc def ghi")

    def test_invalid_timeout(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, FIXER_TIMEOUT_SECONDS=0)

    @pytest.mark.parametrize("name, want", [
        ("warn", "WARNING"),
        ("Warning", "WARNING"),
        ("fatal", "CRITICAL"),
        (" error ", "ERROR"),
        ("trace", "INFO"),
        ("verbose", "INFO"),
    ])
    def test_log_level_names(self, monkeypatch, name, want):
        monkeypatch.setenv("LOG_LEVEL", name)
        assert Settings(_env_file=None).log_level == want

    def test_short_access_key(self, monkeypatch):
        monkeypatch.setenv("FIXER_ACCESS_KEY", "abc123")
        assert Settings(_env_file=None).access_key == "abc123"


class TestGetSettings:
    @pytest.fixture(autouse=True)
    def clear_cache(self):
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cache_clear_reloads(self, monkeypatch):
        monkeypatch.setenv("FIXER_USER_AGENT", "first/1.0")
        assert get_settings().user_agent == "first/1.0"

        monkeypatch.setenv("FIXER_USER_AGENT", "second/1.0")
        assert get_settings().user_agent == "first/1.0"
        get_settings.cache_clear()
        assert get_settings().user_agent == "second/1.0"


class TestImport:
    @pytest.mark.parametrize("env", [
        {"LOG_LEVEL": "warn"},
        {"LOG_LEVEL": "trace"},
        {"FIXER_ACCESS_KEY": "abc123"},
        {"FIXER_BASE_URL": "not-a-url"},
        {"FIXER_TIMEOUT_SECONDS": "-1"},
    ])
    def test_import_does_not_load_settings(self, env, tmp_path):
        src_dir = Path(fixer.__file__).resolve().parents[1]
        child_env = dict(os.environ, **env)
        child_env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(src_dir), os.environ.get("PYTHONPATH")) if p
        )

        result = subprocess.run(
            [sys.executable, "-c", "import fixer; fixer.Client(fixer.access_key('k3y'))"],
            cwd=tmp_path,
            env=child_env,
            capture_output=True,
            text=True,
        )

        assert result.returncode == 0, result.stderr
