"""
tests/test_shared/test_config.py - Tests for environment-driven settings.
"""

from __future__ import annotations

from pathlib import Path

from helpshelf_shared.config import Settings


def test_defaults(monkeypatch):
    for var in ("CSV_PATH", "RESOURCES_PATH", "LOG_LEVEL", "CARD_PRIMARY_NEEDS"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.csv_path == Path("data/approved.csv")
    assert s.resources_path == Path("data/resources.json")
    assert s.card_primary_needs == 2
    assert "{domain}" in s.favicon_url_template


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CSV_PATH", "/tmp/export.csv")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    s = Settings(_env_file=None)
    assert s.csv_path == Path("/tmp/export.csv")
    assert s.log_level == "DEBUG"


def test_cors_origins_list(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", "http://a.test, http://b.test,")
    s = Settings(_env_file=None)
    assert s.cors_origins_list == ["http://a.test", "http://b.test"]
