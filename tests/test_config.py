"""Tests for environment based settings."""

from __future__ import annotations

from pathlib import Path

import pytest

from wikart import config


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    for name in ("WIKART_ARTICLES", "WIKART_LOG_FILE", "WIKART_SEARCH_LIMIT"):
        monkeypatch.delenv(name, raising=False)

    settings = config.Settings.from_env()

    assert settings.articles_dir == Path("wiki_articles")
    assert settings.log_file is None
    assert settings.search_limit == 25


def test_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("WIKART_ARTICLES", str(tmp_path))
    monkeypatch.setenv("WIKART_LOG_FILE", "wikart.log")
    monkeypatch.setenv("WIKART_SEARCH_LIMIT", "10")

    settings = config.Settings.from_env()

    assert settings.articles_dir == tmp_path
    assert settings.log_file == "wikart.log"
    assert settings.search_limit == 10


def test_search_limit_is_clamped() -> None:
    assert config.Settings(search_limit=100).search_limit == 25
    assert config.Settings(search_limit=0).search_limit == 1


def test_search_limit_must_be_numeric() -> None:
    with pytest.raises(ValueError, match="must be an integer"):
        config.Settings(search_limit="many")
