"""Tests for fsfind configuration settings."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fsfind.configuration.settings import (
    SearchSettings,
    Settings,
    load_settings,
    resolve_settings,
    save_settings,
)
from fsfind.errors import InvalidConfigError
from fsfind.matching import MatchMode
from fsfind.search import MatchTarget


def test_resolve_settings_defaults_without_file(tmp_path: Path) -> None:
    settings = resolve_settings(tmp_path / "config.json")

    assert settings.search == SearchSettings()
    assert settings.search.max_depth == 16
    assert not (tmp_path / "config.json").exists()


def test_save_and_load_round_trip(tmp_path: Path) -> None:
    config_path = tmp_path / "nested" / "config.json"
    settings = Settings(search=SearchSettings(recurse=True, max_depth=3, match_mode=MatchMode.LITERAL))

    save_settings(settings, config_path)
    data = json.loads(config_path.read_text())
    assert data["search"]["match_mode"] == "literal"

    loaded = load_settings(config_path)
    assert loaded == settings


def test_load_settings_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_settings(tmp_path / "config.json")


def test_load_settings_rejects_invalid_values(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"search": {"max_depth": 0}}))

    with pytest.raises(InvalidConfigError):
        load_settings(config_path)


def test_load_settings_rejects_malformed_json(tmp_path: Path) -> None:
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json")

    with pytest.raises(InvalidConfigError):
        load_settings(config_path)


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "config.json"
    save_settings(Settings(search=SearchSettings(max_depth=5)), config_path)
    monkeypatch.setenv("FSFIND_MAX_DEPTH", "8")
    monkeypatch.setenv("FSFIND_RECURSE", "yes")
    monkeypatch.setenv("FSFIND_TARGET", "name")

    search = resolve_settings(config_path).search

    assert search.max_depth == 8
    assert search.recurse is True
    assert search.target is MatchTarget.NAME


def test_explicit_overrides_win_over_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FSFIND_MAX_DEPTH", "8")

    search = resolve_settings(
        tmp_path / "config.json",
        overrides={"max_depth": 2, "recurse": None},
    ).search

    assert search.max_depth == 2
    assert search.recurse is False


def test_invalid_environment_value(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FSFIND_MAX_DEPTH", "deep")

    with pytest.raises(InvalidConfigError):
        resolve_settings(tmp_path / "config.json")


def test_walker_config_from_settings() -> None:
    config = SearchSettings(recurse=True, max_depth=4, debug_logging=True).walker_config()

    assert config.recurse is True
    assert config.max_depth == 4
    assert config.debug_logging is True
