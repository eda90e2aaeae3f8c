# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from config import get_settings, read_dotenv, truthy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("TODO_FILE", "TODO_ALT_SCREEN", "TODO_LOG_DIR", "TODO_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = get_settings(dotenv={})
    assert s.store_file.name == "store.json"
    assert s.alt_screen is True
    assert s.log_level == logging.WARNING


def test_env_wins_over_dotenv(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TODO_FILE", str(tmp_path / "env.json"))
    s = get_settings(dotenv={"TODO_FILE": "/nowhere/dotenv.json", "TODO_ALT_SCREEN": "off",
                             "TODO_LOG_LEVEL": "debug"})
    assert s.store_file == tmp_path / "env.json"
    assert s.alt_screen is False
    assert s.log_level == logging.DEBUG


def test_bad_log_level_falls_back() -> None:
    assert get_settings(dotenv={"TODO_LOG_LEVEL": "chatty"}).log_level == logging.WARNING


def test_read_dotenv(tmp_path: Path) -> None:
    env = tmp_path / ".env"
    env.write_text("# palette\nTODO_DONE='#00ff00'\n\nbroken line\nTODO_ALT_SCREEN = 0\n", encoding="utf-8")
    assert read_dotenv(env) == {"TODO_DONE": "#00ff00", "TODO_ALT_SCREEN": "0"}
    assert read_dotenv(tmp_path / "missing") == {}


@pytest.mark.parametrize("raw,expected", [(None, True), ("1", True), ("yes", True), ("off", False), ("0", False), ("", False)])
def test_truthy(raw, expected) -> None:
    assert truthy(raw) is expected
