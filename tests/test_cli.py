# tests/test_cli.py

from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner

import cli
import main as main_module
from models import Task
from storage import KeyValueStore, Storage


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch: pytest.MonkeyPatch) -> list:
    calls: list = []
    monkeypatch.setattr(main_module, "setup_logging", lambda **kw: calls.append(kw))
    return calls


def run(store_file: Path, keys: str):
    runner = CliRunner()
    return runner.invoke(
        main_module.main,
        ["--file", str(store_file), "--no-alt-screen"],
        input=keys,
    )


def saved(store_file: Path) -> list:
    return Storage(KeyValueStore(store_file)).load()


def test_full_session_scenario(store_file: Path) -> None:
    result = run(store_file, "add Buy milk\nx 1\nedit 1\nBuy oat milk\nexit\n")
    assert result.exit_code == 0, result.output
    assert "Goodbye." in result.output
    assert saved(store_file) == [Task("Buy oat milk", True)]

    result = run(store_file, "rm 1\nexit\n")
    assert result.exit_code == 0, result.output
    assert 'Removed "Buy oat milk".' in result.output
    assert saved(store_file) == []


def test_state_is_redrawn_from_previous_session(store_file: Path) -> None:
    Storage(KeyValueStore(store_file)).save([Task("persisted", completed=True)])
    result = run(store_file, "exit\n")
    assert "persisted" in result.output
    assert "[x]" in result.output


def test_prompted_add_and_blank_add(store_file: Path) -> None:
    result = run(store_file, "add\nWalk dog\nadd\n   \nexit\n")
    assert result.exit_code == 0, result.output
    assert "Text required." in result.output
    assert saved(store_file) == [Task("Walk dog")]


def test_done_and_undo(store_file: Path) -> None:
    result = run(store_file, "add a\nadd b\ndone 2\nundo 2\ndone 1\nexit\n")
    assert result.exit_code == 0, result.output
    assert saved(store_file) == [Task("a", True), Task("b", False)]


def test_edit_keeps_text_on_empty_answer(store_file: Path) -> None:
    result = run(store_file, "add keep\nedit 1\n\nexit\n")
    assert result.exit_code == 0, result.output
    assert saved(store_file) == [Task("keep")]


def test_invalid_numbers_and_unknown_command(store_file: Path) -> None:
    result = run(store_file, "add a\nrm 9\nx one\nedit\nfrobnicate\nexit\n")
    assert result.exit_code == 0, result.output
    assert "No item #9." in result.output
    assert "Invalid item number." in result.output
    assert "Usage: edit <n>" in result.output
    assert "Unknown command." in result.output
    assert saved(store_file) == [Task("a")]


def test_clear_and_help(store_file: Path) -> None:
    result = run(store_file, "add a\nadd b\nhelp\n\nclear\nexit\n")
    assert result.exit_code == 0, result.output
    assert "Commands:" in result.output
    assert saved(store_file) == []


def test_eof_exits_cleanly(store_file: Path) -> None:
    result = run(store_file, "add a\n")
    assert result.exit_code == 0, result.output
    assert "Interrupted. Goodbye." in result.output
    assert saved(store_file) == [Task("a")]


def test_corrupt_store_starts_empty(store_file: Path) -> None:
    store_file.write_text('{"todos": "[{broken"}', encoding="utf-8")
    result = run(store_file, "add fresh\nexit\n")
    assert result.exit_code == 0, result.output
    assert saved(store_file) == [Task("fresh")]


def test_inline_add_keeps_internal_whitespace(store_file: Path) -> None:
    result = run(store_file, "add   Buy   oat  milk  \nexit\n")
    assert result.exit_code == 0, result.output
    assert saved(store_file) == [Task("Buy   oat  milk")]


def test_input_ending_at_edit_prompt_cancels_edit(store_file: Path) -> None:
    result = run(store_file, "add keep me\nedit 1\n")
    assert result.exit_code == 0, result.output
    assert "Interrupted. Goodbye." in result.output
    assert saved(store_file) == [Task("keep me")]


def test_prompt_edit_abort_is_cancelled(monkeypatch: pytest.MonkeyPatch) -> None:
    def abort(*args, **kwargs):
        raise click.Abort()

    monkeypatch.setattr(cli.click, "prompt", abort)
    assert cli.prompt_edit("old").is_cancelled


def test_prompt_edit_returns_submitted_text(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(cli.click, "prompt", lambda *args, **kwargs: "  new  ")
    result = cli.prompt_edit("old")
    assert not result.is_cancelled
    assert result.text == "  new  "
