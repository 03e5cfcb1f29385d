"""Command-line launcher: options, corpus errors and frontend dispatch."""

from __future__ import annotations

import sys
import types
from pathlib import Path

import pytest
from typer.testing import CliRunner

import main
from backend.engine.navigation import Shell
from backend.models.word import Level

runner = CliRunner()


@pytest.fixture
def launched(monkeypatch: pytest.MonkeyPatch) -> list[Shell]:
    """Swap the vanilla frontend for a stub that records the shell it gets."""
    shells: list[Shell] = []
    stub = types.ModuleType("stub_frontend")
    stub.run = shells.append  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "stub_frontend", stub)
    monkeypatch.setitem(main._RUNNERS, main.Frontend.vanilla, "stub_frontend")
    return shells


def test_help() -> None:
    result = runner.invoke(main.app, ["--help"])
    assert result.exit_code == 0
    assert "--frontend" in result.output


def test_options_reach_the_shell(launched: list[Shell]) -> None:
    result = runner.invoke(
        main.app, ["-f", "vanilla", "-l", "hard", "-r", "3", "--seed", "5"]
    )

    assert result.exit_code == 0, result.output
    [shell] = launched
    assert shell.default_level is Level.HARD
    assert shell.session.max_rounds == 3


def test_seed_gives_reproducible_sessions(launched: list[Shell]) -> None:
    for _ in range(2):
        runner.invoke(main.app, ["-f", "vanilla", "--seed", "11"])

    words = []
    for shell in launched:
        shell.start_session()
        words.append(shell.session.state.current.word)
    assert words[0] == words[1]


def test_custom_word_list(tmp_path: Path, launched: list[Shell]) -> None:
    path = tmp_path / "words.json"
    path.write_text(
        '{"easy": [{"word": "hope", "hints": ["a", "b", "c"]}]}', encoding="utf-8"
    )

    result = runner.invoke(main.app, ["-f", "vanilla", "--words", str(path)])

    assert result.exit_code == 0, result.output
    assert launched[0].session.corpus.size(Level.EASY) == 1


def test_bad_word_list_exits_with_error(tmp_path: Path, launched: list[Shell]) -> None:
    path = tmp_path / "words.json"
    path.write_text('{"easy": [{"word": "x"}]}', encoding="utf-8")

    result = runner.invoke(main.app, ["-f", "vanilla", "--words", str(path)])

    assert result.exit_code == 1
    assert launched == []


def test_rounds_out_of_range() -> None:
    result = runner.invoke(main.app, ["-f", "vanilla", "-r", "0"])
    assert result.exit_code != 0


def test_picker_quit(launched: list[Shell]) -> None:
    result = runner.invoke(main.app, [], input="0\n")

    assert result.exit_code == 0
    assert "Goodbye" in result.output
    assert launched == []


def test_picker_launches_choice(launched: list[Shell]) -> None:
    result = runner.invoke(main.app, [], input="9\n1\n")

    assert result.exit_code == 0, result.output
    assert "Unknown option." in result.output
    assert len(launched) == 1
