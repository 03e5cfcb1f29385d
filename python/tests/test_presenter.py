"""Presenter text and terminal input parsing."""

from __future__ import annotations

import pytest

from backend.engine.gameplay import ScrambleSession
from backend.models.events import OutcomeKind, SessionEvent
from backend.models.word import Level
from conftest import corpus_of
from frontend.cli.input_handler import resolve_key, resolve_line
from frontend.presenter import (
    NO_WORDS_TEXT,
    Notice,
    attempts_text,
    describe,
    hint_text,
    progress_text,
)


# -- notices ------------------------------------------------------------------


def test_win_notice_reveals_word() -> None:
    notice = describe(SessionEvent(OutcomeKind.WIN, word="hope"))
    assert notice == Notice(OutcomeKind.WIN, "Correct", "Correct! The word was: hope")


def test_loss_notice_reveals_word() -> None:
    notice = describe(SessionEvent(OutcomeKind.LOSS, word="wisdom"))
    assert notice is not None
    assert notice.message == "Out of tries! The correct word was: wisdom"


def test_skip_is_silent() -> None:
    assert describe(SessionEvent(OutcomeKind.SKIP)) is None


def test_session_end_summarises() -> None:
    notice = describe(SessionEvent(OutcomeKind.SESSION_END, rounds=10, wins=7))
    assert notice is not None
    assert "7 of 10" in notice.message
    assert notice.message.startswith("Session finished!")


def test_no_words_notice() -> None:
    notice = describe(SessionEvent(OutcomeKind.NO_WORDS))
    assert notice is not None
    assert notice.message == NO_WORDS_TEXT


@pytest.mark.parametrize(
    "kind",
    [OutcomeKind.WIN, OutcomeKind.LOSS, OutcomeKind.SESSION_END, OutcomeKind.NO_WORDS],
)
def test_notice_carries_event_kind(kind: OutcomeKind) -> None:
    notice = describe(SessionEvent(kind, word="hope", rounds=1, wins=1))
    assert notice is not None
    assert notice.kind is kind


# -- labels -------------------------------------------------------------------


def test_labels_follow_session() -> None:
    session = ScrambleSession(corpus_of("hope", "love", "unity"))
    assert attempts_text(session) == ""
    assert hint_text(session) == ""
    assert progress_text(session) == ""

    session.start(Level.EASY)
    assert attempts_text(session) == "Attempts left: 4"
    assert hint_text(session) == ""
    assert progress_text(session).endswith("word 1 of 3")

    session.submit("wrong")
    assert attempts_text(session) == "Attempts left: 3"
    assert hint_text(session).startswith("Hint: ")
    assert hint_text(session).endswith("-hint-0")


# -- terminal input -----------------------------------------------------------


@pytest.mark.parametrize(
    "line, action",
    [
        (":skip", "skip"),
        ("  :S ", "skip"),
        (":back", "back"),
        (":m", "back"),
        ("hope", "guess"),
        ("", "guess"),
        ("skip", "guess"),
    ],
)
def test_resolve_line(line: str, action: str) -> None:
    assert resolve_line(line) == action


@pytest.mark.parametrize(
    "ch, action",
    [("q", "quit"), ("\x03", "quit"), ("b", "back"), ("S", "start"), ("\r", "enter"), ("1", "1"), ("\x07", "")],
)
def test_resolve_key(ch: str, action: str) -> None:
    assert resolve_key(ch) == action
