"""User-facing text shared by every frontend.

Frontends subscribe to the session, turn each event into a ``Notice`` with
``describe`` and decide how to show it (modal box, panel, plain print).
"""

from __future__ import annotations

from dataclasses import dataclass

from backend.engine.gameplay import ScrambleSession
from backend.models.events import OutcomeKind, SessionEvent

TITLE = "Mind Game Royale"
NO_WORDS_TEXT = "No words available for this level."
TIC_TAC_TOE_TEXT = "Tic Tac Toe is coming soon."
RULES_TEXT = (
    "Guess the scrambled word. You have 4 attempts. "
    "A hint appears only after the first wrong attempt. "
    "If you guess correctly or run out of tries, the next word appears "
    "automatically. You can return to the main menu anytime."
)


@dataclass(frozen=True)
class Notice:
    kind: OutcomeKind
    title: str
    message: str


def describe(event: SessionEvent) -> Notice | None:
    """Return the notice to show for *event*, or ``None`` for silent ones."""
    if event.kind is OutcomeKind.WIN:
        return Notice(event.kind, "Correct", f"Correct! The word was: {event.word}")
    if event.kind is OutcomeKind.LOSS:
        return Notice(
            event.kind, "Moving On", f"Out of tries! The correct word was: {event.word}"
        )
    if event.kind is OutcomeKind.SESSION_END:
        return Notice(
            event.kind,
            "Session Finished",
            f"Session finished! You solved {event.wins} of {event.rounds} words. "
            "Returning to level selection.",
        )
    if event.kind is OutcomeKind.NO_WORDS:
        return Notice(event.kind, "No Words", NO_WORDS_TEXT)
    return None


def attempts_text(session: ScrambleSession) -> str:
    return f"Attempts left: {session.attempts_left}" if session.active else ""


def hint_text(session: ScrambleSession) -> str:
    hint = session.current_hint
    return f"Hint: {hint}" if hint else ""


def progress_text(session: ScrambleSession) -> str:
    if not session.active or session.level is None:
        return ""
    total = min(
        session.max_rounds,
        session.rounds_completed + 1 + len(session.state.pool),
    )
    return f"{session.level.label}  ·  word {session.rounds_completed + 1} of {total}"
