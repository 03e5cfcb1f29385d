"""Typed outcome events emitted by the scramble session engine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OutcomeKind(StrEnum):
    WIN = "win"
    LOSS = "loss"
    SKIP = "skip"
    SESSION_END = "session_end"
    NO_WORDS = "no_words"


@dataclass(frozen=True)
class SessionEvent:
    """One terminal event of a round or session.

    ``word`` is set for WIN and LOSS only. ``rounds`` and ``wins`` summarise
    the session on SESSION_END.
    """

    kind: OutcomeKind
    word: str | None = None
    rounds: int = 0
    wins: int = 0
