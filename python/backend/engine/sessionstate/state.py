"""Tracks the mutable state of a word scramble session."""

from __future__ import annotations

from dataclasses import dataclass, field

from backend.models.word import Level, WordEntry

MAX_ATTEMPTS = 4
MAX_ROUNDS = 10


@dataclass
class SessionState:
    """Holds the remaining pool, the current word and the round counters.

    A fresh instance is inactive; the engine replaces it on every start,
    session end and abort.
    """

    pool: list[WordEntry] = field(default_factory=list)
    current: WordEntry | None = None
    scrambled: str = ""
    attempts_left: int = 0
    rounds_completed: int = 0
    max_rounds: int = MAX_ROUNDS
    hint_index: int = 0
    active: bool = False
    level: Level | None = None
    wins: int = 0
    losses: int = 0
    skips: int = 0

    # -- round setup ----------------------------------------------------------

    def begin_round(self, entry: WordEntry, scrambled: str) -> None:
        self.current = entry
        self.scrambled = scrambled
        self.attempts_left = MAX_ATTEMPTS
        self.hint_index = 0

    # -- attempts and hints ---------------------------------------------------

    def spend_attempt(self) -> None:
        """Use up one attempt, disclosing the next hint if any remain."""
        self.attempts_left -= 1
        if 0 < self.attempts_left < MAX_ATTEMPTS:
            self.hint_index = MAX_ATTEMPTS - self.attempts_left

    @property
    def current_hint(self) -> str | None:
        if self.current is None or self.hint_index == 0:
            return None
        return self.current.hints[self.hint_index - 1]
