"""Core gameplay logic for a word scramble session."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.engine.corpus import WordCorpus
from backend.engine.scrambler import Scrambler
from backend.engine.sessionstate import MAX_ROUNDS, SessionState
from backend.models.events import OutcomeKind, SessionEvent
from backend.models.word import Level

logger = logging.getLogger(__name__)

SessionObserver = Callable[[SessionEvent], None]


class ScrambleSession:
    """Orchestrates one word scramble session at a time.

    Display state is read through the properties below; terminal events
    (round won, lost or skipped, session over, no words) go to every
    subscribed observer.
    """

    def __init__(
        self,
        corpus: WordCorpus,
        rng: random.Random | None = None,
        max_rounds: int = MAX_ROUNDS,
    ) -> None:
        if max_rounds < 1:
            raise ValueError(f"max_rounds must be at least 1, got {max_rounds}.")
        self.corpus = corpus
        self.max_rounds = max_rounds
        self._rng = rng or random.Random()
        self._observers: list[SessionObserver] = []
        self.state = SessionState(max_rounds=max_rounds)

    # -- observers ------------------------------------------------------------

    def subscribe(self, observer: SessionObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: SessionObserver) -> None:
        self._observers.remove(observer)

    def _emit(self, event: SessionEvent) -> None:
        logger.debug("Session event: %s", event)
        for observer in list(self._observers):
            observer(event)

    # -- lifecycle ------------------------------------------------------------

    def start(self, level: Level) -> None:
        """Begin a new session at *level* and present its first word."""
        pool = self.corpus.snapshot(level, self._rng)
        self.state = SessionState(pool=pool, max_rounds=self.max_rounds, level=level)
        if not pool:
            logger.info("No words available for level %s", level)
            self._emit(SessionEvent(OutcomeKind.NO_WORDS))
            return

        logger.debug("Starting %s session with %s words", level, len(pool))
        self.state.active = True
        self.advance()

    def abort(self) -> None:
        """Drop the session, e.g. when the player navigates away."""
        if self.state.active:
            logger.debug(
                "Aborting session after %s rounds", self.state.rounds_completed
            )
        self.state = SessionState(max_rounds=self.max_rounds)

    def advance(self) -> None:
        """Draw the next word, or end the session if it is complete."""
        state = self.state
        if state.rounds_completed >= state.max_rounds:
            self._end()
            return

        while state.pool:
            entry = state.pool.pop(self._rng.randrange(len(state.pool)))
            if not Scrambler.is_scramblable(entry.word):
                logger.warning("Skipping unscramblable word %r", entry.word)
                continue
            state.begin_round(entry, Scrambler.scramble(entry.word, self._rng))
            return

        self._end()

    # -- player actions -------------------------------------------------------

    def submit(self, guess: str) -> bool:
        """Check *guess* against the current word.

        Returns True if the guess was consumed. Blank guesses and guesses
        outside an active round are ignored.
        """
        state = self.state
        if not state.active or state.current is None:
            return False

        guess = guess.strip().casefold()
        if not guess:
            return False

        if guess == state.current.word.casefold():
            self._finish_round(OutcomeKind.WIN, state.current.word)
            return True

        state.spend_attempt()
        logger.debug(
            "Wrong guess %r, %s attempts left", guess, state.attempts_left
        )
        if state.attempts_left <= 0:
            self._finish_round(OutcomeKind.LOSS, state.current.word)
        return True

    def skip(self) -> bool:
        """Move on without revealing the word. The skipped round still counts."""
        state = self.state
        if not state.active or state.current is None:
            return False
        self._finish_round(OutcomeKind.SKIP, state.current.word)
        return True

    # -- queries --------------------------------------------------------------

    @property
    def active(self) -> bool:
        return self.state.active

    @property
    def level(self) -> Level | None:
        return self.state.level

    @property
    def scrambled(self) -> str:
        return self.state.scrambled

    @property
    def current_hint(self) -> str | None:
        return self.state.current_hint

    @property
    def attempts_left(self) -> int:
        return self.state.attempts_left

    @property
    def rounds_completed(self) -> int:
        return self.state.rounds_completed

    # -- helpers --------------------------------------------------------------

    def _finish_round(self, kind: OutcomeKind, word: str) -> None:
        state = self.state

        state.rounds_completed += 1
        if kind is OutcomeKind.WIN:
            state.wins += 1
        elif kind is OutcomeKind.LOSS:
            state.losses += 1
        else:
            state.skips += 1

        self._emit(SessionEvent(kind, word=None if kind is OutcomeKind.SKIP else word))

        # An observer may have aborted the session in response.
        if self.state is state and state.active:
            self.advance()

    def _end(self) -> None:
        state = self.state
        logger.debug(
            "Session over: %s rounds, %s won, %s lost, %s skipped",
            state.rounds_completed, state.wins, state.losses, state.skips,
        )
        self.state = SessionState(max_rounds=self.max_rounds)
        self._emit(
            SessionEvent(
                OutcomeKind.SESSION_END,
                rounds=state.rounds_completed,
                wins=state.wins,
            )
        )
