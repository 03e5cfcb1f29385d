"""Shared fixtures: small hand-built corpora, a seeded random source and
an event recorder subscribed to the session."""

from __future__ import annotations

import random

import pytest

from backend.engine.corpus import WordCorpus
from backend.engine.gameplay import ScrambleSession
from backend.engine.navigation import Shell
from backend.models.events import SessionEvent
from backend.models.word import Level, WordEntry

SEED = 1234


# -- helpers ------------------------------------------------------------------


def entry(word: str) -> WordEntry:
    """Build an entry whose hints name their position, e.g. ``hope-hint-0``."""
    return WordEntry(word=word, hints=tuple(f"{word}-hint-{i}" for i in range(3)))


def corpus_of(*words: str, level: Level = Level.EASY) -> WordCorpus:
    return WordCorpus({level: [entry(w) for w in words]})


class EventRecorder:
    """Session observer that keeps every event it receives."""

    def __init__(self) -> None:
        self.events: list[SessionEvent] = []

    def __call__(self, event: SessionEvent) -> None:
        self.events.append(event)

    @property
    def kinds(self) -> list[str]:
        return [e.kind for e in self.events]


# -- fixtures -----------------------------------------------------------------


@pytest.fixture(scope="session")
def shipped_corpus() -> WordCorpus:
    return WordCorpus.load()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(SEED)


@pytest.fixture
def recorder() -> EventRecorder:
    return EventRecorder()


@pytest.fixture
def make_session(rng: random.Random, recorder: EventRecorder):
    """Factory for a session over *corpus* with the recorder subscribed."""

    def _make(corpus: WordCorpus, max_rounds: int = 10) -> ScrambleSession:
        session = ScrambleSession(corpus, rng=rng, max_rounds=max_rounds)
        session.subscribe(recorder)
        return session

    return _make


@pytest.fixture
def shell(shipped_corpus: WordCorpus, make_session) -> Shell:
    return Shell(make_session(shipped_corpus))
