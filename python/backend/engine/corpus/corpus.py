"""Per-level word corpus, loaded once and shuffled on every snapshot."""

from __future__ import annotations

import json
import logging
import random
from collections.abc import Mapping, Sequence
from pathlib import Path

from backend.models.word import Level, WordEntry

logger = logging.getLogger(__name__)

DEFAULT_WORDS_PATH = Path(__file__).resolve().parents[2] / "data" / "words.json"


class CorpusError(ValueError):
    """Raised when a word list file cannot be turned into a corpus."""


class WordCorpus:
    """Immutable word lists keyed by level."""

    def __init__(self, levels: Mapping[Level, Sequence[WordEntry]]) -> None:
        self._levels: dict[Level, tuple[WordEntry, ...]] = {
            Level(level): tuple(entries) for level, entries in levels.items()
        }

    # -- loading --------------------------------------------------------------

    @classmethod
    def load(cls, filepath: Path = DEFAULT_WORDS_PATH) -> WordCorpus:
        """Read a corpus from a JSON file.

        The file maps level names to lists of ``{"word", "hints"}`` records::

            {"easy": [{"word": "hope", "hints": ["...", "...", "..."]}]}
        """
        try:
            data = json.loads(filepath.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise CorpusError(f"Cannot read word list {filepath}: {exc}") from exc

        if not isinstance(data, dict):
            raise CorpusError(f"{filepath}: expected an object keyed by level.")

        levels: dict[Level, list[WordEntry]] = {}
        for key, records in data.items():
            try:
                level = Level(key)
            except ValueError:
                raise CorpusError(f"{filepath}: unknown level {key!r}.") from None
            try:
                levels[level] = [WordEntry.from_dict(r) for r in records]
            except (KeyError, TypeError, ValueError) as exc:
                raise CorpusError(f"{filepath}: bad entry in {key!r}: {exc}") from exc

        corpus = cls(levels)
        for level in corpus.levels():
            logger.info("Loaded %s %s words from %s", corpus.size(level), level, filepath)
        return corpus

    # -- queries --------------------------------------------------------------

    def levels(self) -> list[Level]:
        return [level for level in Level if level in self._levels]

    def size(self, level: Level) -> int:
        return len(self._levels.get(level, ()))

    def snapshot(self, level: Level, rng: random.Random | None = None) -> list[WordEntry]:
        """Return a shuffled copy of *level*'s words.

        The copy is independent of the master list, so callers may pop
        from it freely. Unknown or empty levels give an empty list.
        """
        entries = list(self._levels.get(level, ()))
        (rng or random.Random()).shuffle(entries)
        return entries
