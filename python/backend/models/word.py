"""Word entries and difficulty levels for the word scramble game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

HINTS_PER_WORD = 3


class Level(StrEnum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class WordEntry:
    """A word to guess plus three hints, most general first.

    Words are lowercase alphabetic and at least two characters long.
    """

    word: str
    hints: tuple[str, str, str]

    def __post_init__(self) -> None:
        if len(self.word) < 2 or not (self.word.isalpha() and self.word.islower()):
            raise ValueError(
                f"Word must be lowercase alphabetic with 2+ letters, got {self.word!r}."
            )
        if any(not isinstance(h, str) or not h.strip() for h in self.hints):
            raise ValueError(f"Hints for {self.word!r} must be non-empty strings.")
        if len(self.hints) != HINTS_PER_WORD:
            raise ValueError(
                f"Expected {HINTS_PER_WORD} hints for {self.word!r}, "
                f"got {len(self.hints)}."
            )
        # Accept any sequence of hints but store a tuple.
        object.__setattr__(self, "hints", tuple(self.hints))

    @classmethod
    def from_dict(cls, data: dict) -> WordEntry:
        """Create an entry from its JSON representation.

        Example::

            WordEntry.from_dict({"word": "hope", "hints": ["a", "b", "c"]})
        """
        hints = data["hints"]
        if isinstance(hints, str):
            raise TypeError(f"Hints must be a list of strings, got {hints!r}.")
        return cls(word=data["word"], hints=tuple(hints))
