"""Shuffles a word's letters into a different arrangement."""

from __future__ import annotations

import random


class Scrambler:
    """Stateless scrambler; all methods are static."""

    @staticmethod
    def is_scramblable(word: str) -> bool:
        """Return True if *word* has an arrangement other than itself.

        Comparison is case-insensitive, so ``"aA"`` cannot be scrambled.
        """
        return len(set(word.casefold())) > 1

    @staticmethod
    def scramble(word: str, rng: random.Random | None = None) -> str:
        """Return a random permutation of *word* that differs from it.

        Words that cannot be rearranged are returned unchanged; check
        ``is_scramblable`` first to tell the two apart.
        """
        if not Scrambler.is_scramblable(word):
            return word

        rng = rng or random.Random()
        chars = list(word)
        while True:
            rng.shuffle(chars)
            scrambled = "".join(chars)
            if scrambled.casefold() != word.casefold():
                return scrambled
