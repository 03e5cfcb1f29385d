"""Scrambler: permutations that never equal the original word."""

from __future__ import annotations

import random

import pytest

from backend.engine.corpus import WordCorpus
from backend.engine.scrambler import Scrambler
from backend.models.word import Level


@pytest.mark.parametrize("word", ["ab", "hope", "courage", "microcontroller"])
def test_scramble_never_returns_input(word: str) -> None:
    rng = random.Random(0)
    for _ in range(500):
        scrambled = Scrambler.scramble(word, rng)
        assert scrambled != word
        assert sorted(scrambled) == sorted(word)


def test_two_letter_word_is_swapped() -> None:
    assert Scrambler.scramble("ab", random.Random(3)) == "ba"


def test_comparison_ignores_case() -> None:
    rng = random.Random(5)
    for _ in range(200):
        assert Scrambler.scramble("Ab", rng) == "bA"


@pytest.mark.parametrize("word", ["a", "aa", "aaa", "aA", ""])
def test_unscramblable_word_is_returned_unchanged(word: str) -> None:
    assert not Scrambler.is_scramblable(word)
    assert Scrambler.scramble(word, random.Random(1)) == word


@pytest.mark.parametrize("word", ["ab", "aab", "hope"])
def test_scramblable_words(word: str) -> None:
    assert Scrambler.is_scramblable(word)


@pytest.mark.parametrize("level", list(Level))
def test_every_shipped_word_scrambles(shipped_corpus: WordCorpus, level: Level) -> None:
    rng = random.Random(level.value)
    for entry in shipped_corpus.snapshot(level, rng):
        assert Scrambler.is_scramblable(entry.word)
        scrambled = Scrambler.scramble(entry.word, rng)
        assert scrambled.casefold() != entry.word.casefold()
        assert sorted(scrambled) == sorted(entry.word)
