"""Word corpus: loading, snapshots and data validation."""

from __future__ import annotations

import json
import random
from pathlib import Path

import pytest

from backend.engine.corpus import CorpusError, WordCorpus
from backend.models.word import Level, WordEntry
from conftest import corpus_of, entry


# -- helpers ------------------------------------------------------------------


def _write(tmp_path: Path, data: object) -> Path:
    path = tmp_path / "words.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


# -- shipped data -------------------------------------------------------------


def test_shipped_levels_are_populated(shipped_corpus: WordCorpus) -> None:
    assert shipped_corpus.levels() == [Level.EASY, Level.MEDIUM, Level.HARD]
    assert shipped_corpus.size(Level.EASY) == 67
    assert shipped_corpus.size(Level.MEDIUM) == 60
    assert shipped_corpus.size(Level.HARD) == 48


def test_shipped_words_are_lowercase_alphabetic(shipped_corpus: WordCorpus) -> None:
    for level in Level:
        for e in shipped_corpus.snapshot(level):
            assert e.word.isalpha() and e.word.islower()
            assert len(e.hints) == 3 and all(e.hints)


def test_shipped_duplicates_are_kept(shipped_corpus: WordCorpus) -> None:
    words = [e.word for e in shipped_corpus.snapshot(Level.EASY)]
    for dup in ("hope", "kindness", "creativity", "focus", "love"):
        assert words.count(dup) == 2


# -- snapshots ----------------------------------------------------------------


def test_snapshot_is_independent_copy() -> None:
    corpus = corpus_of("hope", "love", "unity")
    first = corpus.snapshot(Level.EASY, random.Random(1))
    first.clear()

    assert corpus.size(Level.EASY) == 3
    assert len(corpus.snapshot(Level.EASY)) == 3


def test_snapshot_reshuffles(shipped_corpus: WordCorpus) -> None:
    rng = random.Random(7)
    orders = {
        tuple(e.word for e in shipped_corpus.snapshot(Level.HARD, rng))
        for _ in range(5)
    }
    assert len(orders) > 1


def test_snapshot_without_rng_leaves_global_random_alone(
    shipped_corpus: WordCorpus,
) -> None:
    random.seed(99)
    expected = random.random()

    random.seed(99)
    shipped_corpus.snapshot(Level.EASY)
    assert random.random() == expected


def test_unknown_level_snapshot_is_empty() -> None:
    corpus = corpus_of("hope", level=Level.EASY)
    assert corpus.snapshot(Level.MEDIUM) == []
    assert corpus.size(Level.MEDIUM) == 0
    assert corpus.levels() == [Level.EASY]


# -- loading ------------------------------------------------------------------


def test_load_custom_file(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {"hard": [{"word": "latency", "hints": ["Delay", "In ms", "Responsiveness"]}]},
    )

    corpus = WordCorpus.load(path)

    assert corpus.levels() == [Level.HARD]
    assert corpus.snapshot(Level.HARD) == [
        WordEntry("latency", ("Delay", "In ms", "Responsiveness"))
    ]


@pytest.mark.parametrize(
    "data",
    [
        ["not", "an", "object"],
        {"expert": []},
        {"easy": [{"word": "hope"}]},
        {"easy": [{"word": "Hope", "hints": ["a", "b", "c"]}]},
        {"easy": [{"word": "power supply", "hints": ["a", "b", "c"]}]},
        {"easy": [{"word": "hope", "hints": ["a", "b"]}]},
        {"easy": [{"word": "hope", "hints": "abc"}]},
        {"easy": [{"word": "hope", "hints": [1, 2, 3]}]},
        {"easy": [{"word": "hope", "hints": ["", "", ""]}]},
        {"easy": [{"word": "hope", "hints": ["a", "  ", "c"]}]},
    ],
)
def test_load_rejects_bad_data(tmp_path: Path, data: object) -> None:
    with pytest.raises(CorpusError):
        WordCorpus.load(_write(tmp_path, data))


def test_load_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(CorpusError):
        WordCorpus.load(tmp_path / "missing.json")


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    path = tmp_path / "words.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(CorpusError):
        WordCorpus.load(path)


# -- entries ------------------------------------------------------------------


@pytest.mark.parametrize("word", ["a", "", "Hope", "can't", "h0pe"])
def test_entry_rejects_bad_words(word: str) -> None:
    with pytest.raises(ValueError):
        WordEntry(word, ("a", "b", "c"))


@pytest.mark.parametrize("hints", [("a", "", "c"), ("a", None, "c"), ("a", "b", "   ")])
def test_entry_rejects_blank_or_non_string_hints(hints: tuple) -> None:
    with pytest.raises(ValueError):
        WordEntry("hope", hints)


def test_entry_is_immutable() -> None:
    e = entry("hope")
    with pytest.raises(AttributeError):
        e.word = "love"  # type: ignore[misc]
    assert e.hints == ("hope-hint-0", "hope-hint-1", "hope-hint-2")
