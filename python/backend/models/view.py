"""Views the navigation shell can switch between."""

from __future__ import annotations

from enum import StrEnum


class View(StrEnum):
    MAIN = "main"
    WORD_SCRAMBLE = "word_scramble"
    TIC_TAC_TOE = "tic_tac_toe"
