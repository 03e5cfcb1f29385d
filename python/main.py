#!/usr/bin/env python3
"""Mind Game: a word scramble and tic-tac-toe hub.

Usage::

    python main.py                    # interactive frontend picker
    python main.py -f rich -l hard    # Rich terminal, Hard preselected
    python main.py -f pyqt --seed 7   # PyQt GUI, reproducible word order
    python main.py --words my.json    # play with a custom word list
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.corpus import DEFAULT_WORDS_PATH, CorpusError, WordCorpus  # noqa: E402
from backend.engine.gameplay import ScrambleSession  # noqa: E402
from backend.engine.navigation import Shell  # noqa: E402
from backend.engine.sessionstate import MAX_ROUNDS  # noqa: E402
from backend.models.word import Level  # noqa: E402

logger = logging.getLogger(__name__)


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"
    pygame = "pygame"
    pyqt = "pyqt"


class LogLevel(StrEnum):
    debug = "DEBUG"
    info = "INFO"
    warning = "WARNING"
    error = "ERROR"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
    Frontend.pygame: "frontend.gui.pygame.app",
    Frontend.pyqt: "frontend.gui.pyqt.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
        force=True,
    )


def _build_shell(
    words: Path, level: Level, rounds: int, seed: Optional[int]
) -> Shell:
    corpus = WordCorpus.load(words)
    session = ScrambleSession(corpus, rng=random.Random(seed), max_rounds=rounds)
    return Shell(session, default_level=level)


def _ask_frontend() -> Optional[Frontend]:
    print()
    print("  ====================================")
    print("         M I N D   G A M E            ")
    print("  ====================================")
    print()
    print("  1.  Play  (Vanilla Terminal)")
    print("  2.  Play  (Rich Terminal)")
    print("  3.  Play  (Pygame GUI)")
    print("  4.  Play  (PyQt GUI)")
    print("  0.  Quit")
    print()

    choices = {
        "1": Frontend.vanilla,
        "2": Frontend.rich,
        "3": Frontend.pygame,
        "4": Frontend.pyqt,
    }
    while True:
        try:
            choice = input("  Select: ").strip()
        except EOFError:
            return None
        if choice == "0":
            return None
        if choice in choices:
            return choices[choice]
        print("  Unknown option.")


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Optional[Frontend] = typer.Option(
        None, "-f", "--frontend",
        help="Frontend to launch. Omit for interactive picker.",
    ),
    level: Level = typer.Option(
        Level.EASY, "-l", "--level",
        help="Level preselected in the word scramble view.",
    ),
    rounds: int = typer.Option(
        MAX_ROUNDS, "-r", "--rounds",
        min=1, max=100,
        help="Words per word scramble session.",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the random source for a reproducible word order.",
    ),
    words: Path = typer.Option(
        DEFAULT_WORDS_PATH, "--words",
        help="JSON word list to play with.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity (written to stderr).",
    ),
) -> None:
    """Mind Game: word scramble and tic-tac-toe."""
    _configure_logging(log_level)

    try:
        shell = _build_shell(words, level, rounds, seed)
    except CorpusError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if frontend is None:
        frontend = _ask_frontend()
        if frontend is None:
            print("\n  Goodbye!\n")
            return

    logger.info("Launching %s frontend", frontend)
    mod = importlib.import_module(_RUNNERS[frontend])
    mod.run(shell)


if __name__ == "__main__":
    app()
