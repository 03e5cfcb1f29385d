"""Keyboard input for the terminal frontends.

Menus read single keypresses (arrow keys, digits, letters) without
requiring Enter; guesses are read as whole lines. Works on macOS / Linux
(tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- shared key mapping --------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "b": "back",
    "B": "back",
    "m": "back",
    "M": "back",
    "s": "start",
    "S": "start",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

# In-game commands typed on the guess line.
SKIP_COMMANDS = frozenset({":skip", ":s"})
BACK_COMMANDS = frozenset({":back", ":b", ":menu", ":m"})


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def resolve_line(line: str) -> str:
    """Classify a typed guess line as ``"skip"``, ``"back"`` or ``"guess"``."""
    command = line.strip().lower()
    if command in SKIP_COMMANDS:
        return "skip"
    if command in BACK_COMMANDS:
        return "back"
    return "guess"


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  : arrow keys
        "quit"                         : q / Ctrl-C / Escape
        "back"                         : b / m
        "start"                        : s
        "enter"                        : Enter / Return
        "<char>"                       : unmapped printable char
        ""                             : unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve_key(ch)


def read_line(prompt: str) -> str:
    """Read one line of text. End of input counts as a request to go back."""
    try:
        return input(prompt)
    except EOFError:
        return ":back"
