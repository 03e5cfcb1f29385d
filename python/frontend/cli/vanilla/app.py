"""Vanilla terminal frontend with no third-party dependencies.

Uses only stdlib (print, ANSI codes, tty/termios) for rendering and input.
Menus take single keypresses; guesses are typed and confirmed with Enter.
"""

from __future__ import annotations

import sys

from backend.engine.navigation import Shell
from backend.models.events import OutcomeKind, SessionEvent
from backend.models.view import View
from backend.models.word import Level
from frontend.cli.input_handler import get_key, read_line, resolve_line
from frontend.presenter import (
    NO_WORDS_TEXT,
    RULES_TEXT,
    TIC_TAC_TOE_TEXT,
    TITLE,
    Notice,
    attempts_text,
    describe,
    hint_text,
    progress_text,
)


# -- ANSI helpers -------------------------------------------------------------

_G = "\033[32;1m"    # bold green
_Y = "\033[33;1m"    # bold yellow
_C = "\033[36;1m"    # bold cyan
_RED = "\033[31;1m"  # bold red
_DIM = "\033[2m"     # dim
_BOLD = "\033[1m"    # bold
_R = "\033[0m"       # reset
_BG_SEL = "\033[42;30m"  # green bg, black fg (selected level)

_LEVELS = list(Level)

_NOTICE_COLOUR = {
    OutcomeKind.WIN: _G,
    OutcomeKind.LOSS: _RED,
    OutcomeKind.SESSION_END: _C,
    OutcomeKind.NO_WORDS: _Y,
}


def _clear() -> None:
    sys.stdout.write("\033[2J\033[H")
    sys.stdout.flush()


def _banner(text: str) -> None:
    print()
    print(f"  {_BOLD}======================================{_R}")
    print(f"  {_BOLD}{text:^38}{_R}")
    print(f"  {_BOLD}======================================{_R}")
    print()


class _Presenter:
    """Collects session events until the screen loop can show them."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []
        self.status = ""

    def __call__(self, event: SessionEvent) -> None:
        notice = describe(event)
        if notice is not None:
            self.notices.append(notice)
        if event.kind is OutcomeKind.SKIP:
            self.status = f"{_DIM}Skipped.{_R}"
        elif event.kind is OutcomeKind.NO_WORDS:
            self.status = f"{_RED}{NO_WORDS_TEXT}{_R}"

    def flush(self) -> None:
        """Show queued notices one at a time, each acknowledged by a key."""
        while self.notices:
            notice = self.notices.pop(0)
            colour = _NOTICE_COLOUR.get(notice.kind, _BOLD)
            print()
            print(f"  {colour}[{notice.title}]{_R} {notice.message}")
            print(f"  {_DIM}Press any key to continue.{_R}")
            sys.stdout.flush()
            get_key()


# -- screens ------------------------------------------------------------------


def _show_main() -> None:
    _clear()
    _banner(TITLE)
    print(f"    {_DIM}Choose a Game{_R}")
    print()
    print(f"    {_C}1{_R}  Word Scramble")
    print(f"    {_Y}2{_R}  Tic Tac Toe")
    print(f"    {_DIM}Q{_R}  Exit")
    print()


def _show_levels(shell: Shell, status: str) -> None:
    _clear()
    _banner("W O R D   S C R A M B L E")

    levels_str = ""
    for level in _LEVELS:
        if level is shell.selected_level:
            levels_str += f"  {_BG_SEL} {level.label} {_R}"
        else:
            levels_str += f"  {_DIM}{level.label}{_R}"
    print(f"    Level:{levels_str}")
    print(f"    {_DIM}← → to change{_R}")
    print()
    print(f"    {_C}S{_R}  Start")
    print(f"    {_DIM}B{_R}  Back to Main")
    if status:
        print(f"\n    {status}")
    print(f"\n  {_DIM}{RULES_TEXT}{_R}")
    print()


def _show_round(shell: Shell, status: str) -> None:
    session = shell.session
    _clear()
    _banner("W O R D   S C R A M B L E")
    print(f"  {_DIM}{progress_text(session)}{_R}")
    print()
    print(f"      {_BOLD}{_Y}{session.scrambled.upper()}{_R}")
    print()
    hint = hint_text(session)
    if hint:
        print(f"  {_C}{hint}{_R}")
    print(f"  {attempts_text(session)}")
    if status:
        print(f"  {status}")
    print()
    print(f"  {_DIM}Type a guess and press Enter.  :skip  next word   :back  main menu{_R}")


def _show_tic_tac_toe() -> None:
    _clear()
    _banner("T I C   T A C   T O E")
    print(f"    {TIC_TAC_TOE_TEXT}")
    print()
    print(f"    {_DIM}Press any key to go back.{_R}")


# -- view loops ---------------------------------------------------------------


def _main_menu(shell: Shell) -> None:
    _show_main()
    key = get_key()
    if key == "1":
        shell.show(View.WORD_SCRAMBLE)
    elif key == "2":
        shell.show(View.TIC_TAC_TOE)
    elif key == "quit":
        shell.request_exit()


def _word_scramble(shell: Shell, presenter: _Presenter) -> None:
    session = shell.session

    if not session.active:
        _show_levels(shell, presenter.status)
        key = get_key()
        idx = _LEVELS.index(shell.selected_level)
        if key == "left":
            shell.select_level(_LEVELS[max(0, idx - 1)])
        elif key == "right":
            shell.select_level(_LEVELS[min(len(_LEVELS) - 1, idx + 1)])
        elif key in ("start", "enter"):
            presenter.status = ""
            shell.start_session()
        elif key in ("back", "quit"):
            presenter.status = ""
            shell.show(View.MAIN)
        presenter.flush()
        return

    _show_round(shell, presenter.status)
    presenter.status = ""
    line = read_line(f"\n  {_C}Guess:{_R} ")
    action = resolve_line(line)
    if action == "skip":
        session.skip()
    elif action == "back":
        shell.show(View.MAIN)
    else:
        session.submit(line)
    presenter.flush()


def _tic_tac_toe(shell: Shell) -> None:
    _show_tic_tac_toe()
    get_key()
    shell.show(View.MAIN)


def _menu_loop(shell: Shell) -> None:
    presenter = _Presenter()
    shell.session.subscribe(presenter)
    try:
        while not shell.exit_requested:
            if shell.active is View.MAIN:
                _main_menu(shell)
            elif shell.active is View.WORD_SCRAMBLE:
                _word_scramble(shell, presenter)
            else:
                _tic_tac_toe(shell)
    finally:
        shell.session.unsubscribe(presenter)

    _clear()
    print("  Goodbye!\n")


# -- public entry point -------------------------------------------------------


def run(shell: Shell) -> None:
    """Launch the vanilla CLI with interactive menu."""
    _menu_loop(shell)
