"""Rich terminal frontend with panels and colours.

Uses the ``rich`` library for styled output while sharing the same
input handler, presenter and backend as the vanilla CLI.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

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

console = Console()

_LEVELS = list(Level)

_NOTICE_STYLE = {
    OutcomeKind.WIN: "bold green",
    OutcomeKind.LOSS: "bold red",
    OutcomeKind.SESSION_END: "bold cyan",
    OutcomeKind.NO_WORDS: "bold yellow",
}


class _Presenter:
    """Queues session events as notices for the screen loop."""

    def __init__(self) -> None:
        self.notices: list[Notice] = []
        self.status = ""

    def __call__(self, event: SessionEvent) -> None:
        notice = describe(event)
        if notice is not None:
            self.notices.append(notice)
        if event.kind is OutcomeKind.SKIP:
            self.status = "[dim]Skipped.[/dim]"
        elif event.kind is OutcomeKind.NO_WORDS:
            self.status = f"[yellow]{NO_WORDS_TEXT}[/yellow]"

    def flush(self) -> None:
        while self.notices:
            notice = self.notices.pop(0)
            style = _NOTICE_STYLE.get(notice.kind, "bold")
            panel = Panel(
                Align.center(Text(notice.message, style=style)),
                title=f"[{style}]{notice.title}[/{style}]",
                border_style=style,
                padding=(1, 4),
            )
            console.print()
            console.print(Align.center(panel))
            console.print(Align.center(Text("Press any key to continue.", style="dim")))
            get_key()


# -- screens ------------------------------------------------------------------


def _draw_main() -> None:
    console.clear()

    opts = Text()
    opts.append("  1", style="bold cyan")
    opts.append("  Word Scramble    ")
    opts.append("2", style="bold yellow")
    opts.append("  Tic Tac Toe    ")
    opts.append("Q", style="dim bold")
    opts.append("  Exit", style="dim")

    body = Group(
        Text(""),
        Align.center(Text("Choose a Game", style="dim")),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title=f"[bold]{TITLE}[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


def _draw_levels(shell: Shell, status: str) -> None:
    console.clear()

    levels = Text()
    for i, level in enumerate(_LEVELS):
        if i:
            levels.append("  ")
        if level is shell.selected_level:
            levels.append(f" {level.label} ", style="bold green on #313244")
        else:
            levels.append(f" {level.label} ", style="dim")

    opts = Text()
    opts.append("  S", style="bold cyan")
    opts.append("  Start    ")
    opts.append("B", style="dim bold")
    opts.append("  Back to Main", style="dim")

    parts = [
        Text(""),
        Align.center(levels),
        Align.center(Text("← →  change level", style="dim")),
        Text(""),
        Align.center(opts),
    ]
    if status:
        parts += [Text(""), Align.center(Text.from_markup(status))]
    parts += [Text(""), Text(RULES_TEXT, style="dim", justify="center")]

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Word Scramble[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 4),
        width=72,
    )

    console.print()
    console.print(Align.center(panel))


def _draw_round(shell: Shell, status: str) -> None:
    session = shell.session
    console.clear()

    word = Text(" ".join(session.scrambled.upper()), style="bold yellow")

    parts = [
        Align.center(Text(progress_text(session), style="dim")),
        Text(""),
        Align.center(word),
        Text(""),
    ]
    hint = hint_text(session)
    if hint:
        parts.append(Align.center(Text(hint, style="cyan")))
    parts.append(Align.center(Text(attempts_text(session), style="bold magenta")))
    if status:
        parts.append(Align.center(Text.from_markup(status)))

    panel = Panel(
        Group(*parts),
        title="[bold cyan]Word Scramble[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 4),
        width=72,
    )

    controls = Text()
    controls.append("  Enter", style="bold cyan")
    controls.append("  submit   ", style="dim")
    controls.append(":skip", style="bold cyan")
    controls.append("  next word   ", style="dim")
    controls.append(":back", style="bold cyan")
    controls.append("  main menu", style="dim")

    console.print()
    console.print(Align.center(panel))
    console.print(Align.center(controls))


def _draw_tic_tac_toe() -> None:
    console.clear()
    panel = Panel(
        Group(
            Align.center(Text(TIC_TAC_TOE_TEXT)),
            Text(""),
            Align.center(Text("Press any key to go back.", style="dim")),
        ),
        title="[bold yellow]Tic Tac Toe[/bold yellow]",
        border_style="yellow",
        padding=(1, 4),
    )
    console.print()
    console.print(Align.center(panel))


# -- view loops ---------------------------------------------------------------


def _main_menu(shell: Shell) -> None:
    _draw_main()
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
        _draw_levels(shell, presenter.status)
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

    _draw_round(shell, presenter.status)
    presenter.status = ""
    line = read_line("  Guess: ")
    action = resolve_line(line)
    if action == "skip":
        session.skip()
    elif action == "back":
        shell.show(View.MAIN)
    else:
        session.submit(line)
    presenter.flush()


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
                _draw_tic_tac_toe()
                get_key()
                shell.show(View.MAIN)
    finally:
        shell.session.unsubscribe(presenter)

    console.clear()
    console.print(Align.center(Text("\nGoodbye!\n", style="bold cyan")))


# -- public entry point -------------------------------------------------------


def run(shell: Shell) -> None:
    """Launch the Rich CLI with interactive menu."""
    _menu_loop(shell)
