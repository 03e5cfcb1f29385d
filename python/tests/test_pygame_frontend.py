"""Pygame frontend event handling, run headless on SDL's dummy drivers."""

from __future__ import annotations

import pytest

from backend.engine.navigation import Shell
from backend.models.view import View
from backend.models.word import Level

pygame = pytest.importorskip("pygame")


@pytest.fixture
def app(shell: Shell, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    from frontend.gui.pygame.app import PygameApp

    instance = PygameApp(shell)
    yield instance
    pygame.quit()


def _click(app, btn) -> None:
    ev = pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=btn.rect.center)
    app._ev_word(ev)


def test_level_buttons_change_level_before_start(app, shell: Shell) -> None:
    shell.show(View.WORD_SCRAMBLE)

    _click(app, app._level_btns[Level.HARD])

    assert shell.selected_level is Level.HARD


def test_level_buttons_ignored_during_round(app, shell: Shell) -> None:
    shell.show(View.WORD_SCRAMBLE)
    shell.start_session()
    assert shell.session.active

    _click(app, app._level_btns[Level.HARD])

    assert shell.selected_level is Level.EASY
    assert shell.session.level is Level.EASY
