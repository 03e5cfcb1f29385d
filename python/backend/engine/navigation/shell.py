"""Navigation shell holding the active view and the scramble session."""

from __future__ import annotations

import logging
from collections.abc import Callable

from backend.engine.gameplay import ScrambleSession
from backend.models.view import View
from backend.models.word import Level

logger = logging.getLogger(__name__)

ViewListener = Callable[[View], None]


class Shell:
    """Switches between the main menu and the two game views.

    Leaving the word scramble view drops any session in progress, and
    entering it always shows the level selector with no word on screen.
    """

    def __init__(
        self, session: ScrambleSession, default_level: Level = Level.EASY
    ) -> None:
        self.session = session
        self.default_level = default_level
        self.selected_level = default_level
        self.active = View.MAIN
        self.exit_requested = False
        self._listeners: list[ViewListener] = []

    def subscribe(self, listener: ViewListener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: ViewListener) -> None:
        self._listeners.remove(listener)

    # -- navigation -----------------------------------------------------------

    def show(self, view: View) -> None:
        previous = self.active
        if View.WORD_SCRAMBLE in (previous, view):
            self.session.abort()
        if view is View.WORD_SCRAMBLE:
            self.selected_level = self.default_level

        self.active = view
        logger.debug("View %s -> %s", previous, view)
        for listener in list(self._listeners):
            listener(view)

    def request_exit(self) -> None:
        self.session.abort()
        self.exit_requested = True

    # -- level selector -------------------------------------------------------

    def select_level(self, level: Level) -> None:
        self.selected_level = Level(level)

    def start_session(self) -> None:
        self.session.start(self.selected_level)
