"""Pygame GUI frontend, fully self-contained.

Includes the main menu, level selection, word scramble play with a typed
guess field, and the tic-tac-toe placeholder. Round outcomes appear as
an overlay that is dismissed with Enter or a click.
"""

from __future__ import annotations

import pygame

from backend.engine.navigation import Shell
from backend.models.events import OutcomeKind, SessionEvent
from backend.models.view import View
from backend.models.word import Level
from frontend.presenter import (
    NO_WORDS_TEXT,
    TIC_TAC_TOE_TEXT,
    TITLE,
    Notice,
    attempts_text,
    describe,
    hint_text,
    progress_text,
)

# ---------------------------------------------------------------------------
# Royal palette
# ---------------------------------------------------------------------------
COL_BASE = (7, 18, 51)
COL_HOVER = (12, 30, 80)
COL_PANEL = (20, 30, 70)
COL_GOLD = (255, 215, 0)
COL_GOLD_DIM = (150, 128, 20)
COL_WHITE = (255, 255, 255)
COL_GREEN = (166, 227, 161)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
WIN_W, WIN_H = 720, 560
MAX_GUESS_LEN = 32


# ---------------------------------------------------------------------------
# Simple clickable button
# ---------------------------------------------------------------------------
class _Btn:
    __slots__ = ("rect", "text", "font", "bg", "hover", "fg", "enabled", "_hot")

    def __init__(
        self,
        rect: tuple[int, int, int, int],
        text: str,
        font: pygame.font.Font,
        *,
        bg: tuple = COL_BASE,
        hover: tuple = COL_HOVER,
        fg: tuple = COL_GOLD,
    ) -> None:
        self.rect = pygame.Rect(rect)
        self.text = text
        self.font = font
        self.bg = bg
        self.hover = hover
        self.fg = fg
        self.enabled = True
        self._hot = False

    def draw(self, surf: pygame.Surface) -> None:
        fg = self.fg if self.enabled else COL_GOLD_DIM
        c = self.hover if self._hot and self.enabled else self.bg
        pygame.draw.rect(surf, c, self.rect)
        pygame.draw.rect(surf, fg, self.rect, width=2)
        lbl = self.font.render(self.text, True, fg)
        surf.blit(
            lbl,
            (
                self.rect.centerx - lbl.get_width() // 2,
                self.rect.centery - lbl.get_height() // 2,
            ),
        )

    def motion(self, pos: tuple[int, int]) -> None:
        self._hot = self.rect.collidepoint(pos)

    def hit(self, pos: tuple[int, int]) -> bool:
        return self.enabled and self.rect.collidepoint(pos)


# ---------------------------------------------------------------------------
# Centring helpers
# ---------------------------------------------------------------------------
def _cx(w: int) -> int:
    return (WIN_W - w) // 2


def _blit_center(surf: pygame.Surface, rendered: pygame.Surface, y: int) -> None:
    surf.blit(rendered, (_cx(rendered.get_width()), y))


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(self, shell: Shell) -> None:
        self._shell = shell
        self._session = shell.session

        pygame.init()
        self._surf = pygame.display.set_mode((WIN_W, WIN_H))
        pygame.display.set_caption(TITLE)
        self._clock = pygame.time.Clock()

        # Fonts
        self._f_big = pygame.font.SysFont("Georgia", 40, bold=True)
        self._f_word = pygame.font.SysFont("Georgia", 44, bold=True)
        self._f_title = pygame.font.SysFont("Georgia", 26, bold=True)
        self._f_body = pygame.font.SysFont("Georgia", 18)
        self._f_btn = pygame.font.SysFont("Georgia", 20, bold=True)
        self._f_btn_sm = pygame.font.SysFont("Georgia", 15, bold=True)

        self._guess = ""
        self._status_msg = ""
        self._notices: list[Notice] = []

        self._build_menu_btns()
        self._build_word_btns()
        self._build_tic_btns()

        self._session.subscribe(self._on_event)
        self._shell.subscribe(self._on_view)

    # ── buttons ─────────────────────────────────────────────────────────────

    def _build_menu_btns(self) -> None:
        bw = 300
        self._word_btn = _Btn((_cx(bw), 220, bw, 60), "Word Scramble", self._f_btn)
        self._tic_btn = _Btn((_cx(bw), 296, bw, 60), "Tic Tac Toe", self._f_btn)
        self._exit_btn = _Btn((_cx(200), 380, 200, 48), "Exit", self._f_btn_sm)
        self._menu_all = [self._word_btn, self._tic_btn, self._exit_btn]

    def _build_word_btns(self) -> None:
        bw, gap = 120, 10
        total = len(Level) * bw + (len(Level) - 1) * gap
        sx = _cx(total)
        self._level_btns: dict[Level, _Btn] = {}
        for i, level in enumerate(Level):
            self._level_btns[level] = _Btn(
                (sx + i * (bw + gap), 90, bw, 40), level.label, self._f_btn_sm
            )
        self._start_btn = _Btn((_cx(220) - 120, 146, 220, 44), "Start", self._f_btn_sm)
        self._main_btn = _Btn((_cx(220) + 120, 146, 220, 44), "Back to Main", self._f_btn_sm)
        self._submit_btn = _Btn((470, 360, 160, 44), "Submit Guess", self._f_btn_sm)
        self._skip_btn = _Btn((_cx(220), 460, 220, 40), "Skip to Next Word", self._f_btn_sm)
        self._word_all = [
            *self._level_btns.values(),
            self._start_btn,
            self._main_btn,
            self._submit_btn,
            self._skip_btn,
        ]

    def _build_tic_btns(self) -> None:
        self._tic_back = _Btn((_cx(200), 340, 200, 46), "Back to Main", self._f_btn_sm)

    # ── observers ───────────────────────────────────────────────────────────

    def _on_event(self, event: SessionEvent) -> None:
        notice = describe(event)
        if notice is not None:
            self._notices.append(notice)
        if event.kind is OutcomeKind.NO_WORDS:
            self._status_msg = NO_WORDS_TEXT
        elif event.kind is OutcomeKind.SKIP:
            self._status_msg = "Skipped."
        else:
            self._status_msg = ""

    def _on_view(self, view: View) -> None:
        self._guess = ""
        self._status_msg = ""
        if view is View.WORD_SCRAMBLE:
            pygame.key.start_text_input()
        else:
            pygame.key.stop_text_input()

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_menu(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render(TITLE, True, COL_GOLD), 70)
        _blit_center(
            self._surf, self._f_body.render("Choose a Game", True, COL_GOLD), 170
        )
        for btn in self._menu_all:
            btn.draw(self._surf)

    def _draw_word(self) -> None:
        self._surf.fill(COL_BASE)
        session = self._session
        active = session.active

        _blit_center(
            self._surf, self._f_title.render("Word Scramble", True, COL_GOLD), 30
        )

        for level, btn in self._level_btns.items():
            selected = level is self._shell.selected_level
            btn.bg = COL_PANEL if selected else COL_BASE
            btn.fg = COL_GREEN if selected else COL_GOLD
            btn.enabled = not active
            btn.draw(self._surf)
        self._start_btn.enabled = not active
        self._start_btn.draw(self._surf)
        self._main_btn.draw(self._surf)

        _blit_center(
            self._surf, self._f_body.render(progress_text(session), True, COL_GOLD_DIM), 214
        )
        word = session.scrambled.upper() if active else self._status_msg
        if word:
            font = self._f_word if active else self._f_body
            _blit_center(self._surf, font.render(word, True, COL_GOLD), 250)
        hint = hint_text(session)
        if hint:
            _blit_center(self._surf, self._f_body.render(hint, True, COL_GOLD), 316)

        # guess field
        field = pygame.Rect(90, 360, 360, 44)
        pygame.draw.rect(self._surf, COL_WHITE if active else COL_GOLD_DIM, field)
        if active:
            text = self._f_body.render(self._guess + "|", True, COL_BASE)
            self._surf.blit(text, (field.x + 10, field.centery - text.get_height() // 2))
        self._submit_btn.enabled = active
        self._submit_btn.draw(self._surf)

        _blit_center(
            self._surf, self._f_body.render(attempts_text(session), True, COL_GOLD), 420
        )
        if active and self._status_msg:
            self._surf.blit(self._f_btn_sm.render(self._status_msg, True, COL_GOLD_DIM), (20, 420))
        self._skip_btn.enabled = active
        self._skip_btn.draw(self._surf)

    def _draw_tic(self) -> None:
        self._surf.fill(COL_BASE)
        _blit_center(self._surf, self._f_big.render("Tic Tac Toe", True, COL_GOLD), 140)
        _blit_center(
            self._surf, self._f_body.render(TIC_TAC_TOE_TEXT, True, COL_GOLD), 240
        )
        self._tic_back.draw(self._surf)

    def _draw_notice(self) -> None:
        notice = self._notices[0]
        shade = pygame.Surface((WIN_W, WIN_H), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        self._surf.blit(shade, (0, 0))

        box = pygame.Rect(_cx(560), 170, 560, 200)
        pygame.draw.rect(self._surf, COL_PANEL, box)
        pygame.draw.rect(self._surf, COL_GOLD, box, width=2)
        _blit_center(self._surf, self._f_title.render(notice.title, True, COL_GOLD), 190)
        y = 240
        for line in _wrap(notice.message, self._f_body, box.width - 40):
            _blit_center(self._surf, self._f_body.render(line, True, COL_WHITE), y)
            y += 26
        _blit_center(
            self._surf,
            self._f_btn_sm.render("Press Enter or click to continue", True, COL_GOLD_DIM),
            336,
        )

    # ── event handling ──────────────────────────────────────────────────────

    def _ev_notice(self, ev: pygame.event.Event) -> bool:
        if (ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1) or (
            ev.type == pygame.KEYDOWN
            and ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE, pygame.K_SPACE)
        ):
            self._notices.pop(0)
        return True

    def _ev_menu(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            for b in self._menu_all:
                b.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._word_btn.hit(ev.pos):
                self._shell.show(View.WORD_SCRAMBLE)
            elif self._tic_btn.hit(ev.pos):
                self._shell.show(View.TIC_TAC_TOE)
            elif self._exit_btn.hit(ev.pos):
                return False
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_1:
                self._shell.show(View.WORD_SCRAMBLE)
            elif ev.key == pygame.K_2:
                self._shell.show(View.TIC_TAC_TOE)
            elif ev.key in (pygame.K_q, pygame.K_ESCAPE):
                return False
        return True

    def _ev_word(self, ev: pygame.event.Event) -> bool:
        session = self._session
        if ev.type == pygame.MOUSEMOTION:
            for btn in self._word_all:
                btn.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            for level, b in self._level_btns.items():
                if not session.active and b.hit(ev.pos):
                    self._shell.select_level(level)
                    return True
            if self._start_btn.hit(ev.pos):
                self._start()
            elif self._main_btn.hit(ev.pos):
                self._shell.show(View.MAIN)
            elif self._submit_btn.hit(ev.pos):
                self._submit()
            elif self._skip_btn.hit(ev.pos):
                session.skip()
                self._guess = ""
        elif ev.type == pygame.TEXTINPUT:
            if session.active and len(self._guess) < MAX_GUESS_LEN:
                self._guess += ev.text
        elif ev.type == pygame.KEYDOWN:
            if ev.key == pygame.K_ESCAPE:
                self._shell.show(View.MAIN)
            elif ev.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                if session.active:
                    self._submit()
                else:
                    self._start()
            elif ev.key == pygame.K_BACKSPACE:
                self._guess = self._guess[:-1]
            elif not session.active and ev.key in (pygame.K_LEFT, pygame.K_RIGHT):
                levels = list(Level)
                step = -1 if ev.key == pygame.K_LEFT else 1
                idx = levels.index(self._shell.selected_level) + step
                self._shell.select_level(levels[max(0, min(len(levels) - 1, idx))])
        return True

    def _ev_tic(self, ev: pygame.event.Event) -> bool:
        if ev.type == pygame.MOUSEMOTION:
            self._tic_back.motion(ev.pos)
        elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
            if self._tic_back.hit(ev.pos):
                self._shell.show(View.MAIN)
        elif ev.type == pygame.KEYDOWN:
            if ev.key in (pygame.K_ESCAPE, pygame.K_BACKSPACE, pygame.K_m):
                self._shell.show(View.MAIN)
        return True

    # ── actions ─────────────────────────────────────────────────────────────

    def _start(self) -> None:
        self._status_msg = ""
        self._guess = ""
        self._shell.start_session()

    def _submit(self) -> None:
        if self._session.submit(self._guess):
            self._guess = ""

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        _dispatch = {
            View.MAIN: self._ev_menu,
            View.WORD_SCRAMBLE: self._ev_word,
            View.TIC_TAC_TOE: self._ev_tic,
        }
        _draw = {
            View.MAIN: self._draw_menu,
            View.WORD_SCRAMBLE: self._draw_word,
            View.TIC_TAC_TOE: self._draw_tic,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                handler = self._ev_notice if self._notices else _dispatch[self._shell.active]
                if not handler(ev):
                    running = False
                    break

            _draw[self._shell.active]()
            if self._notices:
                self._draw_notice()
            pygame.display.flip()
            self._clock.tick(30)

        self._shell.request_exit()
        self._session.unsubscribe(self._on_event)
        self._shell.unsubscribe(self._on_view)
        pygame.quit()


def _wrap(text: str, font: pygame.font.Font, width: int) -> list[str]:
    """Split *text* into lines that fit within *width* pixels."""
    lines: list[str] = []
    current = ""
    for word in text.split():
        candidate = f"{current} {word}".strip()
        if current and font.size(candidate)[0] > width:
            lines.append(current)
            current = word
        else:
            current = candidate
    if current:
        lines.append(current)
    return lines


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(shell: Shell) -> None:
    """Launch the Pygame GUI (opens directly to the main menu)."""
    app = PygameApp(shell)
    app.run_loop()
