"""PyQt6 GUI frontend, fully self-contained.

Includes the main menu, the word scramble page with its level selector,
and the tic-tac-toe placeholder. Round outcomes appear as message boxes.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QSpacerItem,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from backend.engine.navigation import Shell
from backend.models.events import OutcomeKind, SessionEvent
from backend.models.view import View
from backend.models.word import Level
from frontend.presenter import (
    NO_WORDS_TEXT,
    RULES_TEXT,
    TIC_TAC_TOE_TEXT,
    TITLE,
    attempts_text,
    describe,
    hint_text,
    progress_text,
)

# ---------------------------------------------------------------------------
# Royal palette
# ---------------------------------------------------------------------------
_ROYAL_BLUE = "#071233"
_ROYAL_BLUE_H = "#0c1e50"
_PANEL = "#141e46"
_GOLD = "#ffd700"
_GOLD_DIM = "#c9a900"
_WHITE = "#ffffff"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_ROYAL_BLUE}; }}
    QLabel {{ color: {_GOLD}; }}
    QComboBox {{ background: {_PANEL}; color: {_GOLD}; padding: 4px 10px; }}
    QLineEdit {{ background: {_WHITE}; color: {_ROYAL_BLUE}; padding: 4px 8px; }}
"""


def _styled_btn(
    text: str,
    *,
    font_size: int = 16,
    min_w: int = 0,
    min_h: int = 40,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Georgia", font_size))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{_ROYAL_BLUE}; color:{_GOLD};"
        f" border:2px solid {_GOLD}; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{_ROYAL_BLUE_H}; }}"
        f" QPushButton:disabled {{ color:{_GOLD_DIM}; border-color:{_GOLD_DIM}; }}"
    )
    return btn


def _label(text: str, size: int, *, bold: bool = False) -> QLabel:
    lbl = QLabel(text)
    lbl.setFont(QFont("Georgia", size, QFont.Weight.Bold if bold else QFont.Weight.Normal))
    lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
    return lbl


# ═══════════════════════════════════════════════════════════════════════════
# Pages
# ═══════════════════════════════════════════════════════════════════════════


class _MenuPage(QWidget):
    """Main menu: game choices and exit."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(12)
        root.setContentsMargins(30, 30, 30, 30)

        root.addWidget(_label(TITLE, 40, bold=True))
        root.addSpacerItem(QSpacerItem(0, 24))
        root.addWidget(_label("Choose a Game", 20))
        root.addSpacerItem(QSpacerItem(0, 8))

        self.word_btn = _styled_btn("Word Scramble", font_size=24, min_w=300, min_h=60)
        root.addWidget(self.word_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.tic_btn = _styled_btn("Tic Tac Toe", font_size=24, min_w=300, min_h=60)
        root.addWidget(self.tic_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        self.exit_btn = _styled_btn("Exit", font_size=18, min_w=200, min_h=50)
        root.addWidget(self.exit_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addSpacerItem(QSpacerItem(0, 24))
        root.addWidget(_label("Designed with a royal theme • Enjoy learning & playing", 13))


class _WordPage(QWidget):
    """Level selector, scrambled word, hint, guess field and controls."""

    def __init__(self, shell: Shell) -> None:
        super().__init__()
        self.setObjectName("page")
        self._shell = shell
        self._no_words = False

        root = QVBoxLayout(self)
        root.setSpacing(10)
        root.setContentsMargins(20, 20, 20, 20)

        title = _label("Word Scramble", 28, bold=True)
        title.setAlignment(Qt.AlignmentFlag.AlignLeft)
        root.addWidget(title)

        # level selection
        levels = QHBoxLayout()
        levels.setAlignment(Qt.AlignmentFlag.AlignLeft)
        levels.setSpacing(12)
        levels.addWidget(_label("Level:", 16))
        self.level_combo = QComboBox()
        for level in Level:
            self.level_combo.addItem(level.label, level)
        self.level_combo.currentIndexChanged.connect(self._pick_level)
        levels.addWidget(self.level_combo)
        self.start_btn = _styled_btn("Start", min_w=110)
        self.start_btn.clicked.connect(self._start)
        levels.addWidget(self.start_btn)
        self.change_btn = _styled_btn("Back to Main", min_w=150)
        levels.addWidget(self.change_btn)
        root.addLayout(levels)

        root.addStretch(1)

        self.progress_label = _label("", 13)
        root.addWidget(self.progress_label)
        self.scrambled_label = _label("", 40, bold=True)
        root.addWidget(self.scrambled_label)
        self.hint_label = _label("", 20)
        root.addWidget(self.hint_label)

        guess_row = QHBoxLayout()
        guess_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.input_field = QLineEdit()
        self.input_field.setFont(QFont("Georgia", 18))
        self.input_field.setMinimumWidth(320)
        self.input_field.returnPressed.connect(self._submit)
        guess_row.addWidget(self.input_field)
        self.submit_btn = _styled_btn("Submit Guess", min_w=160)
        self.submit_btn.clicked.connect(self._submit)
        guess_row.addWidget(self.submit_btn)
        root.addLayout(guess_row)

        self.tries_label = _label("", 16)
        root.addWidget(self.tries_label)

        self.skip_btn = _styled_btn("Skip to Next Word", font_size=14, min_w=200)
        self.skip_btn.clicked.connect(self._skip)
        root.addWidget(self.skip_btn, alignment=Qt.AlignmentFlag.AlignCenter)

        root.addStretch(1)

        rules = _label(RULES_TEXT, 13)
        rules.setWordWrap(True)
        root.addWidget(rules)

        self.back_btn = _styled_btn("Return to Main Menu", font_size=14, min_w=220)
        root.addWidget(self.back_btn, alignment=Qt.AlignmentFlag.AlignRight)

    # -- actions --

    def _pick_level(self, index: int) -> None:
        level = self.level_combo.itemData(index)
        if level is not None:
            self._shell.select_level(level)

    def _start(self) -> None:
        self._no_words = False
        self._shell.start_session()
        self.sync()

    def _submit(self) -> None:
        text = self.input_field.text()
        if self._shell.session.submit(text):
            self.input_field.clear()
        self.sync()

    def _skip(self) -> None:
        self._shell.session.skip()
        self.sync()

    def on_event(self, event: SessionEvent) -> None:
        if event.kind is OutcomeKind.NO_WORDS:
            self._no_words = True
        elif event.kind is OutcomeKind.SESSION_END:
            self._no_words = False

    # -- rendering --

    def show_level_selection(self) -> None:
        """Reset the page to the level selector with no word on screen."""
        self._no_words = False
        self.level_combo.blockSignals(True)
        self.level_combo.setCurrentIndex(list(Level).index(self._shell.selected_level))
        self.level_combo.blockSignals(False)
        self.input_field.clear()
        self.sync()

    def sync(self) -> None:
        session = self._shell.session
        active = session.active

        if active:
            self.scrambled_label.setText(session.scrambled.upper())
        elif self._no_words:
            self.scrambled_label.setText(NO_WORDS_TEXT)
        else:
            self.scrambled_label.setText("")
        self.progress_label.setText(progress_text(session))
        self.hint_label.setText(hint_text(session))
        self.tries_label.setText(attempts_text(session))

        self.input_field.setEnabled(active)
        self.submit_btn.setEnabled(active)
        self.skip_btn.setEnabled(active)
        if active:
            self.input_field.setFocus()


class _TicTacToePage(QWidget):
    """Placeholder for the tic-tac-toe game."""

    def __init__(self) -> None:
        super().__init__()
        self.setObjectName("page")

        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.setSpacing(16)

        root.addWidget(_label("Tic Tac Toe", 36, bold=True))
        root.addWidget(_label(TIC_TAC_TOE_TEXT, 20))
        root.addSpacerItem(QSpacerItem(0, 24))

        self.back_btn = _styled_btn("Back to Main", min_w=200)
        root.addWidget(self.back_btn, alignment=Qt.AlignmentFlag.AlignCenter)


# ═══════════════════════════════════════════════════════════════════════════
# Main window
# ═══════════════════════════════════════════════════════════════════════════

_PAGE_INDEX = {
    View.MAIN: 0,
    View.WORD_SCRAMBLE: 1,
    View.TIC_TAC_TOE: 2,
}


class _MainWindow(QMainWindow):
    def __init__(self, shell: Shell) -> None:
        super().__init__()
        self._shell = shell

        self.setWindowTitle(TITLE)
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(900, 600)

        self._stack = QStackedWidget()
        self.setCentralWidget(self._stack)

        # menu
        self._menu = _MenuPage()
        self._menu.word_btn.clicked.connect(lambda: shell.show(View.WORD_SCRAMBLE))
        self._menu.tic_btn.clicked.connect(lambda: shell.show(View.TIC_TAC_TOE))
        self._menu.exit_btn.clicked.connect(self.close)
        self._stack.addWidget(self._menu)  # 0

        # word scramble
        self._word = _WordPage(shell)
        self._word.change_btn.clicked.connect(lambda: shell.show(View.MAIN))
        self._word.back_btn.clicked.connect(lambda: shell.show(View.MAIN))
        self._stack.addWidget(self._word)  # 1

        # tic-tac-toe
        self._tic = _TicTacToePage()
        self._tic.back_btn.clicked.connect(lambda: shell.show(View.MAIN))
        self._stack.addWidget(self._tic)  # 2

        shell.subscribe(self._on_view)
        shell.session.subscribe(self._on_event)
        self._on_view(shell.active)

    # -- observers ---

    def _on_view(self, view: View) -> None:
        if view is View.WORD_SCRAMBLE:
            self._word.show_level_selection()
        self._stack.setCurrentIndex(_PAGE_INDEX[view])

    def _on_event(self, event: SessionEvent) -> None:
        self._word.on_event(event)
        notice = describe(event)
        if notice is not None:
            QMessageBox.information(self, notice.title, notice.message)

    # -- keyboard ---

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        view = self._shell.active

        if view is View.MAIN:
            if key == Qt.Key.Key_1:
                self._shell.show(View.WORD_SCRAMBLE)
            elif key == Qt.Key.Key_2:
                self._shell.show(View.TIC_TAC_TOE)
            elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
                self.close()
        elif key == Qt.Key.Key_Escape:
            self._shell.show(View.MAIN)
        else:
            super().keyPressEvent(event)

    def closeEvent(self, event) -> None:  # noqa: N802
        self._shell.request_exit()
        self._shell.unsubscribe(self._on_view)
        self._shell.session.unsubscribe(self._on_event)
        super().closeEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(shell: Shell) -> None:
    """Launch the PyQt6 GUI (opens directly to the main menu)."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(shell)
    window.show()
    qapp.exec()
