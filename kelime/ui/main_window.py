from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from kelime.core.services import ImageProvider, SpeechService
from kelime.core.word_store import WordStore
from kelime.ui.colors import HomeColors
from kelime.ui.flashcards import FlashcardsScreen
from kelime.ui.quiz_view import QuizScreen
from kelime.ui.widgets import GradientBackground, secondary_button_style
from kelime.ui.word_detail import WordDetailScreen
from kelime.ui.word_list import WordListScreen


class MainWindow(QMainWindow):
    """Home screen plus a stack of feature screens with back navigation.

    Every screen shares the one WordStore; a screen is refreshed from the
    store each time it is shown.
    """

    def __init__(
        self,
        store: WordStore,
        speech: SpeechService,
        images: ImageProvider,
        user_name: str = "Learner",
    ) -> None:
        super().__init__()
        self._store = store
        self._user_name = user_name
        self._history: list[QWidget] = []

        self.setWindowTitle("Language Learning")
        self.resize(480, 860)

        self._home = self._build_home()
        self._word_list = WordListScreen(store)
        self._detail = WordDetailScreen(store, speech, images)
        self._flashcards = FlashcardsScreen(store, speech)
        self._quiz = QuizScreen()

        self._word_list.word_selected.connect(self._open_word)
        self._detail.quiz_requested.connect(self._open_quiz)

        self._stack = QStackedWidget()
        for screen in (self._home, self._word_list, self._detail, self._flashcards, self._quiz):
            self._stack.addWidget(screen)

        self._back_button = QPushButton("‹ Back")
        self._back_button.setStyleSheet(secondary_button_style())
        self._back_button.clicked.connect(self._go_back)
        self._title = QLabel()
        self._title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 15px; font-weight: 700;")
        nav = QHBoxLayout()
        nav.setContentsMargins(12, 8, 12, 0)
        nav.addWidget(self._back_button, 0)
        nav.addWidget(self._title, 1, Qt.AlignCenter)
        nav.addSpacing(self._back_button.sizeHint().width())

        root = GradientBackground()
        layout = QVBoxLayout(root)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addLayout(nav)
        layout.addWidget(self._stack, 1)
        self.setCentralWidget(root)

        self._show(self._home, remember=False)

    def _build_home(self) -> QWidget:
        home = QWidget()
        layout = QVBoxLayout(home)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(20)

        welcome = QLabel(f"Welcome, {self._user_name}!")
        welcome.setAlignment(Qt.AlignCenter)
        welcome.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 30px; font-weight: 800;")
        subtitle = QLabel("Ready to learn a new language?")
        subtitle.setAlignment(Qt.AlignCenter)
        subtitle.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 500;")

        layout.addWidget(welcome)
        layout.addWidget(subtitle)
        layout.addStretch(1)
        for text, target in (
            ("☰  Word List", lambda: self._show(self._word_list)),
            ("▭  Flashcards", lambda: self._show(self._flashcards)),
        ):
            button = QPushButton(text)
            button.setStyleSheet(secondary_button_style())
            button.setCursor(Qt.PointingHandCursor)
            button.clicked.connect(target)
            layout.addWidget(button)
        layout.addStretch(1)
        return home

    def _open_word(self, word_id: str) -> None:
        self._detail.show_word(word_id)
        self._show(self._detail)

    def _open_quiz(self, word_id: str) -> None:
        word = self._store.get(word_id)
        if word is None:
            return
        self._quiz.start(word)
        self._show(self._quiz)

    def _show(self, screen: QWidget, remember: bool = True) -> None:
        current = self._stack.currentWidget()
        if remember and current is not None and current is not screen:
            self._history.append(current)
        self._stack.setCurrentWidget(screen)
        self._refresh(screen)

    def _go_back(self) -> None:
        if not self._history:
            return
        screen = self._history.pop()
        self._stack.setCurrentWidget(screen)
        self._refresh(screen)

    def _refresh(self, screen: QWidget) -> None:
        titles = {
            self._home: "Language Learning",
            self._word_list: "Words",
            self._detail: "Word",
            self._flashcards: "Flashcards",
            self._quiz: "Quiz",
        }
        self._title.setText(titles.get(screen, ""))
        self._back_button.setVisible(bool(self._history))
        if screen is self._word_list:
            self._word_list.refresh()
        elif screen is self._flashcards:
            self._flashcards.refresh()
        elif screen is self._detail:
            self._detail.refresh()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._store.save()
        super().closeEvent(event)
