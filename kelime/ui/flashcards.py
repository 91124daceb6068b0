"""Flashcards screen: level picker, swipeable card, navigation and progress."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from kelime.core.flashcards import FlashcardDeck
from kelime.core.services import Pronouncer, SpeechService
from kelime.core.word_store import WordStore
from kelime.core.words import Word
from kelime.ui.colors import HomeColors
from kelime.ui.models import star_icon
from kelime.ui.widgets import (
    Card,
    LevelBadge,
    LevelPicker,
    primary_button_style,
    secondary_button_style,
    star_button_style,
)


class FlashcardWidget(Card):
    """Front shows the term; back shows definition, meaning and example.

    A click flips the card; a horizontal drag is reported to the deck and
    resolved on release.
    """

    def __init__(self, deck: FlashcardDeck, screen: "FlashcardsScreen", parent: Optional[QWidget] = None) -> None:
        super().__init__(radius=20, parent=parent)
        self._deck = deck
        self._screen = screen
        self._press_x: Optional[float] = None
        self._dragged = False
        self.setMinimumHeight(360)
        self.setCursor(Qt.OpenHandCursor)

        self._term = QLabel()
        self._term.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 34px; font-weight: 800;")
        self._definition = QLabel()
        self._definition.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 20px;")
        self._meaning = QLabel()
        self._meaning.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 17px;")
        self._example = QLabel()
        self._example.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 14px; font-style: italic;")
        self._badge = LevelBadge()

        self._speaker = QPushButton("🔊")
        self._speaker.setStyleSheet(star_button_style())
        self._speaker.setCursor(Qt.PointingHandCursor)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)
        layout.addStretch(1)
        for label in (self._term, self._definition, self._meaning, self._example):
            label.setAlignment(Qt.AlignCenter)
            label.setWordWrap(True)
            layout.addWidget(label)
        layout.addWidget(self._badge, 0, Qt.AlignHCenter)
        layout.addWidget(self._speaker, 0, Qt.AlignHCenter)
        layout.addStretch(1)

    @property
    def speaker_button(self) -> QPushButton:
        return self._speaker

    def show_word(self, word: Optional[Word], answer_visible: bool) -> None:
        if word is None:
            self._term.setText("No words for this level.")
            for label in (self._definition, self._meaning, self._example):
                label.setVisible(False)
            self._term.setVisible(True)
            self._badge.setVisible(False)
            self._speaker.setVisible(False)
            return

        self._term.setText(word.term)
        self._definition.setText(word.definition)
        self._meaning.setText(word.native_meaning)
        self._example.setText(word.example)
        self._term.setVisible(not answer_visible)
        for label in (self._definition, self._meaning, self._example):
            label.setVisible(answer_visible)
        self._badge.set_level(word.level)
        self._badge.setVisible(True)
        self._speaker.setVisible(True)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._press_x = event.position().x()
            self._dragged = False
            self.setCursor(Qt.ClosedHandCursor)
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event) -> None:
        if self._press_x is not None:
            offset = event.position().x() - self._press_x
            if abs(offset) > 4:
                self._dragged = True
            self._deck.drag(offset)
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event) -> None:
        if self._press_x is not None and event.button() == Qt.LeftButton:
            self._press_x = None
            self.setCursor(Qt.OpenHandCursor)
            if self._dragged:
                self._deck.release()
            else:
                self._deck.toggle_answer()
            self._screen.refresh()
        super().mouseReleaseEvent(event)


class FlashcardsScreen(QWidget):
    def __init__(self, store: WordStore, speech: SpeechService, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._store = store
        self._deck = FlashcardDeck(store)
        self._pronouncer = Pronouncer(
            speech,
            schedule=lambda ms, callback: QTimer.singleShot(ms, self, callback),
            on_change=lambda _playing: self.refresh(),
        )

        self._level_picker = LevelPicker()
        self._level_picker.level_changed.connect(self._select_level)

        self._favorite = QPushButton()
        self._favorite.setStyleSheet(star_button_style())
        self._favorite.setCursor(Qt.PointingHandCursor)
        self._favorite.clicked.connect(self._toggle_favorite)

        top = QHBoxLayout()
        title = QLabel("Flashcards")
        title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 28px; font-weight: 800;")
        top.addWidget(title, 1)
        top.addWidget(self._favorite)

        self._card = FlashcardWidget(self._deck, self)
        self._card.speaker_button.clicked.connect(self._pronounce)

        self._previous = QPushButton("◀")
        self._previous.setStyleSheet(secondary_button_style())
        self._previous.clicked.connect(self._go_previous)
        self._next = QPushButton("▶")
        self._next.setStyleSheet(secondary_button_style())
        self._next.clicked.connect(self._go_next)
        self._answer = QPushButton()
        self._answer.setStyleSheet(primary_button_style())
        self._answer.clicked.connect(self._toggle_answer)

        controls = QHBoxLayout()
        controls.addWidget(self._previous)
        controls.addStretch(1)
        controls.addWidget(self._answer)
        controls.addStretch(1)
        controls.addWidget(self._next)

        self._progress = QLabel()
        self._progress.setAlignment(Qt.AlignCenter)
        self._progress.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 12px;")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(14)
        layout.addLayout(top)
        layout.addWidget(self._level_picker)
        layout.addWidget(self._card, 1)
        layout.addLayout(controls)
        layout.addWidget(self._progress)

        self.refresh()

    def refresh(self) -> None:
        deck = self._deck
        word = deck.current_word()
        self._level_picker.set_level(self._store.selected_level)
        self._card.show_word(word, deck.answer_visible)
        self._card.speaker_button.setEnabled(not self._pronouncer.is_playing)
        self._previous.setEnabled(deck.can_go_previous())
        self._next.setEnabled(deck.can_go_next())
        self._answer.setEnabled(word is not None)
        self._answer.setText("Hide Answer" if deck.answer_visible else "Show Answer")
        self._favorite.setEnabled(word is not None)
        self._favorite.setText(star_icon(word is not None and word.is_favorite))
        self._progress.setText(deck.progress_text())

    def _select_level(self, level: str) -> None:
        self._deck.select_level(level)
        self.refresh()

    def _go_previous(self) -> None:
        self._deck.previous()
        self.refresh()

    def _go_next(self) -> None:
        self._deck.next()
        self.refresh()

    def _toggle_answer(self) -> None:
        self._deck.toggle_answer()
        self.refresh()

    def _toggle_favorite(self) -> None:
        self._deck.toggle_current_favorite()
        self.refresh()

    def _pronounce(self) -> None:
        word = self._deck.current_word()
        if word is not None:
            self._pronouncer.pronounce(word.term)
