"""Word detail screen: image, meaning rows, pronunciation and dictionary actions."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, QTimer, Signal
from PySide6.QtGui import QPixmap
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from kelime.core.services import ImageProvider, Pronouncer, SpeechService
from kelime.core.word_store import WordStore
from kelime.ui.colors import HomeColors
from kelime.ui.models import detail_rows, star_icon
from kelime.ui.widgets import Card, secondary_button_style, star_button_style


class WordDetailScreen(QWidget):
    """Shows one catalog word; always re-reads the word from the store."""

    quiz_requested = Signal(str)

    def __init__(
        self,
        store: WordStore,
        speech: SpeechService,
        images: ImageProvider,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._images = images
        self._word_id: Optional[str] = None
        self._pronouncer = Pronouncer(
            speech,
            schedule=lambda ms, callback: QTimer.singleShot(ms, self, callback),
            on_change=lambda _playing: self._refresh_buttons(),
        )

        self._image = QLabel()
        self._image.setAlignment(Qt.AlignCenter)
        self._image.setFixedHeight(200)

        self._term = QLabel()
        self._term.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 30px; font-weight: 800;")
        self._star = QPushButton()
        self._star.setStyleSheet(star_button_style())
        self._star.setCursor(Qt.PointingHandCursor)
        self._star.clicked.connect(self._toggle_favorite)

        title_row = QHBoxLayout()
        title_row.addWidget(self._term, 1)
        title_row.addWidget(self._star)

        self._rows = Card()
        self._rows_layout = QVBoxLayout(self._rows)
        self._rows_layout.setContentsMargins(16, 14, 16, 14)
        self._rows_layout.setSpacing(12)

        self._listen = QPushButton()
        self._listen.setStyleSheet(secondary_button_style())
        self._listen.clicked.connect(self._pronounce)

        self._personal = QPushButton()
        self._personal.setStyleSheet(secondary_button_style())
        self._personal.clicked.connect(self._toggle_personal)

        quiz = QPushButton("❓ Take a Quiz")
        quiz.setStyleSheet(secondary_button_style())
        quiz.clicked.connect(self._request_quiz)

        content = QWidget()
        layout = QVBoxLayout(content)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(18)
        layout.addWidget(self._image)
        layout.addLayout(title_row)
        layout.addWidget(self._rows)
        layout.addWidget(self._listen)
        layout.addWidget(self._personal)
        layout.addWidget(quiz)
        layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        scroll.setWidget(content)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(0, 0, 0, 0)
        outer.addWidget(scroll)

    def show_word(self, word_id: str) -> None:
        self._word_id = word_id
        word = self._store.get(word_id)
        if word is None:
            return

        image = self._images.image_for(word.term)
        if isinstance(image, QPixmap) and not image.isNull():
            self._image.setPixmap(image.scaledToHeight(200, Qt.SmoothTransformation))
        else:
            self._image.setPixmap(QPixmap())
            self._image.setText("🖼")
            self._image.setStyleSheet("color: #94a3b8; font-size: 96px;")

        while self._rows_layout.count():
            item = self._rows_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        for title, text in detail_rows(word):
            heading = QLabel(title)
            heading.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px; font-weight: 700;")
            body = QLabel(text)
            body.setWordWrap(True)
            body.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 15px;")
            self._rows_layout.addWidget(heading)
            self._rows_layout.addWidget(body)

        self._term.setText(word.term)
        self._refresh_buttons()

    def refresh(self) -> None:
        if self._word_id:
            self.show_word(self._word_id)

    def _refresh_buttons(self) -> None:
        word = self._store.get(self._word_id) if self._word_id else None
        if word is None:
            return
        self._star.setText(star_icon(word.is_favorite))
        playing = self._pronouncer.is_playing
        self._listen.setText("🔊 Playing..." if playing else "🔊 Listen to Pronunciation")
        self._listen.setEnabled(not playing)
        if word.is_in_personal_dictionary:
            self._personal.setText("➖ Remove from Personal Dictionary")
        else:
            self._personal.setText("➕ Add to Personal Dictionary")

    def _pronounce(self) -> None:
        word = self._store.get(self._word_id) if self._word_id else None
        if word is not None:
            self._pronouncer.pronounce(word.term)

    def _request_quiz(self) -> None:
        if self._word_id:
            self.quiz_requested.emit(self._word_id)

    def _toggle_favorite(self) -> None:
        if self._word_id:
            self._store.toggle_favorite(self._word_id)
            self._refresh_buttons()

    def _toggle_personal(self) -> None:
        if self._word_id:
            self._store.toggle_personal_dictionary(self._word_id)
            self._refresh_buttons()
