"""Word list screen: search, level picker, favorites and personal dictionary toggles."""

from __future__ import annotations

from typing import Callable, Optional

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from kelime.core.word_store import WordStore
from kelime.core.words import Word
from kelime.ui.colors import HomeColors
from kelime.ui.models import WordListFilter, star_icon
from kelime.ui.widgets import Card, LevelPicker, star_button_style


class WordRow(Card):
    """One word: term, definition and meaning on the left, favorite star on the right."""

    def __init__(
        self,
        word: Word,
        *,
        on_open: Callable[[str], None],
        on_toggle_favorite: Callable[[str], None],
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(radius=12, parent=parent)
        self._word_id = word.id
        self._on_open = on_open
        self.setCursor(Qt.PointingHandCursor)

        text_col = QVBoxLayout()
        text_col.setSpacing(4)
        term = QLabel(word.term)
        term.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 700;")
        text_col.addWidget(term)
        for line in (word.definition, word.native_meaning):
            label = QLabel(line)
            label.setWordWrap(True)
            label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 13px;")
            text_col.addWidget(label)

        star = QPushButton(star_icon(word.is_favorite))
        star.setStyleSheet(star_button_style())
        star.setCursor(Qt.PointingHandCursor)
        star.setFixedWidth(36)
        star.clicked.connect(lambda: on_toggle_favorite(self._word_id))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 10, 10, 10)
        layout.addLayout(text_col, 1)
        layout.addWidget(star, 0, Qt.AlignVCenter)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.LeftButton:
            self._on_open(self._word_id)
        super().mousePressEvent(event)


class WordListScreen(QWidget):
    """Filtered list of catalog or personal-dictionary words."""

    word_selected = Signal(str)

    def __init__(self, store: WordStore, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._store = store
        self._filter = WordListFilter()

        self._title = QLabel()
        self._title.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 28px; font-weight: 800;")

        self._favorites_button = QPushButton()
        self._favorites_button.setStyleSheet(star_button_style())
        self._favorites_button.setToolTip("Show favorites only")
        self._favorites_button.clicked.connect(self._toggle_favorites_only)

        self._personal_button = QPushButton("📖")
        self._personal_button.setCheckable(True)
        self._personal_button.setStyleSheet(star_button_style())
        self._personal_button.setToolTip("Show personal dictionary")
        self._personal_button.clicked.connect(self._toggle_personal)

        header = QHBoxLayout()
        header.addWidget(self._title, 1)
        header.addWidget(self._favorites_button)
        header.addWidget(self._personal_button)

        self._search = QLineEdit()
        self._search.setPlaceholderText("🔍 Search")
        self._search.setClearButtonEnabled(True)
        self._search.setStyleSheet(
            "QLineEdit { background: #ffffff; border: 1px solid #e2e8f0;"
            " border-radius: 8px; padding: 8px; font-size: 14px; }"
        )
        self._search.textChanged.connect(self._set_query)

        self._level_picker = LevelPicker()
        self._level_picker.level_changed.connect(self._set_level)

        self._rows_container = QWidget()
        self._rows_layout = QVBoxLayout(self._rows_container)
        self._rows_layout.setContentsMargins(4, 4, 4, 4)
        self._rows_layout.setSpacing(10)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QScrollArea.NoFrame)
        scroll.setStyleSheet(f"QScrollArea {{ background: {HomeColors.LIST_BG}; border-radius: 12px; }}")
        scroll.setWidget(self._rows_container)

        self._empty_label = QLabel("No words match.")
        self._empty_label.setAlignment(Qt.AlignCenter)
        self._empty_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px;")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 16, 20, 16)
        layout.setSpacing(12)
        layout.addLayout(header)
        layout.addWidget(self._search)
        layout.addWidget(self._level_picker)
        layout.addWidget(scroll, 1)

        self.refresh()

    def refresh(self) -> None:
        """Rebuild the header and rows from the current store state."""
        self._title.setText(self._filter.title)
        self._favorites_button.setText(star_icon(self._filter.favorites_only))
        self._personal_button.setChecked(self._filter.personal)
        self._level_picker.set_level(self._store.selected_level)

        while self._rows_layout.count():
            item = self._rows_layout.takeAt(0)
            widget = item.widget()
            if widget is not None and widget is not self._empty_label:
                widget.deleteLater()

        words = self._filter.apply(self._store)
        if not words:
            self._rows_layout.addWidget(self._empty_label)
        for word in words:
            self._rows_layout.addWidget(
                WordRow(word, on_open=self.word_selected.emit, on_toggle_favorite=self._toggle_favorite)
            )
        self._rows_layout.addStretch(1)

    def _toggle_favorite(self, word_id: str) -> None:
        self._store.toggle_favorite(word_id)
        self.refresh()

    def _toggle_favorites_only(self) -> None:
        self._filter.favorites_only = not self._filter.favorites_only
        self.refresh()

    def _toggle_personal(self) -> None:
        self._filter.personal = not self._filter.personal
        self.refresh()

    def _set_query(self, text: str) -> None:
        self._filter.query = text
        self.refresh()

    def _set_level(self, level: str) -> None:
        self._store.selected_level = level
        self.refresh()
