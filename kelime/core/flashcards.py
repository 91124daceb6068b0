from __future__ import annotations

from typing import List, Optional

from kelime.core.word_store import WordStore
from kelime.core.words import Word

SWIPE_THRESHOLD = 100.0


class FlashcardDeck:
    """Navigation over the words of the selected level.

    The word sequence is read from the store on every call, so favorite or
    level changes made elsewhere show up immediately. The index is clamped
    on read; an empty sequence has no current word. A revealed answer
    belongs to the card it was revealed on and is hidden once another card
    becomes current.
    """

    def __init__(self, store: WordStore) -> None:
        self._store = store
        self._index = 0
        self._revealed_id: Optional[str] = None
        self._drag_offset = 0.0

    @property
    def words(self) -> List[Word]:
        return self._store.level_words()

    @property
    def count(self) -> int:
        return len(self.words)

    @property
    def index(self) -> int:
        """Index of the current card (0-based), clamped to the sequence."""
        return max(0, min(self._index, self.count - 1))

    @property
    def answer_visible(self) -> bool:
        word = self.current_word()
        return word is not None and word.id == self._revealed_id

    @property
    def drag_offset(self) -> float:
        return self._drag_offset

    def current_word(self) -> Optional[Word]:
        words = self.words
        if not words:
            return None
        return words[max(0, min(self._index, len(words) - 1))]

    def can_go_previous(self) -> bool:
        return self.index > 0

    def can_go_next(self) -> bool:
        return self.index < self.count - 1

    def next(self) -> None:
        self._move_to(self.index + 1)

    def previous(self) -> None:
        self._move_to(self.index - 1)

    def toggle_answer(self) -> None:
        word = self.current_word()
        if word is None or self.answer_visible:
            self._revealed_id = None
        else:
            self._revealed_id = word.id

    def select_level(self, level: str) -> None:
        """Switch the store's level and start again from the first card."""
        self._store.selected_level = level
        self._index = 0
        self._revealed_id = None
        self._drag_offset = 0.0

    def toggle_current_favorite(self) -> None:
        word = self.current_word()
        if word is not None:
            self._store.toggle_favorite(word.id)

    def drag(self, offset: float) -> None:
        """Record the horizontal drag translation of the current card."""
        self._drag_offset = float(offset)

    def release(self) -> None:
        """Finish a drag: swipe right goes back, swipe left goes forward."""
        offset = self._drag_offset
        self._drag_offset = 0.0
        if abs(offset) > SWIPE_THRESHOLD:
            if offset > 0:
                self.previous()
            else:
                self.next()

    def progress_text(self) -> str:
        count = self.count
        if count == 0:
            return "0 / 0"
        return f"{self.index + 1} / {count}"

    def _move_to(self, index: int) -> None:
        count = self.count
        if count == 0:
            self._index = 0
            return
        clamped = max(0, min(index, count - 1))
        if clamped != self.index:
            self._revealed_id = None
        self._index = clamped
