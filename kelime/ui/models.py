"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from kelime.core.word_store import WordStore
from kelime.core.words import Word


@dataclass
class WordListFilter:
    """Word list toggles: favorites only, personal dictionary, search text."""

    favorites_only: bool = False
    personal: bool = False
    query: str = ""

    @property
    def title(self) -> str:
        return "Personal Dictionary" if self.personal else "Word List"

    def apply(self, store: WordStore) -> List[Word]:
        return store.visible_words(
            favorites_only=self.favorites_only,
            query=self.query,
            personal=self.personal,
        )


def detail_rows(word: Word) -> List[Tuple[str, str]]:
    """(title, content) rows shown on the word detail screen."""
    return [
        ("Turkish Meaning", word.native_meaning),
        ("Definition", word.definition),
        ("Example", word.example),
        ("Level", word.level),
    ]


def star_icon(is_favorite: bool) -> str:
    return "★" if is_favorite else "☆"
