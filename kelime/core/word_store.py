from __future__ import annotations

import json
import logging
from dataclasses import replace
from typing import Iterable, List, Optional

from kelime.core.storage import KeyValueStore
from kelime.core.words import ALL_LEVELS, LEVELS, Word

logger = logging.getLogger(__name__)

PERSONAL_DICTIONARY_KEY = "PersonalDictionary"


def filter_words(
    words: Iterable[Word],
    level: str = ALL_LEVELS,
    favorites_only: bool = False,
    query: str = "",
) -> List[Word]:
    """Stable filter by level, favorite flag and case-insensitive term substring."""
    needle = query.lower()
    return [
        w
        for w in words
        if (level == ALL_LEVELS or w.level == level)
        and (not favorites_only or w.is_favorite)
        and (not needle or needle in w.term.lower())
    ]


class WordStore:
    """View-model over the word catalog and the personal dictionary.

    The personal dictionary holds snapshots of catalog words. Both copies of
    a word carry the same ``is_favorite`` and ``is_in_personal_dictionary``
    flags after every command. The personal dictionary is written to the
    key-value store under ``PersonalDictionary`` whenever it changes.
    """

    def __init__(self, words: Iterable[Word], storage: KeyValueStore) -> None:
        self._words: List[Word] = list(words)
        self._storage = storage
        self._selected_level = ALL_LEVELS
        self._personal_dictionary: List[Word] = []
        self._load()

    @property
    def words(self) -> List[Word]:
        """The catalog in seed order."""
        return list(self._words)

    @property
    def personal_dictionary(self) -> List[Word]:
        return list(self._personal_dictionary)

    @property
    def selected_level(self) -> str:
        return self._selected_level

    @selected_level.setter
    def selected_level(self, level: str) -> None:
        if level not in LEVELS:
            raise ValueError(f"Unknown level: {level!r}")
        self._selected_level = level

    def get(self, word_id: str) -> Optional[Word]:
        return self._find(self._words, word_id)

    def in_personal_dictionary(self, word_id: str) -> Optional[Word]:
        return self._find(self._personal_dictionary, word_id)

    def visible_words(
        self,
        favorites_only: bool = False,
        query: str = "",
        personal: bool = False,
    ) -> List[Word]:
        """Catalog or personal dictionary, filtered with the selected level."""
        source = self._personal_dictionary if personal else self._words
        return filter_words(source, self._selected_level, favorites_only, query)

    def level_words(self) -> List[Word]:
        """Catalog filtered by the selected level only."""
        return filter_words(self._words, self._selected_level)

    def toggle_favorite(self, word_id: str) -> None:
        word = self.get(word_id)
        if word is not None:
            word.is_favorite = not word.is_favorite

        saved = self.in_personal_dictionary(word_id)
        if saved is not None:
            saved.is_favorite = not saved.is_favorite
            self.save()

    def toggle_personal_dictionary(self, word_id: str) -> None:
        word = self.get(word_id)
        if word is None:
            return

        word.is_in_personal_dictionary = not word.is_in_personal_dictionary
        self._personal_dictionary = [w for w in self._personal_dictionary if w.id != word_id]
        if word.is_in_personal_dictionary:
            self._personal_dictionary.append(replace(word))
        self.save()

    def save(self) -> bool:
        """Write the whole personal dictionary. Returns False if the write failed."""
        blob = json.dumps([w.to_record() for w in self._personal_dictionary], ensure_ascii=False)
        ok = self._storage.set(PERSONAL_DICTIONARY_KEY, blob)
        if not ok:
            logger.warning("Personal dictionary was not saved (%d words)", len(self._personal_dictionary))
        return ok

    def _load(self) -> None:
        saved = self._decode(self._storage.get(PERSONAL_DICTIONARY_KEY))

        catalog = {w.id: w for w in self._words}
        personal: List[Word] = []
        seen: set[str] = set()
        for entry in saved:
            word = catalog.get(entry.id)
            if word is None:
                logger.info("Dropping saved word %r: not in the catalog", entry.term)
                continue
            if entry.id in seen:
                continue
            seen.add(entry.id)
            word.is_in_personal_dictionary = True
            word.is_favorite = entry.is_favorite
            entry.is_in_personal_dictionary = True
            personal.append(entry)
        self._personal_dictionary = personal

    @staticmethod
    def _decode(blob: Optional[str]) -> List[Word]:
        if not blob:
            return []
        try:
            records = json.loads(blob)
            if not isinstance(records, list):
                raise TypeError("personal dictionary blob is not a list")
            return [Word.from_record(r) for r in records]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Could not read personal dictionary, starting empty: %s", e)
            return []

    @staticmethod
    def _find(words: List[Word], word_id: str) -> Optional[Word]:
        for w in words:
            if w.id == word_id:
                return w
        return None
