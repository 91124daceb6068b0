"""Tests for kelime.core.word_store – catalog, personal dictionary and filtering."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import pytest

from kelime.core.storage import KeyValueStore, MemoryKeyValueStore
from kelime.core.word_store import PERSONAL_DICTIONARY_KEY, WordStore, filter_words
from kelime.core.words import Word
from sample_words import make_words


def terms(words: List[Word]) -> List[str]:
    return [w.term for w in words]


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def storage() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(storage: MemoryKeyValueStore) -> WordStore:
    return WordStore(make_words(), storage)


def saved_records(storage: KeyValueStore) -> list:
    return json.loads(storage.get(PERSONAL_DICTIONARY_KEY) or "[]")


def assert_in_sync(store: WordStore) -> None:
    """Every personal-dictionary entry mirrors its catalog entry's flags."""
    ids = [w.id for w in store.personal_dictionary]
    assert len(ids) == len(set(ids))
    for saved in store.personal_dictionary:
        word = store.get(saved.id)
        assert word is not None
        assert saved.is_in_personal_dictionary is True
        assert word.is_in_personal_dictionary is True
        assert word.is_favorite == saved.is_favorite
    for word in store.words:
        assert word.is_in_personal_dictionary == (word.id in ids)


# ---------------------------------------------------------------------------
# filter_words
# ---------------------------------------------------------------------------

class TestFilterWords:
    def test_all_level_keeps_everything(self):
        words = make_words()
        assert filter_words(words, "All") == words

    def test_level(self):
        assert terms(filter_words(make_words(), "A1")) == ["Apple", "Book"]

    def test_level_without_words(self):
        assert filter_words(make_words(), "C2") == []

    def test_favorites_only(self):
        words = make_words()
        words[1].is_favorite = True
        assert terms(filter_words(words, favorites_only=True)) == ["Book"]

    def test_query_case_insensitive(self):
        assert terms(filter_words(make_words(), query="OMP")) == ["Computer"]

    def test_query_matches_term_only(self):
        assert filter_words(make_words(), query="Elma") == []

    def test_empty_query_matches_all(self):
        assert len(filter_words(make_words(), query="")) == 4

    def test_combined_predicates(self):
        words = make_words()
        words[0].is_favorite = True
        words[2].is_favorite = True
        assert terms(filter_words(words, "A1", favorites_only=True, query="app")) == ["Apple"]

    def test_order_preserved(self):
        words = list(reversed(make_words()))
        assert terms(filter_words(words, query="o")) == ["Democracy", "Computer", "Book"]

    def test_idempotent(self):
        words = make_words()
        words[0].is_favorite = True
        once = filter_words(words, "A1", True, "a")
        assert filter_words(once, "A1", True, "a") == once


# ---------------------------------------------------------------------------
# WordStore – basic state
# ---------------------------------------------------------------------------

class TestWordStoreState:
    def test_words_in_order(self, store: WordStore):
        assert terms(store.words) == ["Apple", "Book", "Computer", "Democracy"]

    def test_words_returns_copy(self, store: WordStore):
        store.words.clear()
        assert len(store.words) == 4

    def test_default_level(self, store: WordStore):
        assert store.selected_level == "All"

    def test_set_level(self, store: WordStore):
        store.selected_level = "B1"
        assert terms(store.level_words()) == ["Democracy"]

    def test_unknown_level_rejected(self, store: WordStore):
        with pytest.raises(ValueError):
            store.selected_level = "D1"
        assert store.selected_level == "All"

    def test_get(self, store: WordStore):
        assert store.get("book").term == "Book"
        assert store.get("missing") is None

    def test_empty_personal_dictionary(self, store: WordStore):
        assert store.personal_dictionary == []


# ---------------------------------------------------------------------------
# WordStore – toggle_favorite
# ---------------------------------------------------------------------------

class TestToggleFavorite:
    def test_flips_catalog_flag(self, store: WordStore):
        store.toggle_favorite("apple")
        assert store.get("apple").is_favorite is True

    @pytest.mark.parametrize("calls", [1, 2, 3, 4, 7])
    def test_parity(self, store: WordStore, calls: int):
        for _ in range(calls):
            store.toggle_favorite("book")
        assert store.get("book").is_favorite is (calls % 2 == 1)

    def test_missing_id_is_noop(self, store: WordStore, storage: MemoryKeyValueStore):
        before = [w.to_record() for w in store.words]
        store.toggle_favorite("missing")
        assert [w.to_record() for w in store.words] == before
        assert storage.get(PERSONAL_DICTIONARY_KEY) is None

    def test_flips_personal_copy(self, store: WordStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_favorite("apple")
        assert store.personal_dictionary[0].is_favorite is True
        assert_in_sync(store)

    def test_persists_when_personal_copy_changes(self, store: WordStore, storage: MemoryKeyValueStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_favorite("apple")
        assert saved_records(storage)[0]["is_favorite"] is True

    def test_only_catalog_when_not_saved(self, store: WordStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_favorite("book")
        assert store.get("book").is_favorite is True
        assert terms(store.personal_dictionary) == ["Apple"]
        assert store.personal_dictionary[0].is_favorite is False


# ---------------------------------------------------------------------------
# WordStore – toggle_personal_dictionary
# ---------------------------------------------------------------------------

class TestTogglePersonalDictionary:
    def test_adds_snapshot(self, store: WordStore):
        store.toggle_personal_dictionary("book")
        [saved] = store.personal_dictionary
        assert saved.id == "book"
        assert saved.is_in_personal_dictionary is True
        assert saved is not store.get("book")
        assert_in_sync(store)

    def test_snapshot_carries_favorite(self, store: WordStore):
        store.toggle_favorite("book")
        store.toggle_personal_dictionary("book")
        assert store.personal_dictionary[0].is_favorite is True

    def test_appends_in_call_order(self, store: WordStore):
        store.toggle_personal_dictionary("computer")
        store.toggle_personal_dictionary("apple")
        assert terms(store.personal_dictionary) == ["Computer", "Apple"]

    def test_double_toggle_restores(self, store: WordStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_personal_dictionary("apple")
        assert store.get("apple").is_in_personal_dictionary is False
        assert store.personal_dictionary == []
        assert_in_sync(store)

    def test_remove_keeps_others(self, store: WordStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_personal_dictionary("book")
        store.toggle_personal_dictionary("apple")
        assert terms(store.personal_dictionary) == ["Book"]

    def test_missing_id_is_noop(self, store: WordStore, storage: MemoryKeyValueStore):
        store.toggle_personal_dictionary("missing")
        assert store.personal_dictionary == []
        assert storage.get(PERSONAL_DICTIONARY_KEY) is None

    def test_persists_full_sequence(self, store: WordStore, storage: MemoryKeyValueStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_personal_dictionary("democracy")
        assert [r["id"] for r in saved_records(storage)] == ["apple", "democracy"]

    def test_removal_persisted(self, store: WordStore, storage: MemoryKeyValueStore):
        store.toggle_personal_dictionary("apple")
        store.toggle_personal_dictionary("apple")
        assert saved_records(storage) == []

    def test_mixed_sequence_stays_in_sync(self, store: WordStore):
        for word_id in ["apple", "book", "apple", "computer", "book", "apple"]:
            store.toggle_personal_dictionary(word_id)
            store.toggle_favorite(word_id)
            assert_in_sync(store)


# ---------------------------------------------------------------------------
# WordStore – visible_words
# ---------------------------------------------------------------------------

class TestVisibleWords:
    def test_catalog_with_level(self, store: WordStore):
        store.selected_level = "A1"
        assert terms(store.visible_words()) == ["Apple", "Book"]

    def test_personal_source(self, store: WordStore):
        store.toggle_personal_dictionary("computer")
        assert terms(store.visible_words(personal=True)) == ["Computer"]

    def test_personal_with_level(self, store: WordStore):
        store.toggle_personal_dictionary("computer")
        store.selected_level = "A1"
        assert store.visible_words(personal=True) == []

    def test_reflects_current_flags(self, store: WordStore):
        assert store.visible_words(favorites_only=True) == []
        store.toggle_favorite("democracy")
        assert terms(store.visible_words(favorites_only=True)) == ["Democracy"]
        store.toggle_favorite("democracy")
        assert store.visible_words(favorites_only=True) == []

    def test_search(self, store: WordStore):
        assert terms(store.visible_words(query="BOO")) == ["Book"]


# ---------------------------------------------------------------------------
# WordStore – persistence round trip
# ---------------------------------------------------------------------------

class TestPersistence:
    def test_apple_book_scenario(self, tmp_path: Path):
        path = tmp_path / "store.json"
        store = WordStore(make_words(), KeyValueStore(path))

        store.toggle_favorite("apple")
        assert terms(store.visible_words(favorites_only=True)) == ["Apple"]

        store.toggle_personal_dictionary("apple")
        [saved] = store.personal_dictionary
        assert saved.term == "Apple"
        assert saved.is_favorite is True
        assert saved.is_in_personal_dictionary is True

        reloaded = WordStore(make_words(), KeyValueStore(path))
        apple = reloaded.get("apple")
        assert apple.is_favorite is True
        assert apple.is_in_personal_dictionary is True
        book = reloaded.get("book")
        assert book.is_favorite is False
        assert book.is_in_personal_dictionary is False
        assert_in_sync(reloaded)

    def test_round_trip_flags(self, storage: MemoryKeyValueStore):
        store = WordStore(make_words(), storage)
        store.toggle_personal_dictionary("apple")
        store.toggle_personal_dictionary("computer")
        store.toggle_favorite("computer")

        fresh = WordStore(make_words(), storage)
        assert terms(fresh.personal_dictionary) == ["Apple", "Computer"]
        for saved in store.personal_dictionary:
            word = fresh.get(saved.id)
            assert word.is_favorite == saved.is_favorite
            assert word.is_in_personal_dictionary is True
        assert_in_sync(fresh)

    def test_round_trip_all_fields(self, storage: MemoryKeyValueStore):
        store = WordStore(make_words(), storage)
        store.toggle_personal_dictionary("democracy")
        fresh = WordStore(make_words(), storage)
        assert fresh.personal_dictionary == store.personal_dictionary

    def test_missing_blob(self):
        store = WordStore(make_words(), MemoryKeyValueStore())
        assert store.personal_dictionary == []

    @pytest.mark.parametrize("blob", ["", "not json", "{\"a\": 1}", "[1, 2]", "[{\"id\": \"apple\"}]", "null"])
    def test_corrupt_blob(self, blob: str, caplog: pytest.LogCaptureFixture):
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: blob})
        store = WordStore(make_words(), storage)
        assert store.personal_dictionary == []
        assert all(not w.is_in_personal_dictionary for w in store.words)

    def test_corrupt_blob_logged(self, caplog: pytest.LogCaptureFixture):
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: "garbage"})
        with caplog.at_level(logging.WARNING):
            WordStore(make_words(), storage)
        assert "Could not read personal dictionary" in caplog.text

    def test_non_boolean_flag_rejects_blob(self):
        record = make_words()[0].to_record()
        record["is_in_personal_dictionary"] = True
        record["is_favorite"] = "false"
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: json.dumps([record])})
        store = WordStore(make_words(), storage)
        assert store.personal_dictionary == []
        assert store.get("apple").is_favorite is False
        assert store.get("apple").is_in_personal_dictionary is False

    def test_unknown_ids_dropped(self):
        orphan = Word(
            id="ghost", term="Ghost", definition="", native_meaning="", example="", level="A1",
            is_in_personal_dictionary=True,
        )
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: json.dumps([orphan.to_record()])})
        store = WordStore(make_words(), storage)
        assert store.personal_dictionary == []

    def test_duplicate_ids_collapsed(self):
        record = make_words()[0].to_record()
        record["is_in_personal_dictionary"] = True
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: json.dumps([record, record])})
        store = WordStore(make_words(), storage)
        assert terms(store.personal_dictionary) == ["Apple"]
        assert_in_sync(store)

    def test_saved_flag_forced_on_load(self):
        record = make_words()[1].to_record()
        record["is_favorite"] = True
        storage = MemoryKeyValueStore({PERSONAL_DICTIONARY_KEY: json.dumps([record])})
        store = WordStore(make_words(), storage)
        assert store.get("book").is_in_personal_dictionary is True
        assert store.get("book").is_favorite is True
        assert_in_sync(store)

    def test_write_failure_does_not_raise(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        blocked = tmp_path / "store.json"
        blocked.mkdir()
        store = WordStore(make_words(), KeyValueStore(blocked))
        with caplog.at_level(logging.WARNING):
            store.toggle_personal_dictionary("apple")
        assert store.get("apple").is_in_personal_dictionary is True
        assert store.save() is False
        assert "Personal dictionary was not saved" in caplog.text
