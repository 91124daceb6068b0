from __future__ import annotations

import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

import yaml

ALL_LEVELS = "All"
WORD_LEVELS = ("A1", "A2", "B1", "B2", "C1", "C2")
LEVELS = (ALL_LEVELS,) + WORD_LEVELS

_ID_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "kelime:words")


def make_word_id(level: str, term: str) -> str:
    """Stable id for a catalog word that has no explicit ``id`` in the seed file."""
    return str(uuid.uuid5(_ID_NAMESPACE, f"{level}:{term.strip().lower()}"))


@dataclass
class Word:
    """A vocabulary entry. Only the two flags change after creation."""

    id: str
    term: str
    definition: str
    native_meaning: str
    example: str
    level: str
    is_favorite: bool = False
    is_in_personal_dictionary: bool = False

    def __setattr__(self, name: str, value) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Word.id is assigned once and cannot change")
        super().__setattr__(name, value)

    def to_record(self) -> Dict[str, object]:
        return {
            "id": self.id,
            "term": self.term,
            "definition": self.definition,
            "native_meaning": self.native_meaning,
            "example": self.example,
            "level": self.level,
            "is_favorite": self.is_favorite,
            "is_in_personal_dictionary": self.is_in_personal_dictionary,
        }

    @classmethod
    def from_record(cls, record: Dict[str, object]) -> "Word":
        """Build a Word from a persisted record.

        Raises ``KeyError``/``TypeError``/``ValueError`` on malformed input so
        callers can treat the whole blob as unreadable.
        """
        if not isinstance(record, dict):
            raise TypeError(f"expected a mapping, got {type(record).__name__}")
        fields = {}
        for key in ("id", "term", "definition", "native_meaning", "example", "level"):
            value = record[key]
            if not isinstance(value, str):
                raise TypeError(f"{key!r} must be a string")
            fields[key] = value
        if fields["level"] not in WORD_LEVELS:
            raise ValueError(f"unknown level {fields['level']!r}")
        for key in ("is_favorite", "is_in_personal_dictionary"):
            value = record.get(key, False)
            if not isinstance(value, bool):
                raise TypeError(f"{key!r} must be a boolean")
            fields[key] = value
        return cls(**fields)


class WordRepository:
    """Seed catalog bundled with the application (``data/words.yaml``)."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path or Path(__file__).resolve().parent.parent / "data" / "words.yaml"
        self._words = self._load_words()

    def all(self) -> List[Word]:
        """Fresh Word objects in seed order."""
        return [
            Word(
                id=w.id,
                term=w.term,
                definition=w.definition,
                native_meaning=w.native_meaning,
                example=w.example,
                level=w.level,
            )
            for w in self._words
        ]

    def _load_words(self) -> List[Word]:
        if not self._path.exists():
            raise FileNotFoundError(f"Word catalog not found: {self._path}")

        raw = yaml.safe_load(self._path.read_text(encoding="utf-8"))
        if not raw or not isinstance(raw, dict) or not isinstance(raw.get("words"), list):
            raise ValueError(f"{self._path.name}: expected YAML with a 'words' list")

        words: List[Word] = []
        seen: set[str] = set()
        for position, entry in enumerate(raw["words"], start=1):
            if not isinstance(entry, dict):
                raise ValueError(f"{self._path.name}: entry {position} is not a mapping")
            term = str(entry.get("term") or "").strip()
            if not term:
                raise ValueError(f"{self._path.name}: entry {position} is missing 'term'")
            level = str(entry.get("level") or "").strip()
            if level not in WORD_LEVELS:
                raise ValueError(f"{self._path.name}: '{term}' has invalid level {level!r}")
            word_id = str(entry.get("id") or "").strip() or make_word_id(level, term)
            if word_id in seen:
                raise ValueError(f"{self._path.name}: duplicate id {word_id!r}")
            seen.add(word_id)
            words.append(
                Word(
                    id=word_id,
                    term=term,
                    definition=str(entry.get("definition") or "").strip(),
                    native_meaning=str(entry.get("native_meaning") or "").strip(),
                    example=str(entry.get("example") or "").strip(),
                    level=level,
                )
            )

        if not words:
            raise ValueError(f"{self._path.name}: 'words' is empty")
        return words
