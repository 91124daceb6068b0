from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

logger = logging.getLogger(__name__)


def data_dir() -> Path:
    """Per-installation data directory (``$KELIME_HOME`` or ``~/.kelime``)."""
    override = os.environ.get("KELIME_HOME")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".kelime"


class KeyValueStore:
    """String blobs under string keys, persisted to one JSON file.

    File: ~/.kelime/store.json. Every ``set`` rewrites the whole file; a
    failed write is logged and reported through the return value.
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or data_dir() / "store.json"
        self._values = self._load()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> bool:
        """Store ``value`` under ``key``, overwriting any previous value."""
        self._values[key] = value
        return self._save()

    def remove(self, key: str) -> bool:
        if key not in self._values:
            return True
        del self._values[key]
        return self._save()

    def _load(self) -> Dict[str, str]:
        if not self._file_path.exists():
            return {}
        try:
            payload = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning("Could not load store from %s: %s", self._file_path, e)
            return {}
        if not isinstance(payload, dict):
            logger.warning("Ignoring store %s: top level is not an object", self._file_path)
            return {}
        return {k: v for k, v in payload.items() if isinstance(k, str) and isinstance(v, str)}

    def _save(self) -> bool:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(json.dumps(self._values, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save store to %s: %s", self._file_path, e)
            return False
        return True


class MemoryKeyValueStore(KeyValueStore):
    """Non-persistent store for headless runs."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self._initial = dict(values or {})
        super().__init__(Path(os.devnull))

    def _load(self) -> Dict[str, str]:
        return dict(self._initial)

    def _save(self) -> bool:
        return True
