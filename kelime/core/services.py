"""Speech and image collaborators used by the word views."""

from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

logger = logging.getLogger(__name__)

PRONUNCIATION_LANGUAGE = "en-US"
PLAYING_RESET_MS = 2000

Scheduler = Callable[[int, Callable[[], None]], None]


class SpeechService(Protocol):
    def speak(self, text: str, language: str) -> None: ...


class ImageProvider(Protocol):
    def image_for(self, term: str) -> Optional[object]: ...


class SilentSpeech:
    """Speech service that only logs; used headless and in tests."""

    def speak(self, text: str, language: str) -> None:
        logger.debug("Speech disabled, not speaking %r (%s)", text, language)


class PlaceholderImageProvider:
    """No image source; views show their placeholder."""

    def image_for(self, term: str) -> Optional[object]:
        return None


class Pronouncer:
    """Speaks a term and keeps an ``is_playing`` flag raised for a short while.

    The reset is handed to ``schedule(delay_ms, callback)``, which the UI
    backs with ``QTimer.singleShot``.
    """

    def __init__(
        self,
        speech: SpeechService,
        schedule: Scheduler,
        reset_after_ms: int = PLAYING_RESET_MS,
        on_change: Optional[Callable[[bool], None]] = None,
    ) -> None:
        self._speech = speech
        self._schedule = schedule
        self._reset_after_ms = reset_after_ms
        self._on_change = on_change
        self._is_playing = False

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    def pronounce(self, term: str) -> bool:
        """Start speaking ``term``. Returns False if already playing or empty."""
        if self._is_playing or not term:
            return False
        try:
            self._speech.speak(term, PRONUNCIATION_LANGUAGE)
        except Exception as e:
            logger.warning("Could not pronounce %r: %s", term, e)
        self._set_playing(True)
        self._schedule(self._reset_after_ms, lambda: self._set_playing(False))
        return True

    def _set_playing(self, value: bool) -> None:
        self._is_playing = value
        if self._on_change is not None:
            self._on_change(value)
