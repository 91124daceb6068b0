"""Qt text-to-speech adapter for :class:`kelime.core.services.SpeechService`."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QLocale
from PySide6.QtTextToSpeech import QTextToSpeech

logger = logging.getLogger(__name__)


class QtSpeech:
    """Speaks through the platform voice; the engine is created on first use."""

    def __init__(self) -> None:
        self._engine: Optional[QTextToSpeech] = None

    def speak(self, text: str, language: str) -> None:
        if self._engine is None:
            self._engine = QTextToSpeech()
            if not self._engine.availableVoices():
                logger.warning("No text-to-speech voices available")
        self._engine.setLocale(QLocale(language.replace("-", "_")))
        self._engine.say(text)
