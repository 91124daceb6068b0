"""Application entry point and setup for the Kelime vocabulary trainer."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from kelime.core.services import PlaceholderImageProvider, SilentSpeech
from kelime.core.storage import KeyValueStore
from kelime.core.word_store import WordStore
from kelime.core.words import WordRepository
from kelime.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def create_speech():
    """Platform speech, or a silent stand-in when ``KELIME_SILENT=1``."""
    if os.environ.get("KELIME_SILENT") == "1":
        return SilentSpeech()
    from kelime.ui.speech import QtSpeech

    return QtSpeech()


def run() -> None:
    """Load the catalog and personal dictionary, then start the main window."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Kelime")
    app.setApplicationDisplayName("Kelime")

    catalog = WordRepository()
    storage = KeyValueStore()
    store = WordStore(catalog.all(), storage)
    logging.info(
        "Loaded %d words, %d in personal dictionary (%s)",
        len(store.words),
        len(store.personal_dictionary),
        storage.file_path,
    )

    window = MainWindow(store=store, speech=create_speech(), images=PlaceholderImageProvider())
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
