"""Quiz screen for a single word."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QLineEdit, QPushButton, QVBoxLayout, QWidget

from kelime.core.quiz import WordQuiz
from kelime.core.words import Word
from kelime.ui.colors import HomeColors
from kelime.ui.widgets import primary_button_style, secondary_button_style


class QuizScreen(QWidget):
    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._quiz: Optional[WordQuiz] = None

        self._prompt = QLabel()
        self._prompt.setAlignment(Qt.AlignCenter)
        self._prompt.setWordWrap(True)
        self._prompt.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 20px;")

        self._term = QLabel()
        self._term.setAlignment(Qt.AlignCenter)
        self._term.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 34px; font-weight: 800;")

        self._answer = QLineEdit()
        self._answer.setPlaceholderText("Your answer")
        self._answer.setStyleSheet(
            "QLineEdit { background: #ffffff; border: 1px solid #e2e8f0;"
            " border-radius: 8px; padding: 8px; font-size: 15px; }"
        )
        self._answer.returnPressed.connect(self._check)

        check = QPushButton("Check Answer")
        check.setStyleSheet(primary_button_style())
        check.clicked.connect(self._check)

        self._result = QLabel()
        self._result.setAlignment(Qt.AlignCenter)
        self._correct_answer = QLabel()
        self._correct_answer.setAlignment(Qt.AlignCenter)
        self._correct_answer.setWordWrap(True)
        self._correct_answer.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px;")

        next_button = QPushButton("Next Question")
        next_button.setStyleSheet(secondary_button_style())
        next_button.clicked.connect(self._next)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(32, 24, 32, 24)
        layout.setSpacing(20)
        layout.addStretch(1)
        layout.addWidget(self._prompt)
        layout.addWidget(self._term)
        layout.addWidget(self._answer)
        layout.addWidget(check, 0, Qt.AlignHCenter)
        layout.addWidget(self._result)
        layout.addWidget(self._correct_answer)
        layout.addWidget(next_button, 0, Qt.AlignHCenter)
        layout.addStretch(2)

    def start(self, word: Word) -> None:
        """Begin a fresh quiz on ``word``."""
        self._quiz = WordQuiz(word)
        self._refresh()

    def _check(self) -> None:
        if self._quiz is None:
            return
        self._quiz.check_answer(self._answer.text())
        self._refresh()

    def _next(self) -> None:
        if self._quiz is None:
            return
        self._quiz.next_question()
        self._refresh()

    def _refresh(self) -> None:
        quiz = self._quiz
        if quiz is None:
            return
        self._prompt.setText(quiz.prompt)
        self._term.setText(quiz.word.term)
        if self._answer.text() != quiz.answer:
            self._answer.setText(quiz.answer)

        self._result.setVisible(quiz.result_visible)
        self._correct_answer.setVisible(quiz.result_visible and not quiz.is_correct)
        if quiz.result_visible:
            color = HomeColors.SUCCESS if quiz.is_correct else HomeColors.ERROR
            self._result.setText("Correct!" if quiz.is_correct else "Incorrect. Try again!")
            self._result.setStyleSheet(f"color: {color}; font-size: 20px; font-weight: 700;")
            self._correct_answer.setText(f"Correct answer: {quiz.correct_answer}")
