from __future__ import annotations

from enum import Enum
from typing import Optional

from kelime.core.words import Word


class QuestionType(Enum):
    NATIVE_MEANING = 0
    DEFINITION = 1
    EXAMPLE = 2


_PROMPTS = {
    QuestionType.NATIVE_MEANING: "What's the Turkish meaning of this word?",
    QuestionType.DEFINITION: "What's the definition of this word?",
    QuestionType.EXAMPLE: "Complete the example sentence:",
}


class WordQuiz:
    """Self-graded quiz on a single word, cycling through three question types.

    Answers are compared case-insensitively and are not trimmed, so a
    trailing space makes an answer wrong.
    """

    def __init__(self, word: Word) -> None:
        self._word = word
        self._question = QuestionType.NATIVE_MEANING
        self.answer = ""
        self._result_visible = False
        self._is_correct = False

    @property
    def word(self) -> Word:
        return self._word

    @property
    def question_type(self) -> QuestionType:
        return self._question

    @property
    def prompt(self) -> str:
        return _PROMPTS[self._question]

    @property
    def correct_answer(self) -> str:
        if self._question is QuestionType.NATIVE_MEANING:
            return self._word.native_meaning
        if self._question is QuestionType.DEFINITION:
            return self._word.definition
        return self._word.example

    @property
    def result_visible(self) -> bool:
        return self._result_visible

    @property
    def is_correct(self) -> bool:
        return self._is_correct

    def check_answer(self, answer: Optional[str] = None) -> bool:
        """Grade ``answer`` (or the stored answer) and reveal the result."""
        if answer is not None:
            self.answer = answer
        self._is_correct = self.answer.lower() == self.correct_answer.lower()
        self._result_visible = True
        return self._is_correct

    def next_question(self) -> None:
        self.answer = ""
        self._result_visible = False
        self._is_correct = False
        self._question = QuestionType((self._question.value + 1) % len(QuestionType))
