"""Sequential quiz runner with a running score."""

from __future__ import annotations

from dataclasses import dataclass, field

from bca_assistant.errors import InvalidInputError
from bca_assistant.gateway.models import Difficulty, QuizQuestion


@dataclass
class AnswerResult:
    is_correct: bool
    correct_answer_index: int
    explanation: str


@dataclass
class QuizRunner:
    """
    Walks a generated quiz one question at a time.

    Each question accepts a single answer; later answers to the same
    question are ignored. An option index outside the question's options
    is rejected without using up the answer.
    """

    topic: str
    difficulty: Difficulty
    questions: list[QuizQuestion] = field(default_factory=list)
    current_index: int = 0
    score: int = 0
    selected_option: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.questions

    @property
    def current(self) -> QuizQuestion | None:
        if self.current_index < len(self.questions):
            return self.questions[self.current_index]
        return None

    @property
    def finished(self) -> bool:
        return self.current_index >= len(self.questions)

    def answer(self, option_index: int) -> AnswerResult | None:
        question = self.current
        if question is None or self.selected_option is not None:
            return None
        if not 0 <= option_index < len(question.options):
            raise InvalidInputError(f"Option {option_index} is out of range")

        self.selected_option = option_index
        is_correct = option_index == question.correct_answer_index
        if is_correct:
            self.score += 1
        return AnswerResult(
            is_correct=is_correct,
            correct_answer_index=question.correct_answer_index,
            explanation=question.explanation,
        )

    def next_question(self) -> QuizQuestion | None:
        if not self.finished:
            self.current_index += 1
            self.selected_option = None
        return self.current

    def summary(self) -> str:
        return f"Score: {self.score}/{len(self.questions)}"

    def to_dict(self) -> dict:
        return {
            "topic": self.topic,
            "difficulty": self.difficulty.value,
            "current_index": self.current_index,
            "score": self.score,
            "finished": self.finished,
            "questions": [q.model_dump() for q in self.questions],
        }
