"""
Typed results returned by the model gateway.

Flashcard and QuizQuestion are pydantic models so that structured replies
from the model are validated field by field before anything reaches a caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

QUIZ_OPTION_COUNT = 4


class Difficulty(str, Enum):
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Flashcard(BaseModel):
    """One card of a generated deck."""

    model_config = ConfigDict(extra="ignore")

    front: str = Field(..., min_length=1, description="Question or term")
    back: str = Field(..., min_length=1, description="Answer or definition")
    topic: str = Field(..., description="Sub-topic the card belongs to")


class QuizQuestion(BaseModel):
    """One multiple-choice question with exactly four options."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    question: str = Field(..., min_length=1)
    options: list[str] = Field(..., min_length=QUIZ_OPTION_COUNT, max_length=QUIZ_OPTION_COUNT)
    correct_answer_index: int = Field(..., alias="correctAnswerIndex")
    explanation: str

    @field_validator("options")
    @classmethod
    def options_not_blank(cls, options: list[str]) -> list[str]:
        if any(not option.strip() for option in options):
            raise ValueError("options must not be blank")
        return options

    @model_validator(mode="after")
    def index_in_range(self) -> QuizQuestion:
        if not 0 <= self.correct_answer_index < len(self.options):
            raise ValueError(
                f"correctAnswerIndex {self.correct_answer_index} out of range for {len(self.options)} options"
            )
        return self

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_answer_index]


@dataclass(frozen=True)
class ChatReply:
    """Model answer for one chat turn."""

    text: str
    sources: tuple[str, ...] = ()
