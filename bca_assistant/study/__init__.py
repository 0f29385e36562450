"""Study orchestration: chat, flashcard decks, quizzes and the C lab."""

from .deck import FlashcardDeck
from .quiz import AnswerResult, QuizRunner
from .service import StudyService

__all__ = ["AnswerResult", "FlashcardDeck", "QuizRunner", "StudyService"]
