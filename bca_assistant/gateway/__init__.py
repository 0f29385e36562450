"""Gemini model gateway and the typed results it returns."""

from .gemini_gateway import GeminiGateway, extract_sources, parse_batch, strip_code_fences
from .models import ChatReply, Difficulty, Flashcard, QuizQuestion

__all__ = [
    "ChatReply",
    "Difficulty",
    "Flashcard",
    "GeminiGateway",
    "QuizQuestion",
    "extract_sources",
    "parse_batch",
    "strip_code_fences",
]
