"""Prompt composition for chat and generation requests."""

from .composer import ComposedPrompt, Turn, compose_chat
from .prompts import AnswerPolicy

__all__ = ["AnswerPolicy", "ComposedPrompt", "Turn", "compose_chat"]
