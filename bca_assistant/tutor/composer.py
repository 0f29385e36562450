"""
Chat prompt composition.

Turns session data into the exact request the gateway sends: one system
instruction plus the ordered conversation. compose_chat is a pure function,
so identical inputs always produce an identical request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from bca_assistant.session.state import Message, Role

from .prompts import AnswerPolicy, knowledge_section


@dataclass(frozen=True)
class Turn:
    """A role-tagged text turn as the model sees it."""

    role: Role
    text: str

    def to_content(self) -> dict:
        return {"role": self.role.value, "parts": [{"text": self.text}]}


@dataclass(frozen=True)
class ComposedPrompt:
    """System instruction and conversation for one chat request."""

    system_instruction: str
    turns: tuple[Turn, ...]
    policy: AnswerPolicy

    @property
    def online(self) -> bool:
        return self.policy.uses_search

    def to_contents(self) -> list[dict]:
        return [turn.to_content() for turn in self.turns]


def build_system_instruction(
    persona: str,
    knowledge_base: str,
    notes: str,
    policy: AnswerPolicy,
) -> str:
    return persona + knowledge_section(knowledge_base, notes) + policy.instruction


def compose_chat(
    message: str,
    persona: str,
    knowledge_base: str,
    notes: str,
    transcript: Iterable[Message],
    online: bool,
) -> ComposedPrompt:
    """
    Build a chat request.

    Args:
        message: The new user message
        persona: Subject tutoring instruction
        knowledge_base: Static reference text for the subject
        notes: Learner-uploaded notes for the subject
        transcript: Prior messages, oldest first (excluding the new message)
        online: Whether web search may be used

    Returns:
        ComposedPrompt with the prior transcript followed by the new user turn
    """
    policy = AnswerPolicy.for_mode(online)
    turns = tuple(
        Turn(role=m.role, text=m.text) for m in transcript if not m.is_thinking
    ) + (Turn(role=Role.USER, text=message),)

    return ComposedPrompt(
        system_instruction=build_system_instruction(persona, knowledge_base, notes, policy),
        turns=turns,
        policy=policy,
    )
