"""
Per-slot request tokens.

Each UI slot (chat box, flashcard deck, quiz runner, compiler pane, ...)
may have one request in flight. Issuing a request for a slot supersedes any
earlier one, so a late reply can be recognised as stale and dropped.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from enum import Enum


class Slot(str, Enum):
    CHAT = "chat"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"
    DOCUMENT = "document"
    COMPILER = "compiler"
    SCANNER = "scanner"


@dataclass(frozen=True)
class RequestToken:
    slot: Slot
    serial: int


class RequestTokens:
    """Hands out request tokens and tracks which slots are pending."""

    def __init__(self):
        self._lock = threading.Lock()
        self._latest: dict[Slot, int] = {}
        self._pending: set[Slot] = set()

    def issue(self, slot: Slot) -> RequestToken:
        with self._lock:
            serial = self._latest.get(slot, 0) + 1
            self._latest[slot] = serial
            self._pending.add(slot)
            return RequestToken(slot=slot, serial=serial)

    def is_current(self, token: RequestToken) -> bool:
        with self._lock:
            return self._latest.get(token.slot) == token.serial

    def release(self, token: RequestToken) -> None:
        """Clear the pending flag if this token is still the slot's latest."""
        with self._lock:
            if self._latest.get(token.slot) == token.serial:
                self._pending.discard(token.slot)

    def pending(self, slot: Slot) -> bool:
        with self._lock:
            return slot in self._pending

    def snapshot(self) -> dict[str, bool]:
        with self._lock:
            return {slot.value: slot in self._pending for slot in Slot}
