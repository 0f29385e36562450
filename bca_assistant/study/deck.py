"""Flashcard deck navigation."""

from __future__ import annotations

from dataclasses import dataclass, field

from bca_assistant.gateway.models import Flashcard


@dataclass
class FlashcardDeck:
    """An ordered deck with a cursor and a flipped/unflipped face."""

    topic: str
    cards: list[Flashcard] = field(default_factory=list)
    index: int = 0
    flipped: bool = False

    @property
    def is_empty(self) -> bool:
        return not self.cards

    @property
    def current(self) -> Flashcard | None:
        return self.cards[self.index] if self.cards else None

    def next(self) -> Flashcard | None:
        if self.index < len(self.cards) - 1:
            self.index += 1
            self.flipped = False
        return self.current

    def previous(self) -> Flashcard | None:
        if self.index > 0:
            self.index -= 1
            self.flipped = False
        return self.current

    def seek(self, index: int) -> Flashcard | None:
        """Jump to a card; out-of-range positions are clamped."""
        if self.cards:
            self.index = max(0, min(index, len(self.cards) - 1))
            self.flipped = False
        return self.current

    def flip(self) -> bool:
        self.flipped = not self.flipped
        return self.flipped

    def to_dict(self) -> dict:
        return {
            "topic": self.topic,
            "index": self.index,
            "total": len(self.cards),
            "cards": [card.model_dump() for card in self.cards],
        }
