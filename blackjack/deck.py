"""A deck of playing cards."""

from __future__ import annotations

import random
from typing import Iterator

from .card import Card, Rank, Suit


class EmptyDeckError(IndexError):
    """Raised when drawing from a deck that has no cards left."""


class Deck:
    """A 52-card deck; the top of the deck is the end of the list."""

    def __init__(self) -> None:
        self._cards: list[Card] = [Card(suit, rank) for suit in Suit for rank in Rank]

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Shuffle the deck in place, with ``rng`` if given."""
        (rng or random.SystemRandom()).shuffle(self._cards)

    def add_card(self, card: Card) -> None:
        """Put a card back on top of the deck."""
        self._cards.append(card)

    def remove_card(self, card: Card) -> None:
        """Remove this very card object from the deck, if it is there."""
        self._cards = [c for c in self._cards if c is not card]

    def draw_card(self) -> Card:
        """Take the top card off the deck."""
        if not self._cards:
            raise EmptyDeckError("the deck is empty")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))