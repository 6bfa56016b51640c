"""Playing cards: suits, ranks and the card itself."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable


class Suit(Enum):
    """The four suits, in deck order."""

    HEARTS = 0
    DIAMONDS = 1
    CLUBS = 2
    SPADES = 3

    @classmethod
    def from_string(cls, text: str) -> "Suit":
        """Return the suit named by ``text`` (e.g. ``"Hearts"``)."""
        for suit, name in _SUIT_NAMES.items():
            if name == text:
                return suit
        raise ValueError("Invalid suit")


class Rank(Enum):
    """The thirteen ranks, ace low, in deck order."""

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    JACK = 10
    QUEEN = 11
    KING = 12

    @classmethod
    def from_string(cls, text: str) -> "Rank":
        """Return the rank named by ``text`` (e.g. ``"Ace"`` or ``"7"``)."""
        for rank, name in _RANK_NAMES.items():
            if name == text:
                return rank
        raise ValueError("Invalid rank")


_SUIT_NAMES = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.SPADES: "Spades",
}

_RANK_NAMES = {
    Rank.ACE: "Ace",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}

_RANK_VALUES = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    def rank_value(self) -> int:
        """Blackjack value of the rank, with the ace counted as 1."""
        return _RANK_VALUES[self.rank]

    def suit_value(self) -> int:
        """Numeric index of the suit."""
        return self.suit.value

    def suit_string(self) -> str:
        """Name of the suit, e.g. ``"Spades"``."""
        return _SUIT_NAMES[self.suit]

    def rank_string(self) -> str:
        """Short name of the rank, e.g. ``"Ace"`` or ``"10"``."""
        return _RANK_NAMES[self.rank]


def _ace_high_total(cards: Iterable[Card]) -> int:
    """Total with aces as 11, each dropped to 1 while the total exceeds 21."""
    total = 0
    aces = 0
    for card in cards:
        if card.rank is Rank.ACE:
            aces += 1
            total += 11
        else:
            total += card.rank_value()
    while total > 21 and aces > 0:
        total -= 10
        aces -= 1
    return total