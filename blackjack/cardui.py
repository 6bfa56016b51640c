"""Display names for cards."""

from __future__ import annotations

from .card import Card, Rank, Suit

_SUIT_DISPLAY = {
    Suit.CLUBS: "Clubs",
    Suit.DIAMONDS: "Diamonds",
    Suit.HEARTS: "Hearts",
    Suit.SPADES: "Spades",
}

_RANK_DISPLAY = {
    Rank.ACE: "Ace",
    Rank.TWO: "Two",
    Rank.THREE: "Three",
    Rank.FOUR: "Four",
    Rank.FIVE: "Five",
    Rank.SIX: "Six",
    Rank.SEVEN: "Seven",
    Rank.EIGHT: "Eight",
    Rank.NINE: "Nine",
    Rank.TEN: "Ten",
    Rank.JACK: "Jack",
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
}


def display_suit(suit: Suit) -> str:
    """Name of a suit as shown to players."""
    return _SUIT_DISPLAY[suit]


def display_rank(rank: Rank) -> str:
    """Name of a rank as shown to players, spelled out in words."""
    return _RANK_DISPLAY[rank]


def describe_card(card: Card) -> str:
    """A card as shown to players, e.g. ``"Ace of Spades"``."""
    return f"{display_rank(card.rank)} of {display_suit(card.suit)}"