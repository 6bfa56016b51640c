"""The dealer, who deals from the deck and plays a hand of their own."""

from __future__ import annotations

import random
from typing import Iterable

from .card import Card, _ace_high_total
from .deck import Deck
from .player import Player


class Dealer:
    """Deals cards from a deck and holds the dealer's hand."""

    def __init__(self, deck: Deck, rng: random.Random | None = None) -> None:
        self.deck = deck
        self.hand: list[Card] = []
        self._rng = rng

    def add_card(self, card: Card) -> None:
        self.hand.append(card)

    def deal(self, players: Iterable[Player]) -> None:
        """Shuffle, then give each player a card, the dealer one, and each player another."""
        players = list(players)
        self.deck.shuffle(self._rng)
        for player in players:
            player.add_card(self.deck.draw_card())
        self.add_card(self.deck.draw_card())
        for player in players:
            player.add_card(self.deck.draw_card())

    def deal_single_card(self) -> Card:
        """Draw one card from the deck."""
        return self.deck.draw_card()

    def check_status(self) -> int:
        """Best total of the dealer's hand, with aces as 11 until that would bust."""
        return _ace_high_total(self.hand)

    def clear_hand(self) -> None:
        self.hand.clear()

    def card_value(self, card: Card) -> int:
        """Value of a single card, with the ace counted as 1."""
        return card.rank_value()