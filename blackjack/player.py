"""Players at the blackjack table."""

from __future__ import annotations

from dataclasses import dataclass, field

from .card import Card, Rank, _ace_high_total
from .deck import Deck

BUST_LIMIT = 21


@dataclass
class Player:
    """A player with a name and a hand of cards."""

    name: str
    hand: list[Card] = field(default_factory=list)
    standing: bool = field(default=False, compare=False)

    def is_busted(self) -> bool:
        """Whether the hand is worth more than 21."""
        return self.hand_value() > BUST_LIMIT

    def add_card(self, card: Card) -> None:
        self.hand.append(card)

    def clear_hand(self) -> None:
        self.hand.clear()

    def hand_value(self) -> int:
        """Value of the hand, counting each ace as 11 where that does not bust."""
        value = sum(card.rank_value() for card in self.hand)
        for card in self.hand:
            if card.rank is Rank.ACE and value + 10 <= BUST_LIMIT:
                value += 10
        return value

    def stand(self) -> None:
        """End the turn, recording that the player stands; the hand is kept."""
        self.standing = True

    def hit(self, deck: Deck) -> None:
        """Draw a card from ``deck``, unless already busted."""
        if self.is_busted():
            return
        self.add_card(deck.draw_card())


class BotPlayer(Player):
    """A computer-controlled opponent named ``Bot``."""

    def __init__(self) -> None:
        super().__init__("Bot")

    def check_status(self) -> int:
        """Best total of the hand, with aces as 11 until that would bust."""
        return _ace_high_total(self.hand)

    def hit(self, deck: Deck) -> None:
        """Draw a card from ``deck``."""
        self.add_card(deck.draw_card())