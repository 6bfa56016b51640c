"""Data transfer objects describing the table for clients of the web API."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from .card import Card
from .cardui import display_rank, display_suit


def _dump_list(items: Iterable[Any] | None) -> list[dict[str, Any]] | None:
    if items is None:
        return None
    return [item.to_dict() for item in items]


@dataclass
class CardDto:
    """A card as rank and suit names."""

    rank: str | None = None
    suit: str | None = None

    @classmethod
    def from_card(cls, card: Card) -> "CardDto":
        """Describe ``card`` with the names shown to players."""
        return cls(rank=display_rank(card.rank), suit=display_suit(card.suit))

    def to_dict(self) -> dict[str, Any]:
        return {"rank": self.rank, "suit": self.suit}


@dataclass
class DealerDto:
    """The dealer's hand and its value."""

    hand: list[CardDto] | None = field(default_factory=list)
    hand_value: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"hand": _dump_list(self.hand), "handValue": self.hand_value}


@dataclass
class PlayerDto:
    """A player's name, hand, hand value and bust flag."""

    name: str | None = None
    hand: list[CardDto] | None = field(default_factory=list)
    hand_value: int | None = None
    is_busted: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "hand": _dump_list(self.hand),
            "handValue": self.hand_value,
            "isBusted": self.is_busted,
        }


@dataclass
class GameDto:
    """The whole table: dealer, players and round status."""

    is_game_over: bool | None = None
    current_player: int | None = None
    dealer: DealerDto | None = None
    players: list[PlayerDto] | None = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isGameOver": self.is_game_over,
            "currentPlayer": self.current_player,
            "dealer": None if self.dealer is None else self.dealer.to_dict(),
            "players": _dump_list(self.players),
        }


@dataclass
class PlayerListDto:
    """A list of players."""

    players: list[PlayerDto] | None = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"players": _dump_list(self.players)}