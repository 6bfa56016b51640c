"""Console views: what players see at the table and how their input is read."""

from __future__ import annotations

import re
import sys
from typing import Iterable, TextIO

from .card import Card
from .cardui import describe_card
from .dealer import Dealer
from .player import Player

_INT_PATTERN = re.compile(r"[+-]?\d+")
_WORD_PATTERN = re.compile(r"\S+")


class _Console:
    """Text output plus whitespace-separated reading of input."""

    def __init__(self, out: TextIO | None = None, inp: TextIO | None = None) -> None:
        self._out = out
        self._inp = inp
        self._pending = ""

    @property
    def out(self) -> TextIO:
        return sys.stdout if self._out is None else self._out

    @property
    def inp(self) -> TextIO:
        return sys.stdin if self._inp is None else self._inp

    def write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _fill(self) -> None:
        """Make sure the pending input starts with a non-blank character."""
        self._pending = self._pending.lstrip()
        while not self._pending:
            line = self.inp.readline()
            if not line:
                raise EOFError("no more input")
            self._pending = line.lstrip()

    def read_char(self) -> str:
        self._fill()
        char, self._pending = self._pending[0], self._pending[1:]
        return char

    def read_word(self) -> str:
        self._fill()
        match = _WORD_PATTERN.match(self._pending)
        assert match is not None
        self._pending = self._pending[match.end():]
        return match.group()

    def read_int(self) -> int:
        self._fill()
        match = _INT_PATTERN.match(self._pending)
        if match is None:
            raise ValueError(f"expected a number, got {self._pending.split()[0]!r}")
        self._pending = self._pending[match.end():]
        return int(match.group())


def _cards_text(hand: Iterable[Card]) -> str:
    return "".join(f"[{describe_card(card)}], " for card in hand)


class PlayerView:
    """Shows hands to the players and asks them what to do."""

    def __init__(self, out: TextIO | None = None, inp: TextIO | None = None) -> None:
        self.console = _Console(out, inp)

    def display_hand(self, hand: Iterable[Card], hand_value: int, player: Player) -> None:
        self.console.write(
            f"{player.name}, your hand is: {_cards_text(hand)}Value: {hand_value}\n"
        )

    def display_dealers_first_card(self, dealer: Dealer, hand: list[Card]) -> None:
        first = hand[0]
        self.console.write(
            f"Dealer's first card: [{describe_card(first)}], "
            f"Value: {dealer.card_value(first)}\n"
        )

    def display_dealers_hand(self, dealer: Dealer, hand: Iterable[Card]) -> None:
        self.console.write(
            f"Dealer's hand is: {_cards_text(hand)}Value: {dealer.check_status()}\n"
        )

    def prompt_user_action(self) -> str:
        """Ask whether to hit or stand and return the character typed."""
        self.console.write("Do you want to hit (h) or stand (s)? ")
        return self.console.read_char()

    def display_bust_message(self) -> None:
        self.console.write("You busted!\n")

    def display_invalid_input(self) -> None:
        self.console.write("Invalid input. Please enter the correct input.\n")


class GameUI:
    """Everything the game shows and asks, built on a :class:`PlayerView`."""

    def __init__(self, player_view: PlayerView | None = None) -> None:
        self.player_view = player_view if player_view is not None else PlayerView()
        self.console = self.player_view.console

    def display_game_name(self) -> None:
        self.console.write("Welcome to Blackjack!\n")

    def display_dealers_card(self, hand: list[Card], dealer: Dealer) -> None:
        self.player_view.display_dealers_first_card(dealer, hand)

    def display_dealer_hand(self, hand: Iterable[Card], dealer: Dealer) -> None:
        self.player_view.display_dealers_hand(dealer, hand)

    def display_hand_status(
        self, hand: Iterable[Card], hand_value: int, player: Player
    ) -> None:
        self.player_view.display_hand(hand, hand_value, player)

    def prompt_user_action(self) -> str:
        return self.player_view.prompt_user_action()

    def bust_message(self) -> None:
        self.player_view.display_bust_message()

    def invalid_input(self) -> None:
        self.player_view.display_invalid_input()

    def dealer_value(self, value: int) -> None:
        self.console.write(f"Dealer's hand value: {value}\n")

    def play_again(self) -> str:
        """Ask whether to play again and return the character typed."""
        self.console.write("Do you want to play again? (y/n): ")
        return self.console.read_char()

    def bust(self, player: Player) -> None:
        self.console.write(f"{player.name} busted!\n")

    def win(self, player: Player) -> None:
        self.console.write(f"{player.name} wins!\n")

    def loses(self, player: Player) -> None:
        self.console.write(f"{player.name} loses!\n")

    def push(self, player: Player) -> None:
        self.console.write(f"{player.name} pushes!\n")

    def new_card(self) -> None:
        self.console.write("You drew a card! ")

    def ask_num_players(self) -> int:
        """Ask how many players are at the table."""
        self.console.write("Enter the number of players: ")
        return self.console.read_int()

    def ask_player_names(self, num_players: int) -> list[str]:
        """Ask for one name per player, each a single word."""
        self.console.write("Enter the name of each player: \n")
        names = []
        for number in range(1, num_players + 1):
            self.console.write(f"Player {number}: ")
            names.append(self.console.read_word())
        return names