"""The flow of a round of blackjack and the console entry point."""

from __future__ import annotations

import argparse
from typing import Sequence

from .dealer import Dealer
from .deck import Deck
from .player import Player
from .views import GameUI

DEALER_STANDS_AT = 17


class Game:
    """Runs player and dealer turns and settles the round."""

    def __init__(self, game_ui: GameUI, dealer: Dealer) -> None:
        self.game_ui = game_ui
        self.dealer = dealer
        self.players: list[Player] = []

    def start(self) -> None:
        """Play one full round: seat players, deal, then take the turns."""
        self.game_ui.display_game_name()
        self.player_init()
        self.dealer.deal(self.players)
        self.player_turn()
        self.dealer_turn()

    def player_init(self) -> None:
        """Ask for the players and seat them."""
        count = self.game_ui.ask_num_players()
        for name in self.game_ui.ask_player_names(count):
            self.add_player(Player(name))

    def player_turn(self) -> None:
        """Let each player hit until they stand or bust."""
        ui = self.game_ui
        ui.display_dealers_card(self.dealer.hand, self.dealer)
        for player in self.players:
            while True:
                ui.display_hand_status(player.hand, player.hand_value(), player)
                choice = ui.prompt_user_action()
                if choice == "h" and not player.is_busted():
                    player.add_card(self.dealer.deal_single_card())
                    ui.new_card()
                    if player.is_busted():
                        ui.bust_message()
                        break
                elif choice == "s":
                    break
                else:
                    ui.invalid_input()

    def dealer_turn(self) -> None:
        """Draw for the dealer until the hand is worth at least 17."""
        dealer = self.dealer
        self.game_ui.display_dealer_hand(dealer.hand, dealer)
        if len(dealer.hand) == 1:
            dealer.add_card(dealer.deal_single_card())
        while dealer.check_status() < DEALER_STANDS_AT:
            dealer.add_card(dealer.deal_single_card())
            self.game_ui.display_dealer_hand(dealer.hand, dealer)

    def check_winner(self) -> bool:
        """Announce each player's result against the dealer; the round is then over."""
        ui = self.game_ui
        dealer_value = self.dealer.check_status()
        ui.dealer_value(dealer_value)
        for player in self.players:
            value = player.hand_value()
            if player.is_busted():
                ui.bust(player)
            elif dealer_value > 21 or value > dealer_value:
                ui.win(player)
            elif value < dealer_value:
                ui.loses(player)
            else:
                ui.push(player)
        return True

    def add_player(self, player: Player) -> None:
        self.players.append(player)

    def player_by_name(self, name: str) -> Player | None:
        """The first player with this name, or ``None``."""
        return next((p for p in self.players if p.name == name), None)

    def deal(self) -> None:
        """Deal the opening cards to every player and the dealer."""
        self.dealer.deal(self.players)


def run(game: Game | None = None) -> None:
    """Play rounds until the game reports it is over, then say goodbye."""
    if game is None:
        game = Game(GameUI(), Dealer(Deck()))
    running = True
    while running:
        game.start()
        running = not game.check_winner()
    game.game_ui.console.write("Thanks for playing!\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Play blackjack at the console."""
    parser = argparse.ArgumentParser(
        prog="blackjack", description="Play a round of blackjack at the console."
    )
    parser.parse_args(argv)
    run()
    return 0