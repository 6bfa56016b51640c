"""HTTP service exposing a shared blackjack table."""

from __future__ import annotations

import argparse
import json
import logging
import random
import threading
from typing import Sequence, TextIO

from flask import Flask, Response

from .dealer import Dealer
from .deck import Deck
from .dto import CardDto, DealerDto, GameDto, PlayerDto
from .game import Game
from .player import Player
from .views import GameUI, PlayerView

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8200

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": (
        "DNT, User-Agent, X-Requested-With, If-Modified-Since, "
        "Cache-Control, Content-Type, Range, Authorization"
    ),
    "Access-Control-Max-Age": "1728000",
}

logger = logging.getLogger("blackjack.server")


def _cards(cards) -> list[CardDto]:
    return [CardDto.from_card(card) for card in cards]


class GameSession:
    """The one game the service plays, replaced on start and reset."""

    def __init__(self, out: TextIO | None = None, rng: random.Random | None = None) -> None:
        self._out = out
        self._rng = rng
        self.lock = threading.RLock()
        self.game = self._new_game()

    def _new_game(self) -> Game:
        return Game(GameUI(PlayerView(out=self._out)), Dealer(Deck(), self._rng))

    @property
    def dealer(self) -> Dealer:
        return self.game.dealer

    def reset(self) -> None:
        """Throw the current game away and set up a fresh table."""
        self.game = self._new_game()

    def dealer_turn_report(self) -> str:
        """Play the dealer's turn and report each player's result, one per line."""
        self.game.dealer_turn()
        dealer_value = self.dealer.check_status()
        lines = []
        for player in self.game.players:
            value = player.hand_value()
            if player.is_busted():
                outcome = "busted."
            elif dealer_value > 21 or value > dealer_value:
                outcome = "wins."
            elif value < dealer_value:
                outcome = "loses."
            else:
                outcome = "pushes (tie)."
            lines.append(f"{player.name} {outcome}\n")
        return "".join(lines)

    def game_state(self) -> GameDto:
        """Describe the dealer and every player."""
        dealer = self.dealer
        return GameDto(
            dealer=DealerDto(hand=_cards(dealer.hand), hand_value=dealer.check_status()),
            players=[
                PlayerDto(
                    name=player.name,
                    hand=_cards(player.hand),
                    hand_value=player.hand_value(),
                    is_busted="true" if player.is_busted() else "false",
                )
                for player in self.game.players
            ],
        )


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def _json(data: dict, status: int = 200) -> Response:
    return Response(json.dumps(data), status=status, mimetype="application/json")


def create_app(session: GameSession | None = None) -> Flask:
    """Build the web application around ``session`` (a new one if omitted)."""
    if session is None:
        session = GameSession()
    app = Flask(__name__)
    app.extensions["blackjack_session"] = session

    @app.after_request
    def add_cors(response: Response) -> Response:
        response.headers.update(CORS_HEADERS)
        return response

    @app.get("/game/addPlayer/<player_name>")
    def add_player(player_name: str) -> Response:
        with session.lock:
            session.game.add_player(Player(player_name))
        return _text("Player added")

    @app.get("/game/start")
    def start_game() -> Response:
        with session.lock:
            session.reset()
            session.game.game_ui.display_game_name()
        return _text("Game started")

    @app.get("/game/isOver")
    def stop_game() -> Response:
        with session.lock:
            session.game.check_winner()
        return _text("Game is over!")

    @app.get("/game/deal")
    def deal() -> Response:
        with session.lock:
            session.game.deal()
        return _text("Game dealt")

    @app.get("/game/dealerTurn")
    def dealer_turn() -> Response:
        with session.lock:
            report = session.dealer_turn_report()
        return _text(report)

    @app.get("/game/gameState")
    def game_state() -> Response:
        with session.lock:
            state = session.game_state()
        return _json(state.to_dict())

    @app.get("/game/hit/<player_name>")
    def hit(player_name: str) -> Response:
        with session.lock:
            player = session.game.player_by_name(player_name)
            if player is None:
                return _text("Player not found", 404)
            if player.is_busted():
                return _text("Player is busted", 400)
            player.add_card(session.dealer.deal_single_card())
            dto = PlayerDto(
                name=player.name,
                hand=_cards(player.hand),
                hand_value=player.hand_value(),
            )
        return _json(dto.to_dict())

    @app.get("/game/stand/<player_name>")
    def stand(player_name: str) -> Response:
        with session.lock:
            player = session.game.player_by_name(player_name)
            if player is None:
                return _text("Player not found", 404)
            player.stand()
        return _text("Player stands")

    @app.get("/game/reset")
    def reset_game() -> Response:
        with session.lock:
            session.reset()
        return _text("Game reset")

    return app


def main(argv: Sequence[str] | None = None) -> int:
    """Serve the blackjack API over HTTP."""
    parser = argparse.ArgumentParser(
        prog="blackjack-server", description="Serve a blackjack table over HTTP."
    )
    parser.add_argument("--host", default=DEFAULT_HOST, help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Server running on port %d", args.port)
    create_app().run(host=args.host, port=args.port, threaded=True)
    return 0