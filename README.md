# blackjack

A game of blackjack for one or more players against a dealer. You can play it
at the terminal, or run it as a small HTTP service that a web front end can
drive.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing at the terminal

```
blackjack
```

The game welcomes you, then asks how many players there are and what each one
is called (one word per name). It shuffles and deals two cards to each player
and one card to the dealer, and shows the dealer's first card. Each player in
turn enters `h` to hit or `s` to stand; anything else is reported as invalid
input and asked again. A player who goes over 21 is busted and their turn
ends. When every player is done, the dealer takes a second card and then draws
until the hand is worth at least 17. The game then prints the dealer's hand
value and, for each player, whether they busted, won, lost or pushed, and says
goodbye.

An ace counts as 11 when that keeps the hand at 21 or below, and as 1
otherwise. Picture cards count 10.

## Running the HTTP service

```
blackjack-server
```

By default the service listens on port 8200 on all interfaces; use `--host`
and `--port` to change that. All endpoints answer `GET` requests and add
cross-origin (CORS) headers to every response. The service holds a single
shared table in memory.

| Path | What it does |
| --- | --- |
| `/game/start` | Discards the current table, sets up a new one: `Game started` |
| `/game/reset` | Discards the current table, sets up a new one: `Game reset` |
| `/game/addPlayer/<name>` | Adds a player: `Player added` |
| `/game/deal` | Shuffles and deals the opening cards: `Game dealt` |
| `/game/hit/<name>` | Gives the player one card and returns the player as JSON; 404 `Player not found` for an unknown name, 400 `Player is busted` when already over 21 |
| `/game/stand/<name>` | Marks the player as standing: `Player stands`; 404 `Player not found` for an unknown name |
| `/game/dealerTurn` | Plays the dealer's hand and returns one line per player: `<name> busted.`, `<name> wins.`, `<name> loses.` or `<name> pushes (tie).` |
| `/game/gameState` | Returns the dealer and the players, with their hands and hand values, as JSON |
| `/game/isOver` | Writes each player's result to the server's console: `Game is over!` |

A typical round:

```
curl localhost:8200/game/start
curl localhost:8200/game/addPlayer/alice
curl localhost:8200/game/deal
curl localhost:8200/game/hit/alice
curl localhost:8200/game/stand/alice
curl localhost:8200/game/dealerTurn
curl localhost:8200/game/gameState
```

A card in the JSON looks like `{"rank": "Ace", "suit": "Spades"}`, with the
rank spelled out in words. `/game/gameState` returns:

```json
{
  "isGameOver": null,
  "currentPlayer": null,
  "dealer": {
    "hand": [{"rank": "King", "suit": "Clubs"}],
    "handValue": 10
  },
  "players": [
    {
      "name": "alice",
      "hand": [{"rank": "Ace", "suit": "Spades"}, {"rank": "Nine", "suit": "Hearts"}],
      "handValue": 20,
      "isBusted": "false"
    }
  ]
}
```

The player returned by `/game/hit/<name>` has the same fields, with
`isBusted` left as `null`.

## Using it as a library

The pieces of the game can be used on their own:

```python
from blackjack.card import Card, Rank, Suit
from blackjack.deck import Deck
from blackjack.player import Player

deck = Deck()
player = Player("alice")
player.add_card(Card(Suit.SPADES, Rank.ACE))
player.add_card(Card(Suit.SPADES, Rank.NINE))
print(player.hand_value())   # 20
player.hit(deck)
print(len(deck))             # 51
```

- `blackjack.card` has `Suit`, `Rank` (each with `from_string`) and `Card`.
- `blackjack.cardui` has `display_suit`, `display_rank` and `describe_card`.
- `blackjack.deck` has `Deck`, which raises `EmptyDeckError` when drawn from
  empty; `Deck.shuffle` takes an optional `random.Random`.
- `blackjack.player` has `Player` and `BotPlayer`; `blackjack.dealer` has
  `Dealer`, which also takes an optional `random.Random` for its shuffles.
- `blackjack.views` has `PlayerView` and `GameUI`; a `PlayerView` can be given
  its own output and input streams.
- `blackjack.game` has `Game` and `run`.
- `blackjack.dto` has the JSON shapes: `CardDto`, `DealerDto`, `PlayerDto`,
  `GameDto` and `PlayerListDto`, each with `to_dict`.
- `blackjack.server.create_app` builds the Flask application around a
  `GameSession`, so you can serve it your own way or drive it from tests with
  Flask's test client.

## What it does not do

- The terminal game plays a single round and then ends; it does not offer to
  play again, although `GameUI.play_again` can ask the question.
- `BotPlayer` is not seated in either the terminal game or the HTTP service.
- The HTTP service keeps its one table in memory only and does not enforce
  turn order: any player can be hit or stood at any time.
- There are no bets or chips.