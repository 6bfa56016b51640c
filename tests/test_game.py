import io
import random

from blackjack.card import Card, Rank, Suit
from blackjack.dealer import Dealer
from blackjack.deck import Deck
from blackjack.game import Game, main, run
from blackjack.player import Player
from blackjack.views import GameUI, PlayerView


def make_game(text="", rng=None):
    out = io.StringIO()
    ui = GameUI(PlayerView(out=out, inp=io.StringIO(text)))
    game = Game(ui, Dealer(Deck(), rng=rng))
    return game, out


def player_with(name, *ranks):
    player = Player(name)
    for rank in ranks:
        player.add_card(Card(Suit.HEARTS, rank))
    return player


def test_add_player_and_lookup():
    game, _ = make_game()
    alice = Player("Alice")
    game.add_player(alice)
    game.add_player(Player("Bob"))
    assert [p.name for p in game.players] == ["Alice", "Bob"]
    assert game.player_by_name("Alice") is alice
    assert game.player_by_name("Carol") is None


def test_deal_gives_two_cards_each_and_one_to_dealer():
    game, _ = make_game(rng=random.Random(3))
    game.add_player(Player("Alice"))
    game.add_player(Player("Bob"))
    game.deal()
    assert [len(p.hand) for p in game.players] == [2, 2]
    assert len(game.dealer.hand) == 1
    assert len(game.dealer.deck) == 47


def test_player_init_reads_players():
    game, out = make_game("2\nAlice Bob\n")
    game.player_init()
    assert [p.name for p in game.players] == ["Alice", "Bob"]
    assert out.getvalue() == (
        "Enter the number of players: "
        "Enter the name of each player: \nPlayer 1: Player 2: "
    )


def test_player_turn_stand_takes_no_card():
    game, out = make_game("s\n")
    game.dealer.add_card(Card(Suit.CLUBS, Rank.FIVE))
    player = player_with("Alice", Rank.TEN, Rank.NINE)
    game.add_player(player)
    game.player_turn()
    assert len(player.hand) == 2
    assert out.getvalue() == (
        "Dealer's first card: [Five of Clubs], Value: 5\n"
        "Alice, your hand is: [Ten of Hearts], [Nine of Hearts], Value: 19\n"
        "Do you want to hit (h) or stand (s)? "
    )


def test_player_turn_invalid_input_then_stand():
    game, out = make_game("x s\n")
    game.dealer.add_card(Card(Suit.CLUBS, Rank.FIVE))
    player = player_with("Alice", Rank.TEN, Rank.NINE)
    game.add_player(player)
    game.player_turn()
    assert len(player.hand) == 2
    assert out.getvalue().count("Invalid input. Please enter the correct input.\n") == 1


def test_player_turn_hit_until_bust():
    game, out = make_game("h\n")
    game.dealer.add_card(Card(Suit.CLUBS, Rank.FIVE))
    player = player_with("Alice", Rank.TEN, Rank.NINE)
    game.add_player(player)
    game.player_turn()
    # An unshuffled deck has the King of Spades on top.
    assert player.hand[-1] == Card(Suit.SPADES, Rank.KING)
    assert player.is_busted()
    assert out.getvalue().endswith("You drew a card! You busted!\n")


def test_player_turn_hit_when_already_busted_is_invalid():
    game, out = make_game("h s\n")
    game.dealer.add_card(Card(Suit.CLUBS, Rank.FIVE))
    player = player_with("Alice", Rank.KING, Rank.QUEEN, Rank.FIVE)
    game.add_player(player)
    game.player_turn()
    assert len(player.hand) == 3
    assert "Invalid input. Please enter the correct input.\n" in out.getvalue()


def test_dealer_turn_with_one_card_draws_one():
    game, _ = make_game()
    game.dealer.add_card(Card(Suit.HEARTS, Rank.TEN))
    game.dealer_turn()
    assert game.dealer.hand == [
        Card(Suit.HEARTS, Rank.TEN),
        Card(Suit.SPADES, Rank.KING),
    ]
    assert game.dealer.check_status() == 20


def test_dealer_turn_draws_until_seventeen():
    game, out = make_game()
    game.dealer.add_card(Card(Suit.HEARTS, Rank.TWO))
    game.dealer.add_card(Card(Suit.HEARTS, Rank.THREE))
    game.dealer_turn()
    assert game.dealer.hand[2:] == [
        Card(Suit.SPADES, Rank.KING),
        Card(Suit.SPADES, Rank.QUEEN),
    ]
    assert game.dealer.check_status() == 25
    assert out.getvalue().count("Dealer's hand is: ") == 3


def test_check_winner_all_outcomes():
    game, out = make_game()
    game.dealer.add_card(Card(Suit.CLUBS, Rank.TEN))
    game.dealer.add_card(Card(Suit.CLUBS, Rank.NINE))
    game.add_player(player_with("Bust", Rank.KING, Rank.QUEEN, Rank.FIVE))
    game.add_player(player_with("Win", Rank.KING, Rank.ACE))
    game.add_player(player_with("Lose", Rank.TEN, Rank.EIGHT))
    game.add_player(player_with("Push", Rank.TEN, Rank.NINE))
    assert game.check_winner() is True
    assert out.getvalue() == (
        "Dealer's hand value: 19\n"
        "Bust busted!\n"
        "Win wins!\n"
        "Lose loses!\n"
        "Push pushes!\n"
    )


def test_check_winner_dealer_bust_means_players_win():
    game, out = make_game()
    for rank in (Rank.KING, Rank.QUEEN, Rank.FIVE):
        game.dealer.add_card(Card(Suit.CLUBS, rank))
    game.add_player(player_with("Low", Rank.TWO, Rank.THREE))
    assert game.check_winner() is True
    assert out.getvalue() == "Dealer's hand value: 25\nLow wins!\n"


def test_start_plays_a_full_round():
    game, out = make_game("1\nAlice\ns\n", rng=random.Random(7))
    game.start()
    assert out.getvalue().startswith("Welcome to Blackjack!\n")
    assert [p.name for p in game.players] == ["Alice"]
    assert len(game.players[0].hand) == 2
    assert game.dealer.check_status() >= 17
    assert len(game.dealer.deck) == 52 - 2 - len(game.dealer.hand)


def test_run_plays_one_round_and_says_goodbye():
    game, out = make_game("1\nAlice\ns\n", rng=random.Random(11))
    run(game)
    text = out.getvalue()
    assert text.startswith("Welcome to Blackjack!\n")
    assert "Dealer's hand value: " in text
    assert text.endswith("Thanks for playing!\n")


def test_main_with_no_players(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    text = capsys.readouterr().out
    assert text.startswith("Welcome to Blackjack!\n")
    assert text.endswith("Thanks for playing!\n")