"""
Tests for the game driver: dealing, players and console output.
"""

import random

from src.common.card import Card, Rank, Suit
from src.common.deck import Deck
from src.game.game import deal_hands, play_game, main
from src.game.player import Player
from src.game.ui import format_melds
from src.common.hand import Hand


class TestPlayer:

    def test_new_player_has_empty_hand(self):
        player = Player("Alice")
        assert player.name == "Alice"
        assert len(player.hand) == 0

    def test_players_do_not_share_hands(self):
        p1, p2 = Player(), Player()
        p1.hand.add_card(Card(Suit.CLUBS, Rank.ACE))
        assert len(p2.hand) == 0


class TestDealHands:
    """Test deal_hands()."""

    def test_deals_round_robin(self):
        """Fresh deck deals K♠, Q♠, J♠, ... alternately."""
        players = [Player("a"), Player("b")]
        assert deal_hands(Deck(), players, cards_per_hand=2)
        assert players[0].hand.cards == [Card(Suit.SPADES, Rank.KING), Card(Suit.SPADES, Rank.JACK)]
        assert players[1].hand.cards == [Card(Suit.SPADES, Rank.QUEEN), Card(Suit.SPADES, Rank.TEN)]

    def test_deal_consumes_20_cards(self):
        deck = Deck(random.Random(11))
        deck.shuffle()
        players = [Player(), Player()]
        assert deal_hands(deck, players, cards_per_hand=10)
        assert all(len(p.hand) == 10 for p in players)
        assert deck.cards_remaining() == 32
        assert not set(players[0].hand) & set(players[1].hand)

    def test_deal_stops_when_deck_runs_out(self):
        """An exhausted deck ends the deal instead of crashing."""
        deck = Deck()
        for _ in range(47):
            deck.deal()
        players = [Player(), Player()]
        assert not deal_hands(deck, players, cards_per_hand=10)
        assert len(players[0].hand) == 3
        assert len(players[1].hand) == 2
        assert deck.is_empty()


class TestPlayGame:
    """Test play_game() and main()."""

    def test_play_game_output(self, capsys):
        players = play_game(Deck())
        out = capsys.readouterr().out
        assert out.count("Hand: ") == 2
        assert f"Hand: {players[0].hand}" in out
        assert "32 cards left in deck" in out

    def test_unshuffled_deal_scores(self, capsys):
        """Unshuffled deck: players alternate through spades then hearts, so no melds form."""
        players = play_game(Deck())
        capsys.readouterr()
        assert all(p.hand.melded_cards() == set() for p in players)
        assert players[0].hand.score() == 73
        assert players[1].hand.score() == 76

    def test_play_game_reports_exhausted_deck(self, capsys):
        deck = Deck()
        for _ in range(45):
            deck.deal()
        players = play_game(deck)
        out = capsys.readouterr().out
        assert "[ERROR] Deck exhausted after dealing 7 cards" in out
        assert sum(len(p.hand) for p in players) == 7

    def test_main_with_seed_is_reproducible(self, capsys):
        first = [p.hand.cards for p in main(seed=123)]
        second = [p.hand.cards for p in main(seed=123)]
        capsys.readouterr()
        assert first == second
        assert all(len(cards) == 10 for cards in first)


class TestFormatMelds:

    def test_no_melds(self):
        hand = Hand([Card(Suit.CLUBS, Rank.TWO)])
        assert format_melds(hand) == "no melds"

    def test_sets_and_runs(self):
        hand = Hand([
            Card(Suit.CLUBS, Rank.SEVEN), Card(Suit.DIAMONDS, Rank.SEVEN), Card(Suit.HEARTS, Rank.SEVEN),
            Card(Suit.SPADES, Rank.TWO), Card(Suit.SPADES, Rank.THREE), Card(Suit.SPADES, Rank.FOUR),
        ])
        assert format_melds(hand) == "sets: 7♣ 7♦ 7♥ | runs: 2♠ 3♠ 4♠"
