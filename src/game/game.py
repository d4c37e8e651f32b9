"""
Game driver: shuffle a deck, deal two hands and show them.

Flow:
1. Build a fresh deck and shuffle it
2. Deal CARDS_PER_HAND cards to each player, one at a time, round-robin
3. Print every hand with its melds and score

Turn-taking, discards and knocking are not part of this game.
Run from the repository root: python -m src.game.game [seed]
"""

import random
import sys

from config import NUM_PLAYERS, CARDS_PER_HAND
from src.common.deck import Deck
from src.game.player import Player
from src.game.ui import show_hand, show_deal_header, show_error, show_info


def deal_hands(deck, players, cards_per_hand=CARDS_PER_HAND):
    """
    Deal cards round-robin until every player holds cards_per_hand cards.

    Args:
        deck (Deck): deck to deal from (top card first)
        players (list[Player]): players in dealing order
        cards_per_hand (int): cards each player should end up with

    Returns:
        bool: True if the deal completed, False if the deck ran out first.
        Cards dealt before the deck ran out stay in the players' hands.
    """
    for _ in range(cards_per_hand):
        for player in players:
            card = deck.deal()
            if card is None:
                return False
            player.hand.add_card(card)
    return True


def play_game(deck, num_players=NUM_PLAYERS, cards_per_hand=CARDS_PER_HAND):
    """
    Deal a round from `deck` and display every hand.

    Returns:
        list[Player]: the players with their dealt hands
    """
    players = [Player(f"Player {i}") for i in range(1, num_players + 1)]

    show_deal_header(num_players, cards_per_hand)
    if not deal_hands(deck, players, cards_per_hand):
        show_error(f"Deck exhausted after dealing {sum(len(p.hand) for p in players)} cards")

    for player in players:
        show_hand(player)

    show_info(f"{deck.cards_remaining()} cards left in deck")
    return players


def main(seed=None):
    """Shuffle a new deck (optionally seeded) and play one deal."""
    rng = random.Random(seed) if seed is not None else None
    deck = Deck(rng)
    deck.shuffle()
    return play_game(deck)


if __name__ == "__main__":
    main(int(sys.argv[1]) if len(sys.argv) > 1 else None)
