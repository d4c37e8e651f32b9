"""
Deck class for managing a standard 52-card deck.

A fresh deck is always built in the same order (Clubs A..K, Diamonds A..K,
Hearts A..K, Spades A..K) and is NOT shuffled on construction, so tests can
rely on its layout. Call shuffle() before dealing a real game.

The top of the deck is the end of the internal list: deal() pops from there.
"""

import random

from config import DECK_SIZE
from .card import Card, Rank, Suit


class Deck:
    """
    Standard 52-card deck (13 ranks x 4 suits).

    Cards leave the deck one at a time through deal() and are never put back.
    """

    def __init__(self, rng=None):
        """
        Create a new deck with all 52 cards in suit-major order.

        Args:
            rng (random.Random | None): randomness source used by shuffle().
                Defaults to a system-seeded random.Random().
        """
        self._rng = rng or random.Random()
        self._cards = []
        self._create_deck()

    def _create_deck(self):
        """Append every suit x rank pair once: Suit by Suit, Ace to King within each."""
        for suit in Suit:
            for rank in Rank:
                self._cards.append(Card(suit, rank))
        assert len(self._cards) == DECK_SIZE

    @property
    def cards(self):
        """Remaining cards, bottom first; the last element is the next one dealt."""
        return list(self._cards)

    def shuffle(self):
        """Uniformly permute the remaining cards in place (Fisher-Yates via rng.shuffle)."""
        self._rng.shuffle(self._cards)

    def deal(self):
        """
        Remove and return the top card.

        Returns:
            Card | None: the dealt card, or None once the deck is exhausted.
            Callers must check for None; an empty deck is not an error here.
        """
        if not self._cards:
            return None
        return self._cards.pop()

    def cards_remaining(self):
        """Return the number of cards left in deck."""
        return len(self._cards)

    def is_empty(self):
        """Return True if all cards have been dealt."""
        return not self._cards

    def __len__(self):
        return len(self._cards)
