"""
Card model: suits, ranks and a single playing card.

Suit and Rank are closed enumerations, so a Card never needs range checks.
Cards are immutable values: two Card objects with the same suit and rank
are equal and hash the same, which is what meld membership relies on.
"""

from dataclasses import dataclass
from enum import Enum

from config import (
    RANK_ACE, RANK_TEN, RANK_KING,
    SUIT_CLUBS, SUIT_DIAMONDS, SUIT_HEARTS, SUIT_SPADES,
    RANK_GLYPHS, SUIT_SYMBOLS, ACE_VALUE, FACE_CARD_VALUE,
)


class Suit(Enum):
    """The four suits, declared in the order a fresh deck is built."""

    CLUBS = SUIT_CLUBS
    DIAMONDS = SUIT_DIAMONDS
    HEARTS = SUIT_HEARTS
    SPADES = SUIT_SPADES

    @property
    def symbol(self) -> str:
        return SUIT_SYMBOLS[self.value]

    def __str__(self) -> str:
        return self.symbol


class Rank(Enum):
    """
    Card ranks, Ace (low) through King.

    The enum value is the rank's position (Ace=1 ... King=13). Run detection
    goes through `order` and `successor()` so adjacency is spelled out rather
    than implied by casting.
    """

    ACE = RANK_ACE
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = RANK_TEN
    JACK = 11
    QUEEN = 12
    KING = RANK_KING

    @property
    def order(self) -> int:
        return self.value

    @property
    def glyph(self) -> str:
        return RANK_GLYPHS[self.value - 1]

    def successor(self):
        """Return the rank directly above this one, or None for King (no wraparound)."""
        if self.value == RANK_KING:
            return None
        return Rank(self.value + 1)

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    def __str__(self) -> str:
        return self.glyph


@dataclass(frozen=True)
class Card:
    suit: Suit
    rank: Rank

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")

    def score(self) -> int:
        """
        Return the point value this card adds to a hand when it is not melded.

        - Ace -> 1
        - Two..Ten -> face value
        - Jack, Queen, King -> 10
        """
        if self.rank is Rank.ACE:
            return ACE_VALUE
        if self.rank.order >= RANK_TEN:
            return FACE_CARD_VALUE
        return self.rank.order

    def __str__(self) -> str:
        """Two-character rendering: rank glyph then suit symbol (e.g. 'T♥')."""
        return f"{self.rank.glyph}{self.suit.symbol}"

    def __repr__(self) -> str:
        return str(self)
