"""
Central configuration for the rummy hand evaluator.
All constants defined here to avoid magic numbers scattered throughout code.
This single file is the source of truth for deck layout, point values and meld rules.
"""

# ============ DECK CONSTANTS ============
DECK_SIZE = 52
RANKS_PER_SUIT = 13
SUITS = 4

# Rank constants (1-13). Ace is low only: it sits below Two and never after King.
RANK_ACE = 1
RANK_TEN = 10
RANK_JACK = 11
RANK_QUEEN = 12
RANK_KING = 13

# Suit constants (0-3), in the order a fresh deck is built
SUIT_CLUBS = 0
SUIT_DIAMONDS = 1
SUIT_HEARTS = 2
SUIT_SPADES = 3

# ============ DISPLAY ============
# Rank glyphs indexed by rank - 1; Ten is "T" so every card renders as 2 characters
RANK_GLYPHS = "A23456789TJQK"

SUIT_SYMBOLS = {
    SUIT_CLUBS: "♣",
    SUIT_DIAMONDS: "♦",
    SUIT_HEARTS: "♥",
    SUIT_SPADES: "♠",
}

# ============ SCORING ============
ACE_VALUE = 1
FACE_CARD_VALUE = 10   # Jack, Queen, King

# Smallest group of cards that counts as a meld (set or run)
MIN_MELD_SIZE = 3

# ============ GAME PARAMETERS ============
NUM_PLAYERS = 2
CARDS_PER_HAND = 10    # 20 cards leave the deck on the initial deal
