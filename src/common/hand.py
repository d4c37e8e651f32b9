"""
A player's hand and its meld detection / scoring.

Melds:
- set: MIN_MELD_SIZE or more cards of the same rank
- run: MIN_MELD_SIZE or more cards of the same suit with consecutive ranks
  (Ace is low only, no wraparound from King)

Scoring: every card that belongs to at least one meld scores 0, every other
card scores its point value. A card in both a set and a run is still
counted once.
"""

from config import MIN_MELD_SIZE


def group_cards(cards, key):
    """
    Group cards by key(card), preserving first-seen order of keys and of cards.

    Returns:
        dict: key -> list[Card]
    """
    groups = {}
    for card in cards:
        groups.setdefault(key(card), []).append(card)
    return groups


def retain_melds(groups, min_size=MIN_MELD_SIZE):
    """Drop every group with fewer than min_size cards."""
    return {key: cards for key, cards in groups.items() if len(cards) >= min_size}


def _split_runs(sorted_cards):
    """
    Split same-suit cards (sorted ascending by rank) into maximal consecutive runs.

    A repeated rank breaks the run just like a gap does.
    """
    runs = []
    current = []
    for card in sorted_cards:
        if current and current[-1].rank.successor() is card.rank:
            current.append(card)
            continue
        if current:
            runs.append(current)
        current = [card]
    # flush the last candidate so a run ending on the suit's highest card still counts
    if current:
        runs.append(current)
    return runs


class Hand:
    """Cards held by one player, in deal order. Cards are only ever appended."""

    def __init__(self, cards=None):
        self.cards = list(cards) if cards is not None else []

    def add_card(self, card):
        self.cards.append(card)

    def set_melds(self):
        """
        Return the set melds in this hand.

        Returns:
            dict[Rank, list[Card]]: rank -> every card of that rank, only for
            ranks held MIN_MELD_SIZE times or more
        """
        return retain_melds(group_cards(self.cards, lambda c: c.rank))

    def run_melds(self):
        """
        Return the run melds in this hand.

        Returns:
            dict[Suit, list[Card]]: suit -> the cards of all runs found in that
            suit, concatenated in ascending rank order. Suits without a run
            are absent.
        """
        melds = {}
        for suit, cards in group_cards(self.cards, lambda c: c.suit).items():
            cards_sorted = sorted(cards, key=lambda c: c.rank.order)
            for run in _split_runs(cards_sorted):
                if len(run) >= MIN_MELD_SIZE:
                    melds.setdefault(suit, []).extend(run)
        return melds

    def melded_cards(self):
        """Return the set of cards that belong to any set or run meld."""
        melded = set()
        for cards in self.set_melds().values():
            melded.update(cards)
        for cards in self.run_melds().values():
            melded.update(cards)
        return melded

    def card_in_meld(self, card):
        """True if a card equal to `card` is part of some meld in this hand."""
        return card in self.melded_cards()

    def unmelded_cards(self):
        """Cards that still count against the hand, in deal order."""
        melded = self.melded_cards()
        return [c for c in self.cards if c not in melded]

    def score(self):
        """Sum of point values of the unmelded cards (0 for an empty hand)."""
        return sum(c.score() for c in self.unmelded_cards())

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self):
        """Space-separated card renderings, each followed by a space (e.g. '3♣ 4♣ ')."""
        return "".join(f"{card} " for card in self.cards)
