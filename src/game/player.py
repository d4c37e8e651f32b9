"""A seat at the table: a name and the one Hand it owns."""

from src.common.hand import Hand


class Player:
    def __init__(self, name="Player"):
        self.name = name
        self.hand = Hand()

    def __repr__(self):
        return f"Player({self.name!r}, {len(self.hand)} cards)"
