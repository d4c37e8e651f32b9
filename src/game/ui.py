"""
Console output for the rummy driver.

This file is the *only* place that uses print(). Core modules (card, deck,
hand) return values and never write to the console.
"""


def format_melds(hand):
    """
    Describe the melds in a hand on one line.

    Returns:
        str: e.g. "sets: 7♣ 7♦ 7♥ | runs: 3♣ 4♣ 5♣", or "no melds"
    """
    sets = [card for cards in hand.set_melds().values() for card in cards]
    runs = [card for cards in hand.run_melds().values() for card in cards]
    parts = []
    if sets:
        parts.append("sets: " + " ".join(str(c) for c in sets))
    if runs:
        parts.append("runs: " + " ".join(str(c) for c in runs))
    return " | ".join(parts) if parts else "no melds"


def show_hand(player):
    """Print a player's hand in the 'Hand: <cards>' format, then its melds and score."""
    print(f"Hand: {player.hand}")
    print(f"  {player.name} - {format_melds(player.hand)} (score: {player.hand.score()})")


def show_deal_header(num_players, cards_per_hand):
    """Display a header before the initial deal."""
    print(f"\n{'='*60}")
    print(f"Dealing {cards_per_hand} cards to {num_players} players")
    print(f"{'='*60}")


def show_error(message):
    """Display an error message."""
    print(f"\n[ERROR] {message}")


def show_info(message):
    """Display an info message."""
    print(f"\n[INFO] {message}")
