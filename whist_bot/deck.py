"""
Deck module for Whist card games.
Handles deck creation, shuffling, and dealing cards.
"""

import random
from typing import List, Optional
from whist_bot.card import Card, create_deck


class Deck:
    """Manages a deck of cards with shuffling and dealing capabilities."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)
        self.cards = create_deck()
        self.shuffle()

    def shuffle(self):
        """Shuffle the deck randomly."""
        self.rng.shuffle(self.cards)

    def deal_hand(self, size: int) -> List[Card]:
        """
        Deal cards from the top of the deck.

        Args:
            size: Number of cards to take

        Returns:
            The cards dealt, in dealing order

        Raises:
            ValueError: If not enough cards remaining
        """
        if len(self.cards) < size:
            raise ValueError(f"Not enough cards in deck. Need {size}, have {len(self.cards)}")

        dealt, self.cards = self.cards[:size], self.cards[size:]
        return dealt

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def reset(self):
        """Reset deck to full 52 cards and shuffle."""
        self.cards = create_deck()
        self.shuffle()
