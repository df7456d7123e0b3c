"""
Rules module for Whist card games.
Contains rule constants, the illegal move error and play validation helpers.
"""

from typing import List, Optional
from whist_bot.card import Card, Suit
from whist_bot.hand import Hand


# Game constants
NUM_PLAYERS = 4
CARDS_PER_PLAYER = 13
TRICKS_PER_HAND = 13

# A partnership needs more than half the tricks to win a hand
TRICKS_TO_WIN_HAND = TRICKS_PER_HAND // 2 + 1


class IllegalMove(Exception):
    """
    Signals an illegal play, such as playing out of turn or
    not following suit when able to.
    """

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


def must_follow_suit(hand: Hand, lead_suit: Optional[Suit]) -> bool:
    """
    Check if player must follow suit.

    Args:
        hand: Player's cards
        lead_suit: Suit that was led (None if leading)

    Returns:
        True if player has cards of led suit and must follow
    """
    return bool(hand.matches(lead_suit))


def get_legal_plays(hand: Hand, lead_suit: Optional[Suit]) -> List[Card]:
    """
    Get all legal card plays for current situation.

    Args:
        hand: Player's current hand
        lead_suit: Suit led in trick (None if leading)

    Returns:
        Cards that can legally be played, ascending
    """
    if must_follow_suit(hand, lead_suit):
        return sorted(hand.matches(lead_suit))
    return hand.cards_in_hand()
