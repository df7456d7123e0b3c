"""
Card module for Whist card games.
Defines Card, Suit, and Rank classes with a total ordering.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


@total_ordering
class Suit(Enum):
    """Card suits, ordered Clubs < Diamonds < Hearts < Spades."""
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self):
        return self.value

    @property
    def order(self) -> int:
        return _SUIT_ORDER[self]

    def __lt__(self, other):
        if not isinstance(other, Suit):
            return NotImplemented
        return self.order < other.order


_SUIT_ORDER = {suit: i for i, suit in enumerate(Suit)}

SUIT_LETTERS = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}


@total_ordering
class Rank(Enum):
    """Card ranks with proper ordering (2 lowest, Ace highest)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self):
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


RANK_SYMBOLS = {str(rank): rank for rank in Rank}


@total_ordering
@dataclass(frozen=True)
class Card:
    """
    Immutable playing card.

    Cards compare by rank first and use the suit as a tiebreak, so every
    card in a standard deck has a distinct position in the order.
    """
    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"

    def __lt__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def sort_key(self):
        return (self.rank.value, self.suit.order)

    @classmethod
    def parse(cls, text: str) -> 'Card':
        """
        Parse a card from user input.

        Accepts the rank followed by either a suit letter or a suit symbol,
        e.g. "QS", "10h" or "Q♠".

        Raises:
            ValueError: If the text does not describe a card
        """
        text = (text or "").strip().upper()
        if len(text) < 2:
            raise ValueError(f"Not a card: {text!r}")

        rank_text, suit_text = text[:-1], text[-1]
        suit = SUIT_LETTERS.get(suit_text)
        if suit is None:
            suit = next((s for s in Suit if s.value == suit_text), None)
        rank = RANK_SYMBOLS.get(rank_text)

        if suit is None or rank is None:
            raise ValueError(f"Not a card: {text!r}")
        return cls(suit, rank)


def create_deck() -> List[Card]:
    """Create a standard 52-card deck."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit, rank))
    return deck
