"""
Hand module for Whist card games.
Tracks the cards a player currently holds.
"""

from typing import Iterable, Iterator, List, Optional, Set
from whist_bot.card import Card, Suit


class Hand:
    """
    The cards held by one player.

    As a trick proceeds the hand shrinks; when a new deal starts it is
    cleared and refilled. Cards are unique and iterate in ascending order.
    """

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        self._cards: Set[Card] = set(cards) if cards else set()

    def __iter__(self) -> Iterator[Card]:
        return iter(sorted(self._cards))

    def __len__(self):
        return len(self._cards)

    def __contains__(self, card):
        return card in self._cards

    def __eq__(self, other):
        if not isinstance(other, Hand):
            return NotImplemented
        return self._cards == other._cards

    def contains(self, card: Card) -> bool:
        """Check whether a given card is in this hand."""
        return card in self._cards

    def matches(self, suit: Optional[Suit]) -> Set[Card]:
        """
        Return all cards in this hand of the given suit.

        Args:
            suit: Suit to match, or None for "no trumps"

        Returns:
            A new set, empty when nothing matches or suit is None
        """
        if suit is None:
            return set()
        return {card for card in self._cards if card.suit == suit}

    def add(self, card: Card):
        """Add a card to the hand."""
        self._cards.add(card)

    def remove(self, card: Card):
        """Remove a card from the hand. Absent cards are ignored."""
        self._cards.discard(card)

    def size(self) -> int:
        """Get number of cards in this hand."""
        return len(self._cards)

    def clear(self):
        """Remove all cards from this hand."""
        self._cards.clear()

    def copy(self) -> 'Hand':
        """Return an independent hand holding the same cards."""
        return Hand(self._cards)

    def cards_in_hand(self) -> List[Card]:
        """Ascending snapshot of the cards held."""
        return sorted(self._cards)

    def __str__(self):
        return " ".join(str(card) for card in self) or "Empty hand"

    def __repr__(self):
        return f"Hand({self.cards_in_hand()!r})"
