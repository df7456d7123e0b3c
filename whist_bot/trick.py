"""
Trick module for Whist card games.
Validates plays in turn order and resolves the trick winner.
"""

import logging
from typing import List, Optional
from whist_bot.card import Card, Suit
from whist_bot.player import Direction, Player
from whist_bot.rules import IllegalMove, NUM_PLAYERS

logger = logging.getLogger(__name__)


class Trick:
    """
    A trick being played: the cards played so far, in seat order from the
    lead player, and the suit of trumps for this trick.
    """

    def __init__(self, lead: Direction, trumps: Optional[Suit]):
        """
        Args:
            lead: Lead player for this trick
            trumps: Trump suit, or None for no trumps
        """
        self.lead = lead
        self.trumps = trumps
        self._cards: List[Optional[Card]] = [None] * NUM_PLAYERS

    def _seats(self):
        """Yield (slot, seat) pairs in playing order from the lead."""
        seat = self.lead
        for i in range(NUM_PLAYERS):
            yield i, seat
            seat = seat.next()

    def get_lead_player(self) -> Direction:
        return self.lead

    def get_trumps(self) -> Optional[Suit]:
        """Suit of trumps for this trick, or None if there are no trumps."""
        return self.trumps

    def get_cards_played(self) -> List[Card]:
        """Cards played so far, in the order they were played."""
        played = []
        for card in self._cards:
            if card is None:
                break
            played.append(card)
        return played

    def get_card_played(self, direction: Direction) -> Optional[Card]:
        """Card played by the given seat, or None if it has yet to play."""
        for i, seat in self._seats():
            if seat == direction:
                return self._cards[i]
        return None

    def get_next_to_play(self) -> Optional[Direction]:
        """Seat due to play next, or None once the trick is complete."""
        for i, seat in self._seats():
            if self._cards[i] is None:
                return seat
        return None

    def is_complete(self) -> bool:
        return all(card is not None for card in self._cards)

    def get_winner(self) -> Direction:
        """
        Determine the seat currently winning this trick.

        The winner is whoever played the highest card of the suit led, or the
        highest trump if any trump was played. An exactly equal later card
        takes over. Works on partial tricks for look-ahead.

        Raises:
            ValueError: If no card has been played
        """
        if self._cards[0] is None:
            raise ValueError("Cannot determine winner - no cards played")

        winning_seat = None
        winning_card = self._cards[0]
        for i, seat in self._seats():
            card = self._cards[i]
            if card is None:
                break
            if card.suit == winning_card.suit and card >= winning_card:
                winning_seat = seat
                winning_card = card
            elif (self.trumps is not None and card.suit == self.trumps
                    and winning_card.suit != self.trumps):
                winning_seat = seat
                winning_card = card
        return winning_seat

    def play(self, player: Player, card: Card):
        """
        Player attempts to play a card.

        Checks that the player holds the card, that it is their turn and
        that the card follows suit when it can. The card then takes the next
        slot and leaves the player's hand.

        Raises:
            IllegalMove: If any of these checks fails; nothing is changed
        """
        if player is None or card is None:
            raise IllegalMove("Player and Card must not be null")

        hand = player.hand()
        if not hand.contains(card):
            raise IllegalMove("Player hand does not contain this card")

        next_seat = self.get_next_to_play()
        if next_seat is None or player.direction() != next_seat:
            raise IllegalMove("Player is not the next to play")

        lead_card = self._cards[0]
        if lead_card is not None and hand.matches(lead_card.suit):
            if card.suit != lead_card.suit:
                raise IllegalMove("Card doesn't follow suit")

        slot = self._cards.index(None)
        self._cards[slot] = card
        hand.remove(card)
        logger.debug("%s plays %s", next_seat, card)

    def contains_suit(self, suit: Optional[Suit]) -> bool:
        """True if any played card is of the given suit."""
        if suit is None:
            return False
        return any(card is not None and card.suit == suit for card in self._cards)

    def match_cards_played(self, suit: Optional[Suit]) -> List[Card]:
        """Played cards of the given suit, in play order."""
        return [card for card in self.get_cards_played() if card.suit == suit]

    def copy(self) -> 'Trick':
        """Snapshot of this trick with its own slot storage."""
        snapshot = Trick(self.lead, self.trumps)
        snapshot._cards = list(self._cards)
        return snapshot

    def __str__(self):
        cards_str = ", ".join(f"{seat}: {self._cards[i]}"
                              for i, seat in self._seats() if self._cards[i] is not None)
        trumps = self.trumps.name if self.trumps else "No Trump"
        return f"Trick(lead={self.lead}, trumps={trumps}, cards=[{cards_str}])"
