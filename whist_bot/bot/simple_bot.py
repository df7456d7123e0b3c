"""
Simple heuristic bot for Whist.

Plays the highest card available while the trick can still be won, and
otherwise discards the lowest card available. When it plays the last card
of the trick and can win, it conservatively plays the least card needed.
"""

import logging
from typing import List, Optional
from whist_bot.card import Card
from whist_bot.player import BotInterface, Player
from whist_bot.rules import NUM_PLAYERS
from whist_bot.trick import Trick

logger = logging.getLogger(__name__)


def highest(cards: List[Card]) -> Optional[Card]:
    """Highest card under the rank-then-suit order, None if empty."""
    return max(cards) if cards else None


class SimpleBot(BotInterface):
    """Rule-based bot choosing cards by a three-tier priority."""

    def __init__(self, player: Optional[Player] = None, name: str = "SimpleBot"):
        super().__init__(player, name)

    def choose_card(self, trick: Trick) -> Card:
        """
        Choose the next card to play in the given trick.

        Candidates are, in order of priority: cards of the lead suit, cards
        of the trump suit, or the whole hand.

        Raises:
            ValueError: If the hand is empty
        """
        hand = self.player.hand()
        if not hand.size():
            raise ValueError("No valid plays available")

        cards_played = trick.get_cards_played()
        trumps = trick.get_trumps()
        lead_suit = cards_played[0].suit if cards_played else None

        same_as_lead = hand.matches(lead_suit)
        same_as_trumps = hand.matches(trumps)

        if same_as_lead:
            candidates = sorted(same_as_lead)
            relevant_played = trick.match_cards_played(lead_suit)
            tier = "lead"
        elif same_as_trumps:
            candidates = sorted(same_as_trumps)
            relevant_played = trick.match_cards_played(trumps)
            tier = "trumps"
        else:
            candidates = hand.cards_in_hand()
            relevant_played = cards_played
            tier = "any"

        if not self.can_win(trick, candidates):
            choice = candidates[0]
        elif len(cards_played) != NUM_PLAYERS - 1:
            choice = candidates[-1]
        else:
            choice = self._conservative_pick(highest(relevant_played), candidates)

        logger.debug("%s (%s): playing %s from %s", self.name, tier, choice,
                     " ".join(str(c) for c in candidates))
        return choice

    def can_win(self, trick: Trick, candidates: List[Card]) -> bool:
        """
        Whether playing from the candidates could still win the trick.

        Args:
            trick: Trick in progress
            candidates: Cards being considered, sorted ascending
        """
        trumps = trick.get_trumps()
        cards_played = trick.get_cards_played()

        if trick.contains_suit(trumps):
            trumps_in_hand = [c for c in candidates if c.suit == trumps]
            if not trumps_in_hand:
                return False
            return highest(trumps_in_hand) > highest(trick.match_cards_played(trumps))

        if not cards_played:
            return True

        if not self.player.hand().matches(cards_played[0].suit):
            return False
        # Equal is impossible with one deck; it counts as a loss
        return candidates[-1] > highest(cards_played)

    def _conservative_pick(self, highest_played: Optional[Card],
                           candidates: List[Card]) -> Card:
        """Least candidate (ascending) that beats the highest relevant card played."""
        for card in candidates:
            if highest_played is None or card > highest_played:
                return card
        raise RuntimeError(
            f"No winning card among {candidates} against {highest_played}")
