"""
Whist variations built on the shared game controller.
"""

from typing import List, Optional
from whist_bot.card import Card
from whist_bot.deck import Deck
from whist_bot.game import CardGame
from whist_bot.player import Player
from whist_bot.rules import CARDS_PER_PLAYER, NUM_PLAYERS


class ClassicWhist(CardGame):
    """The "classical" rules: the whole deck is dealt, first to 5 points wins."""

    WINNING_SCORE = 5

    def get_name(self) -> str:
        return "Classic Whist"

    def is_game_finished(self) -> bool:
        return any(score >= self.WINNING_SCORE for score in self.scores.values())

    def deal(self, deck: Deck) -> Card:
        return self._deal_round_robin(deck.deal_hand(deck.cards_remaining()))


class SingleHandWhist(ClassicWhist):
    """A simple variation where only a single hand is played."""

    WINNING_SCORE = 1

    def get_name(self) -> str:
        return "Single Hand Whist"


class KnockOutWhist(CardGame):
    """Each hand deals one card fewer per player, until none are left."""

    def __init__(self, players: List[Player], seed: Optional[int] = None,
                 hand_size: int = CARDS_PER_PLAYER):
        super().__init__(players, seed)
        self.hand_size = hand_size

    def get_name(self) -> str:
        return "Knock-Out Whist"

    def is_game_finished(self) -> bool:
        return self.hand_size == 0

    def deal(self, deck: Deck) -> Card:
        return self._deal_round_robin(deck.deal_hand(self.hand_size * NUM_PLAYERS))

    def end_hand(self):
        winners = super().end_hand()
        self.hand_size -= 1
        return winners


VARIATIONS = {
    'classic': ClassicWhist,
    'single': SingleHandWhist,
    'knockout': KnockOutWhist,
}


def create_game(variant: str, players: List[Player], seed: Optional[int] = None) -> CardGame:
    """Create a game of the named variation."""
    if variant not in VARIATIONS:
        raise ValueError(f"Unknown variant: {variant}. Available: {list(VARIATIONS.keys())}")
    return VARIATIONS[variant](players, seed=seed)
