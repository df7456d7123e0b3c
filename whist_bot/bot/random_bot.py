"""
Random bot implementation for Whist.
Provides a baseline bot that makes random legal moves.
"""

import random
from typing import Optional
from whist_bot.card import Card
from whist_bot.player import BotInterface, Player
from whist_bot.rules import get_legal_plays
from whist_bot.trick import Trick


class RandomBot(BotInterface):
    """Bot that makes completely random legal moves."""

    def __init__(self, player: Optional[Player] = None, name: str = "RandomBot",
                 seed: Optional[int] = None):
        super().__init__(player, name)
        self.rng = random.Random(seed)

    def choose_card(self, trick: Trick) -> Card:
        cards_played = trick.get_cards_played()
        lead_suit = cards_played[0].suit if cards_played else None
        valid_plays = get_legal_plays(self.player.hand(), lead_suit)
        if not valid_plays:
            raise ValueError("No valid plays available")
        return self.rng.choice(valid_plays)
