"""
Whist trick engine and computer players.
"""

from whist_bot.card import Card, Suit, Rank, create_deck
from whist_bot.hand import Hand
from whist_bot.rules import IllegalMove
from whist_bot.player import Direction, Player, BotInterface, HumanPlayer
from whist_bot.trick import Trick

__version__ = "0.1.0"

__all__ = [
    "Card",
    "Suit",
    "Rank",
    "create_deck",
    "Hand",
    "IllegalMove",
    "Direction",
    "Player",
    "BotInterface",
    "HumanPlayer",
    "Trick",
]
