"""
Utility module for Whist card games.
Contains logging, formatting, and helper functions.
"""

import logging
from typing import Dict, Iterable, List, Optional
from whist_bot.card import Card, Suit


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Set up logging configuration for the game."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def format_hand(hand: Iterable[Card]) -> str:
    """
    Format a hand of cards for display, grouped by suit from high to low.

    Args:
        hand: Cards to show

    Returns:
        Formatted string representation
    """
    cards = list(hand)
    if not cards:
        return "Empty hand"

    by_suit: Dict[Suit, List[Card]] = {}
    for card in cards:
        by_suit.setdefault(card.suit, []).append(card)

    suit_strings = []
    for suit in [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]:
        if suit in by_suit:
            ranks = sorted(by_suit[suit], reverse=True)
            suit_strings.append(f"{suit}: {' '.join(str(card.rank) for card in ranks)}")
    return ' | '.join(suit_strings)


def format_trumps(trumps: Optional[Suit]) -> str:
    return trumps.name.title() if trumps else "No Trump"


class GameLogger:
    """Logging helpers for game events."""

    def __init__(self, name: str = "WhistGame"):
        self.logger = logging.getLogger(name)

    def log_game_start(self, game_name: str, player_names: List[str]):
        """Log the start of a new game session."""
        self.logger.info(f"=== NEW GAME STARTED: {game_name} ===")
        self.logger.info(f"Players: {', '.join(player_names)}")

    def log_hand_start(self, hand_number: int, trumps: Optional[Suit], dealer: str):
        """Log start of new hand."""
        self.logger.info(f"=== Hand {hand_number} - Dealer: {dealer} - Trump: {format_trumps(trumps)} ===")

    def log_card_play(self, player_name: str, card: Card, trick_state: str):
        """Log a card play."""
        self.logger.debug(f"{player_name} plays {card} ({trick_state})")

    def log_trick_winner(self, winner_name: str, trick_cards: List[Card]):
        """Log trick winner and cards played."""
        cards_str = ', '.join(str(card) for card in trick_cards)
        self.logger.info(f"{winner_name} wins trick with: {cards_str}")

    def log_hand_result(self, tricks: Dict[str, int], winners: Optional[str]):
        """Log partnership tricks at the end of a hand."""
        tricks_str = ', '.join(f"{team}: {count}" for team, count in tricks.items())
        self.logger.info(f"Hand complete ({tricks_str}) - {winners or 'nobody'} wins the hand")

    def log_game_end(self, winner_name: str, final_scores: Dict[str, int]):
        """Log game completion."""
        self.logger.info("=== GAME COMPLETE ===")
        self.logger.info(f"Winner: {winner_name}")
        for name, score in final_scores.items():
            self.logger.info(f"{name}: {score} points")
