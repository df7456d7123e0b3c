"""
Match runner for Whist bots.
Plays bot-only games and summarises the results.
"""

import logging
import time
from datetime import datetime
from typing import Any, Dict, List, Optional

import numpy as np

from whist_bot.bot import BOT_TYPES
from whist_bot.player import Direction, Player, PARTNERSHIPS
from whist_bot.rules import NUM_PLAYERS
from whist_bot.variations import create_game

logger = logging.getLogger(__name__)


def create_bot_player(bot_type: str, direction: Direction, seed: Optional[int] = None) -> Player:
    """Create a player seated at direction and driven by a bot of the given type."""
    if bot_type not in BOT_TYPES:
        raise ValueError(f"Unknown bot type: {bot_type}. Available: {list(BOT_TYPES.keys())}")

    name = f"{bot_type.title()}Bot_{direction.value}"
    if seed is not None:
        # Each seat draws its own stream
        seed += list(Direction).index(direction)
    player = Player(direction, name)
    if bot_type == 'random':
        player.strategy = BOT_TYPES[bot_type](player, name, seed=seed)
    else:
        player.strategy = BOT_TYPES[bot_type](player, name)
    return player


class MatchRunner:
    """Runs series of bot games between fixed seatings."""

    def __init__(self, variant: str = "classic"):
        self.variant = variant
        self.results: List[Dict[str, Any]] = []

    def run_single_game(self, bot_types: List[str], seed: Optional[int] = None) -> Dict[str, Any]:
        """Run a single game between bots seated North, East, South, West."""
        if len(bot_types) != NUM_PLAYERS:
            raise ValueError(f"Need exactly {NUM_PLAYERS} bot types")

        players = [create_bot_player(bot_type, direction, seed)
                   for bot_type, direction in zip(bot_types, Direction)]
        game = create_game(self.variant, players, seed=seed)

        start_time = time.time()
        try:
            scores = game.play_game()
        except Exception as e:
            logger.error(f"Game failed: {e}")
            return {
                'timestamp': datetime.now().isoformat(),
                'bot_types': bot_types,
                'variant': self.variant,
                'error': str(e),
                'success': False
            }

        return {
            'timestamp': datetime.now().isoformat(),
            'bot_types': bot_types,
            'variant': self.variant,
            'scores': [scores[direction] for direction in Direction],
            'winners': [direction.name for direction in game.get_winners()],
            'hands_played': game.hands_played,
            'duration_seconds': time.time() - start_time,
            'success': True
        }

    def run_matches(self, bot_types: List[str], num_games: int = 10,
                    seed: Optional[int] = None) -> Dict[str, Any]:
        """
        Play num_games games with the same seating and summarise them.

        Args:
            bot_types: Bot type per seat, North first
            num_games: Number of games to play
            seed: Base seed; game i uses seed + i

        Returns:
            Per-game results and a summary of mean scores and partnership wins
        """
        logger.info(f"Running {num_games} {self.variant} games: {', '.join(bot_types)}")

        results = []
        for game_num in range(num_games):
            game_seed = None if seed is None else seed + game_num
            results.append(self.run_single_game(bot_types, game_seed))
            if (game_num + 1) % 10 == 0:
                logger.info(f"Progress: {game_num + 1}/{num_games} games")

        self.results.extend(results)
        summary = summarise(results)
        logger.info(f"Partnership win rates: {summary['win_rates']}")
        return {'bot_types': bot_types, 'variant': self.variant,
                'results': results, 'summary': summary}


def summarise(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate per-seat scores and partnership wins across games."""
    completed = [r for r in results if r.get('success')]
    failed = len(results) - len(completed)
    seats = list(Direction)

    if not completed:
        return {'games': 0, 'failed': failed, 'mean_scores': {},
                'partnership_wins': {}, 'win_rates': {}}

    scores = np.array([r['scores'] for r in completed], dtype=np.float64)
    mean_scores = scores.mean(axis=0)

    partnership_wins = {}
    for pair in PARTNERSHIPS:
        columns = [seats.index(seat) for seat in pair]
        others = [i for i in range(len(seats)) if i not in columns]
        pair_scores = scores[:, columns].max(axis=1)
        other_scores = scores[:, others].max(axis=1)
        name = "/".join(seat.name for seat in pair)
        partnership_wins[name] = int(np.sum(pair_scores > other_scores))

    return {
        'games': len(completed),
        'failed': failed,
        'mean_scores': {seat.name: float(score) for seat, score in zip(seats, mean_scores)},
        'partnership_wins': partnership_wins,
        'win_rates': {name: wins / len(completed) for name, wins in partnership_wins.items()},
    }
