#!/usr/bin/env python3
"""
Main entry point for Whist card games.
Run a game with bots or human players, or a series of bot-only games.
"""

import argparse
import logging
from typing import List, Optional
from whist_bot.bot import BOT_TYPES
from whist_bot.player import Direction, HumanPlayer, Player
from whist_bot.rules import NUM_PLAYERS
from whist_bot.tournament import MatchRunner, create_bot_player
from whist_bot.utils import setup_logging
from whist_bot.variations import VARIATIONS, create_game


def create_players(humans: int, bot_types: List[str], seed: Optional[int] = None) -> List[Player]:
    """Seat the humans first, from North, then fill the table with bots."""
    players: List[Player] = []
    seats = list(Direction)
    for i in range(humans):
        name = input(f"Enter name for {seats[i]}: ").strip() or f"Human_{seats[i].value}"
        players.append(HumanPlayer(seats[i], name))

    for bot_type, direction in zip(bot_types, seats[humans:]):
        players.append(create_bot_player(bot_type, direction, seed))
    return players


def run_game(variant: str, humans: int, bot_types: List[str], seed: Optional[int] = None) -> dict:
    """Play one game and report the scores."""
    players = create_players(humans, bot_types, seed)
    game = create_game(variant, players, seed=seed)

    print(f"\n🎴 Starting {game.get_name()} 🎴")
    print(f"Players: {', '.join(str(p) for p in players)}")

    try:
        scores = game.play_game()
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return {'interrupted': True}

    return {
        'winners': [game.players[seat].name for seat in game.get_winners()],
        'scores': {game.players[seat].name: score for seat, score in scores.items()},
        'hands_played': game.hands_played
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Whist")
    parser.add_argument('--variant', choices=list(VARIATIONS.keys()),
                        default='classic', help='Rules variation')
    parser.add_argument('--bots', nargs='*', choices=list(BOT_TYPES.keys()),
                        help='Bot types for remaining seats')
    parser.add_argument('--humans', type=int, default=0, choices=range(NUM_PLAYERS + 1),
                        help='Number of human players (0-4)')
    parser.add_argument('--games', type=int, default=1,
                        help='Number of games to play (bot-only)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for shuffling and random bots')
    parser.add_argument('--log-file', default=None, help='Also log to this file')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    return parser


def execute(args: argparse.Namespace) -> dict:
    """Run what the parsed arguments ask for and return the results."""
    setup_logging(args.log_file, level=logging.DEBUG if args.verbose else logging.INFO)

    total_needed = NUM_PLAYERS - args.humans
    bots = list(args.bots or [])
    if len(bots) < total_needed:
        bots.extend(['simple'] * (total_needed - len(bots)))
    bots = bots[:total_needed]

    if args.games > 1:
        if args.humans:
            raise ValueError("--games is only available for bot-only play")
        report = MatchRunner(args.variant).run_matches(bots, args.games, args.seed)
        summary = report['summary']
        print(f"\nGames: {summary['games']} (failed: {summary['failed']})")
        for seat, score in summary['mean_scores'].items():
            print(f"  {seat}: mean score {score:.2f}")
        for pair, rate in summary['win_rates'].items():
            print(f"  {pair}: win rate {rate:.1%}")
        return report

    result = run_game(args.variant, args.humans, bots, args.seed)
    if not result.get('interrupted'):
        print(f"\n✅ Winner(s): {', '.join(result['winners'])}")
        for name, score in result['scores'].items():
            print(f"  {name}: {score}")
    return result


def main(argv: Optional[List[str]] = None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.games > 1 and args.humans:
        parser.error("--games is only available for bot-only play")
    execute(args)


if __name__ == "__main__":
    main()
