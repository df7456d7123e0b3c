"""Computer strategies for Whist."""

from whist_bot.bot.simple_bot import SimpleBot
from whist_bot.bot.random_bot import RandomBot

BOT_TYPES = {
    'simple': SimpleBot,
    'random': RandomBot,
}

__all__ = ["SimpleBot", "RandomBot", "BOT_TYPES"]
