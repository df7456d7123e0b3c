"""
Player module for Whist card games.
Defines seats, player state and the strategy interface.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, TYPE_CHECKING
from whist_bot.card import Card
from whist_bot.hand import Hand
from whist_bot.rules import IllegalMove, get_legal_plays

if TYPE_CHECKING:
    from whist_bot.trick import Trick


class Direction(Enum):
    """Seats around the table, in playing order."""
    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    def next(self) -> 'Direction':
        """Seat to the left, i.e. the next to play."""
        seats = list(Direction)
        return seats[(seats.index(self) + 1) % len(seats)]

    def partner(self) -> 'Direction':
        return self.next().next()

    def __str__(self):
        return self.name.title()


PARTNERSHIPS = ((Direction.NORTH, Direction.SOUTH), (Direction.EAST, Direction.WEST))


class Player:
    """A seat at the table and the hand held there."""

    def __init__(self, direction: Direction, name: str = None):
        self._direction = direction
        self._hand = Hand()
        self.name = name or str(direction)
        self.strategy: Optional['BotInterface'] = None

    def hand(self) -> Hand:
        return self._hand

    def direction(self) -> Direction:
        return self._direction

    def copy(self) -> 'Player':
        """Player at the same seat holding a copy of this hand."""
        clone = Player(self._direction, self.name)
        clone._hand = self._hand.copy()
        return clone

    def choose_card(self, trick: 'Trick') -> Card:
        """Ask this player's strategy for the next card."""
        if self.strategy is None:
            raise ValueError(f"{self.name} has no strategy")
        return self.strategy.choose_card(trick)

    def __str__(self):
        return f"{self.name} ({self._direction.value})"

    def __repr__(self):
        return f"Player(direction={self._direction}, name={self.name!r})"


class BotInterface(ABC):
    """Abstract interface that all bots must implement."""

    def __init__(self, player: Optional[Player] = None, name: str = None):
        self.player = player
        self.name = name or type(self).__name__

    def set_player(self, player: Player):
        """Bind this strategy to a (new) player."""
        self.player = player

    @abstractmethod
    def choose_card(self, trick: 'Trick') -> Card:
        """
        Choose which card to play.

        Args:
            trick: The trick in progress; it is not modified

        Returns:
            A card from the bound player's hand that is legal to play
        """
        pass

    def __str__(self):
        return self.name


class HumanPlayer(Player):
    """Human player that gets input from console."""

    def choose_card(self, trick: 'Trick') -> Card:
        return self.choose_card_interactive(trick)

    def choose_card_interactive(self, trick: 'Trick') -> Card:
        """Get card choice from human player via console input."""
        cards_played = trick.get_cards_played()
        lead_suit = cards_played[0].suit if cards_played else None
        trumps = trick.get_trumps()

        print(f"\n{self.name}'s turn to play")
        print(f"Trump: {trumps.name if trumps else 'No Trump'}")
        print(f"Led suit: {lead_suit.name if lead_suit else 'Leading'}")
        if cards_played:
            print(f"Cards on table: {', '.join(str(card) for card in cards_played)}")
        print(f"Your hand: {self._hand}")
        print(f"Valid plays: {', '.join(str(c) for c in get_legal_plays(self._hand, lead_suit))}")

        while True:
            choice = input("Choose a card to play (e.g. QS, 10H): ").strip()
            try:
                card = Card.parse(choice)
            except ValueError:
                print(f"'{choice}' is not a card.")
                continue

            # Validate on copies; the game loop makes the real play
            try:
                trick.copy().play(self.copy(), card)
            except IllegalMove as e:
                print(f"Illegal move: {e}")
                continue
            return card
