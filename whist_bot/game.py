"""
Main game module for Whist card games.
Manages seats, dealing, trick play and scoring across hands.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Tuple
from whist_bot.card import Card, Suit
from whist_bot.deck import Deck
from whist_bot.player import Direction, Player, PARTNERSHIPS
from whist_bot.rules import IllegalMove, NUM_PLAYERS
from whist_bot.trick import Trick
from whist_bot.utils import GameLogger, format_hand


def partnership_name(partnership: Tuple[Direction, Direction]) -> str:
    return "/".join(str(seat) for seat in partnership)


class CardGame(ABC):
    """
    Game controller shared by the Whist variations.

    Variations decide how many cards are dealt and when the game is over;
    everything else (trumps, trick play, hand scoring) is common.
    """

    def __init__(self, players: List[Player], seed: Optional[int] = None):
        if len(players) != NUM_PLAYERS:
            raise ValueError(f"Whist requires exactly {NUM_PLAYERS} players")
        self.players: Dict[Direction, Player] = {p.direction(): p for p in players}
        if len(self.players) != NUM_PLAYERS:
            raise ValueError("Each player must sit in a different direction")

        self.deck = Deck(seed)
        self.scores: Dict[Direction, int] = {d: 0 for d in Direction}
        self.tricks_won: Dict[Direction, int] = {d: 0 for d in Direction}
        self.current_trick: Optional[Trick] = None
        self.trumps: Optional[Suit] = None
        self.trump_card: Optional[Card] = None
        # North leads the first hand
        self.dealer = Direction.WEST
        self.lead = self.dealer.next()
        self.hands_played = 0
        self.logger = GameLogger()

    @abstractmethod
    def get_name(self) -> str:
        pass

    @abstractmethod
    def is_game_finished(self) -> bool:
        pass

    @abstractmethod
    def deal(self, deck: Deck) -> Card:
        """
        Deal cards from the shuffled deck into the players' hands.

        Returns:
            The last card dealt, which is turned up to set trumps
        """
        pass

    def _deal_round_robin(self, cards: List[Card]) -> Card:
        """Clear all hands and deal the cards one at a time, starting North."""
        self.current_trick = None
        for player in self.players.values():
            player.hand().clear()

        direction = Direction.NORTH
        for card in cards:
            self.players[direction].hand().add(card)
            direction = direction.next()
        return cards[-1]

    def start_hand(self):
        """Shuffle, deal and turn up trumps for a new hand."""
        self.deck.reset()
        self.trump_card = self.deal(self.deck)
        self.trumps = self.trump_card.suit
        self.tricks_won = {d: 0 for d in Direction}
        self.lead = self.dealer.next()

        self.logger.log_hand_start(self.hands_played + 1, self.trumps, str(self.dealer))
        for player in self.players.values():
            self.logger.logger.debug(f"{player.name} hand: {format_hand(player.hand())}")

    def play_trick(self) -> Direction:
        """
        Play one trick, asking each seat for a card in turn.

        Returns:
            The winning seat, which leads the next trick

        Raises:
            IllegalMove: If a player's strategy produces an illegal card
        """
        trick = Trick(self.lead, self.trumps)
        self.current_trick = trick

        while not trick.is_complete():
            player = self.players[trick.get_next_to_play()]
            card = player.choose_card(trick)
            try:
                trick.play(player, card)
            except IllegalMove as e:
                self.logger.logger.error(f"{player.name} attempted illegal move {card}: {e}")
                raise
            self.logger.log_card_play(player.name, card, str(trick))

        winner = trick.get_winner()
        self.tricks_won[winner] += 1
        self.lead = winner
        self.logger.log_trick_winner(self.players[winner].name, trick.get_cards_played())
        return winner

    def partnership_tricks(self) -> Dict[Tuple[Direction, Direction], int]:
        return {pair: sum(self.tricks_won[seat] for seat in pair) for pair in PARTNERSHIPS}

    def end_hand(self) -> Optional[Tuple[Direction, Direction]]:
        """
        Score the hand just played.

        The partnership taking more tricks wins the hand and each of its
        seats gains a point. Equal tricks score nothing.

        Returns:
            The winning partnership, or None on a tie
        """
        tricks = self.partnership_tricks()
        (first, first_tricks), (second, second_tricks) = tricks.items()
        if first_tricks > second_tricks:
            winners = first
        elif second_tricks > first_tricks:
            winners = second
        else:
            winners = None

        if winners is not None:
            for seat in winners:
                self.scores[seat] += 1

        self.logger.log_hand_result(
            {partnership_name(pair): count for pair, count in tricks.items()},
            partnership_name(winners) if winners else None)

        self.hands_played += 1
        self.dealer = self.dealer.next()
        self.current_trick = None
        return winners

    def play_hand(self) -> Optional[Tuple[Direction, Direction]]:
        """Deal and play out a complete hand."""
        self.start_hand()
        while self.players[self.lead].hand().size() > 0:
            self.play_trick()
        return self.end_hand()

    def play_game(self) -> Dict[Direction, int]:
        """Play hands until the variation says the game is over."""
        self.logger.log_game_start(self.get_name(), [p.name for p in self.players.values()])
        while not self.is_game_finished():
            self.play_hand()

        winners = self.get_winners()
        self.logger.log_game_end(
            ", ".join(self.players[seat].name for seat in winners),
            {p.name: self.scores[d] for d, p in self.players.items()})
        return dict(self.scores)

    def get_winners(self) -> List[Direction]:
        """Seats sharing the highest score."""
        best = max(self.scores.values())
        return [seat for seat, score in self.scores.items() if score == best]
