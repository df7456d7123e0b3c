"""
Unit tests for trick play validation and winner resolution.
"""

import random

import pytest
from whist_bot.card import Card, Suit, create_deck
from whist_bot.player import Direction, Player
from whist_bot.rules import IllegalMove, get_legal_plays
from whist_bot.trick import Trick

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST


def c(text):
    return Card.parse(text)


def seat(direction, *cards):
    player = Player(direction)
    for text in cards:
        player.hand().add(c(text))
    return player


@pytest.fixture
def table():
    return {
        N: seat(N, "7C", "AD"),
        E: seat(E, "2H", "4D"),
        S: seat(S, "9C", "5D"),
        W: seat(W, "3C", "KS"),
    }


class TestDirection:
    """Test the seating ring."""

    def test_next_cycles(self):
        assert N.next() == E
        assert E.next() == S
        assert S.next() == W
        assert W.next() == N

    def test_partner(self):
        assert N.partner() == S
        assert E.partner() == W


class TestTrickPlay:
    """Test the play state machine."""

    def test_scenario_follow_suit_and_trump(self, table):
        trick = Trick(N, Suit.HEARTS)
        trick.play(table[N], c("7C"))
        trick.play(table[E], c("2H"))

        with pytest.raises(IllegalMove, match="doesn't follow suit"):
            trick.play(table[S], c("5D"))
        assert trick.get_cards_played() == [c("7C"), c("2H")]
        assert table[S].hand().contains(c("5D"))

        trick.play(table[S], c("9C"))
        trick.play(table[W], c("3C"))

        assert trick.is_complete()
        assert trick.get_cards_played() == [c("7C"), c("2H"), c("9C"), c("3C")]
        assert trick.get_winner() == E

    def test_play_removes_card_from_hand(self, table):
        trick = Trick(N, Suit.HEARTS)
        trick.play(table[N], c("7C"))
        assert not table[N].hand().contains(c("7C"))
        assert table[N].hand().size() == 1

    @pytest.mark.parametrize("use_player, use_card", [(False, True), (True, False), (False, False)])
    def test_null_arguments(self, table, use_player, use_card):
        trick = Trick(N, Suit.HEARTS)
        player = table[N] if use_player else None
        card = c("7C") if use_card else None

        with pytest.raises(IllegalMove, match="must not be null"):
            trick.play(player, card)
        assert trick.get_cards_played() == []
        assert trick.get_next_to_play() == N
        assert table[N].hand().size() == 2

    def test_card_not_in_hand(self, table):
        trick = Trick(N, None)
        with pytest.raises(IllegalMove, match="does not contain this card"):
            trick.play(table[N], c("9C"))

    def test_wrong_turn(self, table):
        trick = Trick(N, None)
        with pytest.raises(IllegalMove, match="not the next to play"):
            trick.play(table[E], c("2H"))

    def test_hand_check_comes_before_turn_check(self, table):
        trick = Trick(N, None)
        with pytest.raises(IllegalMove, match="does not contain"):
            trick.play(table[E], c("7C"))

    def test_no_play_after_complete(self, table):
        trick = Trick(N, None)
        for direction, card in [(N, "7C"), (E, "4D"), (S, "9C"), (W, "3C")]:
            trick.play(table[direction], c(card))

        with pytest.raises(IllegalMove, match="not the next to play"):
            trick.play(table[N], c("AD"))
        assert len(trick.get_cards_played()) == 4

    def test_cannot_follow_may_play_anything(self, table):
        trick = Trick(N, None)
        trick.play(table[N], c("7C"))
        trick.play(table[E], c("4D"))
        assert trick.get_card_played(E) == c("4D")

    def test_lead_may_play_anything(self, table):
        trick = Trick(W, Suit.CLUBS)
        trick.play(table[W], c("KS"))
        assert trick.get_cards_played() == [c("KS")]


class TestTrickQueries:
    """Test the read-only trick operations."""

    def test_next_to_play_advances_from_lead(self, table):
        trick = Trick(S, None)
        expected = S
        for direction, card in [(S, "9C"), (W, "3C"), (N, "7C"), (E, "2H")]:
            assert trick.get_next_to_play() == expected
            trick.play(table[direction], c(card))
            expected = expected.next()
        assert trick.get_next_to_play() is None

    def test_get_card_played(self, table):
        trick = Trick(E, None)
        trick.play(table[E], c("4D"))
        trick.play(table[S], c("5D"))

        assert trick.get_card_played(E) == c("4D")
        assert trick.get_card_played(S) == c("5D")
        assert trick.get_card_played(W) is None
        assert trick.get_card_played(N) is None

    def test_lead_and_trumps(self):
        trick = Trick(W, Suit.SPADES)
        assert trick.get_lead_player() == W
        assert trick.get_trumps() == Suit.SPADES
        assert Trick(W, None).get_trumps() is None

    def test_contains_and_match_suit(self, table):
        trick = Trick(N, Suit.HEARTS)
        trick.play(table[N], c("7C"))
        trick.play(table[E], c("2H"))
        trick.play(table[S], c("9C"))

        assert trick.contains_suit(Suit.CLUBS)
        assert trick.contains_suit(Suit.HEARTS)
        assert not trick.contains_suit(Suit.SPADES)
        assert not trick.contains_suit(None)
        assert trick.match_cards_played(Suit.CLUBS) == [c("7C"), c("9C")]
        assert trick.match_cards_played(Suit.SPADES) == []

    def test_copy_is_independent(self, table):
        trick = Trick(N, Suit.HEARTS)
        trick.play(table[N], c("7C"))
        snapshot = trick.copy()

        trick.play(table[E], c("2H"))
        assert snapshot.get_cards_played() == [c("7C")]
        assert snapshot.get_next_to_play() == E
        assert snapshot.get_lead_player() == N
        assert snapshot.get_trumps() == Suit.HEARTS

        snapshot.play(table[E].copy(), c("4D"))
        assert trick.get_cards_played() == [c("7C"), c("2H")]

    def test_slots_only_filled_by_play(self):
        with pytest.raises(TypeError):
            Trick(N, None, [None, c("7C"), None, None])

        trick = Trick(W, None)
        assert trick.get_cards_played() == []
        assert trick.get_next_to_play() == W


class TestTrickWinner:
    """Test winner resolution."""

    def play_all(self, lead, trumps, cards):
        trick = Trick(lead, trumps)
        direction = lead
        for text in cards:
            trick.play(seat(direction, text), c(text))
            direction = direction.next()
        return trick

    def test_highest_of_lead_suit(self):
        trick = self.play_all(N, Suit.HEARTS, ["7C", "9C", "3C", "5C"])
        assert trick.get_winner() == E

    def test_off_suit_high_card_does_not_win(self):
        trick = self.play_all(N, None, ["5S", "KD", "AC", "2S"])
        assert trick.get_winner() == N

    def test_single_trump_wins_regardless_of_rank(self):
        trick = self.play_all(E, Suit.DIAMONDS, ["AS", "KS", "2D", "QS"])
        assert trick.get_winner() == W

    def test_higher_trump_overtrumps(self):
        trick = self.play_all(N, Suit.HEARTS, ["AS", "2H", "5H", "KS"])
        assert trick.get_winner() == S

    def test_no_trumps_hearts_are_plain(self):
        trick = self.play_all(N, None, ["5S", "AH", "6S", "2S"])
        assert trick.get_winner() == S

    def test_partial_trick_winner(self):
        trick = self.play_all(W, Suit.CLUBS, ["9S"])
        assert trick.get_winner() == W
        trick.play(seat(N, "JS"), c("JS"))
        assert trick.get_winner() == N

    def test_empty_trick_has_no_winner(self):
        with pytest.raises(ValueError):
            Trick(N, None).get_winner()

    def test_exact_tie_goes_to_later_card(self):
        trick = self.play_all(N, None, ["7C", "7C", "2C", "3C"])
        assert trick.get_winner() == E


class TestTrickProperties:
    """Randomised checks over full deals."""

    @pytest.mark.parametrize("seed", range(10))
    def test_legal_random_deals(self, seed):
        rng = random.Random(seed)
        deck = create_deck()
        rng.shuffle(deck)
        players = {d: Player(d) for d in Direction}
        for i, card in enumerate(deck):
            players[list(Direction)[i % 4]].hand().add(card)

        lead = rng.choice(list(Direction))
        trumps = rng.choice([None] + list(Suit))
        played = set()
        for _ in range(13):
            trick = Trick(lead, trumps)
            for count in range(4):
                direction = trick.get_next_to_play()
                assert direction == _advance(lead, count)
                player = players[direction]
                cards_played = trick.get_cards_played()
                lead_suit = cards_played[0].suit if cards_played else None
                card = rng.choice(get_legal_plays(player.hand(), lead_suit))

                held_lead_suit = bool(player.hand().matches(lead_suit))
                trick.play(player, card)
                if held_lead_suit:
                    assert card.suit == lead_suit
                assert len(trick.get_cards_played()) == count + 1

            assert trick.get_next_to_play() is None
            played.update(trick.get_cards_played())
            for p in players.values():
                assert not played & set(p.hand())
            lead = trick.get_winner()

        assert len(played) == 52


def _advance(direction, steps):
    for _ in range(steps):
        direction = direction.next()
    return direction
