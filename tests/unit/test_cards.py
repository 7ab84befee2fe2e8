"""Tests for the card model."""

import pytest
from klondike.rules.cards import (
    Card, Color, Rank, Suit, can_stack_alternating, is_adjacent_ascending, standard_deck,
)


def test_card_immutability() -> None:
    """Test Card is immutable."""
    card = Card(suit=Suit.HEARTS, rank=Rank.ACE)

    with pytest.raises(AttributeError):
        card.rank = Rank.KING  # type: ignore


def test_card_identity_is_structural() -> None:
    """Two cards with the same suit and rank are the same card."""
    assert Card(Suit.SPADES, Rank.TEN) == Card(Suit.SPADES, Rank.TEN)
    assert len({Card(Suit.SPADES, Rank.TEN), Card(Suit.SPADES, Rank.TEN)}) == 1


@pytest.mark.parametrize(
    "suit,color",
    [
        (Suit.SPADES, Color.BLACK),
        (Suit.CLUBS, Color.BLACK),
        (Suit.HEARTS, Color.RED),
        (Suit.DIAMONDS, Color.RED),
    ],
)
def test_suit_color(suit: Suit, color: Color) -> None:
    assert suit.color == color


def test_alternating_colors() -> None:
    assert can_stack_alternating(Suit.SPADES, Suit.HEARTS)
    assert can_stack_alternating(Suit.DIAMONDS, Suit.CLUBS)
    assert not can_stack_alternating(Suit.SPADES, Suit.CLUBS)
    assert not can_stack_alternating(Suit.HEARTS, Suit.DIAMONDS)


def test_rank_columns() -> None:
    """Ace is 0, numbers are n-1, King is 12."""
    assert Rank.ACE.column == 0
    assert Rank.TWO.column == 1
    assert Rank.TEN.column == 9
    assert Rank.JACK.column == 10
    assert Rank.QUEEN.column == 11
    assert Rank.KING.column == 12


def test_rank_next() -> None:
    assert Rank.ACE.next() == Rank.TWO
    assert Rank.TEN.next() == Rank.JACK
    assert Rank.QUEEN.next() == Rank.KING
    assert Rank.KING.next() is None


def test_adjacent_ascending() -> None:
    assert is_adjacent_ascending(Rank.ACE, Rank.TWO)
    assert is_adjacent_ascending(Rank.QUEEN, Rank.KING)
    assert not is_adjacent_ascending(Rank.TWO, Rank.ACE)
    assert not is_adjacent_ascending(Rank.FIVE, Rank.SEVEN)
    assert not is_adjacent_ascending(None, Rank.TWO)
    assert not is_adjacent_ascending(Rank.KING, None)


class TestCanStackOn:
    """Tests for the tableau stacking rule."""

    def test_red_on_black_one_lower(self):
        """A red card goes on a black card one rank higher."""
        assert Card(Suit.HEARTS, Rank.SIX).can_stack_on(Card(Suit.SPADES, Rank.SEVEN))

    def test_same_color_rejected(self):
        assert not Card(Suit.CLUBS, Rank.SIX).can_stack_on(Card(Suit.SPADES, Rank.SEVEN))

    def test_wrong_direction_rejected(self):
        assert not Card(Suit.HEARTS, Rank.EIGHT).can_stack_on(Card(Suit.SPADES, Rank.SEVEN))

    def test_ace_on_two(self):
        assert Card(Suit.DIAMONDS, Rank.ACE).can_stack_on(Card(Suit.CLUBS, Rank.TWO))


def test_standard_deck_has_52_unique_cards() -> None:
    deck = standard_deck()
    assert len(deck) == 52
    assert len(set(deck)) == 52


def test_card_str() -> None:
    assert str(Card(Suit.HEARTS, Rank.TEN)) == "10H"
