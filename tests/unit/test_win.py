"""Tests for win detection."""

import pytest
from klondike.rules.cards import Card, Rank, Suit
from klondike.rules.win import is_won, should_attempt_autosolve


def test_all_kings_wins() -> None:
    assert is_won([Card(suit, Rank.KING) for suit in Suit])


@pytest.mark.parametrize("rank", [Rank.ACE, Rank.TEN, Rank.QUEEN])
def test_any_non_king_top_is_not_won(rank: Rank) -> None:
    tops = [Card(suit, Rank.KING) for suit in Suit]
    tops[2] = Card(tops[2].suit, rank)
    assert not is_won(tops)


def test_empty_foundation_is_not_won() -> None:
    tops = [Card(Suit.SPADES, Rank.KING), None, Card(Suit.HEARTS, Rank.KING), Card(Suit.DIAMONDS, Rank.KING)]
    assert not is_won(tops)


def test_autosolve_trigger() -> None:
    assert should_attempt_autosolve(True, True, True)
    assert not should_attempt_autosolve(False, True, True)
    assert not should_attempt_autosolve(True, False, True)
    assert not should_attempt_autosolve(True, True, False)
