"""Card model: suits, ranks and the tableau stacking rule."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Color(Enum):
    """Suit color class."""

    BLACK = "black"
    RED = "red"


class Suit(Enum):
    """Playing card suits, in foundation order."""

    SPADES = "S"
    CLUBS = "C"
    HEARTS = "H"
    DIAMONDS = "D"

    @property
    def color(self) -> Color:
        if self in (Suit.SPADES, Suit.CLUBS):
            return Color.BLACK
        return Color.RED


class Rank(Enum):
    """Playing card ranks, Ace low."""

    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    @property
    def column(self) -> int:
        """Ordinal 0..12 (Ace=0, King=12)."""
        return _RANK_ORDER.index(self)

    def next(self) -> Optional[Rank]:
        """Successor rank, or None for King."""
        idx = self.column + 1
        if idx >= len(_RANK_ORDER):
            return None
        return _RANK_ORDER[idx]


_RANK_ORDER: tuple[Rank, ...] = tuple(Rank)


def can_stack_alternating(a: Suit, b: Suit) -> bool:
    """True iff the two suits have different color classes."""
    return a.color != b.color


def is_adjacent_ascending(a: Optional[Rank], b: Optional[Rank]) -> bool:
    """True iff ``b`` is exactly one rank above ``a``."""
    if a is None or b is None:
        return False
    return b.column - a.column == 1


@dataclass(frozen=True)
class Card:
    """Immutable playing card. Identity is the (suit, rank) pair."""

    suit: Suit
    rank: Rank

    def can_stack_on(self, other: Card) -> bool:
        """True if this card may be placed on ``other`` in a tableau column.

        Colors must alternate and this card must be exactly one rank below
        ``other``. Foundation placement is decided by ``can_accept`` instead.
        """
        return (
            can_stack_alternating(self.suit, other.suit)
            and is_adjacent_ascending(self.rank, other.rank)
        )

    def __str__(self) -> str:
        return f"{self.rank.value}{self.suit.value}"


def standard_deck() -> list[Card]:
    """The 52 unique cards, suit by suit, Ace to King."""
    return [Card(suit=suit, rank=rank) for suit in Suit for rank in Rank]
