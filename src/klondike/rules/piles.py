"""Piles and the single stacking-legality predicate."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from klondike.rules.cards import Card, Rank, Suit

TABLEAU_COUNT = 7
SUITS: tuple[Suit, ...] = tuple(Suit)


class PileKind(Enum):
    """Kinds of pile on the board."""

    TABLEAU = "tableau"
    FOUNDATION = "foundation"
    DECK = "deck"
    DISCARD = "discard"


@dataclass(frozen=True)
class PileId:
    """Address of one pile.

    ``index`` is the column (0..6) for tableaux and the position of the suit
    in ``Suit`` for foundations. Deck and discard always use index 0.
    """

    kind: PileKind
    index: int = 0

    def __post_init__(self) -> None:
        if self.kind == PileKind.TABLEAU:
            limit = TABLEAU_COUNT
        elif self.kind == PileKind.FOUNDATION:
            limit = len(SUITS)
        else:
            limit = 1
        if not 0 <= self.index < limit:
            raise ValueError(f"Invalid {self.kind.value} index: {self.index}")

    @classmethod
    def tableau(cls, index: int) -> PileId:
        return cls(PileKind.TABLEAU, index)

    @classmethod
    def foundation(cls, suit: Suit) -> PileId:
        return cls(PileKind.FOUNDATION, SUITS.index(suit))

    @property
    def suit(self) -> Optional[Suit]:
        """Suit a foundation is constrained to; None for other piles."""
        if self.kind != PileKind.FOUNDATION:
            return None
        return SUITS[self.index]

    def __str__(self) -> str:
        if self.kind == PileKind.TABLEAU:
            return f"t{self.index + 1}"
        if self.kind == PileKind.FOUNDATION:
            return f"f{SUITS[self.index].value}"
        return self.kind.value


DECK = PileId(PileKind.DECK)
DISCARD = PileId(PileKind.DISCARD)
TABLEAUX: tuple[PileId, ...] = tuple(PileId.tableau(i) for i in range(TABLEAU_COUNT))
FOUNDATIONS: tuple[PileId, ...] = tuple(PileId.foundation(s) for s in SUITS)
ALL_PILES: tuple[PileId, ...] = TABLEAUX + FOUNDATIONS + (DECK, DISCARD)


def can_accept(
    pile: PileId,
    current_top: Optional[Card],
    candidate: Card,
    candidate_has_cards_on_top: bool,
) -> bool:
    """Decide whether ``candidate`` may be dropped on ``pile``.

    Every caller (drops, auto-move to foundation, the auto-solver) goes
    through here. Deck and discard never accept drops.
    """
    if pile.kind == PileKind.FOUNDATION:
        if candidate_has_cards_on_top:
            return False
        if candidate.suit != pile.suit:
            return False
        if current_top is None:
            return candidate.rank == Rank.ACE
        return candidate.rank == current_top.rank.next()

    if pile.kind == PileKind.TABLEAU:
        if current_top is None:
            return candidate.rank == Rank.KING
        return candidate.can_stack_on(current_top)

    return False


@dataclass
class Pile:
    """Ordered cards of one pile, bottom to top.

    Face-down cards always form a prefix of the tableau; ``hidden`` counts
    them. Deck cards are face-down regardless of ``hidden``.
    """

    pile_id: PileId
    cards: list[Card] = field(default_factory=list)
    hidden: int = 0

    @property
    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    def __len__(self) -> int:
        return len(self.cards)

    def is_face_up(self, position: int) -> bool:
        if self.pile_id.kind == PileKind.DECK:
            return False
        return position >= self.hidden

    def index_of(self, card: Card) -> int:
        """Position of ``card`` in this pile, or -1."""
        try:
            return self.cards.index(card)
        except ValueError:
            return -1

    def take_from(self, position: int) -> list[Card]:
        """Remove and return the cards from ``position`` to the top."""
        taken = self.cards[position:]
        del self.cards[position:]
        self.hidden = min(self.hidden, len(self.cards))
        return taken

    def flip_top_up(self) -> bool:
        """Turn a face-down top card face-up. Returns True if it flipped."""
        if self.cards and self.hidden == len(self.cards):
            self.hidden -= 1
            return True
        return False

    def cover_top(self) -> None:
        """Turn the face-up card just above the hidden prefix face-down."""
        if self.hidden < len(self.cards):
            self.hidden += 1
