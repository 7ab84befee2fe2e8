"""Move validation for drops, draws and deck resets."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from klondike.rules.actions import Action
from klondike.rules.cards import Card
from klondike.rules.piles import PileId, PileKind, can_accept


class Verdict(Enum):
    """Outcome of validating a request."""

    ACCEPT = "accept"
    REJECT = "reject"


@dataclass(frozen=True)
class MoveResult:
    """Result returned to the presentation layer for every request."""

    verdict: Verdict
    action: Optional[Action] = None

    @property
    def accepted(self) -> bool:
        return self.verdict == Verdict.ACCEPT

    @classmethod
    def accept(cls, action: Action) -> MoveResult:
        return cls(Verdict.ACCEPT, action)

    @classmethod
    def reject(cls) -> MoveResult:
        return cls(Verdict.REJECT)


def validate_move(
    candidate_card: Card,
    source_pile_id: PileId,
    dest_pile_id: PileId,
    dest_pile_kind: PileKind,
    dest_top: Optional[Card],
    candidate_has_children: bool,
) -> Verdict:
    """Decide legality of dropping ``candidate_card`` on a destination pile."""
    if source_pile_id == dest_pile_id:
        return Verdict.REJECT
    if dest_pile_kind != dest_pile_id.kind:
        raise ValueError(
            f"Pile kind {dest_pile_kind.value} does not match pile {dest_pile_id}"
        )
    if can_accept(dest_pile_id, dest_top, candidate_card, candidate_has_children):
        return Verdict.ACCEPT
    return Verdict.REJECT


def validate_draw(deck_size: int) -> Verdict:
    """A draw needs at least one card in the deck."""
    return Verdict.ACCEPT if deck_size > 0 else Verdict.REJECT


def validate_reset(deck_size: int, discard_size: int) -> Verdict:
    """Recycling needs an empty deck and a non-empty discard pile."""
    if deck_size == 0 and discard_size > 0:
        return Verdict.ACCEPT
    return Verdict.REJECT
