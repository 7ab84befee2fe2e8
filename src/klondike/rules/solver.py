"""Auto-solver for boards with nothing left to uncover."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from klondike.rules.cards import Card, Suit
from klondike.rules.piles import PileId, can_accept

logger = logging.getLogger(__name__)

DEFAULT_SOLVE_INTERVAL = 0.15


@dataclass(frozen=True)
class SolverMove:
    """A proposed tableau-to-foundation move."""

    card: Card
    source: PileId
    destination: PileId


class SolveTimer:
    """Countdown that fires once per ``interval`` seconds of reported time."""

    def __init__(self, interval: float = DEFAULT_SOLVE_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("Solve interval must be positive")
        self.interval = interval
        self.remaining = interval

    def tick(self, elapsed: float) -> bool:
        """Advance by ``elapsed`` seconds. Returns True when the timer fires.

        At most one firing per call; leftover time carries into the next
        period.
        """
        self.remaining -= elapsed
        if self.remaining > 0:
            return False
        self.remaining += self.interval
        if self.remaining <= 0:
            self.remaining = self.interval
        return True

    def reset(self) -> None:
        self.remaining = self.interval


def solve_candidates(
    tableau_tops: Sequence[tuple[PileId, Optional[Card]]],
) -> list[tuple[PileId, Card]]:
    """Tableau tops ordered lowest rank first.

    Empty columns are skipped. The sort is stable, so columns of equal rank
    keep their board order.
    """
    candidates = [(pile, card) for pile, card in tableau_tops if card is not None]
    candidates.sort(key=lambda entry: entry[1].rank.column)
    return candidates


def next_solver_move(
    foundation_tops: Mapping[Suit, Optional[Card]],
    tableau_tops: Sequence[tuple[PileId, Optional[Card]]],
) -> Optional[SolverMove]:
    """The first candidate its foundation accepts, or None if there is none."""
    for source, card in solve_candidates(tableau_tops):
        destination = PileId.foundation(card.suit)
        if can_accept(destination, foundation_tops.get(card.suit), card, False):
            logger.debug(f"Solver proposes {card} from {source} to {destination}")
            return SolverMove(card=card, source=source, destination=destination)
    return None
