"""Win detection and the auto-solve trigger."""

from __future__ import annotations

from typing import Iterable, Optional

from klondike.rules.cards import Card, Rank


def is_won(foundation_tops: Iterable[Optional[Card]]) -> bool:
    """True iff all four foundations are topped by a King.

    Checking the top is enough because foundations only ever accept the next
    rank of their suit.
    """
    tops = list(foundation_tops)
    return len(tops) == 4 and all(
        top is not None and top.rank == Rank.KING for top in tops
    )


def should_attempt_autosolve(
    deck_empty: bool, all_cards_face_up: bool, discard_empty: bool
) -> bool:
    """True when nothing is left to uncover and only tableau tops remain."""
    return deck_empty and all_cards_face_up and discard_empty
