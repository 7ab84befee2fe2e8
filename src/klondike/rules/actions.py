"""Reversible action records and the LIFO action log."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional, Union

from klondike.rules.cards import Card
from klondike.rules.piles import PileId


@dataclass(frozen=True)
class MoveCard:
    """A card (with any cards on top of it) moved between piles."""

    card: Card
    source: PileId
    destination: PileId
    # Visual offset the card had in its source pile before the move
    y_offset: float = 0.0
    # Whether the source's new top was face-down before this move uncovered it
    parent_face_down: bool = False


@dataclass(frozen=True)
class ResetDeck:
    """The discard pile was recycled into the deck."""


@dataclass(frozen=True)
class Draw:
    """``count`` cards were moved from the deck to the discard pile."""

    count: int


Action = Union[MoveCard, ResetDeck, Draw]


@dataclass(frozen=True)
class UndoEffect:
    """What an undo changed, for the presentation layer to mirror."""

    action: Action
    y_offset: float = 0.0
    # Card turned back face-down (loses its draggable state)
    recovered: Optional[Card] = None
    # Discard top that regains its click affordance
    clickable: Optional[Card] = None


@dataclass
class ActionLog:
    """Append-only stack of applied actions, popped by undo."""

    entries: list[Action] = field(default_factory=list)

    def record(self, action: Action) -> None:
        self.entries.append(action)

    def pop(self) -> Optional[Action]:
        """Remove and return the most recent action; None if empty."""
        if not self.entries:
            return None
        return self.entries.pop()

    def peek(self) -> Optional[Action]:
        return self.entries[-1] if self.entries else None

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Action]:
        return iter(self.entries)
