"""Klondike solitaire rules engine."""

from klondike.errors import InvariantViolation
from klondike.session import (
    BoardSnapshot,
    DrawMode,
    GameSession,
    GameState,
    PileView,
    SessionConfig,
)

__all__ = [
    "InvariantViolation",
    "BoardSnapshot",
    "DrawMode",
    "GameSession",
    "GameState",
    "PileView",
    "SessionConfig",
]
