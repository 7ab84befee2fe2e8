"""Engine-independent Klondike rules."""

from klondike.rules.cards import Card, Color, Rank, Suit, standard_deck
from klondike.rules.piles import (
    DECK,
    DISCARD,
    FOUNDATIONS,
    TABLEAUX,
    Pile,
    PileId,
    PileKind,
    can_accept,
)
from klondike.rules.actions import Action, ActionLog, Draw, MoveCard, ResetDeck, UndoEffect
from klondike.rules.validation import MoveResult, Verdict, validate_move
from klondike.rules.win import is_won, should_attempt_autosolve
from klondike.rules.solver import SolverMove, SolveTimer, next_solver_move

__all__ = [
    "Card",
    "Color",
    "Rank",
    "Suit",
    "standard_deck",
    "DECK",
    "DISCARD",
    "FOUNDATIONS",
    "TABLEAUX",
    "Pile",
    "PileId",
    "PileKind",
    "can_accept",
    "Action",
    "ActionLog",
    "Draw",
    "MoveCard",
    "ResetDeck",
    "UndoEffect",
    "MoveResult",
    "Verdict",
    "validate_move",
    "is_won",
    "should_attempt_autosolve",
    "SolverMove",
    "SolveTimer",
    "next_solver_move",
]
