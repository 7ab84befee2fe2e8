"""Text command parsing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from klondike.rules.cards import Card, Rank, Suit
from klondike.rules.piles import DISCARD, PileId

_SYMBOL_SUITS = {"♥": "H", "♦": "D", "♣": "C", "♠": "S"}

HELP_TEXT = """Commands:
  d                 draw from the deck
  r                 recycle the discard pile into the deck
  m <card> <pile>   move a card (and anything on it), e.g. 'm QH t4' or 'm 2S f'
  a <card>          send a card to its foundation
  u                 undo
  n                 new deal
  h                 help
  q                 quit
Piles: t1..t7 (tableau), f / fS fC fH fD (foundation), w (discard)"""


class CommandKind(Enum):
    """Commands a player can type."""

    DRAW = "draw"
    RESET = "reset"
    MOVE = "move"
    AUTO = "auto"
    UNDO = "undo"
    NEW = "new"
    HELP = "help"


@dataclass(frozen=True)
class Command:
    """A parsed command."""

    kind: CommandKind
    card: Optional[Card] = None
    destination: Optional[PileId] = None


@dataclass
class InputResult:
    """Result of reading one line."""

    command: Optional[Command] = None
    quit: bool = False
    error: Optional[str] = None


_KEYWORDS = {
    "d": CommandKind.DRAW,
    "draw": CommandKind.DRAW,
    "r": CommandKind.RESET,
    "reset": CommandKind.RESET,
    "u": CommandKind.UNDO,
    "undo": CommandKind.UNDO,
    "n": CommandKind.NEW,
    "new": CommandKind.NEW,
    "h": CommandKind.HELP,
    "help": CommandKind.HELP,
    "?": CommandKind.HELP,
}


def parse_card(token: str) -> Card:
    """Parse '10H', 'qs', 'A♠' and the like.

    Raises:
        ValueError: If the token is not a card.
    """
    token = token.strip().upper()
    if len(token) < 2:
        raise ValueError(f"Not a card: {token!r}")
    rank_part, suit_part = token[:-1], token[-1]
    suit_part = _SYMBOL_SUITS.get(suit_part, suit_part)
    if rank_part == "1":
        rank_part = "A"
    try:
        return Card(suit=Suit(suit_part), rank=Rank(rank_part))
    except ValueError as e:
        raise ValueError(f"Not a card: {token!r}") from e


def parse_pile(token: str, card: Optional[Card] = None) -> PileId:
    """Parse a pile token. A bare 'f' means the card's own foundation.

    Raises:
        ValueError: If the token names no pile.
    """
    token = token.strip().lower()
    if token in ("w", "waste", "discard"):
        return DISCARD
    if token.startswith("t") and token[1:].isdigit():
        return PileId.tableau(int(token[1:]) - 1)
    if token == "f":
        if card is None:
            raise ValueError("Foundation needs a suit")
        return PileId.foundation(card.suit)
    if token.startswith("f") and len(token) == 2:
        suit_char = _SYMBOL_SUITS.get(token[1], token[1].upper())
        try:
            return PileId.foundation(Suit(suit_char))
        except ValueError as e:
            raise ValueError(f"Unknown pile '{token}'") from e
    raise ValueError(f"Unknown pile '{token}'")


class CommandReader:
    """Reads and parses player commands."""

    def __init__(self, input_fn: Callable[[str], str] = input) -> None:
        self.input_fn = input_fn

    def read(self, prompt: str = "> ") -> InputResult:
        """Read one command line."""
        try:
            raw = self.input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)
        return self.parse(raw)

    def parse(self, raw: str) -> InputResult:
        """Parse a command line into an InputResult."""
        parts = raw.strip().split()
        if not parts:
            return InputResult(error="Enter a command ('h' for help).")

        head = parts[0].lower()
        if head in ("q", "quit", "exit"):
            return InputResult(quit=True)

        if head in _KEYWORDS:
            return InputResult(command=Command(_KEYWORDS[head]))

        if head in ("m", "move"):
            if len(parts) != 3:
                return InputResult(error="Usage: m <card> <pile>")
            try:
                card = parse_card(parts[1])
                destination = parse_pile(parts[2], card)
            except ValueError as e:
                return InputResult(error=str(e))
            return InputResult(command=Command(CommandKind.MOVE, card, destination))

        if head in ("a", "auto"):
            if len(parts) != 2:
                return InputResult(error="Usage: a <card>")
            try:
                card = parse_card(parts[1])
            except ValueError as e:
                return InputResult(error=str(e))
            return InputResult(command=Command(CommandKind.AUTO, card))

        return InputResult(error=f"Unknown command '{head}'. Enter 'h' for help.")
