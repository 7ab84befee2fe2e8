"""Terminal display for the board and for moves."""

from __future__ import annotations

from typing import Union

from klondike.rules.actions import Action, Draw, MoveCard, ResetDeck
from klondike.rules.cards import Card
from klondike.rules.piles import DECK, DISCARD, FOUNDATIONS, TABLEAUX
from klondike.rules.solver import SolverMove
from klondike.session import BoardSnapshot, GameState


# Unicode card symbols
SUIT_SYMBOLS = {"H": "♥", "D": "♦", "C": "♣", "S": "♠"}
HIDDEN = "##"


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


class BoardRenderer:
    """Renders a board snapshot to text."""

    def render(self, snapshot: BoardSnapshot, debug: bool = False) -> str:
        lines: list[str] = []

        lines.append(f"=== Klondike (draw {snapshot.draw_mode.count}) ===")
        lines.append("")

        deck = snapshot.pile(DECK)
        discard = snapshot.pile(DISCARD)
        deck_str = f"{deck.count} cards" if deck.count else "(empty)"
        if discard.top is not None:
            discard_str = f"{format_card(discard.top)} ({discard.count})"
        else:
            discard_str = "(empty)"
        lines.append(f"Deck: {deck_str}   Discard: {discard_str}")

        founds: list[str] = []
        for pile_id in FOUNDATIONS:
            top = snapshot.pile(pile_id).top
            symbol = SUIT_SYMBOLS[pile_id.suit.value]
            founds.append(f"{symbol}: {format_card(top) if top else '--'}")
        lines.append("Foundations: " + "  ".join(founds))
        lines.append("")

        for pile_id in TABLEAUX:
            view = snapshot.pile(pile_id)
            cells: list[str] = []
            for card, face_up in zip(view.cards, view.face_up):
                if face_up:
                    cells.append(format_card(card))
                elif debug:
                    cells.append(f"({format_card(card)})")
                else:
                    cells.append(HIDDEN)
            lines.append(f"{pile_id}: " + (" ".join(cells) if cells else "--"))

        if snapshot.state == GameState.AUTO_SOLVING:
            lines.append("")
            lines.append("Auto-solving...")

        if debug:
            lines.append("")
            lines.append("--- Debug Info ---")
            deck_cards = ", ".join(format_card(c) for c in reversed(deck.cards))
            lines.append(f"Deck (next first): [{deck_cards}]")
            lines.append(f"Undo depth: {snapshot.undo_depth}")

        return "\n".join(lines)


def describe_action(action: Union[Action, SolverMove]) -> str:
    """One-line description of an applied action."""
    if isinstance(action, (MoveCard, SolverMove)):
        return f"{format_card(action.card)}: {action.source} -> {action.destination}"
    if isinstance(action, Draw):
        return f"Drew {action.count} card{'s' if action.count != 1 else ''}"
    if isinstance(action, ResetDeck):
        return "Recycled discard pile into deck"
    return "Unknown action"
