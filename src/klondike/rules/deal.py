"""Shuffling and the triangular opening deal."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

from klondike.rules.cards import Card, standard_deck
from klondike.rules.piles import DECK, TABLEAU_COUNT, TABLEAUX, Pile


@dataclass(frozen=True)
class Deal:
    """Result of dealing: seven tableau columns and the remaining stock."""

    tableaux: tuple[Pile, ...]
    deck: Pile


def shuffled_deck(rng: Optional[random.Random] = None) -> list[Card]:
    """Uniformly shuffled 52-card deck (Fisher-Yates via ``random.shuffle``)."""
    rng = rng or random.Random()
    cards = standard_deck()
    rng.shuffle(cards)
    return cards


def deal(rng: Optional[random.Random] = None) -> Deal:
    """Deal a new game.

    Column i receives i + 1 cards with only its top card face-up. Cards are
    taken from the end of the shuffled list row by row; the 24 cards left over
    become the deck with its last element as the next card drawn.
    """
    cards = shuffled_deck(rng)
    columns: list[list[Card]] = [[] for _ in range(TABLEAU_COUNT)]

    for row in range(TABLEAU_COUNT):
        for col in range(row, TABLEAU_COUNT):
            columns[col].append(cards.pop())

    tableaux = tuple(
        Pile(pile_id=pile_id, cards=column, hidden=len(column) - 1)
        for pile_id, column in zip(TABLEAUX, columns)
    )
    return Deal(tableaux=tableaux, deck=Pile(pile_id=DECK, cards=cards))
