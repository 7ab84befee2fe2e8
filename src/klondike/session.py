"""Game session: owns the piles, the action log and the game state."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence

from klondike.errors import InvariantViolation
from klondike.rules.actions import Action, ActionLog, Draw, MoveCard, ResetDeck, UndoEffect
from klondike.rules.cards import Card, Suit, standard_deck
from klondike.rules.deal import deal
from klondike.rules.piles import (
    ALL_PILES,
    DECK,
    DISCARD,
    FOUNDATIONS,
    TABLEAUX,
    Pile,
    PileId,
    PileKind,
)
from klondike.rules.solver import (
    DEFAULT_SOLVE_INTERVAL,
    SolverMove,
    SolveTimer,
    next_solver_move,
)
from klondike.rules.validation import (
    MoveResult,
    Verdict,
    validate_draw,
    validate_move,
    validate_reset,
)
from klondike.rules.win import is_won, should_attempt_autosolve

logger = logging.getLogger(__name__)

_FULL_DECK = frozenset(standard_deck())


class GameState(Enum):
    """Process-wide game phase."""

    MENU = "menu"
    PLAYING = "playing"
    AUTO_SOLVING = "auto_solving"
    SHUFFLE = "shuffle"
    WON = "won"


class DrawMode(Enum):
    """How many cards a draw moves from the deck to the discard pile."""

    SINGLE = 1
    TRIPLE = 3

    @property
    def count(self) -> int:
        return self.value


@dataclass
class SessionConfig:
    """Configuration for a game session."""

    draw_mode: DrawMode = DrawMode.SINGLE
    solve_interval: float = DEFAULT_SOLVE_INTERVAL
    seed: Optional[int] = None
    debug: bool = False

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)


@dataclass(frozen=True)
class PileView:
    """Read-only view of one pile for rendering."""

    pile_id: PileId
    cards: tuple[Card, ...]
    face_up: tuple[bool, ...]

    @property
    def top(self) -> Optional[Card]:
        return self.cards[-1] if self.cards else None

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class BoardSnapshot:
    """Everything the presentation layer needs to draw the board."""

    state: GameState
    draw_mode: DrawMode
    piles: tuple[PileView, ...]
    deck_empty: bool
    won: bool
    undo_depth: int

    def pile(self, pile_id: PileId) -> PileView:
        for view in self.piles:
            if view.pile_id == pile_id:
                return view
        raise KeyError(pile_id)


class GameSession:
    """Single owner of all mutable game state.

    The presentation layer submits requests and reads snapshots; it never
    changes pile membership itself.
    """

    def __init__(self, config: Optional[SessionConfig] = None) -> None:
        self.config = config or SessionConfig()
        self.draw_mode = self.config.draw_mode
        self.rng = random.Random(self.config.seed)
        # Seed of the current deal; replaying it reproduces the deal
        self.seed: Optional[int] = None
        self.state = GameState.MENU
        self.log = ActionLog()
        self.piles: dict[PileId, Pile] = {pile_id: Pile(pile_id) for pile_id in ALL_PILES}
        self.timer = SolveTimer(self.config.solve_interval)
        self.dragging = False
        self.move_count = 0
        self._autosolve_exhausted = False

    # ------------------------------------------------------------------
    # Inbound requests
    # ------------------------------------------------------------------

    def new_deal(self, draw_mode: Optional[DrawMode] = None) -> None:
        """Shuffle and deal a fresh game, discarding the action log."""
        if draw_mode is not None:
            self.draw_mode = draw_mode
        self.state = GameState.SHUFFLE
        self.log.clear()

        if self.seed is None:
            self.seed = self.config.seed
        else:
            self.seed = self.rng.randint(0, 2**32 - 1)
        dealt = deal(random.Random(self.seed))
        self.piles = {pile_id: Pile(pile_id) for pile_id in ALL_PILES}
        for pile in dealt.tableaux:
            self.piles[pile.pile_id] = pile
        self.piles[DECK] = dealt.deck

        self.dragging = False
        self.move_count = 0
        self._autosolve_exhausted = False
        self.timer.reset()
        self._check_conservation()
        self.state = GameState.PLAYING
        logger.info(f"Dealt new game (draw {self.draw_mode.count}, seed {self.seed})")

    def load(
        self,
        layout: Mapping[PileId, Sequence[Card]],
        hidden: Optional[Mapping[PileId, int]] = None,
    ) -> None:
        """Start play from an arbitrary position.

        ``layout`` lists each pile's cards bottom to top; omitted piles are
        empty. ``hidden`` gives the face-down prefix length of tableau piles.

        Raises:
            ValueError: If ``hidden`` would leave a tableau top face-down or
                names a pile other than a tableau.
            InvariantViolation: If the layout does not hold exactly the 52 cards.
        """
        hidden = hidden or {}
        for pile_id, count in hidden.items():
            size = len(layout.get(pile_id, ()))
            if pile_id.kind != PileKind.TABLEAU:
                if count != 0:
                    raise ValueError(f"Only tableau piles hold face-down cards, got {pile_id}")
            elif count < 0 or (size and count >= size) or (not size and count):
                raise ValueError(f"Invalid face-down count {count} for {pile_id} of {size} cards")
        self.piles = {pile_id: Pile(pile_id) for pile_id in ALL_PILES}
        for pile_id, cards in layout.items():
            self.piles[pile_id] = Pile(pile_id, list(cards), hidden.get(pile_id, 0))
        self._check_conservation()

        self.log.clear()
        self.dragging = False
        self.move_count = 0
        self._autosolve_exhausted = False
        self.timer.reset()
        self.state = GameState.PLAYING
        self._after_change()

    def return_to_menu(self) -> None:
        self.state = GameState.MENU

    def begin_drag(self, card: Card) -> bool:
        """Mark a drag in progress if ``card`` is draggable."""
        if self.state != GameState.PLAYING:
            return False
        found = self.locate(card)
        if found is None:
            return False
        pile, position = found
        if not self._can_lift(pile, position):
            return False
        self.dragging = True
        return True

    def end_drag(self) -> None:
        """End a drag; a drop outside any pile changes nothing."""
        self.dragging = False

    def request_move(
        self,
        card: Card,
        source: PileId,
        destination: PileId,
        y_offset: float = 0.0,
    ) -> MoveResult:
        """Move ``card`` (and any cards on top of it) if the rules allow it."""
        self.dragging = False
        if self.state != GameState.PLAYING:
            return MoveResult.reject()

        src = self.piles[source]
        position = src.index_of(card)
        if position < 0 or not self._can_lift(src, position):
            return MoveResult.reject()

        has_children = position < len(src) - 1
        dest = self.piles[destination]
        verdict = validate_move(
            card, source, destination, destination.kind, dest.top, has_children
        )
        if verdict == Verdict.REJECT:
            return MoveResult.reject()

        parent_face_down = self._transfer(src, position, dest)
        action = MoveCard(
            card=card,
            source=source,
            destination=destination,
            y_offset=y_offset,
            parent_face_down=parent_face_down,
        )
        logger.debug(f"Move {card} {source} -> {destination}")
        return self._commit(action)

    def request_auto_move(self, card: Card) -> MoveResult:
        """Send an exposed card to its suit's foundation (double-click)."""
        found = self.locate(card)
        if found is None:
            return MoveResult.reject()
        pile, position = found
        if position != len(pile) - 1:
            return MoveResult.reject()
        return self.request_move(card, pile.pile_id, PileId.foundation(card.suit))

    def request_draw(self) -> MoveResult:
        """Move up to ``draw_mode.count`` cards from the deck to the discard."""
        if self.state != GameState.PLAYING:
            return MoveResult.reject()
        deck = self.piles[DECK]
        discard = self.piles[DISCARD]
        if validate_draw(len(deck)) == Verdict.REJECT:
            return MoveResult.reject()

        count = min(self.draw_mode.count, len(deck))
        for _ in range(count):
            discard.cards.append(deck.cards.pop())
        logger.debug(f"Drew {count} card(s); {len(deck)} left in deck")
        return self._commit(Draw(count))

    def request_reset_deck(self) -> MoveResult:
        """Recycle the discard pile into an empty deck."""
        if self.state != GameState.PLAYING:
            return MoveResult.reject()
        deck = self.piles[DECK]
        discard = self.piles[DISCARD]
        if validate_reset(len(deck), len(discard)) == Verdict.REJECT:
            return MoveResult.reject()

        deck.cards = list(reversed(discard.cards))
        discard.cards.clear()
        logger.debug(f"Recycled {len(deck)} card(s) into the deck")
        return self._commit(ResetDeck())

    def request_undo(self) -> Optional[UndoEffect]:
        """Invert the most recent logged action.

        Returns None when nothing was undone: empty log, a drag in progress,
        or the game not in normal play.
        """
        if self.dragging or self.state != GameState.PLAYING:
            return None
        action = self.log.pop()
        if action is None:
            return None

        logger.debug(f"Undo {action}")
        if isinstance(action, MoveCard):
            effect = self._undo_move(action)
        elif isinstance(action, ResetDeck):
            effect = self._undo_reset(action)
        else:
            effect = self._undo_draw(action)

        self._check_conservation()
        self._autosolve_exhausted = False
        self._after_change()
        return effect

    def tick(self, elapsed: float) -> Optional[SolverMove]:
        """Advance the auto-solve countdown by ``elapsed`` seconds.

        Applies and returns at most one solver move per firing.
        """
        if self.state != GameState.AUTO_SOLVING:
            return None
        if not self.timer.tick(elapsed):
            return None
        return self.solve_step()

    def solve_step(self) -> Optional[SolverMove]:
        """Run one auto-solver step immediately."""
        if self.state != GameState.AUTO_SOLVING:
            return None

        foundation_tops = {pile_id.suit: self.piles[pile_id].top for pile_id in FOUNDATIONS}
        tableau_tops = [(pile_id, self.piles[pile_id].top) for pile_id in TABLEAUX]
        move = next_solver_move(foundation_tops, tableau_tops)

        if move is None:
            logger.info("Auto-solve has nothing left to move")
            self._autosolve_exhausted = True
            self.state = GameState.PLAYING
            self._after_change()
            return None

        # Solver moves are not logged, so earlier entries could no longer be
        # inverted against the board.
        self.log.clear()
        src = self.piles[move.source]
        self._transfer(src, len(src) - 1, self.piles[move.destination])
        self.move_count += 1
        self._check_conservation()
        self._check_win()
        return move

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def pile(self, pile_id: PileId) -> Pile:
        return self.piles[pile_id]

    def locate(self, card: Card) -> Optional[tuple[Pile, int]]:
        """Pile holding ``card`` and its position, or None."""
        for pile in self.piles.values():
            position = pile.index_of(card)
            if position >= 0:
                return pile, position
        return None

    @property
    def deck_empty(self) -> bool:
        return not self.piles[DECK].cards

    @property
    def won(self) -> bool:
        return is_won(self.piles[pile_id].top for pile_id in FOUNDATIONS)

    def all_face_up(self) -> bool:
        if not self.deck_empty:
            return False
        return all(self.piles[pile_id].hidden == 0 for pile_id in TABLEAUX)

    def foundation_top(self, suit: Suit) -> Optional[Card]:
        return self.piles[PileId.foundation(suit)].top

    def snapshot(self) -> BoardSnapshot:
        views = tuple(
            PileView(
                pile_id=pile_id,
                cards=tuple(pile.cards),
                face_up=tuple(pile.is_face_up(i) for i in range(len(pile))),
            )
            for pile_id, pile in self.piles.items()
        )
        return BoardSnapshot(
            state=self.state,
            draw_mode=self.draw_mode,
            piles=views,
            deck_empty=self.deck_empty,
            won=self.won,
            undo_depth=len(self.log),
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _can_lift(self, pile: Pile, position: int) -> bool:
        kind = pile.pile_id.kind
        if kind == PileKind.DECK:
            return False
        if not pile.is_face_up(position):
            return False
        if kind in (PileKind.DISCARD, PileKind.FOUNDATION):
            return position == len(pile) - 1
        return True

    def _transfer(self, src: Pile, position: int, dest: Pile) -> bool:
        """Move cards from ``position`` up; returns True if a card was uncovered."""
        dest.cards.extend(src.take_from(position))
        if src.pile_id.kind == PileKind.TABLEAU:
            return src.flip_top_up()
        return False

    def _commit(self, action: Action) -> MoveResult:
        self.log.record(action)
        self.move_count += 1
        self._check_conservation()
        self._autosolve_exhausted = False
        self._after_change()
        return MoveResult.accept(action)

    def _check_win(self) -> bool:
        if not self.won:
            return False
        self.state = GameState.WON
        logger.info(f"Game won in {self.move_count} moves!")
        return True

    def _after_change(self) -> None:
        """Win check, then decide whether the rest can be automated.

        Entering auto-solve keeps the action log; the solver's first move
        discards it. A solver that is stuck from the start leaves undo intact.
        """
        if self._check_win():
            return
        if self._autosolve_exhausted:
            return
        if should_attempt_autosolve(
            deck_empty=self.deck_empty,
            all_cards_face_up=self.all_face_up(),
            discard_empty=not self.piles[DISCARD].cards,
        ):
            logger.info("Attempting to auto-solve")
            self.timer.reset()
            self.state = GameState.AUTO_SOLVING

    def _undo_move(self, action: MoveCard) -> UndoEffect:
        dest = self.piles[action.destination]
        position = dest.index_of(action.card)
        if position < 0:
            raise InvariantViolation(f"{action.card} is not on {action.destination}")
        moved = dest.take_from(position)

        src = self.piles[action.source]
        recovered = None
        if action.parent_face_down:
            if src.top is None or src.hidden != len(src) - 1:
                raise InvariantViolation(f"Nothing to re-cover on {action.source}")
            src.cover_top()
            recovered = src.top
        src.cards.extend(moved)

        clickable = action.card if action.source == DISCARD else None
        return UndoEffect(
            action=action,
            y_offset=action.y_offset,
            recovered=recovered,
            clickable=clickable,
        )

    def _undo_reset(self, action: ResetDeck) -> UndoEffect:
        deck = self.piles[DECK]
        discard = self.piles[DISCARD]
        if discard.cards:
            raise InvariantViolation("Discard pile must be empty to undo a deck reset")
        while deck.cards:
            discard.cards.append(deck.cards.pop())
        return UndoEffect(action=action, clickable=discard.top)

    def _undo_draw(self, action: Draw) -> UndoEffect:
        deck = self.piles[DECK]
        discard = self.piles[DISCARD]
        if len(discard) < action.count:
            raise InvariantViolation(
                f"Cannot undo draw of {action.count}: discard holds {len(discard)}"
            )
        for _ in range(action.count):
            deck.cards.append(discard.cards.pop())
        return UndoEffect(action=action, clickable=discard.top)

    def _check_conservation(self) -> None:
        seen: list[Card] = [card for pile in self.piles.values() for card in pile.cards]
        if len(seen) != len(_FULL_DECK) or set(seen) != _FULL_DECK:
            raise InvariantViolation(
                f"Card conservation broken: {len(seen)} cards, {len(set(seen))} unique"
            )
