"""Interactive play loop driving a GameSession from text commands."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from klondike.playtest.display import BoardRenderer, describe_action
from klondike.playtest.input import HELP_TEXT, Command, CommandKind, CommandReader
from klondike.rules.validation import MoveResult
from klondike.session import GameSession, GameState

logger = logging.getLogger(__name__)


@dataclass
class PlayResult:
    """Outcome of an interactive session."""

    seed: Optional[int]
    won: bool
    moves: int
    quit_early: bool


class PlaySession:
    """Runs a game in the terminal."""

    def __init__(
        self,
        session: GameSession,
        reader: Optional[CommandReader] = None,
        sleep_fn: Callable[[float], None] = time.sleep,
    ):
        self.session = session
        self.reader = reader or CommandReader()
        self.renderer = BoardRenderer()
        self.sleep_fn = sleep_fn

    def run(self, output_fn: Callable[[str], None] = print) -> PlayResult:
        """Play until the game is won or the player quits.

        Args:
            output_fn: Function to output text (default: print)

        Returns:
            PlayResult with the game outcome
        """
        if self.session.state == GameState.MENU:
            self.session.new_deal()

        debug = self.session.config.debug
        if self.session.seed is not None:
            output_fn(f"Seed: {self.session.seed} (use --seed {self.session.seed} to replay)")

        while True:
            if self.session.state == GameState.AUTO_SOLVING:
                self._run_solver(output_fn)
                continue

            if self.session.state == GameState.WON:
                output_fn("")
                output_fn(self.renderer.render(self.session.snapshot(), debug))
                output_fn("\n=== You Win! ===")
                return self._result(quit_early=False)

            output_fn("")
            output_fn(self.renderer.render(self.session.snapshot(), debug))

            result = self.reader.read()
            if result.quit:
                return self._result(quit_early=True)
            if result.error:
                output_fn(result.error)
                continue
            if result.command:
                self._dispatch(result.command, output_fn)

    def _run_solver(self, output_fn: Callable[[str], None]) -> None:
        interval = self.session.timer.interval
        self.sleep_fn(interval)
        move = self.session.tick(interval)
        if move is not None:
            output_fn(f"Auto: {describe_action(move)}")

    def _dispatch(self, command: Command, output_fn: Callable[[str], None]) -> None:
        session = self.session
        logger.debug(f"Command: {command}")

        if command.kind == CommandKind.HELP:
            output_fn(HELP_TEXT)
            return

        if command.kind == CommandKind.NEW:
            session.new_deal()
            output_fn(f"New deal (seed {session.seed})")
            return

        if command.kind == CommandKind.UNDO:
            effect = session.request_undo()
            if effect is None:
                output_fn("Nothing to undo.")
            else:
                output_fn(f"Undid: {describe_action(effect.action)}")
            return

        if command.kind == CommandKind.DRAW:
            result = session.request_draw()
            if not result.accepted and session.deck_empty:
                result = session.request_reset_deck()
        elif command.kind == CommandKind.RESET:
            result = session.request_reset_deck()
        elif command.kind == CommandKind.AUTO:
            result = session.request_auto_move(command.card)
        else:
            result = self._move(command)

        self._report(result, output_fn)

    def _move(self, command: Command) -> MoveResult:
        found = self.session.locate(command.card)
        if found is None:
            return MoveResult.reject()
        pile, _ = found
        return self.session.request_move(command.card, pile.pile_id, command.destination)

    def _report(self, result: MoveResult, output_fn: Callable[[str], None]) -> None:
        if result.accepted:
            output_fn(describe_action(result.action))
        else:
            output_fn("Illegal move.")

    def _result(self, quit_early: bool) -> PlayResult:
        return PlayResult(
            seed=self.session.seed,
            won=self.session.won,
            moves=self.session.move_count,
            quit_early=quit_early,
        )
