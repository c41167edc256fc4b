from __future__ import annotations

import time
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from ..models.board import Coord
    from ..models.enums import Colour
    from ..models.game import Game

from .. import settings
from ..models.api import AttackAction
from ..models.board import Move, PieceTile
from ..models.enums import Command
from .core import StrategoEngine, action_for
from .errors import EarlyExit

Redraw = Callable[["Colour"], None]

_CURSOR_STEPS = {
    Command.UP: (0, -1),
    Command.DOWN: (0, 1),
    Command.LEFT: (-1, 0),
    Command.RIGHT: (1, 0),
}


class GameController:
    """Turns a stream of cursor commands into engine actions.

    ``redraw(viewer)`` is called after every command and twice during a
    reveal; ``sleep(seconds)`` is the pause between the two reveal frames.
    """

    def __init__(
        self,
        game: Game,
        engine: StrategoEngine | None = None,
        redraw: Redraw | None = None,
        sleep: Callable[[float], None] = time.sleep,
        reveal_delay: float | None = None,
    ):
        self.game = game
        self.engine = engine or StrategoEngine()
        self.redraw: Redraw = redraw or (lambda viewer: None)
        self.sleep = sleep
        self.reveal_delay = settings.REVEAL_DELAY_MS / 1000 if reveal_delay is None else reveal_delay

    def handle(self, cmd: Command) -> None:
        g = self.game
        if cmd is Command.QUIT:
            raise EarlyExit()
        if cmd in _CURSOR_STEPS:
            g.cursor = g.cursor.offset(*_CURSOR_STEPS[cmd]) or g.cursor
        elif cmd is Command.SELECT:
            if g.selected is None:
                self._select()
            else:
                self._confirm()
        self.redraw(g.player)

    def _select(self) -> None:
        g = self.game
        dests = [la.action.dst for la in self.engine.list_legal_actions(g, g.cursor)]
        if dests:
            g.selected = g.cursor
            g.highlighted = dests

    def _confirm(self) -> None:
        g = self.game
        if g.cursor not in g.highlighted:
            g.clear_selection()
            return
        action = action_for(g.board, Move(src=g.selected, dst=g.cursor))
        if isinstance(action, AttackAction):
            self.reveal(action.dst, g.player)
        self.engine.process_action(g, action)

    def reveal(self, c: Coord, viewer: Colour) -> None:
        """Show the true identity of the piece at ``c`` to ``viewer`` for a moment."""
        tile = self.game.board.tile_at(c)
        if not isinstance(tile, PieceTile):
            return
        board = self.game.board
        board.set_tile(c, PieceTile(piece=tile.piece, owner=tile.owner.other()))
        try:
            self.redraw(viewer)
            self.sleep(self.reveal_delay)
        finally:
            board.set_tile(c, tile)
        self.redraw(viewer)
