from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.board import Board, Coord, Move
    from ..models.game import Game
    from .actions.base import Registry

from ..models.api import (
    Action,
    AttackAction,
    EvaluateResponse,
    LegalAction,
    MoveAction,
)
from ..models.board import PieceTile
from .actions.attack import AttackHandler
from .actions.move import MoveHandler
from .logging.logger import log_error, log_illegal
from .systems import movement

default_handlers: Registry = {
    MoveHandler.action_type: MoveHandler(),
    AttackHandler.action_type: AttackHandler(),
}


def action_for(board: Board, move: Move) -> Action:
    """Moving onto a piece is an attack; anything else is a plain move."""
    if isinstance(board.tile_at(move.dst), PieceTile):
        return AttackAction(src=move.src, dst=move.dst)
    return MoveAction(src=move.src, dst=move.dst)


class StrategoEngine:
    def __init__(self, handlers: Registry | None = None):
        self.handlers: Registry = handlers or default_handlers

    def evaluate(self, game: Game, action: Action) -> EvaluateResponse:
        h = self.handlers.get(type(action))
        if not h:
            return EvaluateResponse(legal=False, explanation="unknown action")
        ok, why = h.evaluate(game, action)
        return EvaluateResponse(legal=ok, explanation=why)

    def process_action(self, game: Game, action: Action):
        ev = self.evaluate(game, action)
        if not ev.legal:
            log_illegal(game, action, ev.explanation)
            return ev, None
        try:
            new_game = self.handlers[type(action)].apply(game, action)
        except Exception as e:
            log_error(game, action, e)
            raise
        self.end_turn(new_game)
        return ev, new_game

    def end_turn(self, game: Game) -> None:
        game.clear_selection()
        game.player = game.player.other()
        game.turn += 1

    def list_legal_actions(self, game: Game, origin: Coord) -> list[LegalAction]:
        tile = game.board.tile_at(origin)
        if not isinstance(tile, PieceTile) or tile.owner != game.player:
            return []
        out: list[LegalAction] = []
        for mv in movement.legal_moves(game.board, origin):
            act = action_for(game.board, mv)
            h = self.handlers.get(type(act))
            if not h:
                continue
            ok, why = h.evaluate(game, act)
            if ok:
                out.append(LegalAction(action=act, explanation=why))
        return out
