from __future__ import annotations

from ...models.api import AttackAction
from ...models.board import PieceTile
from ...models.enums import ActionLogResult
from ...models.game import Game
from ..logging.logger import log_event
from ..systems import combat
from .base import ActionHandler, check_mover


class AttackHandler(ActionHandler):
    action_type = AttackAction

    def evaluate(self, game: Game, action: AttackAction):
        t = game.board.tile_at(action.dst)
        if not isinstance(t, PieceTile):
            return False, "no piece to attack"
        if t.owner == game.player:
            return False, "cannot attack own piece"
        why = check_mover(game, action)
        return (False, why) if why else (True, "ok")

    def apply(self, game: Game, action: AttackAction):
        board = game.board
        a = board.tile_at(action.src)
        t = board.tile_at(action.dst)
        battle = combat.explain_battle(a.piece, t.piece)
        combat.apply_outcome(board, action.move, combat.resolve(a.piece, t.piece))
        log_event(game, action, ActionLogResult.APPLIED, battle=battle)
        return game
