from __future__ import annotations

from ...models.api import MoveAction
from ...models.board import EmptyTile
from ...models.enums import ActionLogResult
from ...models.game import Game
from ..logging.logger import log_event
from .base import ActionHandler, check_mover


class MoveHandler(ActionHandler):
    action_type = MoveAction

    def evaluate(self, game: Game, action: MoveAction):
        if not isinstance(game.board.tile_at(action.dst), EmptyTile):
            return False, "destination not empty"
        why = check_mover(game, action)
        return (False, why) if why else (True, "ok")

    def apply(self, game: Game, action: MoveAction):
        game.board.apply_move(action.move)
        log_event(game, action, ActionLogResult.APPLIED)
        return game
