from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ...models.api import Action
    from ...models.game import Game

from ...models.board import PieceTile
from ..systems import movement


class ActionHandler(Protocol):
    action_type: type

    def evaluate(self, game: Game, action: Action) -> tuple[bool, str]: ...

    def apply(self, game: Game, action: Action) -> Game: ...


Registry = dict[type, ActionHandler]


def check_mover(game: Game, action: Action) -> str | None:
    """Shared checks: the player to move owns ``src`` and ``dst`` is reachable from it."""
    tile = game.board.tile_at(action.src)
    if not isinstance(tile, PieceTile):
        return "no piece at source"
    if tile.owner != game.player:
        return "not your piece"
    if not movement.can_reach(game.board, action.move):
        return "cannot reach"
    return None
