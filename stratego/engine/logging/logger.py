from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.game import Game

from ...events import ActionEvent, event_bus
from ...models.api import Action
from ...models.enums import ActionLogResult


def log_event(
    game: Game,
    action: Action,
    result: ActionLogResult,
    message: str | None = None,
    battle: dict | None = None,
) -> None:
    event_bus.emit(
        ActionEvent(
            turn=game.turn,
            player=game.player,
            action=action,
            result=result,
            message=message,
            battle=battle,
        )
    )


def log_illegal(game: Game, action: Action, explanation: str) -> None:
    log_event(game, action, ActionLogResult.ILLEGAL, explanation)


def log_error(game: Game, action: Action, error: Exception) -> None:
    log_event(game, action, ActionLogResult.ERROR, str(error))
