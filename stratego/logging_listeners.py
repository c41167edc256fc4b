from __future__ import annotations

import logging

from .events import ActionEvent, event_bus
from .models.api import ActionLogEntry
from .models.enums import ActionLogResult

logger = logging.getLogger("stratego.actions")


def _on_action_event(ev: ActionEvent) -> None:
    entry = ActionLogEntry(
        turn=ev.turn,
        player=ev.player,
        action=ev.action,
        result=ev.result,
        message=ev.message,
        battle=ev.battle,
    )
    move = f"{entry.action.src}-{entry.action.dst}"
    if entry.result is ActionLogResult.APPLIED:
        outcome = entry.battle["result"] if entry.battle else "moved"
        logger.info("turn %d %s %s %s: %s", entry.turn, entry.player.value, entry.action.kind.value, move, outcome)
    elif entry.result is ActionLogResult.ILLEGAL:
        logger.info("turn %d %s rejected %s: %s", entry.turn, entry.player.value, move, entry.message)
    else:
        logger.error("turn %d %s failed %s: %s", entry.turn, entry.player.value, move, entry.message)
    # piece identities at DEBUG only
    logger.debug("%s", entry.model_dump_json())


_registered = False


def register_listeners() -> None:
    global _registered
    if _registered:
        return
    event_bus.subscribe(ActionEvent, _on_action_event)
    _registered = True
