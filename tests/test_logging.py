import logging

from stratego.engine.core import StrategoEngine
from stratego.logging_listeners import register_listeners
from stratego.models.api import ActionLogEntry, AttackAction, MoveAction
from stratego.models.enums import ActionLogResult, Colour, PieceKind
from tests.helpers import at, put


def test_actions_are_written_to_the_log(game, caplog):
    register_listeners()
    register_listeners()
    put(game.board, "e6", PieceKind.CAPTAIN, Colour.RED)
    put(game.board, "e4", PieceKind.MAJOR, Colour.BLUE)
    engine = StrategoEngine()
    with caplog.at_level(logging.INFO, logger="stratego.actions"):
        engine.process_action(game, MoveAction(src=at("e6"), dst=at("e5")))
        engine.process_action(game, MoveAction(src=at("e4"), dst=at("e2")))
        engine.process_action(game, AttackAction(src=at("e4"), dst=at("e5")))
    messages = [r.getMessage() for r in caplog.records if r.name == "stratego.actions"]
    assert messages == [
        "turn 1 red move e6-e5: moved",
        "turn 2 blue rejected e4-e2: cannot reach",
        "turn 2 blue attack e4-e5: victory",
    ]
    assert "captain" not in " ".join(messages)


def test_battle_details_only_at_debug(game, caplog):
    register_listeners()
    put(game.board, "e6", PieceKind.SPY, Colour.RED)
    put(game.board, "e5", PieceKind.MARSHALL, Colour.BLUE)
    with caplog.at_level(logging.DEBUG, logger="stratego.actions"):
        StrategoEngine().process_action(game, AttackAction(src=at("e6"), dst=at("e5")))
    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
    assert any("marshall" in m for m in debug)


def test_debug_record_is_the_full_log_entry(game, caplog):
    register_listeners()
    put(game.board, "e6", PieceKind.MINER, Colour.RED)
    put(game.board, "e5", PieceKind.BOMB, Colour.BLUE)
    with caplog.at_level(logging.DEBUG, logger="stratego.actions"):
        StrategoEngine().process_action(game, AttackAction(src=at("e6"), dst=at("e5")))
    debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG and r.name == "stratego.actions"]
    entry = ActionLogEntry.model_validate_json(debug[-1])
    assert entry.turn == 1 and entry.player is Colour.RED
    assert entry.result is ActionLogResult.APPLIED
    assert isinstance(entry.action, AttackAction)
    assert str(entry.action.dst) == "e5"
    assert entry.battle["rule"] == "miner vs bomb"
