from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Board, Move

from ...models.board import EMPTY
from ...models.enums import BattleResult, PieceKind

# (attacker, defender) pairs that ignore rank. Order of the checks matters.
_EXCEPTIONS = [
    (PieceKind.MINER, PieceKind.BOMB, BattleResult.VICTORY),
    (PieceKind.SPY, PieceKind.MARSHALL, BattleResult.VICTORY),
    (PieceKind.MARSHALL, PieceKind.SPY, BattleResult.LOSS),
]


def resolve(attacker: PieceKind, defender: PieceKind) -> BattleResult:
    for a, d, result in _EXCEPTIONS:
        if attacker is a and defender is d:
            return result
    if attacker.rank < defender.rank:
        return BattleResult.LOSS
    if attacker.rank == defender.rank:
        return BattleResult.DRAW
    return BattleResult.VICTORY


def apply_outcome(board: Board, move: Move, result: BattleResult) -> None:
    """Winner takes the defender's cell; a loss removes the attacker, a draw both."""
    if result is BattleResult.VICTORY:
        board.apply_move(move)
    elif result is BattleResult.LOSS:
        board.set_tile(move.src, EMPTY)
    elif result is BattleResult.DRAW:
        board.set_tile(move.src, EMPTY)
        board.set_tile(move.dst, EMPTY)
    else:
        raise ValueError(f"unknown battle result {result!r}")


def explain_battle(attacker: PieceKind, defender: PieceKind) -> dict:
    result = resolve(attacker, defender)
    rule = next(
        (f"{a.value} vs {d.value}" for a, d, _ in _EXCEPTIONS if attacker is a and defender is d),
        None,
    )
    return {
        "attacker": attacker.value,
        "defender": defender.value,
        "attacker_rank": attacker.rank,
        "defender_rank": defender.rank,
        "rule": rule or "rank",
        "result": result.value,
    }
