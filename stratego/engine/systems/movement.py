from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Board, Coord

from ...models.board import EmptyTile, Move, PieceTile, TerrainTile

# East, west, south, north. Callers rely on this enumeration order.
DIRECTIONS = [(1, 0), (-1, 0), (0, 1), (0, -1)]


def legal_moves(board: Board, origin: Coord) -> list[Move]:
    """All destinations reachable from ``origin`` in one move.

    Empty/terrain origins and immobile pieces (bomb, flag) give nothing.
    Scouts slide any distance over empty tiles and may finish on an enemy;
    everything else steps onto an adjacent empty or enemy tile.
    """
    tile = board.tile_at(origin)
    if not isinstance(tile, PieceTile) or tile.piece.immobile:
        return []
    out: list[Move] = []
    for dx, dy in DIRECTIONS:
        if tile.piece.slides:
            out.extend(_slide(board, origin, tile, dx, dy))
        else:
            out.extend(_step(board, origin, tile, dx, dy))
    return out


def _step(board: Board, origin: Coord, mover: PieceTile, dx: int, dy: int) -> list[Move]:
    nxt = origin.offset(dx, dy)
    if nxt is None:
        return []
    tgt = board.tile_at(nxt)
    if isinstance(tgt, EmptyTile):
        return [Move(src=origin, dst=nxt)]
    if isinstance(tgt, PieceTile):
        return [Move(src=origin, dst=nxt)] if tgt.owner != mover.owner else []
    if isinstance(tgt, TerrainTile):
        return []
    raise TypeError(f"unknown tile {tgt!r}")


def _slide(board: Board, origin: Coord, mover: PieceTile, dx: int, dy: int) -> list[Move]:
    out: list[Move] = []
    mult = 1
    while (nxt := origin.offset(dx * mult, dy * mult)) is not None:
        tgt = board.tile_at(nxt)
        if isinstance(tgt, EmptyTile):
            out.append(Move(src=origin, dst=nxt))
        elif isinstance(tgt, PieceTile):
            if tgt.owner != mover.owner:
                out.append(Move(src=origin, dst=nxt))
            break
        elif isinstance(tgt, TerrainTile):
            break
        else:
            raise TypeError(f"unknown tile {tgt!r}")
        mult += 1
    return out


def can_reach(board: Board, move: Move) -> bool:
    return move in legal_moves(board, move.src)
