from __future__ import annotations

from stratego.models.board import Board, Coord, PieceTile
from stratego.models.enums import Colour, PieceKind


def at(text: str) -> Coord:
    c = Coord.parse(text)
    assert c is not None, text
    return c


def put(board: Board, text: str, kind: PieceKind, owner: Colour = Colour.RED) -> Coord:
    c = at(text)
    board.set_tile(c, PieceTile(piece=kind, owner=owner))
    return c


def dests(moves) -> list[str]:
    return [str(m.dst) for m in moves]
