from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Board, Tile
    from ...models.enums import Colour

from ...models.board import SIZE, EmptyTile, PieceTile, TerrainTile

TERRAIN_GLYPH = "~"
EMPTY_GLYPH = " "
HIDDEN_GLYPH = "▇"
CELL_WIDTH = 3

FRAME_TOP = "┌" + "─" * (SIZE * CELL_WIDTH) + "┐"
FRAME_BOTTOM = "└" + "─" * (SIZE * CELL_WIDTH) + "┘"
FRAME_SIDE = "│"


def render(tile: Tile, viewer: Colour) -> str:
    """One glyph for ``tile`` as ``viewer`` may see it; enemy pieces stay hidden."""
    if isinstance(tile, TerrainTile):
        return TERRAIN_GLYPH
    if isinstance(tile, EmptyTile):
        return EMPTY_GLYPH
    if isinstance(tile, PieceTile):
        return tile.piece.glyph if tile.owner == viewer else HIDDEN_GLYPH
    raise TypeError(f"unknown tile {tile!r}")


def board_rows(board: Board, viewer: Colour) -> list[list[str]]:
    return [[render(t, viewer) for t in row] for row in board.tiles]


def display_to(board: Board, viewer: Colour) -> str:
    lines = [FRAME_TOP]
    for row in board_rows(board, viewer):
        lines.append(FRAME_SIDE + "".join(f" {g} " for g in row) + FRAME_SIDE)
    lines.append(FRAME_BOTTOM)
    return "\n".join(lines)
