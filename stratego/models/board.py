from __future__ import annotations

from typing import Annotated, Iterator, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Colour, PieceKind, TileKind

SIZE = 10
FILES = "abcdefghij"

# (x, y) cells of the two 2x2 lakes in rows 4-5.
NO_MANS_LAND = frozenset(
    (x, y) for y in (4, 5) for x in (2, 3, 6, 7)
)


class Coord(BaseModel):
    """Board coordinate, 0-based; textual form is file letter then row digit ("e0")."""

    model_config = ConfigDict(frozen=True)

    x: int = Field(ge=0, le=SIZE - 1)
    y: int = Field(ge=0, le=SIZE - 1)

    @classmethod
    def parse(cls, text: str) -> Coord | None:
        if len(text) != 2:
            return None
        f, r = text[0], text[1]
        if f not in FILES or r not in "0123456789":
            return None
        return cls(x=FILES.index(f), y=int(r))

    def offset(self, dx: int, dy: int) -> Coord | None:
        x, y = self.x + dx, self.y + dy
        if not (0 <= x < SIZE and 0 <= y < SIZE):
            return None
        return Coord(x=x, y=y)

    def __str__(self) -> str:
        return f"{FILES[self.x]}{self.y}"


class TerrainTile(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal[TileKind.TERRAIN] = TileKind.TERRAIN


class EmptyTile(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal[TileKind.EMPTY] = TileKind.EMPTY


class PieceTile(BaseModel):
    model_config = ConfigDict(frozen=True)
    kind: Literal[TileKind.PIECE] = TileKind.PIECE
    piece: PieceKind
    owner: Colour


Tile = Annotated[Union[TerrainTile, EmptyTile, PieceTile], Field(discriminator="kind")]

TERRAIN = TerrainTile()
EMPTY = EmptyTile()


class Move(BaseModel):
    model_config = ConfigDict(frozen=True)

    src: Coord
    dst: Coord

    def __str__(self) -> str:
        return f"{self.src}-{self.dst}"


def initial_tiles() -> list[list[Tile]]:
    return [
        [TERRAIN if (x, y) in NO_MANS_LAND else EMPTY for x in range(SIZE)]
        for y in range(SIZE)
    ]


class Board(BaseModel):
    tiles: list[list[Tile]] = Field(default_factory=initial_tiles)  # tiles[y][x]
    moves: list[Move] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_dimensions(self) -> Board:
        if len(self.tiles) != SIZE or any(len(row) != SIZE for row in self.tiles):
            raise ValueError(f"board must be {SIZE}x{SIZE}")
        return self

    def tile_at(self, c: Coord) -> Tile:
        return self.tiles[c.y][c.x]

    def set_tile(self, c: Coord, t: Tile) -> None:
        self.tiles[c.y][c.x] = t

    def apply_move(self, m: Move) -> None:
        """Relocate whatever is on ``m.src`` to ``m.dst``; no legality checks."""
        self.set_tile(m.dst, self.tile_at(m.src))
        self.set_tile(m.src, EMPTY)
        self.moves.append(m)

    def cells(self) -> Iterator[tuple[Coord, Tile]]:
        for y, row in enumerate(self.tiles):
            for x, t in enumerate(row):
                yield Coord(x=x, y=y), t
