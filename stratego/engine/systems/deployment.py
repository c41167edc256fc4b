from __future__ import annotations

import random
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ...models.board import Board

from ...models.board import SIZE, Coord, PieceTile
from ...models.enums import Colour, PieceKind
from ..errors import SetupError, SetupInvariantError

HOME_ROWS = 4

ARMY: dict[PieceKind, int] = {
    PieceKind.BOMB: 6,
    PieceKind.MARSHALL: 1,
    PieceKind.GENERAL: 1,
    PieceKind.COLONEL: 2,
    PieceKind.MAJOR: 3,
    PieceKind.CAPTAIN: 4,
    PieceKind.LIEUTENANT: 4,
    PieceKind.SERGEANT: 4,
    PieceKind.MINER: 5,
    PieceKind.SCOUT: 8,
    PieceKind.SPY: 1,
    PieceKind.FLAG: 1,
}


def _layout(*rows: str) -> list[list[PieceKind]]:
    return [[PieceKind.parse(g) for g in row] for row in rows]  # type: ignore[misc]


# Row 0 is the back line.
DEFAULT_LAYOUT = _layout(
    "8596989785",
    "98547SF949",
    "93B7B2BB86",
    "69B1654B37",
)


def army_counts() -> Counter:
    return Counter(ARMY)


def army() -> list[PieceKind]:
    return [kind for kind, n in ARMY.items() for _ in range(n)]


def row_offset(player: Colour) -> int:
    return 0 if player is Colour.BLUE else SIZE - HOME_ROWS


def home_cells(player: Colour) -> list[Coord]:
    """Home region in fill order: column-major, rows ascending within a column."""
    off = row_offset(player)
    return [Coord(x=x, y=y + off) for x in range(SIZE) for y in range(HOME_ROWS)]


def randomise(
    board: Board,
    player: Colour,
    rng: random.Random | None = None,
    units: list[PieceKind] | None = None,
) -> None:
    """Shuffle the army and fill ``player``'s home region with it."""
    rng = rng or random.Random()
    to_place = list(army() if units is None else units)
    cells = home_cells(player)
    if len(to_place) != len(cells):
        raise SetupInvariantError(
            f"placement list has {len(to_place)} units for {len(cells)} home cells"
        )
    rng.shuffle(to_place)
    for c in cells:
        board.set_tile(c, PieceTile(piece=to_place.pop(), owner=player))


def place(board: Board, player: Colour, layout: list[list[PieceKind]]) -> None:
    """Place a hand-made 4x10 layout; row 0 goes on the player's back line."""
    if not (
        isinstance(layout, list)
        and len(layout) == HOME_ROWS
        and all(isinstance(r, list) and len(r) == SIZE for r in layout)
    ):
        raise SetupError(f"layout must be {HOME_ROWS} rows of {SIZE} pieces")
    if any(not isinstance(k, PieceKind) for row in layout for k in row):
        raise SetupError("layout may only contain piece kinds")
    counts = Counter(k for row in layout for k in row)
    if counts != army_counts():
        raise SetupError(
            "invalid piece counts: "
            f"found {_fmt(counts)}, expected {_fmt(army_counts())}"
        )
    for i, row in enumerate(layout):
        y = i if player is Colour.BLUE else SIZE - 1 - i
        for x, kind in enumerate(row):
            board.set_tile(Coord(x=x, y=y), PieceTile(piece=kind, owner=player))


def _fmt(counts: Counter) -> str:
    return ", ".join(f"{k.value}={n}" for k, n in sorted(counts.items(), key=lambda kv: -kv[0].rank))
