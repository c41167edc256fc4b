from __future__ import annotations

from pydantic import BaseModel, Field

from .board import Board, Coord
from .enums import Colour


class Game(BaseModel):
    board: Board = Field(default_factory=Board)
    player: Colour = Colour.RED
    turn: int = 1
    cursor: Coord = Field(default_factory=lambda: Coord(x=0, y=9))
    selected: Coord | None = None
    highlighted: list[Coord] = Field(default_factory=list)

    def clear_selection(self) -> None:
        self.selected = None
        self.highlighted = []
