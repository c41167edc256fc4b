from __future__ import annotations

import sys
from enum import Enum


class Colour(str, Enum):
    RED = "red"
    BLUE = "blue"

    def other(self) -> Colour:
        return Colour.BLUE if self is Colour.RED else Colour.RED


class PieceKind(str, Enum):
    BOMB = "bomb"
    MARSHALL = "marshall"
    GENERAL = "general"
    COLONEL = "colonel"
    MAJOR = "major"
    CAPTAIN = "captain"
    LIEUTENANT = "lieutenant"
    SERGEANT = "sergeant"
    MINER = "miner"
    SCOUT = "scout"
    SPY = "spy"
    FLAG = "flag"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]

    @property
    def immobile(self) -> bool:
        return self in (PieceKind.BOMB, PieceKind.FLAG)

    @property
    def slides(self) -> bool:
        return self is PieceKind.SCOUT

    @classmethod
    def parse(cls, text: str) -> PieceKind | None:
        """Accept the full name ("miner") or the board glyph ("8", "B", "s")."""
        if text in _BY_GLYPH:
            return _BY_GLYPH[text]
        try:
            return cls(text)
        except ValueError:
            return None


# Bomb outranks everything; only the miner exception in combat gets past it.
_RANKS = {
    PieceKind.BOMB: sys.maxsize,
    PieceKind.MARSHALL: 10,
    PieceKind.GENERAL: 9,
    PieceKind.COLONEL: 8,
    PieceKind.MAJOR: 7,
    PieceKind.CAPTAIN: 6,
    PieceKind.LIEUTENANT: 5,
    PieceKind.SERGEANT: 4,
    PieceKind.MINER: 3,
    PieceKind.SCOUT: 2,
    PieceKind.SPY: 1,
    PieceKind.FLAG: 0,
}

_GLYPHS = {
    PieceKind.BOMB: "B",
    PieceKind.MARSHALL: "1",
    PieceKind.GENERAL: "2",
    PieceKind.COLONEL: "3",
    PieceKind.MAJOR: "4",
    PieceKind.CAPTAIN: "5",
    PieceKind.LIEUTENANT: "6",
    PieceKind.SERGEANT: "7",
    PieceKind.MINER: "8",
    PieceKind.SCOUT: "9",
    PieceKind.SPY: "S",
    PieceKind.FLAG: "F",
}

_BY_GLYPH = {g: k for k, g in _GLYPHS.items()}
_BY_GLYPH.update({"b": PieceKind.BOMB, "s": PieceKind.SPY, "f": PieceKind.FLAG})


class TileKind(str, Enum):
    TERRAIN = "terrain"
    EMPTY = "empty"
    PIECE = "piece"


class BattleResult(str, Enum):
    VICTORY = "victory"
    LOSS = "loss"
    DRAW = "draw"


class ActionKind(str, Enum):
    MOVE = "move"
    ATTACK = "attack"


class ActionLogResult(str, Enum):
    APPLIED = "applied"
    ILLEGAL = "illegal"
    ERROR = "error"


class Command(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    SELECT = "select"
    QUIT = "quit"
