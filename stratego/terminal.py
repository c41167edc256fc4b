from __future__ import annotations

import re
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from .models.enums import Colour
    from .models.game import Game

from .engine.systems.fog import FRAME_BOTTOM, FRAME_SIDE, FRAME_TOP, board_rows
from .models.board import Coord
from .models.enums import Command

CLEAR = "\x1b[2J\x1b[H"
HIGHLIGHT = "\x1b[41m"
RESET = "\x1b[49m"

KEYS = {
    "w": Command.UP,
    "a": Command.LEFT,
    "s": Command.DOWN,
    "d": Command.RIGHT,
    " ": Command.SELECT,
    "e": Command.SELECT,
    "q": Command.QUIT,
}

ARROWS = {
    "\x1b[A": Command.UP,
    "\x1b[B": Command.DOWN,
    "\x1b[C": Command.RIGHT,
    "\x1b[D": Command.LEFT,
    "\x1bOA": Command.UP,
    "\x1bOB": Command.DOWN,
    "\x1bOC": Command.RIGHT,
    "\x1bOD": Command.LEFT,
}

# arrow keys, or any other CSI/SS3 escape sequence
_ESCAPE = re.compile(r"\x1b[\[O][0-9;]*[A-Za-z~]|\x1b.?")


def parse_keys(line: str) -> list[Command]:
    """Map a line of key presses to commands; unknown keys are ignored."""
    out: list[Command] = []
    pos = 0
    for m in _ESCAPE.finditer(line):
        out.extend(KEYS[ch] for ch in line[pos:m.start()].lower() if ch in KEYS)
        if m.group() in ARROWS:
            out.append(ARROWS[m.group()])
        pos = m.end()
    out.extend(KEYS[ch] for ch in line[pos:].lower() if ch in KEYS)
    return out


class TerminalView:
    def __init__(self, game: Game, out: TextIO, colour: bool = True):
        self.game = game
        self.out = out
        self.colour = colour

    def frame(self, viewer: Colour) -> str:
        lines = [FRAME_TOP]
        for y, row in enumerate(board_rows(self.game.board, viewer)):
            cells = [self._cell(Coord(x=x, y=y), glyph) for x, glyph in enumerate(row)]
            lines.append(FRAME_SIDE + "".join(cells) + FRAME_SIDE)
        lines.append(FRAME_BOTTOM)
        return "\n".join(lines)

    def _cell(self, c: Coord, glyph: str) -> str:
        g = self.game
        if c == g.cursor:
            text = f"[{glyph}]"
        elif c in g.highlighted and not self.colour:
            text = f"<{glyph}>"
        else:
            text = f" {glyph} "
        if c in g.highlighted and self.colour:
            return f"{HIGHLIGHT}{text}{RESET}"
        return text

    def draw(self, viewer: Colour) -> None:
        self.out.write(CLEAR + self.frame(viewer) + "\n")
        self.out.flush()
