import pytest

from stratego.engine.systems.fog import (
    EMPTY_GLYPH,
    HIDDEN_GLYPH,
    TERRAIN_GLYPH,
    display_to,
    render,
)
from stratego.models.board import EMPTY, TERRAIN, PieceTile
from stratego.models.enums import Colour, PieceKind
from tests.helpers import put


@pytest.mark.parametrize("kind", list(PieceKind))
@pytest.mark.parametrize("owner", list(Colour))
def test_owner_sees_kind_opponent_sees_hidden(kind, owner):
    tile = PieceTile(piece=kind, owner=owner)
    assert render(tile, owner) == kind.glyph
    assert render(tile, owner.other()) == HIDDEN_GLYPH


def test_terrain_and_empty_look_the_same_to_everyone():
    for viewer in Colour:
        assert render(TERRAIN, viewer) == TERRAIN_GLYPH
        assert render(EMPTY, viewer) == EMPTY_GLYPH


def test_display_frame_shape(board):
    text = display_to(board, Colour.RED)
    lines = text.split("\n")
    assert len(lines) == 12
    assert all(len(line) == 32 for line in lines)
    assert lines[0].startswith("┌") and lines[-1].startswith("└")
    assert lines[5] == "│" + "   " * 2 + " ~ " * 2 + "   " * 2 + " ~ " * 2 + "   " * 2 + "│"


def test_display_hides_only_the_opponent(board):
    put(board, "a0", PieceKind.MARSHALL, Colour.BLUE)
    put(board, "a9", PieceKind.SPY, Colour.RED)
    red = display_to(board, Colour.RED).split("\n")
    blue = display_to(board, Colour.BLUE).split("\n")
    assert red[1][1:4] == f" {HIDDEN_GLYPH} " and red[10][1:4] == " S "
    assert blue[1][1:4] == " 1 " and blue[10][1:4] == f" {HIDDEN_GLYPH} "
    assert "1" not in "".join(red) and "S" not in "".join(blue)
