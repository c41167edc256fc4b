import pytest

from stratego.engine.systems.movement import legal_moves
from stratego.models.board import Coord, Move
from stratego.models.enums import Colour, PieceKind
from tests.helpers import at, dests, put


def test_marshall_on_back_edge(board):
    e0 = put(board, "e0", PieceKind.MARSHALL)
    assert legal_moves(board, e0) == [
        Move(src=e0, dst=at("f0")),
        Move(src=e0, dst=at("d0")),
        Move(src=e0, dst=at("e1")),
    ]


def test_step_order_is_east_west_south_north(board):
    f2 = put(board, "f2", PieceKind.SERGEANT)
    assert dests(legal_moves(board, f2)) == ["g2", "e2", "f3", "f1"]


def test_terrain_blocks_a_step(board):
    d3 = put(board, "d3", PieceKind.CAPTAIN)
    assert dests(legal_moves(board, d3)) == ["e3", "c3", "d2"]


def test_enemy_is_attackable_ally_is_not(board):
    e0 = put(board, "e0", PieceKind.MARSHALL, Colour.RED)
    put(board, "e1", PieceKind.FLAG, Colour.BLUE)
    assert "e1" in dests(legal_moves(board, e0))

    put(board, "e1", PieceKind.FLAG, Colour.RED)
    assert "e1" not in dests(legal_moves(board, e0))


@pytest.mark.parametrize("kind", [PieceKind.BOMB, PieceKind.FLAG])
def test_bomb_and_flag_never_move(board, kind):
    c = put(board, "e2", kind)
    put(board, "e3", PieceKind.SPY, Colour.BLUE)
    assert legal_moves(board, c) == []


def test_empty_and_terrain_origins_have_no_moves(board):
    assert legal_moves(board, at("a0")) == []
    assert legal_moves(board, at("c4")) == []


def test_boxed_in_piece_has_no_moves(board):
    a0 = put(board, "a0", PieceKind.GENERAL)
    put(board, "b0", PieceKind.BOMB)
    put(board, "a1", PieceKind.SCOUT)
    assert legal_moves(board, a0) == []


def test_scout_slides_until_blocked(board):
    e0 = put(board, "e0", PieceKind.SCOUT, Colour.RED)
    put(board, "h0", PieceKind.FLAG, Colour.RED)
    put(board, "b0", PieceKind.FLAG, Colour.BLUE)
    south = [f"e{y}" for y in range(1, 10)]
    assert dests(legal_moves(board, e0)) == ["f0", "g0", "d0", "c0", "b0"] + south


def test_scout_stops_before_lake(board):
    c0 = put(board, "c0", PieceKind.SCOUT)
    assert dests(legal_moves(board, c0)) == [
        "d0", "e0", "f0", "g0", "h0", "i0", "j0", "b0", "a0", "c1", "c2", "c3",
    ]


def test_scout_adjacent_enemy_ends_direction(board):
    e5 = put(board, "e5", PieceKind.SCOUT, Colour.BLUE)
    put(board, "f5", PieceKind.MINER, Colour.RED)
    put(board, "e6", PieceKind.MINER, Colour.BLUE)
    assert dests(legal_moves(board, e5)) == ["f5", "e4", "e3", "e2", "e1", "e0"]


def test_scout_may_exceed_four_moves(board):
    e2 = put(board, "e2", PieceKind.SCOUT)
    assert len(legal_moves(board, e2)) > 4


def test_moves_never_start_and_end_on_the_same_cell(board):
    for text, kind in [("e2", PieceKind.SCOUT), ("a9", PieceKind.MAJOR)]:
        c = put(board, text, kind)
        assert all(m.src == c and m.dst != c for m in legal_moves(board, c))


def test_legal_moves_do_not_mutate_board(board):
    put(board, "e2", PieceKind.SCOUT)
    before = board.model_copy(deep=True)
    legal_moves(board, Coord(x=4, y=2))
    assert board == before
