import pytest

from contestkit.board import rook_moves


@pytest.mark.parametrize("square", ["a1", "d4", "h8", "e2", "b7"])
def test_move_count_and_lines(square):
    moves = rook_moves(square)
    assert len(moves) == 14
    assert square not in moves
    assert len(set(moves)) == 14
    for move in moves:
        assert move[0] == square[0] or move[1] == square[1]


def test_file_moves_come_first_in_rank_order():
    moves = rook_moves("d4")
    file_moves = moves[:7]
    assert all(m[0] == "d" for m in file_moves)
    assert [int(m[1]) for m in file_moves] == [1, 2, 3, 5, 6, 7, 8]
    rank_moves = moves[7:]
    assert [m[0] for m in rank_moves] == list("abcefgh")
    assert all(m[1] == "4" for m in rank_moves)


def test_corner_first_move():
    assert rook_moves("a1")[0] == "a2"


@pytest.mark.parametrize("square", ["", "a", "i1", "a9", "a0", "11", "a12"])
def test_invalid_square(square):
    with pytest.raises(ValueError):
        rook_moves(square)