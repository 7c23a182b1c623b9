"""Chess board helpers."""

from __future__ import annotations

_FILES = "abcdefgh"
_RANKS = range(1, 9)


def rook_moves(square: str) -> list[str]:
    """Return every square a rook on ``square`` can reach on an empty board.

    Squares in the same file come first, ordered by rank, followed by the
    squares in the same rank, ordered by file.
    """
    if len(square) != 2 or square[0] not in _FILES or not square[1].isdigit():
        raise ValueError(f"invalid square: {square!r}")
    file, rank = square[0], int(square[1])
    if rank not in _RANKS:
        raise ValueError(f"invalid square: {square!r}")

    same_file = [f"{file}{r}" for r in _RANKS if r != rank]
    same_rank = [f"{f}{rank}" for f in _FILES if f != file]
    return same_file + same_rank