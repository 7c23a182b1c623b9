"""Constructions of permutations and operations on them."""

from __future__ import annotations


def reversal_operations(n: int) -> list[tuple[int, int, int]]:
    """Return ``(row, left, right)`` reversals that turn an ``n`` by ``n``
    grid of rows ``1..n`` into one whose columns are all permutations.

    Exactly ``2n - 1`` operations are produced.
    """
    if n < 1:
        raise ValueError("n must be positive")
    operations: list[tuple[int, int, int]] = []
    for row in range(1, n):
        operations.append((row, 1, row))
        operations.append((row, row + 1, n))
    operations.append((n, 1, n))
    return operations


def generate_permutation(n: int) -> list[int] | None:
    """Return a permutation of ``1..n`` that needs the same number of
    carriage returns from either end, or ``None`` when none exists."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [1]
    if n % 2 == 0:
        return None
    ascending = (n + 1) // 2
    descending = n - ascending
    return list(range(n, n - descending, -1)) + list(range(1, ascending + 1))


def minimize_inversions(
    first: list[int], second: list[int]
) -> tuple[list[int], list[int]]:
    """Reorder two sequences together so that the first is sorted.

    Pairs ``(first[i], second[i])`` stay together; ties are broken by the
    second element.
    """
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    pairs = sorted(zip(first, second))
    return [a for a, _ in pairs], [b for _, b in pairs]