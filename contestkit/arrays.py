"""Array puzzles."""

from __future__ import annotations

import math
from itertools import accumulate


def max_last_element(values: list[int]) -> int:
    """Return the largest element that can remain after repeatedly removing
    adjacent pairs, i.e. the largest element at an even index."""
    if not values:
        raise ValueError("values must not be empty")
    return max(values[::2])


def extremal_mask(values: list[int]) -> str:
    """Mark with ``1`` every element that is a prefix minimum or a suffix
    maximum, and with ``0`` every other element."""
    prefix_min = accumulate(values, min)
    suffix_max = list(accumulate(reversed(values), max, initial=0))[:0:-1]
    return "".join(
        "1" if value in (low, high) else "0"
        for value, low, high in zip(values, prefix_min, suffix_max)
    )


def gcd_array_exists(values: list[int]) -> bool:
    """Tell whether some array ``b`` of length ``len(values) + 1`` has
    ``gcd(b[i], b[i + 1]) == values[i]`` for every ``i``."""
    if len(values) <= 2:
        return True
    candidate = [values[0]]
    candidate += [math.lcm(a, b) for a, b in zip(values, values[1:])]
    candidate.append(values[-1])
    return all(
        math.gcd(left, right) == value
        for left, right, value in zip(candidate, candidate[1:], values)
    )


def max_saved_magazines(lids: str, values: list[int]) -> int:
    """Return the largest total of magazines that can be kept under lids.

    ``lids`` holds ``0`` and ``1`` per box; a lid may move one box to the
    left, at most once.
    """
    if len(lids) != len(values):
        raise ValueError("lids and values must have the same length")
    if set(lids) - {"0", "1"}:
        raise ValueError("lids must consist of 0 and 1")
    covered = [char == "1" for char in lids]
    free = None
    for index, value in enumerate(values):
        if not covered[index]:
            free = index
        elif free is not None and value < values[free]:
            covered[free] = True
            covered[index] = False
            free = index
    return sum(value for value, has_lid in zip(values, covered) if has_lid)


def max_min_pieces(n: int, a: int, b: int) -> int:
    """Return the largest ``x`` such that cakes of ``a`` and ``b`` pieces can
    fill ``n`` plates with at least ``x`` pieces each."""
    if a + b == n:
        return 1
    if n == a == b:
        return 2 if n % 2 == 0 else 1
    if a + b < n or min(a, b) < 1:
        raise ValueError("not enough pieces for every plate")
    return next(x for x in range(min(a, b), 0, -1) if a // x + b // x >= n)


def fraction_text(a: float, b: float) -> str:
    """Return ``a / b`` written with six digits after the decimal point."""
    return f"{a / b:f}"