"""String puzzles."""

from __future__ import annotations

_VOWELS = frozenset("aeiou")


def milica_operations(s: str, k: int) -> list[tuple[int, str]]:
    """Return the prefix assignments that leave exactly ``k`` letters ``B``.

    Each operation ``(i, letter)`` sets the first ``i`` characters of ``s``
    to ``letter``. At most one operation is ever needed.
    """
    if not 0 <= k <= len(s):
        raise ValueError("k must lie between 0 and the length of s")
    count = s.count("B")
    if count == k:
        return []
    if count > k:
        remaining = count
        for index, char in enumerate(s, start=1):
            if char == "B":
                remaining -= 1
                if remaining == k:
                    return [(index, "A")]
    else:
        total = count
        for index, char in enumerate(s, start=1):
            if char == "A":
                total += 1
                if total == k:
                    return [(index, "B")]
    raise ValueError("s must consist of the letters A and B")


def can_transform(s: str, t: str) -> bool:
    """Tell whether ``s`` can become ``t`` by swapping vowels for vowels and
    consonants for consonants."""
    if len(s) != len(t):
        return False
    return all((a in _VOWELS) == (b in _VOWELS) for a, b in zip(s, t))


def binary_battle_winner(n: int, k: int, s: str) -> str:
    """Return the winner, ``"Alice"`` or ``"Bob"``, of the binary string game."""
    ones = s.count("1")
    return "Alice" if ones <= k or n < 2 * k else "Bob"