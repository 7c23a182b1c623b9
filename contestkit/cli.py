"""Command-line front end that reads a problem's input and prints its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator

from contestkit.arrays import (
    extremal_mask,
    fraction_text,
    gcd_array_exists,
    max_last_element,
    max_min_pieces,
    max_saved_magazines,
)
from contestkit.board import rook_moves
from contestkit.permutations import (
    generate_permutation,
    minimize_inversions,
    reversal_operations,
)
from contestkit.strings import binary_battle_winner, can_transform, milica_operations


class _Tokens:
    """Whitespace-separated tokens of an input text."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        token = self.word()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected an integer, got {token!r}") from None

    def real(self) -> float:
        token = self.word()
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def integers(self, count: int) -> list[int]:
        return [self.integer() for _ in range(count)]

    def cases(self) -> range:
        return range(self.integer())


def _spaced(values: list[int]) -> str:
    return "".join(f"{value} " for value in values)


def _rook(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield from rook_moves(tokens.word())


def _make_it_permutation(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        operations = reversal_operations(tokens.integer())
        yield str(len(operations))
        for row, left, right in operations:
            yield f"{row} {left} {right}"


def _minimize_inversions(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n = tokens.integer()
        first = tokens.integers(n)
        second = tokens.integers(n)
        ordered_first, ordered_second = minimize_inversions(first, second)
        yield _spaced(ordered_first)
        yield _spaced(ordered_second)


def _position_in_fraction(tokens: _Tokens) -> Iterator[str]:
    a, b = tokens.real(), tokens.real()
    tokens.real()
    yield fraction_text(a, b)


def _prefix_min_suffix_max(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield extremal_mask(tokens.integers(tokens.integer()))


def _binary_string_battle(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n, k = tokens.integer(), tokens.integer()
        yield binary_battle_winner(n, k, tokens.word())


def _maximize_last_element(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield str(max_last_element(tokens.integers(tokens.integer())))


def _milica(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n, k = tokens.integer(), tokens.integer()
        operations = milica_operations(tokens.word()[:n], k)
        yield str(len(operations))
        for index, letter in operations:
            yield f"{index} {letter}"


def _superhero(tokens: _Tokens) -> Iterator[str]:
    s, t = tokens.word(), tokens.word()
    yield "Yes" if can_transform(s, t) else "No"


def _generate_permutation(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        permutation = generate_permutation(tokens.integer())
        if permutation is None:
            yield "-1"
        elif len(permutation) == 1:
            yield "1"
        else:
            yield _spaced(permutation)


def _playing_with_gcd(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        yield "YES" if gcd_array_exists(tokens.integers(tokens.integer())) else "NO"


def _save_the_magazines(tokens: _Tokens) -> Iterator[str]:
    for _ in tokens.cases():
        n = tokens.integer()
        lids = tokens.word()
        yield str(max_saved_magazines(lids, tokens.integers(n)))


_LINE_PROBLEMS: dict[str, Callable[[_Tokens], Iterator[str]]] = {
    "rook": _rook,
    "make-it-permutation": _make_it_permutation,
    "minimize-inversions": _minimize_inversions,
    "position-in-fraction": _position_in_fraction,
    "prefix-min-suffix-max": _prefix_min_suffix_max,
    "binary-string-battle": _binary_string_battle,
    "maximize-last-element": _maximize_last_element,
    "milica-and-string": _milica,
    "superhero-transformation": _superhero,
    "generate-permutation": _generate_permutation,
    "playing-with-gcd": _playing_with_gcd,
    "save-the-magazines": _save_the_magazines,
}

PROBLEMS: tuple[str, ...] = tuple(sorted([*_LINE_PROBLEMS, "two-cakes"]))


def run(problem: str, text: str) -> str:
    """Solve ``problem`` for the input ``text`` and return the printed answer."""
    tokens = _Tokens(text)
    if problem == "two-cakes":
        n, a, b = tokens.integer(), tokens.integer(), tokens.integer()
        return str(max_min_pieces(n, a, b))
    try:
        solver = _LINE_PROBLEMS[problem]
    except KeyError:
        raise ValueError(f"unknown problem: {problem!r}") from None
    return "".join(f"{line}\n" for line in solver(tokens))


def main(argv: list[str] | None = None) -> int:
    """Read a problem's input from standard input and print the answer."""
    parser = argparse.ArgumentParser(
        prog="contestkit", description="Solve a contest problem from standard input."
    )
    parser.add_argument("problem", choices=PROBLEMS)
    args = parser.parse_args(argv)
    try:
        output = run(args.problem, sys.stdin.read())
    except ValueError as error:
        print(f"contestkit: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0