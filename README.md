# contestkit

contestkit has solutions to a set of short competitive-programming
problems. You can use it as a Python library, or as a command that reads a
problem's input from standard input and prints the expected output.

## Installation

```
pip install .
```

To install it with the test dependencies:

```
pip install ".[test]"
```

## Command line

```
contestkit PROBLEM < input.txt
```

`PROBLEM` is one of:

- `binary-string-battle`
- `generate-permutation`
- `make-it-permutation`
- `maximize-last-element`
- `milica-and-string`
- `minimize-inversions`
- `playing-with-gcd`
- `position-in-fraction`
- `prefix-min-suffix-max`
- `rook`
- `save-the-magazines`
- `superhero-transformation`
- `two-cakes`

The input is read as whitespace-separated tokens. Most problems start with a
test-case count and then give each case. `two-cakes` reads a single case of
three integers. `superhero-transformation` reads two words.
`position-in-fraction` reads three numbers and uses the first two. The answer
is written to standard output.

If the input is malformed or runs out, or a solver rejects its input, the
command prints `contestkit: <message>` to standard error and exits with
status 1. `contestkit --help` lists the problem names.

From Python, `contestkit.cli.run(problem, text)` returns the text the command
would print for `problem` given the input `text`. It raises `ValueError` for
an unknown problem or bad input.

## Library

The solutions are plain functions grouped by topic:

- `contestkit.board`
  - `rook_moves(square)`: every square a rook can reach from a chess square
    such as `"d4"`. Squares on the same file come first, then squares on the
    same rank. It raises `ValueError` for an invalid square.
- `contestkit.permutations`
  - `reversal_operations(n)`: a list of `2n - 1` `(row, left, right)` range
    reversals.
  - `generate_permutation(n)`: a permutation of `1..n`, or `None` when `n` is
    even.
  - `minimize_inversions(first, second)`: both lists reordered together by
    sorting their pairs.
- `contestkit.strings`
  - `milica_operations(s, k)`: the prefix assignments, at most one, that
    leave exactly `k` letters `B` in `s`.
  - `can_transform(s, t)`: whether `s` and `t` have the same length and put
    vowels and consonants in the same positions.
  - `binary_battle_winner(n, k, s)`: `"Alice"` or `"Bob"`.
- `contestkit.arrays`
  - `max_last_element(values)`: the largest value at an even index.
  - `extremal_mask(values)`: a `0`/`1` string that marks each value that is
    a prefix minimum or a suffix maximum.
  - `gcd_array_exists(values)`: whether some array has adjacent GCDs equal
    to `values`.
  - `max_saved_magazines(lids, values)`: the largest total of values that
    lids can cover when each lid may move one place to the left.
  - `max_min_pieces(n, a, b)`: the largest smallest piece count when two
    cakes are shared out over `n` plates.
  - `fraction_text(a, b)`: `a / b` written with six decimal places.

Functions raise `ValueError` for input they cannot handle, for example
sequences of different lengths. Each docstring gives the details.

```python
from contestkit.strings import can_transform
from contestkit.arrays import extremal_mask

can_transform("abc", "ukm")   # True
extremal_mask([1, 3, 2])      # "111"
```

## Running the tests

```
pytest
```