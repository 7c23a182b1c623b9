import io

import pytest

from contestkit.arrays import extremal_mask, gcd_array_exists, max_saved_magazines
from contestkit.cli import PROBLEMS, main, run
from contestkit.board import rook_moves
from contestkit.strings import binary_battle_winner


def test_rook_lists_every_reachable_square():
    lines = run("rook", "1\nd4\n").splitlines()
    assert lines == rook_moves("d4")
    assert len(set(lines)) == 14
    assert "d4" not in lines


def test_rook_handles_several_cases():
    lines = run("rook", "2\na1\nh8\n").splitlines()
    assert lines == rook_moves("a1") + rook_moves("h8")


def test_make_it_permutation_columns_become_permutations():
    n = 4
    lines = run("make-it-permutation", f"1\n{n}\n").splitlines()
    assert int(lines[0]) == 2 * n - 1
    assert len(lines) == 2 * n
    grid = [list(range(1, n + 1)) for _ in range(n)]
    for line in lines[1:]:
        row, left, right = map(int, line.split())
        segment = grid[row - 1][left - 1:right]
        grid[row - 1][left - 1:right] = segment[::-1]
    for column in zip(*grid):
        assert sorted(column) == list(range(1, n + 1))


def test_generate_permutation_cases():
    lines = run("generate-permutation", "3\n1\n2\n5\n").splitlines()
    assert lines[0] == "1"
    assert lines[1] == "-1"
    assert sorted(map(int, lines[2].split())) == [1, 2, 3, 4, 5]
    assert lines[2].endswith(" ")


def test_minimize_inversions_sorts_pairs_together():
    output = run("minimize-inversions", "1\n3\n3 1 2\n6 4 5\n")
    assert output == "1 2 3 \n4 5 6 \n"


def test_position_in_fraction_prints_six_digits():
    assert run("position-in-fraction", "1 4 0") == "0.250000\n"


def test_prefix_min_suffix_max_matches_mask():
    values = [1, 3, 2, 5, 4]
    output = run("prefix-min-suffix-max", "1\n5\n1 3 2 5 4\n")
    assert output == extremal_mask(values) + "\n"
    assert len(output.strip()) == len(values)


def test_binary_string_battle_reports_winner():
    lines = run("binary-string-battle", "2\n5 2 11011\n4 1 1010\n").splitlines()
    assert lines == [
        binary_battle_winner(5, 2, "11011"),
        binary_battle_winner(4, 1, "1010"),
    ]
    assert set(lines) <= {"Alice", "Bob"}


def test_maximize_last_element_picks_even_index():
    assert run("maximize-last-element", "1\n5\n4 7 4 2 9\n") == "9\n"


def test_milica_operation_leaves_k_letters_b():
    cases = [("AAB", 2), ("BBA", 0), ("ABAB", 2)]
    text = str(len(cases)) + "\n" + "".join(
        f"{len(s)} {k}\n{s}\n" for s, k in cases
    )
    lines = iter(run("milica-and-string", text).splitlines())
    for s, k in cases:
        count = int(next(lines))
        result = s
        for _ in range(count):
            index, letter = next(lines).split()
            result = letter * int(index) + result[int(index):]
        assert result.count("B") == k
        assert count <= 1


def test_superhero_transformation():
    assert run("superhero-transformation", "abc ukm") == "Yes\n"
    assert run("superhero-transformation", "abc ab") == "No\n"
    assert run("superhero-transformation", "abc kbc") == "No\n"


def test_playing_with_gcd_matches_check():
    output = run("playing-with-gcd", "2\n1\n5\n3\n4 2 4\n")
    assert output.splitlines() == [
        "YES",
        "YES" if gcd_array_exists([4, 2, 4]) else "NO",
    ]


def test_two_cakes_prints_without_newline():
    assert run("two-cakes", "5 2 3") == "1"


def test_save_the_magazines_matches_total():
    lids, values = "0110", [10, 5, 8, 1]
    output = run("save-the-magazines", "1\n4\n0110\n10 5 8 1\n")
    assert output == f"{max_saved_magazines(lids, values)}\n"


def test_unknown_problem_is_rejected():
    with pytest.raises(ValueError):
        run("no-such-problem", "1")


def test_truncated_input_is_rejected():
    with pytest.raises(ValueError):
        run("maximize-last-element", "1\n5\n1 2\n")


def test_non_numeric_input_is_rejected():
    with pytest.raises(ValueError):
        run("generate-permutation", "1\nx\n")


def test_problem_list_has_thirteen_entries():
    assert len(PROBLEMS) == 13
    assert "two-cakes" in PROBLEMS
    assert run("two-cakes", "4 7 10") == "3"


@pytest.mark.parametrize("problem", sorted(PROBLEMS))
def test_every_listed_problem_is_known_to_run(problem):
    with pytest.raises(ValueError, match="unexpected end of input"):
        run(problem, "")


def test_main_writes_answer(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc ukm\n"))
    assert main(["superhero-transformation"]) == 0
    assert capsys.readouterr().out == "Yes\n"


def test_main_reports_bad_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["generate-permutation"]) == 1
    assert "unexpected end of input" in capsys.readouterr().err