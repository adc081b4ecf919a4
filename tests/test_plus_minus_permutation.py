from itertools import permutations

import pytest

from problemset1200.plus_minus_permutation import max_score, run


def _best_by_search(n, x, y):
    best = None
    for perm in permutations(range(1, n + 1)):
        score = sum(perm[i - 1] for i in range(x, n + 1, x)) - sum(
            perm[i - 1] for i in range(y, n + 1, y)
        )
        best = score if best is None else max(best, score)
    return best


def test_statement_example():
    assert max_score(7, 2, 3) == 12


@pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
@pytest.mark.parametrize("x", [1, 2, 3, 4])
@pytest.mark.parametrize("y", [1, 2, 3, 5])
def test_matches_exhaustive_search(n, x, y):
    assert max_score(n, x, y) == _best_by_search(n, x, y)


@pytest.mark.parametrize("n,x", [(10, 3), (100, 7), (10**9, 5)])
def test_equal_steps_cancel(n, x):
    assert max_score(n, x, x) == 0


def test_large_input_is_exact():
    n = 10**9
    assert max_score(n, 1, n + 1) == n * (n + 1) // 2


@pytest.mark.parametrize("args", [(0, 1, 1), (5, 0, 2), (5, 2, -1)])
def test_invalid_arguments(args):
    with pytest.raises(ValueError):
        max_score(*args)


def test_run_formats_each_case():
    assert run("2\n7 2 3\n5 4 4\n") == f"{max_score(7, 2, 3)}\n0\n"


def test_run_truncated_input():
    with pytest.raises(ValueError):
        run("1\n7 2\n")