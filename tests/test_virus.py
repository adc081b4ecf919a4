import random

import pytest

from problemset1200.virus import min_infected, run


@pytest.mark.parametrize(
    "n, infected, expected",
    [(10, [1, 7, 2], 7), (6, [2, 5], 5), (20, [3, 7, 12], 11)],
)
def test_worked_examples(n, infected, expected):
    assert min_infected(n, infected) == expected


def test_everything_infected():
    assert min_infected(4, [1, 2, 3, 4]) == 4


def test_result_bounds():
    rng = random.Random(11)
    for _ in range(100):
        n = rng.randint(1, 40)
        infected = rng.sample(range(1, n + 1), rng.randint(1, n))
        result = min_infected(n, infected)
        assert len(infected) <= result <= n


def test_rotation_invariance():
    rng = random.Random(5)
    n = 30
    infected = rng.sample(range(1, n + 1), 5)
    base = min_infected(n, infected)
    for shift in range(1, n):
        rotated = [(p - 1 + shift) % n + 1 for p in infected]
        assert min_infected(n, rotated) == base


def test_invalid_inputs():
    with pytest.raises(ValueError):
        min_infected(5, [])
    with pytest.raises(ValueError):
        min_infected(5, [2, 2])
    with pytest.raises(ValueError):
        min_infected(5, [6])


def test_run():
    assert run("1\n10 3\n1 7 2\n") == "7\n"