"""Best score of a permutation: sum at multiples of x minus sum at multiples of y."""

from math import lcm

from .and_big_sum import _each_case


def _triangle(count):
    return count * (count + 1) // 2


def max_score(n, x, y):
    """Return the largest possible score over all permutations of 1..n.

    The score adds the values at positions divisible by ``x`` and subtracts
    the values at positions divisible by ``y``.
    """
    if n < 1:
        raise ValueError("n must be positive")
    if x < 1 or y < 1:
        raise ValueError("x and y must be positive")
    both = n // lcm(x, y)
    only_x = n // x - both
    only_y = n // y - both
    rest = n - only_x
    gained = _triangle(n) - _triangle(rest)
    lost = _triangle(only_y)
    return gained - lost


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, lambda take: f"{max_score(take(), take(), take())}\n")