"""Count index pairs i < j with a_j - a_i = j - i."""

from collections import Counter

from .and_big_sum import _each_case


def count_pairs(values):
    """Return the number of pairs i < j whose values differ as their indices do."""
    keys = Counter(value - index for index, value in enumerate(values, 1))
    return sum(size * (size - 1) // 2 for size in keys.values())


def _solve(take):
    values = [take() for _ in range(take())]
    return f"{count_pairs(values)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)