"""Count pairs whose bitwise AND is at least their bitwise XOR."""

from collections import Counter

from .and_big_sum import _each_case


def count_pairs(values):
    """Return the number of pairs i < j with a_i & a_j >= a_i ^ a_j."""
    values = list(values)
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    groups = Counter(value.bit_length() for value in values)
    return sum(size * (size - 1) // 2 for size in groups.values())


def _solve(take):
    values = [take() for _ in range(take())]
    return f"{count_pairs(values)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)