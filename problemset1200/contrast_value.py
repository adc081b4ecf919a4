"""Smallest subsequence keeping the contrast (sum of adjacent differences)."""

from itertools import groupby

from .and_big_sum import _each_case


def min_contrast_size(values):
    """Return the size of the shortest subsequence with the same contrast."""
    compressed = [value for value, _ in groupby(values)]
    monotone = sum(
        1
        for x, y, z in zip(compressed, compressed[1:], compressed[2:])
        if x < y < z or x > y > z
    )
    return len(compressed) - monotone


def _solve(take):
    values = [take() for _ in range(take())]
    return f"{min_contrast_size(values)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)