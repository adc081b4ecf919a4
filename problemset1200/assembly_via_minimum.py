"""Rebuild an array from the minimums of all its pairs."""

from collections import Counter

from .and_big_sum import _each_case


def restore_array(n, values):
    """Return a sorted array of length n whose pairwise minimums are ``values``."""
    if n < 2:
        raise ValueError("n must be at least 2")
    values = list(values)
    if len(values) != n * (n - 1) // 2:
        raise ValueError("expected n*(n-1)/2 values")
    counts = Counter(values)
    result = []
    space = n - 1
    for value in sorted(counts):
        remaining = counts[value]
        while remaining > 0:
            if space <= 0:
                raise ValueError("values are not the pairwise minimums of any array")
            result.append(value)
            remaining -= space
            space -= 1
    result.extend([max(counts)] * (n - len(result)))
    return result


def _solve(take):
    n = take()
    values = [take() for _ in range(n * (n - 1) // 2)]
    return " ".join(map(str, restore_array(n, values))) + "\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)