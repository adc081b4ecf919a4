"""Fewest arrays into which numbers split so that adjacent sums divide by m."""

from collections import Counter

from .and_big_sum import _each_case


def min_arrays(values, m):
    """Return the smallest number of m-divisible arrays the values split into."""
    if m < 1:
        raise ValueError("m must be positive")
    counts = Counter(value % m for value in values)
    total = 0
    for residue in sorted(counts):
        complement = m - residue
        if residue == 0 or 2 * residue == m:
            total += 1
        elif 2 * residue < m or complement not in counts:
            mine, theirs = counts[residue], counts.get(complement, 0)
            total += 1 + max(0, abs(mine - theirs) - 1)
    return total


def _solve(take):
    n, m = take(), take()
    values = [take() for _ in range(n)]
    return f"{min_arrays(values, m)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)