"""Fewest stable groups after inviting up to k extra students."""

from .and_big_sum import _token_reader


def min_groups(levels, k, x):
    """Return the fewest groups with neighbouring levels differing by at most ``x``.

    Up to ``k`` students of any level may be added; the smallest gaps are
    bridged first.
    """
    if x < 1:
        raise ValueError("x must be positive")
    if k < 0:
        raise ValueError("k must be non-negative")
    ordered = sorted(levels)
    gaps = sorted(b - a for a, b in zip(ordered, ordered[1:]) if b - a > x)
    remaining = len(gaps)
    for gap in gaps:
        if k <= 0:
            break
        need = (gap - 1) // x
        if need > k:
            break
        k -= need
        remaining -= 1
    return 1 + remaining


def run(text):
    """Solve the single test case in ``text`` and return the printed answer."""
    take = _token_reader(text)
    n, k, x = take(), take(), take()
    levels = [take() for _ in range(n)]
    return f"{min_groups(levels, k, x)}\n"