"""Where cat B sleeps at hour k when cat A walks the spots backwards."""

from .and_big_sum import _each_case


def cat_position(n, k):
    """Return cat B's spot (1-based) at hour k among n spots."""
    if n < 2:
        raise ValueError("n must be at least 2")
    if k < 1:
        raise ValueError("k must be positive")
    shift = (n % 2) * (2 * (k - 1) // (n - 1))
    return (k - 1 + shift) % n + 1


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, lambda take: f"{cat_position(take(), take())}\n")