"""Decide whether prefix inversions of balanced prefixes turn one bit string into another."""

from itertools import accumulate

from .and_big_sum import _each_case


def can_transform(a, b):
    """Return True if ``a`` can become ``b`` by inverting prefixes with equal 0s and 1s."""
    if len(a) != len(b):
        raise ValueError("strings must have the same length")
    if (set(a) | set(b)) - {"0", "1"}:
        raise ValueError("strings must contain only 0 and 1")
    balance = list(accumulate(1 if c == "1" else -1 for c in a))
    flipped = [x != y for x, y in zip(a, b)] + [False]
    return all(
        level == 0
        for level, here, after in zip(balance, flipped, flipped[1:])
        if here != after
    )


def _solve(take):
    n = int(take())
    a, b = take(), take()
    if len(a) != n:
        raise ValueError("string length does not match n")
    return "YES\n" if can_transform(a, b) else "NO\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)