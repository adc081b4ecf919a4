"""Fewest sets of consecutive-size matryoshkas that the given dolls split into."""

from collections import Counter

from .and_big_sum import _each_case


def min_sets(sizes):
    """Return the fewest sets of consecutive sizes covering all ``sizes``.

    Each set holds dolls of sizes s, s+1, ..., s+k-1, one of each.
    """
    deltas = Counter()
    for size in sizes:
        deltas[size] += 1
        deltas[size + 1] -= 1
    return sum(delta for delta in deltas.values() if delta > 0)


def _solve(take):
    sizes = [take() for _ in range(take())]
    return f"{min_sets(sizes)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)