"""Fewest cell flips that make a square 0/1 grid look the same in every rotation."""

from .and_big_sum import _each_case


def min_flips(grid):
    """Return the fewest flips making the grid invariant under 90-degree rotations."""
    rows = list(grid)
    n = len(rows)
    if any(len(row) != n for row in rows):
        raise ValueError("grid must be square")
    if any(set(row) - {"0", "1"} for row in rows):
        raise ValueError("grid must contain only 0 and 1")
    last = n - 1
    total = 0
    for i in range(n // 2):
        for j in range(i, last - i):
            cells = (rows[i][j], rows[j][last - i], rows[last - i][last - j], rows[last - j][i])
            ones = cells.count("1")
            total += min(ones, len(cells) - ones)
    return total


def _solve(take):
    grid = [take() for _ in range(int(take()))]
    return f"{min_flips(grid)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)