"""Total winnings when every pair of players plays every column of cards."""

from itertools import accumulate


def total_winnings(rows):
    """Return the sum over all player pairs and columns of |a - b|.

    ``rows`` holds one equal-length row of card values per player.
    """
    rows = [list(row) for row in rows]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("all rows must have the same length")
    total = 0
    for column in zip(*rows):
        ordered = sorted(column)
        size = len(ordered)
        column_sum = sum(ordered)
        for index, (value, prefix) in enumerate(zip(ordered, accumulate(ordered))):
            above = column_sum - prefix
            total += abs(above - (size - index - 1) * value)
    return total


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    tokens = iter(text.split())

    def take():
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    lines = []
    for _ in range(take()):
        n, m = take(), take()
        rows = [[take() for _ in range(m)] for _ in range(n)]
        lines.append(f"{total_winnings(rows)}\n")
    return "".join(lines)