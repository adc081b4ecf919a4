"""Pick three different days for three activities to meet the most friends."""

from itertools import product


def _top_three(values):
    return sorted(((value, day) for day, value in enumerate(values)), reverse=True)[:3]


def max_friends(a, b, c):
    """Return the most friends met doing each activity on a distinct day."""
    a, b, c = list(a), list(b), list(c)
    if not len(a) == len(b) == len(c):
        raise ValueError("all activities must cover the same days")
    if len(a) < 3:
        raise ValueError("at least three days are needed")
    return max(
        x + y + z
        for (x, i), (y, j), (z, k) in product(_top_three(a), _top_three(b), _top_three(c))
        if len({i, j, k}) == 3
    )


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
        n = take()
        a = [take() for _ in range(n)]
        b = [take() for _ in range(n)]
        c = [take() for _ in range(n)]
        lines.append(f"{max_friends(a, b, c)}\n")
    return "".join(lines)