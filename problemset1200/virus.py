"""Fewest infected houses on a ring when protecting one house per day."""


def min_infected(n, infected):
    """Return the fewest houses that end up infected among ``n`` on a ring."""
    positions = sorted(p - 1 for p in infected)
    if not positions:
        raise ValueError("at least one house must be infected")
    if len(set(positions)) != len(positions):
        raise ValueError("infected houses must be distinct")
    if positions[0] < 0 or positions[-1] >= n:
        raise ValueError("house numbers must lie in 1..n")
    gaps = sorted(
        ((after - before) % n or n) - 1
        for before, after in zip(positions, positions[1:] + positions[:1])
    )
    gaps.reverse()
    safe = 0
    for day, gap in enumerate(gaps):
        left = gap - 4 * day
        if left >= 1:
            safe += max(1, left - 1)
    return n - safe


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
        houses, count = take(), take()
        infected = [take() for _ in range(count)]
        lines.append(f"{min_infected(houses, infected)}\n")
    return "".join(lines)