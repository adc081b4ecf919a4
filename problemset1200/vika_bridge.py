"""Smallest possible longest step across a bridge after repainting one plank."""

from heapq import nlargest


def min_max_step(planks, k):
    """Return the least achievable longest jump, counted in skipped planks.

    Vika steps only on planks of one colour; one plank may be repainted.
    Colours are numbered 1..k.
    """
    planks = list(planks)
    if k < 1:
        raise ValueError("k must be positive")
    if not planks:
        raise ValueError("the bridge must have at least one plank")
    if any(not 1 <= colour <= k for colour in planks):
        raise ValueError("plank colours must lie in 1..k")
    n = len(planks)
    positions = {}
    for index, colour in enumerate(planks, 1):
        positions.setdefault(colour, [0]).append(index)
    best = None
    for spots in positions.values():
        spots = spots + [n + 1]
        gaps = [after - before - 1 for before, after in zip(spots, spots[1:])]
        largest, second = (nlargest(2, gaps) + [0])[:2]
        result = max(second, largest // 2)
        if best is None or result < best:
            best = result
    return best


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
        n, k = take(), take()
        planks = [take() for _ in range(n)]
        lines.append(f"{min_max_step(planks, k)}\n")
    return "".join(lines)