"""Count sugar packs bought over the days while prices grow by one a day."""

from .and_big_sum import _each_case


def count_packs(budget, prices):
    """Return the total number of packs bought with ``budget`` per day."""
    total = 0
    spent = 0
    for shops, price in enumerate(sorted(prices), 1):
        spent += price
        remaining = budget - spent
        if remaining >= 0:
            total += remaining // shops + 1
    return total


def _solve(take):
    n, budget = take(), take()
    prices = [take() for _ in range(n)]
    return f"{count_packs(budget, prices)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)