"""Split friends into groups of two or more whose budgets cover their spending."""

from .and_big_sum import _each_case


def max_days(spend, budget):
    """Return the largest number of days the friends can visit the restaurant.

    Each day a group of at least two friends goes, and the group's total budget
    must cover its total spending. No friend goes on two days.
    """
    spend = list(spend)
    budget = list(budget)
    if len(spend) != len(budget):
        raise ValueError("spend and budget must have the same length")
    extras = sorted(b - a for a, b in zip(spend, budget) if b >= a)
    lacks = sorted(a - b for a, b in zip(spend, budget) if b < a)
    days = 0
    while extras and lacks:
        extra = extras[-1]
        while lacks and lacks[-1] > extra:
            lacks.pop()
        if not lacks:
            break
        days += 1
        extras.pop()
        lacks.pop()
    return days + len(extras) // 2


def _solve(take):
    n = take()
    spend = [take() for _ in range(n)]
    budget = [take() for _ in range(n)]
    return f"{max_days(spend, budget)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)