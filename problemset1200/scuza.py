"""Highest height reachable on a staircase for each leg length."""

from bisect import bisect_right
from itertools import accumulate

from .and_big_sum import _each_case


def max_heights(steps, legs):
    """Return, for each leg length, the height of the highest reachable step.

    A step can be climbed only if it is no taller than the leg. Climbing stops
    at the first step that is too tall.
    """
    steps = list(steps)
    if not steps:
        raise ValueError("the staircase must have at least one step")
    tallest = list(accumulate(steps, max))
    heights = list(accumulate(steps))
    results = []
    for leg in legs:
        climbed = bisect_right(tallest, leg)
        results.append(heights[climbed - 1] if climbed else 0)
    return results


def _solve(take):
    n, k = take(), take()
    steps = [take() for _ in range(n)]
    legs = [take() for _ in range(k)]
    return "".join(f"{value} " for value in max_heights(steps, legs)) + "\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)