"""Fewest removals from both ends of a 0/1 array to reach a given sum."""

from .and_big_sum import _each_case


def min_removals(target, bits):
    """Return the fewest end removals leaving sum ``target``, or -1 if impossible."""
    if target < 1:
        raise ValueError("target must be positive")
    bits = list(bits)
    if target > sum(bits):
        return -1
    size = len(bits)
    left = right = window = best = 0
    while right < size:
        while right < size and window + bits[right] <= target:
            window += bits[right]
            right += 1
        best = max(best, right - left)
        while left < right and window >= target:
            window -= bits[left]
            left += 1
    return size - best


def _solve(take):
    n, target = take(), take()
    bits = [take() for _ in range(n)]
    return f"{min_removals(target, bits)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)