"""Find a segment of a permutation whose ends are neither its minimum nor maximum."""

from .and_big_sum import _each_case


def find_segment(permutation):
    """Return a 1-based (l, r) segment meeting the condition, or None if none exists."""
    values = list(permutation)
    if sorted(values) != list(range(1, len(values) + 1)):
        raise ValueError("input must be a permutation of 1..n")
    low, high = 1, len(values)
    left, right = 0, len(values) - 1
    while left < right:
        if values[left] in (low, high):
            if values[left] == low:
                low += 1
            else:
                high -= 1
            left += 1
        elif values[right] in (low, high):
            if values[right] == low:
                low += 1
            else:
                high -= 1
            right -= 1
        else:
            return left + 1, right + 1
    return None


def _solve(take):
    segment = find_segment([take() for _ in range(take())])
    return "-1\n" if segment is None else f"{segment[0]} {segment[1]}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)