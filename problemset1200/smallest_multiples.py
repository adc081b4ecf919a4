"""Cheapest way to remove elements of 1..n leaving exactly the kept ones."""

from .and_big_sum import _each_case


def min_total_cost(bits):
    """Return the least total cost of removals turning 1..n into ``bits``.

    ``bits[i-1]`` is "1" if i stays and "0" if it must go. Removing the
    smallest multiple of k still present costs k.
    """
    if set(bits) - {"0", "1"}:
        raise ValueError("bits must contain only 0 and 1")
    n = len(bits)
    cost = [0] * (n + 1)
    for step in range(n, 0, -1):
        if bits[step - 1] != "0":
            continue
        for j in range(step, n + 1, step):
            if bits[j - 1] == "1":
                break
            cost[j] = step
    return sum(cost)


def _solve(take):
    n = int(take())
    bits = take()
    if len(bits) != n:
        raise ValueError("string length does not match n")
    return f"{min_total_cost(bits)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)