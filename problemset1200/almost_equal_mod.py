"""Choose k so that the array taken modulo k has exactly two distinct values."""

from functools import reduce
from math import gcd

from .and_big_sum import _each_case


def choose_modulus(values):
    """Return twice the gcd of the differences of neighbouring values."""
    values = list(values)
    common = reduce(gcd, (abs(a - b) for a, b in zip(values, values[1:])), 0)
    return 2 * common


def _solve(take):
    values = [take() for _ in range(take())]
    return f"{choose_modulus(values)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)