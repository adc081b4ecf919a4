"""Swap digits at equal positions of two numbers to maximise their product."""

from .and_big_sum import _each_case


def maximize_product(x, y):
    """Return the pair of digit strings with the largest product.

    Digits may only be swapped between equal positions of ``x`` and ``y``.
    """
    if len(x) != len(y):
        raise ValueError("numbers must have the same number of digits")
    if not (x + y).isdigit():
        raise ValueError("numbers must consist of digits only")
    first, second = [], []
    differed = False
    for a, b in zip(x, y):
        if (a > b) == differed:
            a, b = b, a
        differed |= a != b
        first.append(a)
        second.append(b)
    return "".join(first), "".join(second)


def _solve(take):
    first, second = maximize_product(take(), take())
    return f"{first}\n{second}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)