"""Shortest, then lexicographically smallest, string that is not a substring."""

from itertools import count, product
from string import ascii_lowercase

from .and_big_sum import _each_case


def shortest_absent(text):
    """Return the shortest lowercase string absent from ``text``, smallest first."""
    if any(c not in ascii_lowercase for c in text):
        raise ValueError("text must contain lowercase letters only")
    for length in count(1):
        present = {text[i:i + length] for i in range(len(text) - length + 1)}
        for letters in product(ascii_lowercase, repeat=length):
            candidate = "".join(letters)
            if candidate not in present:
                return candidate


def _solve(take):
    n = int(take())
    string = take()
    if len(string) != n:
        raise ValueError("string length does not match n")
    return f"{shortest_absent(string)}\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)