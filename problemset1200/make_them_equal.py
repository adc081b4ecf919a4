"""Fewest operations making every character of a string equal to a given one."""

from .and_big_sum import _each_case


def min_operations(char, text):
    """Return the list of chosen x values, each replacing s[j] for j not divisible by x.

    An empty list means the string already consists of ``char`` only.
    """
    n = len(text)
    if all(c == char for c in text):
        return []
    for x in range(1, n + 1):
        if all(text[j - 1] == char for j in range(x, n + 1, x)):
            return [x]
    return [n, n - 1]


def _solve(take):
    n = int(take())
    char = take()
    string = take()
    if len(string) != n:
        raise ValueError("string length does not match n")
    operations = min_operations(char, string)
    if not operations:
        return "0\n"
    return f"{len(operations)}\n" + " ".join(map(str, operations)) + "\n"


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve, convert=str)