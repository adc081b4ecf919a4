"""Sort an array with operations a[x] = a[y] - a[z] for x < y < z."""

from .and_big_sum import _each_case


def plan_operations(values):
    """Return the operations (x, y, z) that sort ``values``, or None if impossible.

    Positions are 1-based. An already sorted array needs no operations.
    """
    values = list(values)
    n = len(values)
    if n < 3:
        raise ValueError("the array must have at least 3 elements")
    if values[-2] > values[-1]:
        return None
    if values == sorted(values):
        return []
    if values[-1] < 0 and values[-2] < 0:
        return None
    return [(i, n - 1, n) for i in range(1, n - 1)]


def _solve(take):
    values = [take() for _ in range(take())]
    operations = plan_operations(values)
    if operations is None:
        return "-1\n"
    return f"{len(operations)}\n" + "".join(f"{x} {y} {z}\n" for x, y, z in operations)


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, _solve)