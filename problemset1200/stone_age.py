"""Keep the array sum through point assignments and whole-array fills."""

from .and_big_sum import _token_reader


def process_queries(values, queries):
    """Return the array sum after each query.

    A query ``(1, i, x)`` sets the 1-based element ``i`` to ``x``; a query
    ``(2, x)`` sets every element to ``x``.
    """
    values = list(values)
    n = len(values)
    overrides = dict(enumerate(values))
    fill = 0
    total = sum(values)
    totals = []
    for query in queries:
        kind, *args = query
        if kind == 1:
            index, x = args
            if not 1 <= index <= n:
                raise IndexError("position out of range")
            current = overrides.get(index - 1, 0) or fill
            total += x - current
            overrides[index - 1] = x
        elif kind == 2:
            (x,) = args
            total = n * x
            overrides.clear()
            fill = x
        else:
            raise ValueError(f"unknown query type {kind}")
        totals.append(total)
    return totals


def run(text):
    """Solve the single test case in ``text`` and return the printed answers."""
    take = _token_reader(text)
    n, q = take(), take()
    values = [take() for _ in range(n)]
    queries = []
    for _ in range(q):
        kind = take()
        if kind == 1:
            queries.append((1, take(), take()))
        else:
            queries.append((kind, take()))
    return "".join(f"{total}\n" for total in process_queries(values, queries))