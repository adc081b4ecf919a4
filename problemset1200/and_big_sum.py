"""Count arrays of length n with elements below 2**k, AND equal to 0 and maximal sum."""

MOD = 10**9 + 7


def _token_reader(text, convert=int):
    """Return a function that gives the next whitespace-separated token of ``text``."""
    tokens = iter(text.split())

    def take():
        try:
            return convert(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    return take


def _each_case(text, solve, convert=int):
    """Read the case count, call ``solve(take)`` per case and join its outputs."""
    take = _token_reader(text, convert)
    return "".join(solve(take) for _ in range(int(take())))


def count_arrays(n, k):
    """Return n**k modulo MOD, the number of such arrays."""
    if n < 0 or k < 0:
        raise ValueError("n and k must be non-negative")
    return pow(n, k, MOD)


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    return _each_case(text, lambda take: f"{count_arrays(take(), take())}\n")