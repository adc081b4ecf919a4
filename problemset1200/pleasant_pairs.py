"""Count index pairs i < j with a_i * a_j == i + j."""


def count_pleasant(values):
    """Return the number of 1-based pairs i < j with a_i * a_j equal to i + j."""
    values = list(values)
    if any(value < 1 for value in values):
        raise ValueError("values must be positive")
    n = len(values)
    total = 0
    for i, step in enumerate(values, 1):
        partner = 2 * i // step + 1
        for j in range(step * partner - i, n + 1, step):
            if values[j - 1] == partner:
                total += 1
            partner += 1
    return total


def run(text):
    """Solve every test case in ``text`` and return the printed answers."""
    tokens = iter(text.split())

    def take():
        try:
            return int(next(tokens))
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    lines = []
    for _ in range(take()):
        n = take()
        values = [take() for _ in range(n)]
        lines.append(f"{count_pleasant(values)}\n")
    return "".join(lines)