"""Connect districts by roads so that no road joins two districts of one gang."""


def connect_districts(gangs):
    """Return n-1 roads (1-based pairs) forming a tree, or None if impossible."""
    gangs = list(gangs)
    edges = []
    reached = set()
    for i, gang_i in enumerate(gangs, 1):
        for j, gang_j in enumerate(gangs, 1):
            if i != j and gang_i != gang_j and j not in reached:
                edges.append((i, j))
                reached.add(j)
    if len(edges) < len(gangs) - 1:
        return None
    seen = set()
    tree = []
    for u, v in edges:
        if u not in seen or v not in seen:
            tree.append((u, v))
        seen.update((u, v))
    return tree


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
        gangs = [take() for _ in range(n)]
        roads = connect_districts(gangs)
        if roads is None:
            lines.append("NO\n")
            continue
        lines.append("YES\n")
        lines.extend(f"{u} {v}\n" for u, v in roads)
    return "".join(lines)