import pytest

from problemset1200.districts_connection import connect_districts, run


def _component_count(n, edges):
    parent = list(range(n + 1))

    def find(x):
        while parent[x] != x:
            parent[x] = parent[parent[x]]
            x = parent[x]
        return x

    for u, v in edges:
        parent[find(u)] = find(v)
    return len({find(i) for i in range(1, n + 1)})


@pytest.mark.parametrize(
    "gangs",
    [[1, 2, 2, 1, 3], [1, 2, 1, 2], [7, 7, 7, 1], [1, 2], [5, 4, 3, 2, 1]],
)
def test_roads_form_valid_tree(gangs):
    roads = connect_districts(gangs)
    assert len(roads) == len(gangs) - 1
    assert all(gangs[u - 1] != gangs[v - 1] for u, v in roads)
    assert _component_count(len(gangs), roads) == 1


def test_single_gang_is_impossible():
    assert connect_districts([1, 1, 1]) is None


def test_run_formats_output():
    out = run("2\n5\n1 2 2 1 3\n3\n1 1 1\n").splitlines()
    assert out[0] == "YES"
    assert out[-1] == "NO"
    assert len(out) == 1 + 4 + 1


def test_run_truncated_input_raises():
    with pytest.raises(ValueError):
        run("1\n3\n1 2")