import pytest

from problemset1200.smallest_multiples import min_total_cost, run


def test_statement_example():
    assert min_total_cost("0010") == 4


@pytest.mark.parametrize("n", [1, 4, 6, 50])
def test_nothing_to_remove(n):
    assert min_total_cost("1" * n) == 0


@pytest.mark.parametrize("n", [1, 4, 7, 100])
def test_removing_everything_costs_one_each(n):
    assert min_total_cost("0" * n) == n


@pytest.mark.parametrize("bits", ["1101001", "10010101", "0110", "1000000", "0101010101"])
def test_cost_bounds(bits):
    cost = min_total_cost(bits)
    zeros = [i for i, c in enumerate(bits, 1) if c == "0"]
    assert len(zeros) <= cost <= sum(zeros)


def test_removing_only_n_costs_at_most_n():
    assert min_total_cost("1111110") == 7


@pytest.mark.parametrize("bits", ["012", "abc", "1 0"])
def test_rejects_non_binary(bits):
    with pytest.raises(ValueError):
        min_total_cost(bits)


def test_run_formats_each_case():
    assert run("2\n4\n0000\n6\n111111\n") == "4\n0\n"


def test_run_length_mismatch():
    with pytest.raises(ValueError):
        run("1\n5\n0000\n")