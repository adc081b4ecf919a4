import pytest

from problemset1200.stable_groups import min_groups, run


def test_first_example():
    assert min_groups([1, 1, 5, 8, 12, 13, 20, 22], 2, 3) == 2


def test_second_example_without_extra_students():
    levels = [20, 20, 80, 70, 70, 70, 420, 5, 1, 5, 1, 60, 90]
    assert min_groups(levels, 0, 37) == 3


def test_enough_students_give_one_group():
    assert min_groups([1, 100, 1000], 10**6, 1) == 1


def test_more_students_never_hurt():
    levels = [1, 9, 30, 31, 70, 200]
    results = [min_groups(levels, k, 4) for k in range(0, 60)]
    assert results == sorted(results, reverse=True)
    assert results[-1] == 1


def test_invalid_x():
    with pytest.raises(ValueError):
        min_groups([1, 2], 1, 0)


def test_run_single_case():
    assert run("8 2 3\n1 1 5 8 12 13 20 22\n") == "2\n"