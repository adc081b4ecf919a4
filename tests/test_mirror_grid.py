import pytest

from problemset1200.mirror_grid import min_flips, run


def _rotate(grid):
    n = len(grid)
    return ["".join(grid[n - 1 - r][c] for r in range(n)) for c in range(n)]


def test_sample_case():
    assert run("1\n3\n010\n110\n010\n") == "1\n"


def test_uniform_grids_need_nothing():
    assert min_flips(["000", "000", "000"]) == 0
    assert min_flips(["1111"] * 4) == 0


def test_single_corner_needs_one_flip():
    assert min_flips(["100", "000", "000"]) == 1


def test_rotation_does_not_change_answer():
    grid = ["10110", "01001", "11100", "00011", "10101"]
    assert min_flips(grid) == min_flips(_rotate(grid))


def test_symmetric_grid_needs_nothing():
    grid = ["0110", "1001", "1001", "0110"]
    assert grid == _rotate(grid)
    assert min_flips(grid) == 0


def test_one_by_one_grid():
    assert min_flips(["1"]) == 0


def test_non_square_raises():
    with pytest.raises(ValueError):
        min_flips(["01", "1"])


def test_bad_characters_raise():
    with pytest.raises(ValueError):
        min_flips(["0a", "10"])