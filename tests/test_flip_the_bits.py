import random

import pytest

from problemset1200.flip_the_bits import can_transform, run


def _flip_balanced_prefixes(text, rng, rounds):
    bits = list(text)
    for _ in range(rounds):
        ends = []
        level = 0
        for position, bit in enumerate(bits, 1):
            level += 1 if bit == "1" else -1
            if level == 0:
                ends.append(position)
        if not ends:
            break
        end = rng.choice(ends)
        bits[:end] = ["1" if bit == "0" else "0" for bit in bits[:end]]
    return "".join(bits)


def test_run_samples():
    text = (
        "5\n10\n0111010000\n0100101100\n4\n0000\n0000\n3\n001\n000\n"
        "12\n010101010101\n100110011010\n6\n000111\n110100\n"
    )
    assert run(text) == "YES\nYES\nNO\nYES\nNO\n"


@pytest.mark.parametrize("text", ["0", "1", "0101", "111000", "0011010"])
def test_identity_is_reachable(text):
    assert can_transform(text, text) is True


def test_unbalanced_change_is_unreachable():
    assert can_transform("001", "000") is False


@pytest.mark.parametrize("seed", range(8))
def test_flipped_balanced_prefixes_are_reachable(seed):
    rng = random.Random(seed)
    source = "".join(rng.choice("01") for _ in range(16))
    target = _flip_balanced_prefixes(source, rng, 5)
    assert can_transform(source, target) is True


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        can_transform("01", "011")


def test_non_binary_raises():
    with pytest.raises(ValueError):
        can_transform("0a", "01")


def test_run_wrong_length_raises():
    with pytest.raises(ValueError):
        run("1\n3\n01\n10\n")