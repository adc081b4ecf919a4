"""Command line entry: solve one problem from judge-style input."""

import argparse
import sys

from problemset1200 import (
    almost_equal_mod,
    and_big_sum,
    assembly_via_minimum,
    binary_deque,
    casino,
    cat_cycle,
    contrast_value,
    differential_sorting,
    districts_connection,
    dolce_vita,
    dora_and_search,
    flip_the_bits,
    friends_restaurant,
    long_multiplication,
    m_arrays,
    make_them_equal,
    matryoshka,
    mex_string,
    mirror_grid,
    pleasant_pairs,
    plus_minus_permutation,
    rock_and_lever,
    same_differences,
    scuza,
    smallest_multiples,
    stable_groups,
    stone_age,
    three_activities,
    vika_bridge,
    virus,
)

PROBLEMS = {
    "and-big-sum": and_big_sum.run,
    "assembly-via-minimum": assembly_via_minimum.run,
    "binary-deque": binary_deque.run,
    "cat-cycle": cat_cycle.run,
    "contrast-value": contrast_value.run,
    "differential-sorting": differential_sorting.run,
    "districts-connection": districts_connection.run,
    "dolce-vita": dolce_vita.run,
    "dora-and-search": dora_and_search.run,
    "flip-the-bits": flip_the_bits.run,
    "friends-restaurant": friends_restaurant.run,
    "long-multiplication": long_multiplication.run,
    "m-arrays": m_arrays.run,
    "almost-equal-mod": almost_equal_mod.run,
    "make-them-equal": make_them_equal.run,
    "mirror-grid": mirror_grid.run,
    "plus-minus-permutation": plus_minus_permutation.run,
    "mex-string": mex_string.run,
    "smallest-multiples": smallest_multiples.run,
    "rock-and-lever": rock_and_lever.run,
    "same-differences": same_differences.run,
    "scuza": scuza.run,
    "stable-groups": stable_groups.run,
    "stone-age": stone_age.run,
    "three-activities": three_activities.run,
    "virus": virus.run,
    "matryoshka": matryoshka.run,
    "casino": casino.run,
    "pleasant-pairs": pleasant_pairs.run,
    "vika-bridge": vika_bridge.run,
}


def main(argv=None):
    """Read a problem's input from a file or stdin, print its answers, return the exit code."""
    parser = argparse.ArgumentParser(
        prog="problemset1200",
        description="Solve a problem from its judge-style input.",
    )
    parser.add_argument("problem", choices=sorted(PROBLEMS))
    parser.add_argument("input", nargs="?", help="input file (default: standard input)")
    args = parser.parse_args(argv)

    if args.input is None:
        text = sys.stdin.read()
    else:
        with open(args.input, encoding="utf-8") as stream:
            text = stream.read()

    try:
        output = PROBLEMS[args.problem](text)
    except (ValueError, IndexError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())