# problemset1200

Thirty solved algorithmic problems of moderate difficulty. Each problem lives
in its own module and offers two ways in:

- a function that solves one test case from Python values, and
- `run(text)`, which takes the whole problem input as text in the usual judge
  format and returns the whole expected output as text.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the functions

```python
from problemset1200.and_big_sum import count_arrays
from problemset1200.cat_cycle import cat_position

count_arrays(2, 2)     # 4
cat_position(2, 1)     # 1
```

Functions raise `ValueError` on input that breaks a problem's conditions
(for example strings of different lengths where equal lengths are needed);
`stone_age.process_queries` raises `IndexError` for a position out of range.

| Module | Function | Answers |
| --- | --- | --- |
| `and_big_sum` | `count_arrays(n, k)` | `n**k` modulo 10^9+7 |
| `assembly_via_minimum` | `restore_array(n, values)` | an array whose pairwise minimums are `values` |
| `binary_deque` | `min_removals(target, bits)` | fewest end removals to reach sum `target`, or -1 |
| `cat_cycle` | `cat_position(n, k)` | cat B's spot at hour `k` |
| `contrast_value` | `min_contrast_size(values)` | shortest subsequence with the same contrast |
| `differential_sorting` | `plan_operations(values)` | list of `(x, y, z)` operations, or `None` |
| `districts_connection` | `connect_districts(gangs)` | list of roads, or `None` |
| `dolce_vita` | `count_packs(budget, prices)` | total packs bought |
| `dora_and_search` | `find_segment(permutation)` | a 1-based `(l, r)`, or `None` |
| `flip_the_bits` | `can_transform(a, b)` | `True` or `False` |
| `friends_restaurant` | `max_days(spend, budget)` | most restaurant days |
| `long_multiplication` | `maximize_product(x, y)` | the two digit strings with the largest product |
| `m_arrays` | `min_arrays(values, m)` | fewest m-divisible arrays |
| `almost_equal_mod` | `choose_modulus(values)` | a `k` leaving exactly two residues |
| `make_them_equal` | `min_operations(char, text)` | list of chosen `x` values |
| `mirror_grid` | `min_flips(grid)` | fewest flips for rotational symmetry |
| `plus_minus_permutation` | `max_score(n, x, y)` | best permutation score |
| `mex_string` | `shortest_absent(text)` | shortest, then smallest, absent string |
| `smallest_multiples` | `min_total_cost(bits)` | least total removal cost |
| `rock_and_lever` | `count_pairs(values)` | pairs with AND at least XOR |
| `same_differences` | `count_pairs(values)` | pairs with `a_j - a_i == j - i` |
| `scuza` | `max_heights(steps, legs)` | reachable height per leg length |
| `stable_groups` | `min_groups(levels, k, x)` | fewest stable groups |
| `stone_age` | `process_queries(values, queries)` | the array sum after each query |
| `three_activities` | `max_friends(a, b, c)` | most friends met on three distinct days |
| `virus` | `min_infected(n, infected)` | fewest infected houses |
| `matryoshka` | `min_sets(sizes)` | fewest consecutive-size sets |
| `casino` | `total_winnings(rows)` | sum of `abs(a - b)` over player pairs and columns |
| `pleasant_pairs` | `count_pleasant(values)` | pairs with `a_i * a_j == i + j` |
| `vika_bridge` | `min_max_step(planks, k)` | least possible longest jump |

Every module also has `run(text)`:

```python
from problemset1200.and_big_sum import run

print(run("1\n2 2\n"), end="")   # prints 4
```

For most problems the input starts with the number of test cases;
`stable_groups.run` and `stone_age.run` read a single test case.

## Command line

```
problemset1200 PROBLEM [INPUT]
```

`PROBLEM` is one of the names listed by `problemset1200 --help`, such as
`and-big-sum`, `cat-cycle` or `vika-bridge`. The input is read from the file
`INPUT`, or from standard input when it is left out, and the answers are
written to standard output. If the input is malformed the command prints an
error to standard error and exits with status 1.