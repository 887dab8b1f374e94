# drillbook

Solutions to classic practice problems: counting, sequence construction and
exhaustive search. Each problem is a plain Python function that takes ordinary
values and returns ordinary values. The package has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

### `drillbook.counting`

Closed-form and dynamic-programming counts. `MOD` is 1 000 000 007.

- `dice_combinations(n)`: number of ordered sequences of die throws (1 to 6)
  that sum to `n`, modulo `MOD`.
- `bit_strings(n)`: number of bit strings of length `n`, modulo `MOD`.
- `trailing_zeros(n)`: number of trailing zeros of `n!`.
- `two_knights(n)`: a list with, for every board size 1..n, the number of ways
  to place two knights that do not attack each other.
- `number_spiral(row, col)`: the value at a 1-based cell of the number spiral.
- `digit_query(k)`: answers a digit query for position `k` by working through
  blocks of numbers with the same digit count.
- `coin_piles(a, b)`: `True` if both piles can be emptied by repeatedly taking
  two coins from one pile and one from the other.

Negative arguments, and `row`, `col` or `k` below 1, raise `ValueError`.

### `drillbook.sequences`

- `weird_algorithm(n)`: the sequence from `n` to 1 under "halve if even,
  otherwise 3n+1".
- `missing_number(n, numbers)`: the one value of 1..n missing from `numbers`
  (which must hold exactly `n - 1` values).
- `increasing_array(values)`: minimum total increments that make `values`
  non-decreasing.
- `repetitions(s)`: length of the longest run of a single repeated character.
- `beautiful_permutation(n)`: a permutation of 1..n in which no neighbours
  differ by exactly 1.
- `palindrome_reorder(s)`: the capital letters of `s` rearranged into a
  palindrome.
- `two_sets(n)`: two lists that split 1..n into halves with equal sums.
- `gray_code(n)`: the reflected Gray code of `n` bits as bit strings.

When an input has no answer, these raise `NoSolution`, a subclass of
`ValueError`.

### `drillbook.search`

Backtracking and recursion:

- `apple_division(weights)`: smallest difference between the total weights of
  two groups.
- `count_queen_placements(board)`: ways to place eight non-attacking queens on
  an 8x8 board given as eight strings, where `*` marks a blocked cell.
- `count_distinct_strings(s)` and `distinct_strings(s)`: the number of distinct
  rearrangements of a lowercase string, and a generator of them in
  alphabetical order.
- `count_grid_paths(path)`: number of 48-move paths over a 7x7 grid from the
  top-left to the bottom-left corner that visit every cell; each character of
  `path` is a fixed move (`D`, `U`, `R`, `L`) or `?` for any move.
- `tower_of_hanoi(n)`: the list of `(from_peg, to_peg)` moves that carry `n`
  disks from peg 1 to peg 3.

## Example

```python
from drillbook.counting import bit_strings, dice_combinations, trailing_zeros
from drillbook.search import apple_division
from drillbook.sequences import NoSolution, beautiful_permutation

dice_combinations(3)             # 4
bit_strings(3)                   # 8
trailing_zeros(20)               # 4
apple_division([3, 2, 7, 4, 1])  # 1
beautiful_permutation(4)         # [2, 4, 1, 3]

try:
    beautiful_permutation(3)
except NoSolution as exc:
    print(exc)                   # NO SOLUTION
```

## Command line

Installing the package provides a `drillbook` command with four subcommands:

```
drillbook permutation 5
drillbook two-sets 7
drillbook hanoi 3
drillbook coin-piles 2 1 2 2 3 3
```

- `permutation N` prints a permutation of 1..N on one line, or `NO SOLUTION`.
- `two-sets N` prints `YES`, then the size and members of each set, or `NO`.
- `hanoi N` prints the number of moves, then one `from to` pair per line.
- `coin-piles A B [A B ...]` prints `YES` or `NO` for each pair of piles.

`drillbook --help` lists them.

## What it does not do

Only the four problems above are available from the command line; every other
problem is reached by calling its function from Python.