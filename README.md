# loopgrid

Classic loop and matrix exercises as plain, importable Python functions.
The package has no runtime dependencies.

## What is in it

- `loopgrid.numbers`: `count_digits`, `is_armstrong`, `armstrong_numbers`,
  `reverse_digits`, `palindromes`, `is_perfect`, `perfect_numbers`,
  `is_prime`, `primes`, `factorial`, `fibonacci`, `fibonacci_series`,
  `inverse_power_sum` and `mean_inverse_sqrt`.
- `loopgrid.complexity`: counts of how often loop bodies run for sequential,
  nested, doubling, halving, squaring, power-tower and triangular loops, plus
  `comparison_cost` (loop-control steps and body runs of two nested loops)
  and `numbered_grid`.
- `loopgrid.loops`: `ascii_table`, `odd_numbers` (continue),
  `pairs_before_diagonal` and `rows_until` (break), `pairs_off_diagonal`,
  `control_flow_trace` (the order in which a counting loop's parts run),
  `parity` and `wrap_until_negative` (where a signed counter wraps).
- `loopgrid.patterns`: star pyramids and diamonds, number triangles,
  palindromic pyramids, Floyd's triangle and Pascal's triangle, each
  returning a list of lines; `render` joins them into text.
- `loopgrid.matrix_ops`: `format_matrix`, `random_matrix`, `add`,
  `subtract`, `transpose`, `multiply`, `row_sums`, `column_sums` and
  `is_idempotent`.
- `loopgrid.matrix_stats`: row and column maxima and minima, the principal
  and secondary diagonals, and the four triangular parts of a matrix
  (`Triangle`, `in_triangle`, `triangle`, `format_triangle`).
- `loopgrid.transforms`: horizontal and vertical flips, clockwise and
  anticlockwise rotation, and folds across the diagonals and the middle.
- `loopgrid.traversal`: `zigzag_diagonals` and `spiral_order`.
- `loopgrid.sparse`: `count_nonzero`, `compact` (row, column, value entries)
  and `format_compact`.
- `loopgrid.sudoku`: `has_duplicate`, `rows_valid`, `columns_valid`,
  `boxes_valid` and `is_valid_solution` for a completed 9x9 grid.
- `loopgrid.minesweeper`: `place_mines`, `add_hints` and `format_board`.
- `loopgrid.bitmatrix`: `BitMatrix`, a 0/1 matrix packed into 32-bit words,
  with `set`, `reset`, `get`, `populate`, `storage_bytes` and `wasted_bits`.
- `loopgrid.cipher`: `xor_matrices`, and `encrypt` / `decrypt` that combine
  two XOR keys with a transpose.

Functions raise `ValueError` for inputs they cannot handle, such as matrices
of mismatched sizes or a negative factorial.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
loopgrid-patterns [rows] [--pattern NAME]
```

prints a text pattern. Without `rows` it asks for the number of rows.
`--pattern` picks one of: `arrow`, `descending`, `diamond`, `floyd`,
`floyd-diamond`, `inverted-descending`, `inverted-floyd`,
`inverted-numbers`, `inverted-palindrome`, `inverted-pascal`,
`inverted-right-aligned`, `numbers`, `palindrome`, `palindrome-diamond`,
`pascal`, `pascal-diamond`, `pyramid` (the default) and `right-aligned`.

## Library use

```python
from loopgrid.numbers import is_armstrong, primes, factorial
from loopgrid.traversal import spiral_order
from loopgrid.patterns import pascal_triangle, render

is_armstrong(153)          # True
primes(20)                 # [2, 3, 5, 7, 11, 13, 17, 19]
factorial(20)              # 2432902008176640000

spiral_order([[1, 2, 3],
              [4, 5, 6],
              [7, 8, 9]])  # [1, 2, 3, 6, 9, 8, 7, 4, 5]

print(render(pascal_triangle(5)))
```

Randomised helpers (`random_matrix`, `place_mines`, `BitMatrix.populate`)
take an optional `random.Random`, so results can be reproduced with a seed:

```python
import random
from loopgrid.minesweeper import place_mines, add_hints, format_board

board = add_hints(place_mines(10, 5, 12, random.Random(7)))
print(format_board(board))
```

## What it does not do

The Minesweeper and Sudoku modules only build and check boards; there is no
playable game. The only command is `loopgrid-patterns`; everything else is
used from Python.