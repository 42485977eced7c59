# algokit

Classic algorithms, a few small data structures and some console games,
written in plain Python with no third-party dependencies.

## Installation

```
pip install algokit
```

To run the test suite:

```
pip install "algokit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.multi_array` | `MultiArray`, an N-dimensional array on flat row-major storage |
| `algokit.club_list` | `Member`, `ClubList`, a club roster with president first and secretary last |
| `algokit.polynomial` | `Term`, `add_polynomials`, `format_polynomial` |
| `algokit.minesweeper` | `Difficulty`, `Minesweeper` |
| `algokit.craps` | `roll_dice`, `simulate` |
| `algokit.trees` | `TreeNode`, `diameter`, `inorder`, `postorder`, `lowest_common_ancestor` |
| `algokit.strings` | `break_palindrome`, `longest_palindrome`, `longest_common_subsequence`, `count_anagram_occurrences`, `to_24_hour`, `sort_by_alphabet`, `insertion_sort_ignore_case` |
| `algokit.roman` | `roman_value`, `roman_to_decimal`, `parse_roman` |
| `algokit.arrays` | `max_subarray_kadane`, `max_subarray_divide_conquer`, `longest_increasing_subsequence`, `merge_sort`, `find_pair_with_sum`, `bitonic_peak`, `search_bitonic`, `smallest_missing`, `long_sequence_count`, `add_matrices` |
| `algokit.integers` | `binomial`, `catalan`, `fibonacci`, `is_palindrome_number`, `primes_up_to` |
| `algokit.puzzles` | `n_queens`, `number_pattern` |

## Examples

Numbers and puzzles:

```python
from algokit.integers import catalan, fibonacci, primes_up_to
from algokit.puzzles import n_queens
from algokit.roman import roman_to_decimal

[catalan(i) for i in range(10)]
# [1, 1, 2, 5, 14, 42, 132, 429, 1430, 4862]

primes_up_to(30)
# [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]

fibonacci(7)
# [0, 1, 1, 2, 3, 5, 8]

roman_to_decimal("MCMIV")
# 1904

n_queens(4)
# [[2, 4, 1, 3], [3, 1, 4, 2]]
```

Arrays and strings:

```python
from algokit.arrays import max_subarray_kadane, merge_sort
from algokit.strings import longest_palindrome, to_24_hour

max_subarray_kadane([-2, -3, 4, -1, -2, 1, 5, -3])
# SubarraySum(total=7, start=2, end=6)

merge_sort([5, 2, 9, 1])
# [1, 2, 5, 9]

longest_palindrome("forgeeksskeegfor")
# 'geeksskeeg'

to_24_hour("07:05:45PM")
# '19:05:45'
```

Binary search tree lowest common ancestor:

```python
from algokit.trees import TreeNode, lowest_common_ancestor

root = TreeNode(20, TreeNode(8, TreeNode(4), TreeNode(12, TreeNode(10), TreeNode(14))), TreeNode(22))
lowest_common_ancestor(root, 10, 14).data  # 12
lowest_common_ancestor(root, 14, 8).data   # 8
lowest_common_ancestor(root, 10, 22).data  # 20
```

Polynomials, given as terms in descending power:

```python
from algokit.polynomial import Term, add_polynomials, format_polynomial

total = add_polynomials([Term(2, 2), Term(3, 1)], [Term(5, 1), Term(6, 0)])
format_polynomial(total)
# '2x^(2) + 8x^(1) + 6x^(0)'
```

An N-dimensional array addressed by coordinates or by flat index:

```python
from algokit.multi_array import MultiArray

grid = MultiArray(2, 3)
grid.index(1, 2)   # 5
grid[1, 2] = 7
grid[5]            # 7
```

Minesweeper can be played from code as well as from the console; pass a
seeded `random.Random` for a repeatable board:

```python
import random
from algokit.minesweeper import Difficulty, Minesweeper

game = Minesweeper(Difficulty.BEGINNER, random.Random(1))
game.reveal(4, 4)      # False: the first move is always safe
print(game.render())
```

## Command-line programs

```
algokit-minesweeper   # play Minesweeper at beginner, intermediate or advanced level
algokit-craps         # simulate 1000 rounds of craps (or the number given) and print the totals
algokit-roman MCMIV   # print the decimal value of a Roman numeral
algokit-club          # manage two club rosters from a menu
```

## What it does not do

The package has no general-purpose linked list, stack or queue classes,
no graph search, no trie-based algorithms and no number-guessing game.
`ClubList` is the only list-like container, and it is specialised to club
members keyed by PRN number.