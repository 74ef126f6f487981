# puzzlekit

A collection of compact solutions to classic algorithmic puzzles, grouped by
theme. It is plain Python with no runtime dependencies. Every function takes
ordinary Python values, such as lists, strings and tuples, and returns a
result.

## Installation

```
pip install .
```

## Modules

- `puzzlekit.arrays`: problems over integer sequences and small matrices:
  `earliest_full_bloom`, `equalize_water`, `is_good_array`,
  `number_of_arrays`, `find_lonely`, `max_run_time`, `min_swaps`,
  `minimum_cost`, `rearrange_array`, `count_elements`, `min_moves`,
  `odd_cells` and `check_valid`.
- `puzzlekit.dynamic`: dynamic programming and exhaustive search:
  `most_points`, `corridor_ways`, `max_sum_div_three`, `handshake_ways`,
  `count_subranges`, `max_score_words` and `maximum_good`. Counting results
  from `corridor_ways`, `handshake_ways` and `count_subranges` are taken
  modulo 1,000,000,007 (exported as `MOD`).
- `puzzlekit.text`: strings, words and named hierarchies: `encode`,
  `word_count`, `divide_string`, `generate_sentences` and
  `find_smallest_region`. `encode` and `find_smallest_region` raise
  `ValueError` when there is no answer.
- `puzzlekit.grids`: grid traversal: `closed_island` (leaves the grid
  unchanged), `shift_grid`, `highest_ranked_k_items` and `min_push_box`
  (returns -1 when the box cannot reach the target, and raises `ValueError`
  if the grid lacks a `B`, `S` or `T` cell).
- `puzzlekit.trees`: `TreeNode`, a dataclass with `val`, `left` and `right`,
  and `FindElements`, which restores a tree's values (root 0, children
  `2v+1` and `2v+2`) and answers lookups through `find(target)` or the `in`
  operator.
- `puzzlekit.social`: `recommend_pages(friendships, likes, user_id=1)`, which
  returns, sorted, the pages liked by a user's friends that the user does not
  already like.

## Example

```python
from puzzlekit.arrays import minimum_cost
from puzzlekit.dynamic import most_points
from puzzlekit.text import divide_string
from puzzlekit.trees import FindElements, TreeNode

minimum_cost([6, 5, 7, 9, 2, 2])              # 23
most_points([[3, 2], [4, 3], [4, 4], [2, 5]])  # 5
divide_string("abcdefghij", 3, "x")           # ['abc', 'def', 'ghi', 'jxx']

tree = FindElements(TreeNode(right=TreeNode()))
tree.find(2)   # True
1 in tree      # False
```

## What it does not do

puzzlekit is a library only. It has no command-line program, and
`recommend_pages` works on in-memory pairs rather than on a database.

## Running the tests

```
pip install ".[test]"
pytest
```