import copy

import pytest

from puzzlekit.grids import closed_island, highest_ranked_k_items, min_push_box, shift_grid

ENCLOSED = [[1, 1, 1], [1, 0, 1], [1, 1, 1]]

BOX_GRID = [
    "######",
    "#T####",
    "#..B.#",
    "#.##.#",
    "#...S#",
    "######",
]

PRICE_GRID = [[1, 2, 0, 1], [1, 3, 0, 1], [0, 2, 5, 1]]


def test_closed_island_single_enclosed_cell():
    assert closed_island(ENCLOSED) == 1


def test_closed_island_counts_add_when_blocks_are_joined():
    joined = [left + right for left, right in zip(ENCLOSED, ENCLOSED)]
    assert closed_island(joined) == 2 * closed_island(ENCLOSED)


def test_closed_island_ignores_land_on_edge():
    edge = [[0, 1, 1], [1, 1, 1], [1, 1, 0]]
    assert closed_island(edge) == closed_island([[1] * 3 for _ in range(3)])


def test_closed_island_leaves_grid_untouched():
    grid = [[1, 1, 1, 1], [1, 0, 0, 1], [1, 1, 1, 1]]
    before = copy.deepcopy(grid)
    closed_island(grid)
    assert grid == before


def test_shift_grid_zero_and_full_cycle_are_identity():
    grid = [[1, 2, 3], [4, 5, 6]]
    assert shift_grid(grid, 0) == grid
    assert shift_grid(grid, 6) == grid


def test_shift_grid_by_one_moves_last_to_front():
    grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    shifted = shift_grid(grid, 1)
    flat = [v for row in grid for v in row]
    shifted_flat = [v for row in shifted for v in row]
    assert shifted_flat[0] == flat[-1]
    assert shifted_flat[1:] == flat[:-1]


@pytest.mark.parametrize("k", [1, 2, 5, 7])
def test_shift_grid_composes(k):
    grid = [[1, 2], [3, 4], [5, 6]]
    assert shift_grid(shift_grid(grid, 1), k - 1) == shift_grid(grid, k)


def test_shift_grid_keeps_shape_and_values():
    grid = [[9, 8, 7, 6], [5, 4, 3, 2]]
    shifted = shift_grid(grid, 3)
    assert [len(row) for row in shifted] == [len(row) for row in grid]
    assert sorted(v for row in shifted for v in row) == sorted(v for row in grid for v in row)


def test_highest_ranked_worked_example():
    assert highest_ranked_k_items(PRICE_GRID, [2, 5], [0, 0], 3) == [[0, 1], [1, 1], [2, 1]]


def test_highest_ranked_start_in_range_with_k_one():
    assert highest_ranked_k_items(PRICE_GRID, [1, 5], [1, 1], 1) == [[1, 1]]


def test_highest_ranked_results_in_range_and_distinct():
    result = highest_ranked_k_items(PRICE_GRID, [2, 5], [0, 0], 10)
    assert len(result) <= 10
    assert len({tuple(cell) for cell in result}) == len(result)
    assert all(2 <= PRICE_GRID[x][y] <= 5 for x, y in result)


def test_highest_ranked_smaller_k_is_prefix():
    full = highest_ranked_k_items(PRICE_GRID, [1, 5], [0, 0], 20)
    for k in range(1, len(full) + 1):
        assert highest_ranked_k_items(PRICE_GRID, [1, 5], [0, 0], k) == full[:k]


def test_highest_ranked_walled_in_start():
    grid = [[1, 0], [0, 3]]
    assert not highest_ranked_k_items(grid, [2, 5], [0, 0], 2)


def test_min_push_box_worked_example():
    assert min_push_box(BOX_GRID) == 3


def test_min_push_box_transpose_and_mirror_agree():
    transposed = ["".join(col) for col in zip(*BOX_GRID)]
    mirrored = list(reversed(BOX_GRID))
    expected = min_push_box(BOX_GRID)
    assert min_push_box(transposed) == expected
    assert min_push_box(mirrored) == expected


def test_min_push_box_unreachable():
    grid = [
        "######",
        "#T####",
        "#..B.#",
        "####.#",
        "#...S#",
        "######",
    ]
    assert min_push_box(grid) == -1


def test_min_push_box_missing_box():
    with pytest.raises(ValueError):
        min_push_box(["#T.S#"])