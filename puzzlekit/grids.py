"""Puzzles over two-dimensional grids."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))

Cell = tuple[int, int]


def _neighbours(i: int, j: int, rows: int, cols: int) -> Iterator[Cell]:
    for di, dj in _DIRECTIONS:
        x, y = i + di, j + dj
        if 0 <= x < rows and 0 <= y < cols:
            yield x, y


def closed_island(grid: Sequence[Sequence[int]]) -> int:
    """Count islands of land (0) that touch no edge of the grid.

    The grid is not modified.
    """
    rows, cols = len(grid), len(grid[0])
    land = {(i, j) for i, row in enumerate(grid) for j, cell in enumerate(row) if cell == 0}
    closed = 0
    while land:
        stack = [land.pop()]
        touches_edge = False
        while stack:
            i, j = stack.pop()
            if i in (0, rows - 1) or j in (0, cols - 1):
                touches_edge = True
            for cell in _neighbours(i, j, rows, cols):
                if cell in land:
                    land.remove(cell)
                    stack.append(cell)
        if not touches_edge:
            closed += 1
    return closed


def shift_grid(grid: Sequence[Sequence[int]], k: int) -> list[list[int]]:
    """Return the grid with every element moved ``k`` places forward in row-major order."""
    rows, cols = len(grid), len(grid[0])
    flat = [value for row in grid for value in row]
    total = rows * cols
    cut = total - k % total
    rotated = flat[cut:] + flat[:cut]
    return [rotated[start : start + cols] for start in range(0, total, cols)]


def highest_ranked_k_items(
    grid: Sequence[Sequence[int]],
    pricing: Sequence[int],
    start: Sequence[int],
    k: int,
) -> list[list[int]]:
    """Return up to ``k`` positions of items priced within ``pricing``, best ranked first.

    Items rank by distance from ``start``, then price, then row, then column.
    Cells holding 0 are walls.
    """
    rows, cols = len(grid), len(grid[0])
    low, high = pricing
    row, col = start
    ranked: list[list[int]] = []

    if low <= grid[row][col] <= high:
        ranked.append([row, col])
        if k == 1:
            return ranked

    seen = {(row, col)}
    frontier = [(row, col)]
    while frontier:
        next_frontier: list[Cell] = []
        for i, j in frontier:
            for x, y in _neighbours(i, j, rows, cols):
                if not grid[x][y] or (x, y) in seen:
                    continue
                seen.add((x, y))
                next_frontier.append((x, y))
        in_range = sorted(
            ((x, y) for x, y in next_frontier if low <= grid[x][y] <= high),
            key=lambda cell: (grid[cell[0]][cell[1]], cell[0], cell[1]),
        )
        for x, y in in_range:
            if len(ranked) < k:
                ranked.append([x, y])
            if len(ranked) == k:
                return ranked
        frontier = next_frontier
    return ranked


def _locate(grid: Sequence[Sequence[str]], mark: str) -> Cell:
    for i, row in enumerate(grid):
        for j, cell in enumerate(row):
            if cell == mark:
                return i, j
    raise ValueError(f"grid has no {mark!r} cell")


def _is_open(grid: Sequence[Sequence[str]], i: int, j: int) -> bool:
    return 0 <= i < len(grid) and 0 <= j < len(grid[0]) and grid[i][j] != "#"


def _can_reach(grid: Sequence[Sequence[str]], player: Cell, goal: Cell, box: Cell) -> bool:
    seen = {player}
    queue = deque([player])
    while queue:
        i, j = queue.popleft()
        if (i, j) == goal:
            return True
        for di, dj in _DIRECTIONS:
            cell = (i + di, j + dj)
            if cell in seen or cell == box or not _is_open(grid, *cell):
                continue
            seen.add(cell)
            queue.append(cell)
    return False


def min_push_box(grid: Sequence[Sequence[str]]) -> int:
    """Return the fewest pushes that move the box 'B' onto 'T', or -1 if impossible.

    'S' marks the player, '#' a wall and '.' open floor.
    """
    box = _locate(grid, "B")
    player = _locate(grid, "S")
    target = _locate(grid, "T")

    seen = {(box, player)}
    frontier = [(box, player)]
    pushes = 0
    while frontier:
        next_frontier: list[tuple[Cell, Cell]] = []
        for box_at, player_at in frontier:
            if box_at == target:
                return pushes
            bx, by = box_at
            for dx, dy in _DIRECTIONS:
                moved = (bx + dx, by + dy)
                if not _is_open(grid, *moved) or (moved, box_at) in seen:
                    continue
                behind = (bx - dx, by - dy)
                if not _is_open(grid, *behind):
                    continue
                if _can_reach(grid, player_at, behind, box_at):
                    seen.add((moved, box_at))
                    next_frontier.append((moved, box_at))
        frontier = next_frontier
        pushes += 1
    return -1