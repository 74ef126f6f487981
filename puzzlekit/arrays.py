"""Puzzles over flat integer sequences and small matrices."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Sequence
from itertools import accumulate, chain

_WATER_TOLERANCE = 1e-5


def earliest_full_bloom(plant_time: Sequence[int], grow_time: Sequence[int]) -> int:
    """Return the earliest day on which every seed is in bloom.

    Seeds that take longest to grow are planted first.
    """
    seeds = sorted(zip(plant_time, grow_time, strict=True), key=lambda seed: seed[1], reverse=True)
    elapsed = 0
    latest = 0
    for plant, grow in seeds:
        elapsed += plant
        latest = max(latest, elapsed + grow)
    return latest


def _can_fill(buckets: Sequence[int], target: float, keep: float) -> bool:
    extra = sum(bucket - target for bucket in buckets if bucket > target)
    need = sum(target - bucket for bucket in buckets if bucket <= target)
    return extra * keep >= need


def equalize_water(buckets: Sequence[int], loss: int) -> float:
    """Return the highest common level reachable when pouring loses ``loss`` percent."""
    keep = (100 - loss) / 100
    low, high = 0.0, float(max(buckets))
    while high - low > _WATER_TOLERANCE:
        middle = (low + high) / 2
        if _can_fill(buckets, middle, keep):
            low = middle
        else:
            high = middle
    return low


def is_good_array(nums: Sequence[int]) -> bool:
    """Return True if some integer combination of ``nums`` sums to one."""
    return math.gcd(*nums) == 1


def number_of_arrays(differences: Sequence[int], lower: int, upper: int) -> int:
    """Count the arrays with the given consecutive differences inside ``[lower, upper]``."""
    prefix = list(accumulate(differences, initial=0))
    return max(0, (upper - lower) - (max(prefix) - min(prefix)) + 1)


def find_lonely(nums: Sequence[int]) -> list[int]:
    """Return the numbers that occur once and have no adjacent value present."""
    counts = Counter(nums)
    return [
        num
        for num, freq in counts.items()
        if freq == 1 and num - 1 not in counts and num + 1 not in counts
    ]


def max_run_time(n: int, batteries: Sequence[int]) -> int:
    """Return the longest time ``n`` computers can run together on the batteries."""
    remaining = sorted(batteries)
    total = sum(remaining)
    # A battery larger than the average can power one computer for the whole run.
    while remaining and remaining[-1] > total // n:
        total -= remaining.pop()
        n -= 1
    return total // n


def min_swaps(nums: Sequence[int]) -> int:
    """Return the fewest swaps that gather every 1 of a circular array together."""
    ones = list(nums).count(1)
    if ones == 0:
        return 0
    flags = [1 if num else 0 for num in nums]
    doubled = flags + flags
    window = sum(doubled[:ones])
    best = window
    for outgoing, incoming in zip(doubled, doubled[ones:]):
        window += incoming - outgoing
        best = max(best, window)
    return ones - best


def minimum_cost(cost: Sequence[int]) -> int:
    """Return the cost of all candies when every third one, cheapest of its group, is free."""
    ordered = sorted(cost, reverse=True)
    return sum(ordered) - sum(ordered[2::3])


def rearrange_array(nums: Sequence[int]) -> list[int]:
    """Interleave positives and negatives, keeping their relative order."""
    positives = [num for num in nums if num > 0]
    negatives = [num for num in nums if num <= 0]
    return [num for pair in zip(positives, negatives, strict=True) for num in pair]


def count_elements(nums: Sequence[int]) -> int:
    """Count elements with both a strictly smaller and a strictly larger element."""
    low, high = min(nums), max(nums)
    return sum(1 for num in nums if low < num < high)


def min_moves(target: int, max_doubles: int) -> int:
    """Return the fewest increments and doublings that take 1 to ``target``."""
    steps = 0
    while target > 1 and max_doubles:
        if target % 2 == 1:
            target -= 1
        else:
            target //= 2
            max_doubles -= 1
        steps += 1
    return steps + target - 1


def odd_cells(m: int, n: int, indices: Sequence[Sequence[int]]) -> int:
    """Count cells holding an odd value after incrementing the listed rows and columns."""
    rows = [False] * m
    cols = [False] * n
    for row, col in indices:
        rows[row] = not rows[row]
        cols[col] = not cols[col]
    odd_rows = sum(rows)
    odd_cols = sum(cols)
    return odd_rows * (n - odd_cols) + (m - odd_rows) * odd_cols


def check_valid(matrix: Sequence[Sequence[int]]) -> bool:
    """Return True if every row and column holds ``n`` distinct values."""
    size = len(matrix)
    return all(len(set(line)) >= size for line in chain(matrix, zip(*matrix)))