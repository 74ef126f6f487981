"""Puzzles solved by dynamic programming and exhaustive search."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

MOD = 1_000_000_007


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Return the most points earned when solving a question skips the next ``brainpower``."""
    count = len(questions)
    best = [0] * (count + 1)
    for index, (points, brainpower) in reversed(list(enumerate(questions))):
        following = index + brainpower + 1
        next_points = best[following] if following < count else 0
        best[index] = max(points + next_points, best[index + 1])
    return best[0]


def corridor_ways(corridor: str) -> int:
    """Count the ways to divide a corridor into sections of exactly two seats."""
    ways = 1
    previous_seat = -1
    seats = 0
    for position, spot in enumerate(corridor):
        if spot != "S":
            continue
        seats += 1
        if seats > 2 and seats % 2 == 1:
            ways = ways * (position - previous_seat) % MOD
        previous_seat = position
    return ways if seats > 1 and seats % 2 == 0 else 0


def max_sum_div_three(nums: Sequence[int]) -> int:
    """Return the largest subset sum divisible by three."""
    best = [0, 0, 0]
    for num in nums:
        for total in tuple(best):
            candidate = total + num
            best[candidate % 3] = max(best[candidate % 3], candidate)
    return best[0]


def handshake_ways(num_people: int) -> int:
    """Count the non-crossing ways people around a table can shake hands, modulo 1e9+7."""
    pairs = num_people // 2
    ways = [1] + [0] * pairs
    for total in range(1, pairs + 1):
        ways[total] = sum(ways[inner] * ways[total - 1 - inner] for inner in range(total)) % MOD
    return ways[pairs]


def count_subranges(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Count balanced choices over all subranges, modulo 1e9+7.

    Each index of a range contributes ``nums1[i]`` or ``-nums2[i]``; a choice is
    balanced when the contributions sum to zero.
    """
    answer = 0
    sums: Counter[int] = Counter()
    for first, second in zip(nums1, nums2, strict=True):
        updated: Counter[int] = Counter()
        updated[first] += 1
        updated[-second] += 1
        for previous, count in sums.items():
            updated[previous + first] = (updated[previous + first] + count) % MOD
            updated[previous - second] = (updated[previous - second] + count) % MOD
        sums = updated
        answer = (answer + sums.get(0, 0)) % MOD
    return answer


def max_score_words(words: Sequence[str], letters: Sequence[str], score: Sequence[int]) -> int:
    """Return the best score of a set of words formed from the given letters."""
    available = Counter(letters)

    def word_score(word: str) -> int:
        return sum(score[ord(char) - ord("a")] for char in word)

    def search(start: int) -> int:
        best = 0
        for index in range(start, len(words)):
            needed = Counter(words[index])
            if any(available[char] < amount for char, amount in needed.items()):
                continue
            earned = word_score(words[index])
            if earned <= 0:
                continue
            available.subtract(needed)
            best = max(best, earned + search(index + 1))
            available.update(needed)
        return best

    return search(0)


def _is_consistent(statements: Sequence[Sequence[int]], mask: int) -> bool:
    for speaker, claims in enumerate(statements):
        if not mask >> speaker & 1:
            continue
        for subject, claim in enumerate(claims):
            if claim != 2 and claim != mask >> subject & 1:
                return False
    return True


def maximum_good(statements: Sequence[Sequence[int]]) -> int:
    """Return the most people who can be good given their statements about each other.

    ``statements[i][j]`` is 1 if i says j is good, 0 if bad, and 2 if i says nothing.
    """
    return max(
        mask.bit_count()
        for mask in range(1 << len(statements))
        if _is_consistent(statements, mask)
    )