"""Puzzles over strings, words and named hierarchies."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterable, Sequence

_ENCODE_BITS = 30


def encode(num: int) -> str:
    """Return the binary form of ``num + 1`` without its leading one."""
    value = (num + 1) % (1 << _ENCODE_BITS)
    if value == 0:
        raise ValueError(f"cannot encode {num}")
    return bin(value)[3:]


def _letter_mask(word: str) -> int:
    mask = 0
    for char in word:
        mask ^= 1 << (ord(char) - ord("a"))
    return mask


def word_count(start_words: Iterable[str], target_words: Iterable[str]) -> int:
    """Count target words made by adding one letter to a start word and rearranging."""
    seen = {_letter_mask(word) for word in start_words}
    total = 0
    for word in target_words:
        mask = _letter_mask(word)
        if any(mask ^ (1 << (ord(char) - ord("a"))) in seen for char in word):
            total += 1
    return total


def divide_string(s: str, k: int, fill: str) -> list[str]:
    """Split ``s`` into pieces of length ``k``, padding the last with ``fill``."""
    return [s[start : start + k].ljust(k, fill) for start in range(0, len(s), k)]


def generate_sentences(synonyms: Iterable[Sequence[str]], text: str) -> list[str]:
    """Return, in sorted order, every sentence reachable by swapping synonyms."""
    graph: defaultdict[str, list[str]] = defaultdict(list)
    for first, second in synonyms:
        graph[first].append(second)
        graph[second].append(first)

    found: set[str] = set()
    queue = deque([text])
    while queue:
        sentence = queue.popleft()
        found.add(sentence)
        words = sentence.split()
        for position, word in enumerate(words):
            for synonym in graph.get(word, ()):
                words[position] = synonym
                candidate = " ".join(words)
                if candidate not in found:
                    queue.append(candidate)
    return sorted(found)


def find_smallest_region(regions: Iterable[Sequence[str]], region1: str, region2: str) -> str:
    """Return the smallest region that contains both given regions.

    Each entry of ``regions`` lists a region followed by the regions it contains.
    """
    parent = {child: region[0] for region in regions for child in region[1:]}

    ancestors: set[str] = set()
    node: str | None = region1
    while node:
        ancestors.add(node)
        node = parent.get(node)

    node = region2
    while node not in ancestors:
        if node not in parent:
            raise ValueError(f"{region1!r} and {region2!r} share no region")
        node = parent[node]
    return node