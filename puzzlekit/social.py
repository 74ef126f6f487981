"""Page recommendations from a friendship graph."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable


def recommend_pages(
    friendships: Iterable[tuple[int, int]],
    likes: Iterable[tuple[int, int]],
    user_id: int = 1,
) -> list[int]:
    """Return, sorted, the pages liked by friends of ``user_id`` that the user does not like.

    ``friendships`` holds unordered pairs of user ids; ``likes`` holds ``(user_id, page_id)``.
    """
    friends: set[int] = set()
    for first, second in friendships:
        if first == user_id:
            friends.add(second)
        if second == user_id:
            friends.add(first)

    pages_of: defaultdict[int, set[int]] = defaultdict(set)
    for liker, page in likes:
        pages_of[liker].add(page)

    suggested = {page for friend in friends for page in pages_of.get(friend, ())}
    return sorted(suggested - pages_of.get(user_id, set()))