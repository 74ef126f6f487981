"""Recovery of values in a binary tree whose values were lost."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = -1
    left: TreeNode | None = None
    right: TreeNode | None = None


class FindElements:
    """Restores a tree whose root is 0 and whose children are 2v+1 and 2v+2, then answers lookups."""

    def __init__(self, root: TreeNode | None) -> None:
        self._values: set[int] = set()
        stack = [(root, 0)]
        while stack:
            node, value = stack.pop()
            if node is None:
                continue
            node.val = value
            self._values.add(value)
            stack.append((node.left, value * 2 + 1))
            stack.append((node.right, value * 2 + 2))

    def find(self, target: int) -> bool:
        """Return True if ``target`` is a value in the restored tree."""
        return target in self._values

    def __contains__(self, target: int) -> bool:
        return self.find(target)