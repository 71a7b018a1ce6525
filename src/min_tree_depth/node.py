"""Binary tree node shape consumed by the depth functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class BinaryNode(Protocol):
    """Anything with optional left and right children.

    Children are read-only members so node classes with narrower child
    types, such as TreeNode, still match.
    """

    @property
    def left(self) -> BinaryNode | None: ...

    @property
    def right(self) -> BinaryNode | None: ...


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def is_leaf(node: BinaryNode) -> bool:
    """A leaf has neither a left nor a right child."""
    return node.left is None and node.right is None
