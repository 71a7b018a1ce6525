"""Shortest root-to-leaf depth, counted in edges."""

from collections import deque

from .node import BinaryNode, is_leaf


def _require_root(root: BinaryNode | None) -> None:
    if root is None:
        raise ValueError("root must be a tree node, got None")


def minimum_depth(root: BinaryNode) -> int:
    """Number of edges from root to its nearest leaf.

    A node with only one child is not a leaf, so descent is forced into the
    child that exists rather than stopping at the missing one.

    Args:
        root: Root of a finite, acyclic binary tree.

    Returns:
        0 for a single node, otherwise the length of the shortest
        root-to-leaf path.

    Raises:
        ValueError: If root is None.
        RecursionError: If the tree is taller than the recursion limit
            (use minimum_depth_bfs) or the structure contains a cycle.
    """
    _require_root(root)

    left, right = root.left, root.right
    if left is None:
        if right is None:
            return 0
        return minimum_depth(right) + 1
    if right is None:
        return minimum_depth(left) + 1
    return min(minimum_depth(left), minimum_depth(right)) + 1


def minimum_depth_bfs(root: BinaryNode) -> int:
    """Breadth-first minimum depth.

    Same result as minimum_depth, but iterative: memory grows with tree width
    instead of height, and the walk stops at the first leaf dequeued.

    Args:
        root: Root of a finite, acyclic binary tree.

    Returns:
        Depth of the shallowest leaf.

    Raises:
        ValueError: If root is None.
    """
    _require_root(root)

    queue: deque[tuple[BinaryNode, int]] = deque([(root, 0)])

    # Level order, so the first leaf seen is a shallowest one
    while queue:
        node, depth = queue.popleft()
        if is_leaf(node):
            return depth
        for child in (node.left, node.right):
            if child is not None:
                queue.append((child, depth + 1))

    raise RuntimeError("no leaf reachable from root")
