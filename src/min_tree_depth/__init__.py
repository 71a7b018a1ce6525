"""Minimum depth of binary trees.

Computes the number of edges on the shortest root-to-leaf path, recursively
or with a breadth-first queue for trees too tall to recurse over.
"""

from .depth import minimum_depth, minimum_depth_bfs
from .node import BinaryNode, TreeNode, is_leaf

__all__ = [
    "BinaryNode",
    "TreeNode",
    "is_leaf",
    "minimum_depth",
    "minimum_depth_bfs",
]
