"""
Tree walking helpers shared by diagnostics and reports.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .ir import Node, SetName


def iter_preorder(node: Node) -> Iterator[Node]:
    """Pre-order walk using an explicit stack (no recursion limit)."""
    return iter(node.iter_nodes())


def count_nodes(node: Node) -> int:
    return sum(1 for _ in iter_preorder(node))


def depth(node: Node) -> int:
    """Number of levels in the tree; a lone leaf has depth 1."""
    best = 0
    stack: List[Tuple[Node, int]] = [(node, 1)]
    while stack:
        current, level = stack.pop()
        best = max(best, level)
        stack.extend((child, level + 1) for child in current.children)
    return best


def effect_group_paths(node: Node) -> List[Tuple[str, ...]]:
    """
    Name paths of every node that directly owns at least one effect leaf,
    in pre-order.
    """
    paths: List[Tuple[str, ...]] = []
    stack: List[Tuple[Node, Tuple[str, ...]]] = [(node, ())]
    while stack:
        current, path = stack.pop()
        if isinstance(current.action, SetName):
            path = path + (current.action.name,)
        if any(child.is_effect() for child in current.children):
            paths.append(path)
        stack.extend((child, path) for child in reversed(current.children))
    return paths
