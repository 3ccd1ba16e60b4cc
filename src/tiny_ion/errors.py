"""
Exceptions raised while building or flattening schedule trees.
"""

from __future__ import annotations

from typing import List, Tuple


class IonError(Exception):
    """Base exception for tiny-ion failures."""


class FlattenError(IonError):
    """Raised when a tree cannot be flattened into a schedule table."""


class UnknownActionError(FlattenError, TypeError):
    """Raised when a node carries an action the flatten engine does not know."""

    def __init__(self, node: object, path: Tuple[str, ...] = ()) -> None:
        self.node = node
        self.path = tuple(path)
        action = getattr(node, "action", None)
        children = len(getattr(node, "children", ()))
        where = "/".join(self.path) if self.path else "<root>"
        super().__init__(
            f"Unknown action type {type(action).__name__!r} ({action!r}) "
            f"on node under `{where}` with {children} child node(s)"
        )


class NodeUnboundError(IonError, TypeError):
    """Raised when a child slot holds something that is not a node."""

    def __init__(self, value: object, parent_action: object = None) -> None:
        self.value = value
        self.parent_action = parent_action
        hint = ""
        if hasattr(value, "nodes") and hasattr(value, "value"):
            hint = " (pass `spec.nodes` or use the builder combinators)"
        super().__init__(
            f"Child of node with action {parent_action!r} is not a Node: "
            f"{type(value).__name__} {value!r}{hint}"
        )


class DuplicateNameError(IonError, ValueError):
    """Raised by the optional uniqueness pass when entry names collide."""

    def __init__(self, names: List[str]) -> None:
        self.names = list(names)
        super().__init__(
            "Duplicate schedule entry names: " + ", ".join(self.names)
        )


class IgnoredCombinatorWarning(UserWarning):
    """Emitted when a combinator is accepted but has no effect on the schedule."""
