from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Tuple, Union

from tiny_ion.errors import NodeUnboundError


class PhaseContext(Enum):
    """What a phase value is measured against."""

    ABSOLUTE = "absolute"  # first tick within the period
    RELATIVE = "relative"  # last phase used


class PhaseKind(Enum):
    MIN = "min"  # at this phase or any later point
    EXACT = "exact"


def _require_int(value: Any, what: str) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{what} must be an int, got {type(value).__name__} {value!r}.")


@dataclass(frozen=True)
class Effect:
    """
    Opaque, host-supplied fragment attached to a leaf node.

    The handle is only stored and forwarded; it is never executed or
    inspected here.
    """

    handle: Any


@dataclass(frozen=True)
class SetPhase:
    context: PhaseContext
    kind: PhaseKind
    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Phase")
        if self.value < 0:
            raise ValueError(f"Phase must be non-negative, got {self.value}.")


@dataclass(frozen=True)
class SetPeriod:
    value: int

    def __post_init__(self) -> None:
        _require_int(self.value, "Period")
        if self.value < 1:
            raise ValueError(f"Period must be at least 1, got {self.value}.")


@dataclass(frozen=True)
class SetName:
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str):
            raise TypeError(f"Node name must be a str, got {type(self.name).__name__}.")
        if not self.name:
            raise ValueError("Node name must be a non-empty string.")


@dataclass(frozen=True)
class NoAction:
    pass


NO_ACTION = NoAction()

Action = Union[Effect, SetPhase, SetPeriod, SetName, NoAction]
ACTION_TYPES = (Effect, SetPhase, SetPeriod, SetName, NoAction)


@dataclass(frozen=True)
class Node:
    """
    One node of a schedule tree.

    ``action`` applies to this node and, except for ``Effect`` and
    ``NoAction``, to every descendant. When two actions conflict the innermost
    one wins. Effect nodes are always leaves.
    """

    action: Action = NO_ACTION
    children: Tuple["Node", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        children = tuple(self.children)
        for child in children:
            if not isinstance(child, Node):
                raise NodeUnboundError(child, self.action)
        if isinstance(self.action, Effect) and children:
            raise ValueError("Effect nodes cannot have children.")
        object.__setattr__(self, "children", children)

    def is_leaf(self) -> bool:
        return not self.children

    def is_effect(self) -> bool:
        return isinstance(self.action, Effect)

    def iter_nodes(self) -> Iterable["Node"]:
        """Pre-order walk; uses an explicit stack so depth is unbounded."""
        stack: List[Node] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))


def leaf(handle: Any) -> Node:
    return Node(action=Effect(handle))
