"""
Builder combinators: the authoring surface for schedule trees.

A ``Spec`` pairs the top-level nodes accumulated so far with a value that is
threaded through sequential composition. Every wrapping combinator turns the
wrapped spec's nodes into the children of exactly one new node.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from tiny_ion.errors import IgnoredCombinatorWarning
from tiny_ion.tree.ir import (
    NO_ACTION,
    Action,
    Node,
    PhaseContext,
    PhaseKind,
    SetName,
    SetPeriod,
    SetPhase,
    leaf,
)
from tiny_ion.utils.config import config


@dataclass(frozen=True)
class Spec:
    """
    Partially built list of sibling nodes plus a user-facing result value.
    """

    nodes: Tuple[Node, ...] = field(default_factory=tuple)
    value: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))

    def then(self, other: "Spec") -> "Spec":
        """Append ``other``'s nodes after ours and forward its value."""
        if not isinstance(other, Spec):
            raise TypeError(f"Cannot sequence Spec with {type(other)!r}.")
        return Spec(nodes=self.nodes + other.nodes, value=other.value)

    def __add__(self, other: "Spec") -> "Spec":
        if not isinstance(other, Spec):
            return NotImplemented
        return self.then(other)

    def bind(self, fn: Callable[[Any], "Spec"]) -> "Spec":
        return self.then(fn(self.value))

    def map(self, fn: Callable[[Any], Any]) -> "Spec":
        return Spec(nodes=self.nodes, value=fn(self.value))

    def root(self) -> Node:
        """Structural root node grouping every top-level node of this spec."""
        return Node(action=NO_ACTION, children=self.nodes)


def pure(value: Any = None) -> Spec:
    return Spec(nodes=(), value=value)


def sequence(*specs: Spec) -> Spec:
    """Compose specs left to right; the last one's value is kept."""
    result = pure()
    for spec in specs:
        result = result.then(spec)
    return result


def make_sub(action: Action, sub: Spec) -> Spec:
    """
    Wrap ``sub`` under a single new node carrying ``action``.
    """
    if not isinstance(sub, Spec):
        raise TypeError(f"Expected a Spec to wrap, got {type(sub)!r}.")
    return Spec(nodes=(Node(action=action, children=sub.nodes),), value=sub.value)


def effect(handle: Any) -> Spec:
    """Turn one opaque effect into a single-leaf spec."""
    return Spec(nodes=(leaf(handle),), value=None)


def named(name: str, sub: Spec) -> Spec:
    return make_sub(SetName(name), sub)


def at_phase(value: int, sub: Spec) -> Spec:
    """
    Set the phase for ``sub``. Nested specs may override it.

    Always builds a relative/min phase; absolute and exact phases have no
    combinator yet.
    """
    return make_sub(SetPhase(PhaseContext.RELATIVE, PhaseKind.MIN, value), sub)


def at_period(value: int, sub: Spec) -> Spec:
    """Set the period for ``sub``. Nested specs may override it."""
    return make_sub(SetPeriod(value), sub)


def _warn_ignored(combinator: str) -> None:
    if config.warn_ignored_combinators:
        warnings.warn(
            f"{combinator}() is accepted but not enforced: the wrapped effects "
            "are still scheduled unconditionally.",
            IgnoredCombinatorWarning,
            stacklevel=3,
        )


def disable(sub: Spec) -> Spec:
    """
    Mark ``sub`` as disabled.

    Not enforced: the flatten engine still schedules everything below. The
    spec is wrapped in a plain grouping node and a warning is emitted.
    """
    _warn_ignored("disable")
    return make_sub(NO_ACTION, sub)


def condition(predicate: Any, sub: Spec) -> Spec:
    """
    Guard ``sub`` with ``predicate``.

    Not enforced, like :func:`disable`. The predicate is accepted and dropped.
    """
    _warn_ignored("condition")
    return make_sub(NO_ACTION, sub)
