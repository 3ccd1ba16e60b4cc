"""
Schedule tree model and authoring combinators.

- Node and action types (see `ir.py`)
- Builder combinators producing `Spec` values (see `builders.py`)
- Traversal and debug-dump helpers.
"""

from .ir import (
    ACTION_TYPES,
    NO_ACTION,
    Action,
    Effect,
    NoAction,
    Node,
    PhaseContext,
    PhaseKind,
    SetName,
    SetPeriod,
    SetPhase,
)
from .builders import (
    Spec,
    at_period,
    at_phase,
    condition,
    disable,
    effect,
    make_sub,
    named,
    pure,
    sequence,
)
from . import traversal
from . import visualize

__all__ = [
    "ACTION_TYPES",
    "NO_ACTION",
    "Action",
    "Effect",
    "NoAction",
    "Node",
    "PhaseContext",
    "PhaseKind",
    "SetName",
    "SetPeriod",
    "SetPhase",
    "Spec",
    "at_period",
    "at_phase",
    "condition",
    "disable",
    "effect",
    "make_sub",
    "named",
    "pure",
    "sequence",
    "traversal",
    "visualize",
]
