"""
tiny-ion

Build-time compiler turning hierarchical time-triggered specifications into
flat schedule tables for code generation.
"""

from .tree.ir import Node
from .tree.builders import (
    Spec,
    at_period,
    at_phase,
    condition,
    disable,
    effect,
    named,
    pure,
    sequence,
)
from .schedule.context import ROOT_CONTEXT, Context
from .schedule.flatten import build_schedule, flatten
from .schedule.table import ScheduleEntry, ScheduleTable

__all__ = [
    "Node",
    "Spec",
    "at_period",
    "at_phase",
    "condition",
    "disable",
    "effect",
    "named",
    "pure",
    "sequence",
    "ROOT_CONTEXT",
    "Context",
    "build_schedule",
    "flatten",
    "ScheduleEntry",
    "ScheduleTable",
]
