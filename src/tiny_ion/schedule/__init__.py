"""
Schedule construction from a schedule tree.

This package turns a tree built with the combinators into:
- A resolved context per node (name, path, phase, period).
- A flat, pre-ordered table of schedule entries.
- Optional validation passes over that table.
"""

from .context import ROOT_CONTEXT, Context
from .table import ScheduleEntry, ScheduleTable
from .validate import find_duplicate_names, is_identifier, validate_table
from .flatten import build_schedule, flatten, resolve_context

__all__ = [
    "ROOT_CONTEXT",
    "Context",
    "ScheduleEntry",
    "ScheduleTable",
    "find_duplicate_names",
    "is_identifier",
    "validate_table",
    "build_schedule",
    "flatten",
    "resolve_context",
]
