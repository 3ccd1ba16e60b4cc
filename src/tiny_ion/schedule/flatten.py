"""
Flatten a schedule tree into a linear table of schedule entries.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional, Tuple, Union

from tiny_ion.errors import UnknownActionError
from tiny_ion.schedule.context import ROOT_CONTEXT, Context
from tiny_ion.schedule.table import ScheduleEntry, ScheduleTable
from tiny_ion.schedule.validate import check_unique_names
from tiny_ion.tree.builders import Spec
from tiny_ion.tree.ir import Effect, NoAction, Node, SetName, SetPeriod, SetPhase
from tiny_ion.tree.traversal import count_nodes
from tiny_ion.tree.visualize import format_tree
from tiny_ion.utils.config import config
from tiny_ion.utils.logging import logger

log = logger.getChild("flatten")


def resolve_context(context: Context, node: Node) -> Context:
    """
    Apply ``node``'s action to the inherited context.

    Only the resulting values are passed on to children; the action itself is
    not re-applied below this node.
    """
    action = node.action
    if isinstance(action, (Effect, NoAction)):
        return context
    if isinstance(action, SetPhase):
        # Phase context and kind are not interpreted yet: every phase
        # overwrites the inherited one.
        return replace(context, phase=action.value)
    if isinstance(action, SetPeriod):
        return replace(context, period=action.value)
    if isinstance(action, SetName):
        return replace(context, name=action.name, path=context.path + (action.name,))
    raise UnknownActionError(node, context.path)


def _entry_for(context: Context, node: Node) -> Optional[ScheduleEntry]:
    effects = [
        child.action.handle for child in node.children if isinstance(child.action, Effect)
    ]
    if not effects:
        return None
    return ScheduleEntry(
        name=context.entry_name(),
        path=context.path,
        phase=context.phase,
        period=context.period,
        effects=tuple(effects),
    )


def flatten(context: Context, node: Node) -> List[ScheduleEntry]:
    """
    Walk ``node`` and return its schedule entries in tree pre-order.

    Effect leaves that are siblings under the same parent are batched into a
    single entry for that parent. A node without effect children emits
    nothing itself.
    """
    entries: List[ScheduleEntry] = []
    stack: List[Tuple[Context, Node]] = [(context, node)]
    while stack:
        inherited, current = stack.pop()
        resolved = resolve_context(inherited, current)
        entry = _entry_for(resolved, current)
        if entry is not None:
            entries.append(entry)
        stack.extend((resolved, child) for child in reversed(current.children))
    return entries


def build_schedule(
    spec: Union[Spec, Node],
    context: Optional[Context] = None,
    *,
    check_names: Optional[bool] = None,
) -> ScheduleTable:
    """
    Flatten a spec (or an already built root node) into a ``ScheduleTable``.

    Args:
        spec: Result of the builder combinators, or a root ``Node``.
        context: Starting context. Defaults to ``ROOT_CONTEXT``.
        check_names: Reject duplicate entry names. Defaults to
            ``config.check_unique_names``.
    """
    root = spec.root() if isinstance(spec, Spec) else spec
    if not isinstance(root, Node):
        raise TypeError(f"build_schedule expects a Spec or Node, got {type(spec)!r}.")
    if context is None:
        context = ROOT_CONTEXT
    if check_names is None:
        check_names = config.check_unique_names

    if config.debug:
        log.debug("Flattening tree:\n%s", "\n".join(format_tree(root)))

    entries = flatten(context, root)
    if check_names:
        check_unique_names(entries)

    log.debug("Flattened %d nodes into %d entries", count_nodes(root), len(entries))
    if config.debug:
        for entry in entries:
            log.debug(
                "%s path=%s phase=%d period=%d effects=%d",
                entry.name,
                "/".join(entry.path),
                entry.phase,
                entry.period,
                len(entry.effects),
            )
    return ScheduleTable(entries=entries)
