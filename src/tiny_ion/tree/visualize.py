"""
Human-readable dumps of schedule trees for debugging.
"""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO, Tuple

from .ir import Effect, NoAction, Node, SetName, SetPeriod, SetPhase


def describe_action(action: object) -> str:
    if isinstance(action, Effect):
        return f"Effect({action.handle!r})"
    if isinstance(action, SetPhase):
        return (
            f"SetPhase({action.context.value}, {action.kind.value}, {action.value})"
        )
    if isinstance(action, SetPeriod):
        return f"SetPeriod({action.value})"
    if isinstance(action, SetName):
        return f"SetName({action.name!r})"
    if isinstance(action, NoAction):
        return "NoAction"
    return repr(action)


def format_tree(node: Node, indent: str = "    ") -> List[str]:
    lines: List[str] = []
    # (node, level); None marks the closing brace of the node at that level
    stack: List[Tuple[Optional[Node], int]] = [(node, 0)]
    while stack:
        current, level = stack.pop()
        prefix = indent * level
        if current is None:
            lines.append(prefix + "}")
            continue
        lines.append(prefix + "Node {")
        lines.append(f"{prefix} action = {describe_action(current.action)}")
        stack.append((None, level))
        if current.children:
            lines.append(prefix + " children =")
            stack.extend((child, level + 1) for child in reversed(current.children))
    return lines


def pretty_print(node: Node, file: Optional[TextIO] = None) -> None:
    out = file if file is not None else sys.stdout
    out.write("\n".join(format_tree(node)) + "\n")
