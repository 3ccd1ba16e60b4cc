from __future__ import annotations

import io
import sys

from tiny_ion.tree.builders import at_period, effect, named
from tiny_ion.tree.ir import NO_ACTION, Effect, Node, PhaseContext, PhaseKind, SetPhase
from tiny_ion.tree.visualize import describe_action, format_tree, pretty_print


def test_format_tree_nests_children() -> None:
    root = named("Foo", at_period(20, effect("a"))).root()
    assert format_tree(root) == [
        "Node {",
        " action = NoAction",
        " children =",
        "    Node {",
        "     action = SetName('Foo')",
        "     children =",
        "        Node {",
        "         action = SetPeriod(20)",
        "         children =",
        "            Node {",
        "             action = Effect('a')",
        "            }",
        "        }",
        "    }",
        "}",
    ]


def test_describe_action_variants() -> None:
    assert describe_action(NO_ACTION) == "NoAction"
    assert (
        describe_action(SetPhase(PhaseContext.ABSOLUTE, PhaseKind.EXACT, 3))
        == "SetPhase(absolute, exact, 3)"
    )
    assert describe_action("mystery") == "'mystery'"


def test_pretty_print_writes_to_file() -> None:
    buf = io.StringIO()
    pretty_print(effect("x").root(), file=buf)
    assert buf.getvalue().endswith("}\n")
    assert "Effect('x')" in buf.getvalue()


def test_format_tree_handles_deep_trees() -> None:
    levels = sys.getrecursionlimit() + 50
    node = Node(action=Effect("deep"))
    for _ in range(levels):
        node = Node(action=NO_ACTION, children=[node])

    lines = format_tree(node, indent=" ")
    assert lines[0] == "Node {"
    assert lines[-1] == "}"
    assert lines.count(" " * levels + "Node {") == 1
    assert sum(1 for line in lines if line.strip() == "Node {") == levels + 1
