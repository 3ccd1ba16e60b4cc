from __future__ import annotations

from tiny_ion.tree.builders import at_phase, effect, named, pure
from tiny_ion.tree.traversal import count_nodes, depth, effect_group_paths, iter_preorder


def test_iter_preorder_matches_recursive_walk() -> None:
    root = named("A", effect("a") + named("B", effect("b")) + effect("c")).root()
    assert list(iter_preorder(root)) == list(root.iter_nodes())


def test_count_and_depth() -> None:
    root = named("A", at_phase(1, effect("a")) + effect("b")).root()
    # root, A, phase, a, b
    assert count_nodes(root) == 5
    assert depth(root) == 4
    assert depth(pure().root()) == 1


def test_effect_group_paths() -> None:
    root = named("A", effect("a") + named("B", named("C", pure()) + effect("b"))).root()
    assert effect_group_paths(root) == [("A",), ("A", "B")]
