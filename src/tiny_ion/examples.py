"""
Reference specifications.

Effects here are plain strings standing in for host-language fragments
(comments in the generated code). These are smoke tests / reference usage.
"""

from __future__ import annotations

from .schedule.flatten import build_schedule
from .tree.builders import (
    Spec,
    at_period,
    at_phase,
    condition,
    disable,
    effect,
    named,
    sequence,
)
from .tree.visualize import pretty_print


def ext_baz1() -> Spec:
    return named(
        "extBaz1",
        at_phase(
            10,
            sequence(
                effect("should be phase 10"),
                at_phase(20, effect("should be phase 20")),
            ),
        ),
    )


def ext_baz2() -> Spec:
    return at_phase(10, named("extBaz2", effect("should be phase 10")))


def demo_spec() -> Spec:
    """
    The classic Foo example: overridden periods, nested names and phases,
    and the accepted-but-unenforced ``disable``/``condition`` combinators.
    """
    return named(
        "Foo",
        sequence(
            at_period(
                20,
                sequence(
                    effect("period 20a"),
                    effect("period 20b"),
                    effect("period 20c"),
                    effect("period 20d"),
                    at_period(30, effect("period 30 overwriting 20")),
                ),
            ),
            named("Bar", effect("Foo.Bar") + effect("Foo.Bar 2")),
            named(
                "Baz",
                at_period(1500, effect("Foo.Baz period 1500") + effect("Foo.Baz period 1500b")),
            ),
            ext_baz1(),
            ext_baz2(),
            disable(named("disabled", at_period(60000, effect("Should be disabled")))),
            condition(
                False,
                named(
                    "condTest",
                    sequence(
                        effect("Conditional test"),
                        named("condTest1", effect("Conditional test sub 1")),
                        named("condTest2", effect("Conditional test sub 2")),
                        named("condTest3", effect("Conditional test sub 3")),
                        condition(
                            True,
                            named(
                                "twoConds",
                                effect("Two conditions")
                                + named("condTest4", effect("Also two conditions")),
                            ),
                        ),
                    ),
                ),
            ),
        ),
    )


def demo() -> None:
    spec = demo_spec()
    pretty_print(spec.root())
    print(build_schedule(spec).format(render=str))


if __name__ == "__main__":
    demo()
