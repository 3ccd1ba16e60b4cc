"""
Generate synthetic schedule specifications and time the flatten pass.
"""

from __future__ import annotations

import argparse
import random
from time import perf_counter

from tiny_ion.analysis.report import summarize_schedule
from tiny_ion.schedule.flatten import build_schedule
from tiny_ion.tree.builders import Spec, at_period, at_phase, effect, named, pure
from tiny_ion.tree.traversal import count_nodes, depth


PROFILES = {
    "small": {
        "depth": 4,
        "max_children": 4,
        "max_period": 16,
    },
    "medium": {
        "depth": 6,
        "max_children": 5,
        "max_period": 100,
    },
    "large": {
        "depth": 8,
        "max_children": 6,
        "max_period": 1000,
    },
}


def build_random_spec(
    max_depth: int,
    max_children: int,
    max_period: int,
    *,
    seed: int,
) -> Spec:
    rng = random.Random(seed)
    counter = 0

    def grow(level: int) -> Spec:
        nonlocal counter
        if level >= max_depth:
            counter += 1
            return effect(f"e{counter}")
        result = pure()
        for _ in range(rng.randint(1, max_children)):
            if rng.random() < 0.4:
                counter += 1
                child = effect(f"e{counter}")
            else:
                child = grow(level + 1)
                choice = rng.random()
                if choice < 0.3:
                    child = named(f"n{counter}", child)
                elif choice < 0.6:
                    child = at_period(rng.randint(1, max_period), child)
                elif choice < 0.8:
                    child = at_phase(rng.randint(0, max_period - 1), child)
            result = result + child
        return result

    return grow(0)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--profile", choices=PROFILES.keys(), default="medium")
    parser.add_argument("--depth", type=int, default=None)
    parser.add_argument("--max-children", type=int, default=None)
    parser.add_argument("--max-period", type=int, default=None)
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument("--repeats", type=int, default=5)
    args = parser.parse_args()
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")
    for key, value in PROFILES[args.profile].items():
        if getattr(args, key) is None:
            setattr(args, key, value)
    return args


def main() -> None:
    args = parse_args()
    spec = build_random_spec(
        max_depth=args.depth,
        max_children=args.max_children,
        max_period=args.max_period,
        seed=args.seed,
    )
    root = spec.root()

    timings = []
    table = None
    for _ in range(args.repeats):
        start = perf_counter()
        table = build_schedule(root)
        timings.append(perf_counter() - start)

    report = summarize_schedule(table)
    print("=== Flatten Microbenchmark ===")
    print(f"Nodes: {count_nodes(root)}  Depth: {depth(root)}")
    print(f"Entries: {report.num_entries}  Effects: {report.num_effects}")
    print(f"Distinct periods: {len(report.periods)}  Hyperperiod: {report.hyperperiod}")
    print(f"Duplicate names: {len(report.duplicate_names)}")
    print(f"Best flatten time: {min(timings) * 1e3:.2f} ms over {args.repeats} runs")


if __name__ == "__main__":
    main()
