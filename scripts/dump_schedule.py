#!/usr/bin/env python
"""
Flatten the bundled demo specification and print it.
"""

from __future__ import annotations

import argparse
import logging
import sys
import warnings

from tiny_ion.analysis.report import summarize_schedule
from tiny_ion.errors import IgnoredCombinatorWarning, IonError
from tiny_ion.examples import demo_spec
from tiny_ion.schedule.flatten import build_schedule
from tiny_ion.schedule.validate import validate_table
from tiny_ion.tree.visualize import format_tree
from tiny_ion.utils.config import config
from tiny_ion.utils.logging import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--format",
        choices=("table", "json", "tree", "report"),
        default="table",
        help="What to print.",
    )
    parser.add_argument("--check-names", action="store_true", help="Reject duplicate entry names.")
    parser.add_argument("--identifiers", action="store_true", help="Require C identifier names.")
    parser.add_argument("--quiet-warnings", action="store_true", help="Hide ignored-combinator warnings.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logger = setup_logging(logging.DEBUG if args.debug else logging.INFO)
    config.debug = args.debug
    if args.quiet_warnings:
        warnings.simplefilter("ignore", IgnoredCombinatorWarning)

    spec = demo_spec()
    if args.format == "tree":
        print("\n".join(format_tree(spec.root())))
        return 0

    try:
        table = build_schedule(spec, check_names=args.check_names)
        validate_table(table, identifiers=args.identifiers)
    except (IonError, ValueError) as exc:
        logger.error("%s", exc)
        return 1

    if args.format == "json":
        print(table.to_json(render=str))
    elif args.format == "report":
        report = summarize_schedule(table)
        print(f"Entries: {report.num_entries}  Effects: {report.num_effects}")
        print(f"Periods: {report.periods}  Hyperperiod: {report.hyperperiod}")
        for period, count in report.entries_per_period.items():
            print(f"  period {period}: {count} entr{'y' if count == 1 else 'ies'}")
        if report.duplicate_names:
            print("Duplicate names: " + ", ".join(report.duplicate_names))
        if report.phase_overruns:
            print("Phase >= period: " + ", ".join(report.phase_overruns))
    else:
        print(table.format(render=str))
    return 0


if __name__ == "__main__":
    sys.exit(main())
