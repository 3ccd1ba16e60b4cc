from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List

from tiny_ion.schedule.table import ScheduleEntry
from tiny_ion.schedule.validate import find_duplicate_names


@dataclass(frozen=True)
class ScheduleReport:
    num_entries: int
    num_effects: int
    periods: List[int]
    hyperperiod: int
    entries_per_period: Dict[int, int]
    duplicate_names: List[str]
    phase_overruns: List[str]


def summarize_schedule(entries: Iterable[ScheduleEntry]) -> ScheduleReport:
    """
    Describe a flattened schedule without rejecting anything.

    ``phase_overruns`` lists entries whose phase does not fall inside
    ``0..period-1``.
    """
    entries = list(entries)
    per_period: Dict[int, int] = {}
    for entry in entries:
        per_period[entry.period] = per_period.get(entry.period, 0) + 1
    periods = sorted(per_period)

    hyperperiod = 1
    for period in periods:
        hyperperiod = math.lcm(hyperperiod, period)

    return ScheduleReport(
        num_entries=len(entries),
        num_effects=sum(len(entry.effects) for entry in entries),
        periods=periods,
        hyperperiod=hyperperiod,
        entries_per_period={period: per_period[period] for period in periods},
        duplicate_names=find_duplicate_names(entries),
        phase_overruns=[entry.name for entry in entries if entry.phase >= entry.period],
    )
