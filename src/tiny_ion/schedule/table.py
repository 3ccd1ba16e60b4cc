from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Sequence, Tuple


@dataclass(frozen=True)
class ScheduleEntry:
    """
    A scheduled batch of effects. Phase and period are absolute and the
    effects all fire together.
    """

    name: str
    path: Tuple[str, ...]
    phase: int
    period: int
    effects: Tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))
        object.__setattr__(self, "effects", tuple(self.effects))
        if not self.effects:
            raise ValueError(f"Schedule entry `{self.name}` has no effects.")

    def to_dict(self, render: Callable[[Any], Any] = repr) -> Dict[str, Any]:
        return {
            "name": self.name,
            "path": list(self.path),
            "phase": self.phase,
            "period": self.period,
            "effects": [render(e) for e in self.effects],
        }


@dataclass
class ScheduleTable:
    """
    Ordered, flattened schedule handed to a code generator.
    """

    entries: List[ScheduleEntry] = field(default_factory=list)

    def __iter__(self) -> Iterator[ScheduleEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __getitem__(self, idx: int) -> ScheduleEntry:
        return self.entries[idx]

    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def effects(self) -> List[Any]:
        return [eff for entry in self.entries for eff in entry.effects]

    def to_dicts(self, render: Callable[[Any], Any] = repr) -> List[Dict[str, Any]]:
        return [entry.to_dict(render) for entry in self.entries]

    def to_json(self, render: Callable[[Any], Any] = repr, indent: int = 2) -> str:
        return json.dumps(self.to_dicts(render), indent=indent)

    def format(self, render: Callable[[Any], str] = repr) -> str:
        """Aligned text table, one row per entry."""
        headers = ("name", "path", "phase", "period", "effects")
        rows: List[Sequence[str]] = [
            (
                entry.name,
                "/".join(entry.path) or "-",
                str(entry.phase),
                str(entry.period),
                ", ".join(render(e) for e in entry.effects),
            )
            for entry in self.entries
        ]
        widths = [
            max([len(headers[col])] + [len(row[col]) for row in rows])
            for col in range(len(headers) - 1)
        ]

        def _line(cells: Sequence[str]) -> str:
            padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
            return "  ".join(padded + [cells[-1]]).rstrip()

        return "\n".join([_line(headers)] + [_line(row) for row in rows])
