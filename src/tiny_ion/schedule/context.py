from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Context:
    """
    Scheduling state inherited from ancestors during flattening.

    Passed by value: each branch derives its own copy and siblings never see
    each other's updates.
    """

    name: str = "root"
    path: Tuple[str, ...] = field(default_factory=tuple)
    phase: int = 0
    period: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(self.path))

    def entry_name(self) -> str:
        return f"{self.name}_{self.phase}_{self.period}"


ROOT_CONTEXT = Context()
