"""
Optional validation passes over flattened schedules.

None of these run as part of ``flatten``; name uniqueness in particular is
not part of the core contract.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from tiny_ion.errors import DuplicateNameError
from tiny_ion.schedule.table import ScheduleEntry


def is_identifier(name: str) -> bool:
    """True if ``name`` can be used verbatim as a C identifier."""
    if not isinstance(name, str) or not name:
        return False
    if not (name[0].isascii() and (name[0].isalpha() or name[0] == "_")):
        return False
    return all(ch.isascii() and (ch.isalnum() or ch == "_") for ch in name)


def find_duplicate_names(entries: Iterable[ScheduleEntry]) -> List[str]:
    """Names occurring more than once, in order of their first repeat."""
    seen: Set[str] = set()
    duplicates: List[str] = []
    for entry in entries:
        if entry.name in seen and entry.name not in duplicates:
            duplicates.append(entry.name)
        seen.add(entry.name)
    return duplicates


def check_unique_names(entries: Iterable[ScheduleEntry]) -> None:
    duplicates = find_duplicate_names(entries)
    if duplicates:
        raise DuplicateNameError(duplicates)


def validate_table(
    entries: Iterable[ScheduleEntry],
    *,
    unique_names: bool = False,
    identifiers: bool = False,
) -> None:
    """
    Structural validation:
    - phase is non-negative and period positive
    - (optional) entry names are unique
    - (optional) entry names are C identifiers
    """
    entries = list(entries)
    errors: List[str] = []
    for idx, entry in enumerate(entries):
        if entry.phase < 0:
            errors.append(f"entries[{idx}] `{entry.name}` has negative phase {entry.phase}")
        if entry.period < 1:
            errors.append(f"entries[{idx}] `{entry.name}` has non-positive period {entry.period}")
        if identifiers and not is_identifier(entry.name):
            errors.append(f"entries[{idx}] name is not a valid identifier: {entry.name!r}")
    if errors:
        raise ValueError("Invalid schedule table:\n" + "\n".join(errors))

    if unique_names:
        check_unique_names(entries)
