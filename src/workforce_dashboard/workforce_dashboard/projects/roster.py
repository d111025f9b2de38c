from __future__ import annotations

import json
from typing import Any, FrozenSet, Iterable, Sequence, TypeVar

from ..employees.model import Employee

E = TypeVar("E", bound=Employee)


def parse_roster(raw: Any) -> FrozenSet[str]:
    """Normalise a stored roster into a set of employee ids.

    Accepts a list of ids, a list of ``{"id": ...}`` objects, or either of
    those JSON-encoded as a string (older project rows stored it that way).
    """
    if raw is None:
        return frozenset()
    if isinstance(raw, (bytes, bytearray)):
        raw = raw.decode("utf-8")
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return frozenset()
        try:
            raw = json.loads(text)
        except ValueError:
            return frozenset(part.strip() for part in text.split(",") if part.strip())
        if isinstance(raw, str):
            return parse_roster(raw)
    if isinstance(raw, dict):
        raw = [raw]
    if not isinstance(raw, Iterable):
        return frozenset()

    ids = set()
    for item in raw:
        if isinstance(item, dict):
            item = item.get("id")
        if item is None:
            continue
        item = str(item).strip()
        if item:
            ids.add(item)
    return frozenset(ids)


def roster_rows(all_employees: Sequence[E], roster: Iterable[str]) -> list[E]:
    """Employees on ``roster``, in ``all_employees`` order (not roster order)."""
    members = set(roster)
    return [e for e in all_employees if e.employee_id in members]
