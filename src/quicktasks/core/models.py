# src/quicktasks/core/models.py

from __future__ import annotations

from dataclasses import dataclass, replace

CLEARED_TEMPLATE = "Cleared {n} task(s)"
NOTHING_CLEARED = "No completed tasks"


@dataclass(frozen=True, slots=True)
class Task:
    """
    A single to-do entry.

    Tasks are immutable: toggling produces a copy via `with_done`.
    """

    id: int
    text: str
    done: bool = False

    def with_done(self, checked: bool) -> Task:
        return replace(self, done=bool(checked))


@dataclass(frozen=True, slots=True)
class ClearResult:
    """Outcome of one "clear completed" transaction."""

    cleared: int
    remaining: int

    @property
    def message(self) -> str:
        if self.cleared > 0:
            return CLEARED_TEMPLATE.format(n=self.cleared)
        return NOTHING_CLEARED
