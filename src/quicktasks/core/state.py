# src/quicktasks/core/state.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .models import ClearResult, Task
from .notifications import SnackbarHost
from .ports import Notifier, StateListener, Unsubscribe

logger = logging.getLogger(__name__)


class TaskListState:
    """
    State holder for the task screen.

    Owns the ordered task list and the transient input buffer. Every mutation
    replaces the whole tuple, so readers always see a consistent snapshot.

    Ids come from a monotonic counter and are never reused within a session,
    even after completed tasks are cleared.
    """

    def __init__(self, notifier: Notifier | None = None) -> None:
        self._tasks: tuple[Task, ...] = ()
        self._next_id = 1
        self._listeners: list[StateListener] = []
        self.notifier = notifier
        self.input_text = ""

    # ---- reads ----

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def total_count(self) -> int:
        return len(self._tasks)

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.done)

    def counter_text(self) -> str:
        return f"{self.completed_count} / {self.total_count}"

    def get(self, task_id: int) -> Task | None:
        for t in self._tasks:
            if t.id == task_id:
                return t
        return None

    # ---- subscriptions ----

    def subscribe(self, listener: StateListener) -> Unsubscribe:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def _changed(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("State listener %r failed.", listener)

    # ---- input buffer ----

    def update_input(self, text: str) -> None:
        self.input_text = text or ""

    # ---- mutations ----

    def add(self, text: str | None = None) -> Task | None:
        """
        Append a task from `text` (or from the input buffer when None).

        Blank input is ignored: no task is created and the buffer is kept.
        """
        raw = self.input_text if text is None else text
        clean = (raw or "").strip()
        if not clean:
            logger.debug("Ignoring blank task text.")
            return None

        task = Task(id=self._next_id, text=clean)
        self._next_id += 1
        self._tasks = self._tasks + (task,)
        self.input_text = ""
        logger.debug("Added task id=%s total=%s", task.id, len(self._tasks))
        self._changed()
        return task

    def toggle(self, task_id: int, checked: bool) -> bool:
        """Set `done` on the matching task. Unknown ids are a no-op (False)."""
        if self.get(task_id) is None:
            logger.debug("Toggle ignored: no task id=%s", task_id)
            return False

        self._tasks = tuple(t.with_done(checked) if t.id == task_id else t for t in self._tasks)
        logger.debug("Task id=%s done=%s", task_id, bool(checked))
        self._changed()
        return True

    def flip(self, task_id: int) -> bool:
        task = self.get(task_id)
        if task is None:
            return False
        return self.toggle(task_id, not task.done)

    def clear_completed(self) -> ClearResult:
        """
        Drop every done task in one replacement and report how many went.

        The status message goes to the notifier after the list is replaced.
        """
        snapshot = self._tasks
        kept = tuple(t for t in snapshot if not t.done)
        result = ClearResult(cleared=len(snapshot) - len(kept), remaining=len(kept))

        if result.cleared:
            self._tasks = kept
            logger.debug("Cleared %s completed task(s), %s left.", result.cleared, result.remaining)
            self._changed()

        if self.notifier is not None:
            try:
                self.notifier.show(result.message)
            except Exception:
                logger.exception("Notifier failed for message %r.", result.message)
        return result


@dataclass
class AppState:
    # Settings are kept on the state so commands and connectors can read them.
    settings: Any

    tasks: TaskListState
    snackbar: SnackbarHost
