# src/quicktasks/core/screen.py

"""
Pure render model of the task screen.

`build_screen` is a function of the current state only; connectors turn the
resulting model into whatever their surface needs (`render_lines` for text).
"""

from __future__ import annotations

from dataclasses import dataclass

from .state import TaskListState

DEFAULT_TITLE = "QuickTasks"
DEFAULT_PLACEHOLDER = "Enter task"
EMPTY_HINT = "No tasks yet. Type a task and press Enter to add it."


@dataclass(frozen=True, slots=True)
class TaskRow:
    key: int
    text: str
    checked: bool


@dataclass(frozen=True, slots=True)
class ScreenModel:
    title: str
    placeholder: str
    input_text: str
    counter: str
    rows: tuple[TaskRow, ...]


def build_screen(
    state: TaskListState,
    *,
    title: str = DEFAULT_TITLE,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> ScreenModel:
    rows = tuple(TaskRow(key=t.id, text=t.text, checked=t.done) for t in state.tasks)
    return ScreenModel(
        title=title,
        placeholder=placeholder,
        input_text=state.input_text,
        counter=f"Completed: {state.counter_text()}",
        rows=rows,
    )


def render_lines(model: ScreenModel) -> list[str]:
    lines = [model.title, "=" * max(len(model.title), 10), model.counter, ""]
    if not model.rows:
        lines.append(f"  {EMPTY_HINT}")
    else:
        width = len(str(max(r.key for r in model.rows)))
        for row in model.rows:
            box = "[x]" if row.checked else "[ ]"
            lines.append(f"  {box} {row.key:>{width}}. {row.text}")
    return lines
