# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from quicktasks.core.ports import Notifier


@dataclass(slots=True)
class FakeNotifier(Notifier):
    """Records every status message instead of displaying it."""

    messages: list[str] = field(default_factory=list)

    def show(self, message: str) -> None:
        self.messages.append(message)


class ScriptedInput:
    """
    Stand-in for `input()` used by console loop tests.

    Returns the scripted lines in order, then raises EOFError
    (or the given exception instance) once the script is exhausted.
    """

    def __init__(self, lines: Iterable[str], end: BaseException | None = None) -> None:
        self._lines = list(lines)
        self._end = end if end is not None else EOFError()
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise self._end
        return self._lines.pop(0)


class CapturedOutput:
    """Collects printed lines for assertions."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def __call__(self, text: str = "") -> None:
        self.lines.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
