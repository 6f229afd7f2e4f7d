# src/quicktasks/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core.

The state holder depends on these Protocols instead of concrete UI pieces,
so the console connector (or a test fake) can be plugged in.
"""

from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .state import TaskListState


class Notifier(Protocol):
    """
    Transient status messages (snackbar-like).

    `show` must return immediately: the caller never waits for the message
    to be displayed or dismissed.
    """

    def show(self, message: str) -> None: ...


StateListener = Callable[["TaskListState"], None]
# Called with the state after every effective mutation.

Unsubscribe = Callable[[], None]
