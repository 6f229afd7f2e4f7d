# src/quicktasks/cli/commands.py

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from typing import cast

from ..core.state import AppState

CommandHandler2 = Callable[[AppState, list[str]], str]
CommandHandler3 = Callable[[AppState, list[str], str], str]
CommandHandler = CommandHandler2 | CommandHandler3

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Slash-command registry used by connectors (/help, /add, /clear, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "/command args".
        Returns a reply string ("" for a silent success) or None if not a command.

        Handlers taking three parameters also get the raw text after the
        command word, with its inner spacing intact.
        """
        if not line.startswith("/"):
            return None

        head = line[1:].split(maxsplit=1)
        if not head:
            return "Empty command. Use /help to list available commands."

        name = head[0].lower()
        raw = head[1] if len(head) > 1 else ""
        args = raw.split()

        handler = self._handlers.get(name)
        if not handler:
            return f"Unknown command: /{name}. Use /help to list available commands."

        try:
            nparams = len(inspect.signature(handler).parameters)
        except (TypeError, ValueError):
            nparams = 2

        if nparams >= 3:
            h3 = cast(CommandHandler3, handler)
            return h3(state, args, raw)

        h2 = cast(CommandHandler2, handler)
        return h2(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  /{name} - {help_text}")
        lines.append("  /exit - Quit.")
        lines.append("Anything that is not a command is added as a new task.")
        lines.append("A task that itself starts with '/' needs /add, e.g. /add /tmp cleanup.")
        return "\n".join(lines)


registry = CommandRegistry()


def _parse_id(args: list[str]) -> int | None:
    if len(args) != 1:
        return None
    raw = args[0].strip().lstrip("#").rstrip(".")
    if not (raw.isascii() and raw.isdecimal()):
        return None
    return int(raw)


def cmd_help(state: AppState, args: list[str]) -> str:
    return registry.build_help()


def cmd_add(state: AppState, args: list[str], raw: str) -> str:
    """
    /add <text>  -> add a task (blank text is ignored)
    """
    state.tasks.add(raw)
    return ""


def _set_done(state: AppState, args: list[str], checked: bool, usage: str) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return usage
    # Unknown ids are ignored on purpose, same as an unchecked row tap.
    state.tasks.toggle(task_id, checked)
    return ""


def cmd_done(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, True, "Usage: /done <id>")


def cmd_undone(state: AppState, args: list[str]) -> str:
    return _set_done(state, args, False, "Usage: /undone <id>")


def cmd_toggle(state: AppState, args: list[str]) -> str:
    task_id = _parse_id(args)
    if task_id is None:
        return "Usage: /toggle <id>"
    state.tasks.flip(task_id)
    return ""


def cmd_clear(state: AppState, args: list[str]) -> str:
    """
    /clear  -> remove completed tasks; the status message goes to the snackbar
    """
    result = state.tasks.clear_completed()
    logger.info("Clear completed: cleared=%s remaining=%s", result.cleared, result.remaining)
    return ""


def cmd_count(state: AppState, args: list[str]) -> str:
    return f"Completed: {state.tasks.counter_text()}"


registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("add", cmd_add, help_text="Add a task: /add <text>.", aliases=["a"])
registry.register("done", cmd_done, help_text="Check a task: /done <id>.", aliases=["d"])
registry.register("undone", cmd_undone, help_text="Uncheck a task: /undone <id>.", aliases=["u"])
registry.register("toggle", cmd_toggle, help_text="Flip a task's checkbox: /toggle <id>.", aliases=["t"])
registry.register("clear", cmd_clear, help_text="Clear completed tasks.", aliases=["c"])
registry.register("count", cmd_count, help_text="Show the completed / total counter.")
