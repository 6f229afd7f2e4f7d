# src/quicktasks/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from ..cli.commands import registry as command_registry
from ..core.screen import DEFAULT_PLACEHOLDER, DEFAULT_TITLE, build_screen, render_lines
from ..core.state import AppState

logger = logging.getLogger(__name__)

CLEAR_SEQ = "\033[H\033[2J"
EXIT_COMMANDS = ("/exit", "/quit")

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _clear_screen() -> None:
    """Best-effort: only emit the ANSI clear when stdout is a TTY."""
    if sys.stdout.isatty():
        sys.stdout.write(CLEAR_SEQ)
        sys.stdout.flush()


def render(state: AppState, out: OutputFn = print) -> None:
    settings = state.settings
    model = build_screen(
        state.tasks,
        title=str(getattr(settings, "app_name", DEFAULT_TITLE)),
        placeholder=str(getattr(settings, "input_placeholder", DEFAULT_PLACEHOLDER)),
    )
    for line in render_lines(model):
        out(line)

    # Snackbar messages are transient: each one is shown on exactly one render.
    for message in state.snackbar.drain():
        out("")
        out(f"  >> {message}")


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    out: OutputFn = print,
) -> None:
    clear = bool(getattr(state.settings, "clear_screen", False))
    placeholder = str(getattr(state.settings, "input_placeholder", DEFAULT_PLACEHOLDER))

    logger.info("Console connector started.")
    reply: str | None = None

    while True:
        if clear:
            _clear_screen()
        render(state, out)
        if reply:
            out("")
            out(reply)
        reply = None

        try:
            line = input_fn(f"\n{placeholder}: ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            out("")
            break

        if not line:
            continue

        if line.lower() in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

        try:
            reply = command_registry.handle(state, line)
            if reply is None:
                # Plain text is the "type and press Add" path.
                state.tasks.update_input(line)
                state.tasks.add()
        except Exception:
            logger.exception("Command handler crashed.")
            reply = "Internal error while handling a command."

    logger.info("Console connector finished.")
