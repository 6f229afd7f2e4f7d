# src/quicktasks/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures the local (gitignored) data directory exists,
- wires the snackbar host into the task state and builds AppState.
"""

from __future__ import annotations

import logging

from ..config import get_settings
from ..core.notifications import SnackbarHost
from ..core.state import AppState, TaskListState

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    if getattr(settings, "log_to_file", False):
        settings.data_dir.mkdir(parents=True, exist_ok=True)


def create_initial_state(*, settings=None) -> AppState:
    """
    Create AppState from the provided settings.

    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    snackbar = SnackbarHost()
    state = AppState(
        settings=settings,
        tasks=TaskListState(notifier=snackbar),
        snackbar=snackbar,
    )
    logger.debug("AppState ready (app=%s).", getattr(settings, "app_name", "QuickTasks"))
    return state
