# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from quicktasks.core.notifications import SnackbarHost
from quicktasks.core.state import AppState, TaskListState

from .fakes import FakeNotifier


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the connectors.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="QuickTasks",
        log_level="DEBUG",
        log_to_file=False,
        clear_screen=False,
        input_placeholder="Enter task",
        data_dir=tmp_path / "data",
    )


@pytest.fixture()
def notifier() -> FakeNotifier:
    return FakeNotifier()


@pytest.fixture()
def tasks(notifier: FakeNotifier) -> TaskListState:
    return TaskListState(notifier=notifier)


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState wired the same way bootstrap does it (real SnackbarHost)."""
    snackbar = SnackbarHost()
    return AppState(
        settings=settings,
        tasks=TaskListState(notifier=snackbar),
        snackbar=snackbar,
    )
