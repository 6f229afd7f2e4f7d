# tests/test_bootstrap.py

from __future__ import annotations

from types import SimpleNamespace

import pytest

from quicktasks.cli import main as main_mod
from quicktasks.cli.bootstrap import create_initial_state


def test_create_initial_state_wires_snackbar(settings: SimpleNamespace) -> None:
    state = create_initial_state(settings=settings)

    state.tasks.clear_completed()

    assert state.settings is settings
    assert state.snackbar.drain() == ["No completed tasks"]


def test_create_initial_state_makes_data_dir_for_file_logs(settings: SimpleNamespace) -> None:
    settings.log_to_file = True
    create_initial_state(settings=settings)
    assert settings.data_dir.is_dir()


def test_main_builds_state_and_runs_console(
    settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch
) -> None:
    captured: dict = {}

    def fake_loop(state) -> None:
        captured["state"] = state
        state.tasks.add("from main")

    def fake_setup_logging(**kwargs) -> None:
        captured["log"] = kwargs

    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(main_mod, "setup_logging", fake_setup_logging)
    monkeypatch.setattr(main_mod, "run_console_loop", fake_loop)

    main_mod.main()

    assert captured["log"]["log_dir"] is None
    assert captured["log"]["console_level"] == 10
    assert captured["state"].settings is settings
    assert captured["state"].tasks.total_count == 1


def test_main_defaults_console_level_to_warning(
    settings: SimpleNamespace, monkeypatch: pytest.MonkeyPatch
) -> None:
    levels: list[int] = []

    monkeypatch.setattr(main_mod, "get_settings", lambda: settings)
    monkeypatch.setattr(
        main_mod, "setup_logging", lambda **kwargs: levels.append(kwargs["console_level"])
    )
    monkeypatch.setattr(main_mod, "run_console_loop", lambda state: None)

    del settings.log_level
    main_mod.main()

    settings.log_level = "VERBOSE"
    main_mod.main()

    assert levels == [30, 30]
