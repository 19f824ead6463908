"""Tests for logger configuration module."""

import logging
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from confdir.logger import clear_logger_state, setup_logging
from confdir.logger.config import (
    default_log_file,
    load_log_settings,
    set_console_level,
)
from confdir.logger.state import get_state
from confdir.paths import get_dir_for


@pytest.fixture
def fresh_logger():
    """Reset logger state before and after the test."""
    clear_logger_state()
    yield
    clear_logger_state()


def test_load_log_settings_defaults(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv("CONFDIR_LOG_LEVEL", raising=False)

    assert load_log_settings() == ("WARNING", "INFO")


def test_load_log_settings_env_level(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("CONFDIR_LOG_LEVEL", "debug")

    console_level, file_level = load_log_settings()

    assert console_level == "DEBUG"
    assert file_level == "INFO"


def test_load_log_settings_ignores_unknown_level(
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setenv("CONFDIR_LOG_LEVEL", "LOUD")

    assert load_log_settings()[0] == "WARNING"


def test_default_log_file_with_env_var(
    monkeypatch: MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("CONFDIR_LOG_DIR", str(tmp_path / "test-logs"))

    assert default_log_file() == tmp_path / "test-logs" / "confdir.log"


def test_default_log_file_with_tilde(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.setenv("CONFDIR_LOG_DIR", "~/custom-logs")

    log_path = default_log_file()

    assert log_path.name == "confdir.log"
    assert "~" not in str(log_path)


def test_default_log_file_without_env_var(monkeypatch: MonkeyPatch) -> None:
    monkeypatch.delenv("CONFDIR_LOG_DIR", raising=False)

    assert default_log_file() == (
        get_dir_for("confdir") / "logs" / "confdir.log"
    )


def test_set_console_level(fresh_logger) -> None:
    setup_logging(console_level="WARNING")
    state = get_state()
    (console,) = state.queue_listener.handlers

    set_console_level(state, "DEBUG")
    assert console.level == logging.DEBUG

    set_console_level(state, "error")
    assert console.level == logging.ERROR


def test_set_console_level_before_setup_is_a_no_op(fresh_logger) -> None:
    set_console_level(get_state(), "DEBUG")

    assert get_state().queue_listener is None
