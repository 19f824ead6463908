"""Pytest configuration and fixtures for confdir tests."""

import logging
from pathlib import Path

import pytest

from confdir.store import ConfigStore

APP_NAME = "myapp"


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation for all loggers during tests.

    This allows pytest's caplog fixture to capture logs from all loggers,
    even those created with propagate=False in production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("confdir"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point every config location at a temporary directory.

    Home, XDG_CONFIG_HOME, APPDATA and the log directory are redirected so
    no test touches the real user configuration on any platform.
    """
    home = tmp_path / "home"
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    monkeypatch.setenv("CONFDIR_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.delenv("CONFDIR_LOG_LEVEL", raising=False)
    return tmp_path


@pytest.fixture
def store() -> ConfigStore:
    """ConfigStore resolving paths for the running platform."""
    return ConfigStore()


@pytest.fixture
def config_dir(store: ConfigStore) -> Path:
    """Configuration directory of the test application (not created)."""
    return store.dir_for(APP_NAME)
