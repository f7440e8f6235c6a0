"""Root conftest — shared test configuration."""

import logging
import os

import pytest

from pureops.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Drop PUREOPS_* variables from the environment and the settings cache."""
    for key in list(os.environ):
        if key.upper().startswith("PUREOPS_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(os.path.dirname(__file__))  # no stray .env
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging():
    """Remove handlers installed by setup_logging so they don't outlive capsys."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)
