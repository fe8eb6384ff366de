"""Root test configuration: isolates env settings and root logging per test"""

import logging
import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDBLOCKKIT_ environment variables set outside the test session."""
    for name in list(os.environ):
        if name.startswith("MDBLOCKKIT_"):
            monkeypatch.delenv(name)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler/level changes made by configure_logging (the CLI calls it)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
