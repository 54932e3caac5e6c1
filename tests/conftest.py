"""Shared pytest fixtures."""

import pytest

from keymenu.menu import Menu
from keymenu.utils.debug import reload_config
from tests.helpers.fake_terminal import FakeTerminal


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Drop KEYMENU_* vars so tests see defaults."""
    import os

    for key in list(os.environ):
        if key.startswith("KEYMENU_"):
            monkeypatch.delenv(key)
    reload_config()
    yield
    reload_config()


@pytest.fixture
def terminal():
    """In-memory terminal with no queued keys."""
    return FakeTerminal()


@pytest.fixture
def menu(terminal):
    """Menu with three items wired to the fake terminal."""
    m = Menu("Main Menu", terminal=terminal)
    m.add("n", "New game")
    m.add("l", "Load game")
    m.add("q", "Quit")
    return m
