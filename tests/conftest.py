"""Shared fixtures for the Connect Four test suite."""

import logging

import pytest

from connect_four.core.config import reset_settings
from connect_four.core.types import Player
from connect_four.game.engine import GameEngine


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate every test from the caller's environment and the settings singleton."""
    for key in ("GAME_HEIGHT", "GAME_WIDTH", "GAME_PLAYER1_COLOR", "GAME_PLAYER2_COLOR", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    reset_settings()
    yield
    reset_settings()
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def red():
    return Player("red")


@pytest.fixture
def gold():
    return Player("gold")


@pytest.fixture
def engine(red, gold):
    return GameEngine(red, gold)
