"""Game logic module for Connect Four."""

from .engine import GameEngine
from .rules import Connect4Rules


__all__ = [
    "Connect4Rules",
    "GameEngine",
]
