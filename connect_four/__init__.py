"""Connect Four rules engine and turn-based state machine."""

from .core import (
    ColumnFull,
    GameAlreadyOver,
    GameError,
    GameStatus,
    InvalidColumn,
    InvalidDimension,
    MoveOutcome,
    OutcomeKind,
    Player,
)
from .game import Connect4Rules, GameEngine


__version__ = "0.1.0"

__all__ = [
    "GameEngine",
    "Connect4Rules",
    "Player",
    "GameStatus",
    "OutcomeKind",
    "MoveOutcome",
    "GameError",
    "InvalidDimension",
    "InvalidColumn",
    "ColumnFull",
    "GameAlreadyOver",
]
