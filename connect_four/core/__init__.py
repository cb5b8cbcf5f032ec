"""Core infrastructure for the Connect Four engine."""

from .bus import EventBus
from .config import (
    MIN_BOARD_SIZE,
    GameSettings,
    LogSettings,
    Settings,
    get_settings,
    reset_settings,
)
from .errors import (
    ColumnFull,
    GameAlreadyOver,
    GameError,
    InvalidColumn,
    InvalidDimension,
)
from .events import Event, EventType
from .types import (
    Board,
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    OutcomeKind,
    Player,
    Position,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "LogSettings",
    "MIN_BOARD_SIZE",
    # Errors
    "GameError",
    "InvalidDimension",
    "InvalidColumn",
    "ColumnFull",
    "GameAlreadyOver",
    # Types
    "Player",
    "Position",
    "Board",
    "GameStatus",
    "OutcomeKind",
    "Move",
    "MoveOutcome",
    "GameState",
    # Events
    "Event",
    "EventType",
    "EventBus",
]
