"""Errors raised by the Connect Four engine.

Every error is raised before any state is mutated, so a caller can always
recover by submitting a different move (or by stopping, once the game is over).
"""


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidDimension(GameError, ValueError):
    """Board height or width below the minimum playable size."""

    def __init__(self, height: object, width: object, minimum: int):
        self.height = height
        self.width = width
        self.minimum = minimum
        super().__init__(
            f"Board must be at least {minimum}x{minimum} (got {height}x{width})"
        )


class InvalidColumn(GameError, ValueError):
    """Column index outside [0, width)."""

    def __init__(self, column: object, width: int):
        self.column = column
        self.width = width
        super().__init__(f"Invalid column {column!r}: expected 0-{width - 1}")


class ColumnFull(GameError, ValueError):
    """Target column has no empty cell."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Column {column} is full")


class GameAlreadyOver(GameError, RuntimeError):
    """Move submitted after the game reached a terminal status."""

    def __init__(self, status: object):
        self.status = status
        super().__init__(f"Game is already over ({status})")
