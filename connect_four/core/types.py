"""
Shared data types for the Connect Four engine.

These types are the contracts between the engine and its callers.
Presentation layers only ever see these structures.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


# ─────────────────────────────────────────────────────────────
# PLAYER & STATUS
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True, eq=False)
class Player:
    """Opaque player identity.

    Two players are only equal if they are the same object, so two
    participants may share a color label without being confused.
    """

    color: str

    def __str__(self) -> str:
        return self.color


class GameStatus(Enum):
    """Lifecycle of a game session."""

    IN_PROGRESS = auto()
    WON = auto()  # Terminal
    TIED = auto()  # Terminal


class OutcomeKind(Enum):
    """Result of an accepted move."""

    CONTINUE = auto()
    WIN = auto()
    TIE = auto()


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left


@dataclass
class Board:
    """
    Fixed-size Connect Four grid.

    The grid is a 2D list where:
    - grid[0] is the top row
    - grid[height - 1] is the bottom row
    - grid[row][col] is None or the Player occupying the cell
    """

    height: int = 6
    width: int = 7
    grid: list[list[Player | None]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None] * self.width for _ in range(self.height)]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def get(self, row: int, col: int) -> Player | None:
        return self.grid[row][col]

    def place(self, row: int, col: int, player: Player) -> None:
        """Occupy an empty cell. Occupied cells are never reassigned."""
        if self.grid[row][col] is not None:
            raise ValueError(f"Cell ({row}, {col}) is already occupied")
        self.grid[row][col] = player

    def is_full(self) -> bool:
        return all(cell is not None for row in self.grid for cell in row)

    def count_in_column(self, col: int) -> int:
        return sum(1 for row in self.grid if row[col] is not None)

    def cells(self) -> tuple[tuple[Player | None, ...], ...]:
        """Immutable snapshot of the grid."""
        return tuple(tuple(row) for row in self.grid)

    def as_matrix(self, players: tuple[Player, Player]) -> np.ndarray:
        """Convert to a numpy matrix for display or analysis.

        Returns:
            numpy array where players[0]=1, players[1]=-1, empty=0
        """
        first, second = players
        matrix = np.zeros((self.height, self.width), dtype=np.int8)
        for r, row in enumerate(self.grid):
            for c, cell in enumerate(row):
                if cell is first:
                    matrix[r, c] = 1
                elif cell is second:
                    matrix[r, c] = -1
        return matrix

    def copy(self) -> "Board":
        """Create a copy of the board (players are shared references)."""
        return Board(
            height=self.height,
            width=self.width,
            grid=[row.copy() for row in self.grid],
        )


# ─────────────────────────────────────────────────────────────
# MOVE & GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Move:
    """An accepted move."""

    column: int
    player: Player
    position: Position


@dataclass(frozen=True)
class MoveOutcome:
    """Everything a presentation layer needs after an accepted move."""

    kind: OutcomeKind
    row: int
    column: int
    player: Player  # Who just moved
    status: GameStatus
    winner: Player | None = None
    winning_positions: tuple[Position, ...] = ()
    next_player: Player | None = None  # Only set for CONTINUE

    @property
    def is_terminal(self) -> bool:
        return self.kind is not OutcomeKind.CONTINUE

    def describe(self) -> str:
        """Human-readable summary of the outcome."""
        if self.kind is OutcomeKind.WIN:
            return f"The {self.winner} player won!"
        if self.kind is OutcomeKind.TIE:
            return "Tie!"
        return f"{self.player} played column {self.column} (row {self.row}); {self.next_player} to move"


@dataclass
class GameState:
    """Complete state of one game session."""

    board: Board
    players: tuple[Player, Player]
    current_index: int = 0
    status: GameStatus = GameStatus.IN_PROGRESS
    winner: Player | None = None
    winning_positions: list[Position] = field(default_factory=list)
    move_history: list[Move] = field(default_factory=list)
    turn_number: int = 1

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.IN_PROGRESS

    def copy(self) -> "GameState":
        """Create a copy of the game state (players are shared references)."""
        return GameState(
            board=self.board.copy(),
            players=self.players,
            current_index=self.current_index,
            status=self.status,
            winner=self.winner,
            winning_positions=self.winning_positions.copy(),
            move_history=self.move_history.copy(),
            turn_number=self.turn_number,
        )
