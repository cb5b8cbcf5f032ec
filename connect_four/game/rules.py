"""Connect Four rules on a rectangular board."""

from numbers import Integral

from ..core.errors import InvalidColumn
from ..core.types import Board, Player, Position


# Scan order: horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
)


class Connect4Rules:
    """Stateless Connect Four rules.

    Win condition: 4 in a row (horizontal, vertical, or diagonal)
    """

    def __init__(self, win_length: int = 4):
        """Initialize rules.

        Args:
            win_length: Number in a row to win (4 default)
        """
        self.win_length = win_length

    def validate_column(self, board: Board, column: object) -> int:
        """Check that column is an integer index into the board.

        Returns:
            The column as a plain int

        Raises:
            InvalidColumn: If column is not an int or is out of range
        """
        if isinstance(column, bool) or not isinstance(column, Integral):
            raise InvalidColumn(column, board.width)
        col = int(column)
        if not 0 <= col < board.width:
            raise InvalidColumn(column, board.width)
        return col

    def get_landing_row(self, board: Board, column: object) -> int | None:
        """Get the row where a piece would land in given column.

        Args:
            board: Current board
            column: Column to drop piece in

        Returns:
            Row index where piece lands, or None if column is full

        Raises:
            InvalidColumn: If column is out of range
        """
        col = self.validate_column(board, column)
        for row in range(board.height - 1, -1, -1):
            if board.grid[row][col] is None:
                return row
        return None

    def get_legal_moves(self, board: Board) -> list[int]:
        """Get columns that aren't full."""
        return [col for col in range(board.width) if board.grid[0][col] is None]

    def is_full(self, board: Board) -> bool:
        """Check whether every cell is occupied."""
        return board.is_full()

    def find_winning_line(self, board: Board, player: Player) -> list[Position]:
        """Scan every cell for a line owned entirely by player.

        Every cell is tried as the start of a line in each direction; the
        first complete line found is returned.

        Returns:
            List of winning positions, or empty list if no win
        """
        for row in range(board.height):
            for col in range(board.width):
                for dr, dc in DIRECTIONS:
                    positions = self._check_direction(board, row, col, dr, dc, player)
                    if positions:
                        return positions
        return []

    def has_won(self, board: Board, player: Player) -> bool:
        return bool(self.find_winning_line(board, player))

    def _check_direction(
        self,
        board: Board,
        start_row: int,
        start_col: int,
        dr: int,
        dc: int,
        player: Player,
    ) -> list[Position]:
        """Check for win_length in a row in given direction.

        Returns:
            List of winning positions, or empty list if no win
        """
        positions = []

        for i in range(self.win_length):
            row = start_row + i * dr
            col = start_col + i * dc

            if not board.in_bounds(row, col):
                return []

            if board.grid[row][col] is not player:
                return []

            positions.append(Position(row=row, col=col))

        return positions
