"""Game engine for Connect Four state management."""

from numbers import Integral

from ..core.bus import EventBus
from ..core.config import MIN_BOARD_SIZE, Settings
from ..core.errors import ColumnFull, GameAlreadyOver, InvalidDimension
from ..core.events import Event, EventType
from ..core.types import (
    Board,
    GameState,
    GameStatus,
    Move,
    MoveOutcome,
    OutcomeKind,
    Player,
    Position,
)
from .rules import Connect4Rules


def _valid_dimension(value: object) -> bool:
    return (
        isinstance(value, Integral)
        and not isinstance(value, bool)
        and value >= MIN_BOARD_SIZE
    )


class GameEngine:
    """Owns the board and turn state of a single game.

    Stateful engine that:
    - Validates moves before touching any state
    - Places pieces under gravity
    - Detects ties and wins
    - Alternates turns
    - Emits events for accepted moves
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        height: int = 6,
        width: int = 7,
        *,
        rules: Connect4Rules | None = None,
        bus: EventBus | None = None,
        board: Board | None = None,
    ):
        """Start a new game.

        Args:
            player1: Moves first
            player2: Moves second
            height: Number of rows (>= 4)
            width: Number of columns (>= 4)
            rules: Game rules (uses defaults if None)
            bus: Event bus (a private one is created if None)
            board: Starting position; copied, and its size overrides height/width

        Raises:
            InvalidDimension: If height or width is below 4
            ValueError: If both players are the same object, or board is full
        """
        if board is not None:
            height, width = board.height, board.width
        if not (_valid_dimension(height) and _valid_dimension(width)):
            raise InvalidDimension(height, width, MIN_BOARD_SIZE)
        if player1 is player2:
            raise ValueError("player1 and player2 must be distinct players")
        if board is not None and board.is_full():
            raise ValueError("Starting board has no empty cell")

        self.rules = rules or Connect4Rules()
        self.bus = bus or EventBus()
        self._state = GameState(
            board=board.copy() if board is not None else Board(height=int(height), width=int(width)),
            players=(player1, player2),
        )

        self.bus.publish(Event(
            type=EventType.GAME_STARTED,
            data={"players": self._state.players, "height": height, "width": width},
            source="game_engine",
        ))

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        height: int | None = None,
        width: int | None = None,
        bus: EventBus | None = None,
    ) -> "GameEngine":
        """Build an engine and two fresh players from configuration.

        Explicit height/width override the configured board size.
        """
        game = settings.game
        return cls(
            Player(game.player1_color),
            Player(game.player2_color),
            height=game.height if height is None else height,
            width=game.width if width is None else width,
            bus=bus,
        )

    # ─────────────────────────────────────────────────────────
    # MOVES
    # ─────────────────────────────────────────────────────────

    def find_landing_row(self, column: int) -> int | None:
        """Lowest empty row in column, or None if the column is full.

        Raises:
            InvalidColumn: If column is outside [0, width)
        """
        return self.rules.get_landing_row(self._state.board, column)

    def submit_move(self, column: int) -> MoveOutcome:
        """Drop the current player's piece into column.

        Args:
            column: Column index in [0, width)

        Returns:
            Outcome of the accepted move

        Raises:
            GameAlreadyOver: If the game has already been won or tied
            InvalidColumn: If column is outside [0, width)
            ColumnFull: If column has no empty cell
        """
        state = self._state
        if state.is_over:
            raise GameAlreadyOver(state.status)

        col = self.rules.validate_column(state.board, column)
        row = self.rules.get_landing_row(state.board, col)
        if row is None:
            raise ColumnFull(col)

        player = state.current_player
        state.board.place(row, col, player)
        state.move_history.append(Move(column=col, player=player, position=Position(row=row, col=col)))
        state.turn_number += 1

        self.bus.publish(Event(
            type=EventType.MOVE_MADE,
            data={"row": row, "column": col, "player": player},
            source="game_engine",
        ))

        # Tie is checked before win: a move that fills the board reports a tie
        # even if it also completes a line.
        if self.rules.is_full(state.board):
            state.status = GameStatus.TIED
            outcome = MoveOutcome(
                kind=OutcomeKind.TIE,
                row=row,
                column=col,
                player=player,
                status=state.status,
            )
            self.bus.publish(Event(type=EventType.GAME_DRAW, data=outcome, source="game_engine"))
            return outcome

        winning_line = self.find_winning_line()
        if winning_line:
            state.status = GameStatus.WON
            state.winner = player
            state.winning_positions = winning_line
            outcome = MoveOutcome(
                kind=OutcomeKind.WIN,
                row=row,
                column=col,
                player=player,
                status=state.status,
                winner=player,
                winning_positions=tuple(winning_line),
            )
            self.bus.publish(Event(type=EventType.GAME_WON, data=outcome, source="game_engine"))
            return outcome

        state.current_index = 1 - state.current_index
        outcome = MoveOutcome(
            kind=OutcomeKind.CONTINUE,
            row=row,
            column=col,
            player=player,
            status=state.status,
            next_player=state.current_player,
        )
        self.bus.publish(Event(
            type=EventType.TURN_CHANGED,
            data={"player": state.current_player, "turn": state.turn_number},
            source="game_engine",
        ))
        return outcome

    # ─────────────────────────────────────────────────────────
    # WIN DETECTION
    # ─────────────────────────────────────────────────────────

    def find_winning_line(self) -> list[Position]:
        """Positions of a line of four owned by the current player, if any."""
        return self.rules.find_winning_line(self._state.board, self._state.current_player)

    def check_for_winner(self) -> bool:
        """Check whether the current player owns any line of four."""
        return bool(self.find_winning_line())

    # ─────────────────────────────────────────────────────────
    # QUERIES
    # ─────────────────────────────────────────────────────────

    def legal_moves(self) -> list[int]:
        """Columns that can still accept a piece (empty once the game is over)."""
        if self._state.is_over:
            return []
        return self.rules.get_legal_moves(self._state.board)

    @property
    def state(self) -> GameState:
        """Get a snapshot of the current game state."""
        return self._state.copy()

    @property
    def board(self) -> Board:
        """Get a snapshot of the board."""
        return self._state.board.copy()

    @property
    def height(self) -> int:
        return self._state.board.height

    @property
    def width(self) -> int:
        return self._state.board.width

    @property
    def players(self) -> tuple[Player, Player]:
        return self._state.players

    @property
    def current_player(self) -> Player:
        return self._state.current_player

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def winner(self) -> Player | None:
        return self._state.winner

    @property
    def is_game_over(self) -> bool:
        """Check if game is over."""
        return self._state.is_over
