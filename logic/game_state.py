"""
Game state management for console TicTacToe.
Tracks the board, current player, turn phase and outcome.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field

import numpy as np

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    X = GameConfig.X_VALUE
    O = GameConfig.O_VALUE

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X

    @property
    def symbol(self) -> str:
        """Symbol drawn on the board for this player."""
        return GameConfig.X_SYMBOL if self == Player.X else GameConfig.O_SYMBOL

    @property
    def number(self) -> int:
        """Player number shown to the humans (X is 1, O is 2)."""
        return GameConfig.PLAYER_NUMBERS[self.symbol]


class Outcome(Enum):
    """Final result of a game."""
    X = "X"
    O = "O"
    TIE = "tie"

    @classmethod
    def for_player(cls, player: Player) -> "Outcome":
        """Get the winning outcome for a player."""
        return cls.X if player == Player.X else cls.O

    @property
    def player(self) -> Optional[Player]:
        """The winning player, or None for a tie."""
        if self == Outcome.TIE:
            return None
        return Player.X if self == Outcome.X else Player.O


class Phase(Enum):
    """Turn state machine."""
    AWAITING_MOVE = "awaiting_move"
    EVALUATING = "evaluating"
    FINISHED = "finished"


@dataclass
class Move:
    """
    A move in the game.
    """
    player: Player          # Who made the move
    row: int                # Row (1-3)
    col: int                # Column (1-3)
    move_number: int        # Which move of the game this is (1-9)


def _empty_board() -> np.ndarray:
    size = GameConfig.BOARD_SIZE
    return np.full((size, size), GameConfig.EMPTY, dtype=np.int8)


@dataclass
class GameState:
    """
    The complete state of the TicTacToe game.

    Tracks:
    - The 3x3 board (0 empty, 1 X, 2 O)
    - Current player
    - Turn phase (awaiting move, evaluating, finished)
    - Move history
    - Game result

    Rows and columns are 1-based everywhere outside of the board array.
    """

    board: np.ndarray = field(default_factory=_empty_board)

    # Current player's turn
    current_player: Player = Player.X

    phase: Phase = Phase.AWAITING_MOVE

    # Move history
    moves: List[Move] = field(default_factory=list)

    # Game result, None while the game is ongoing
    winner: Optional[Outcome] = None

    @property
    def is_game_over(self) -> bool:
        return self.phase == Phase.FINISHED

    def value_at(self, row: int, col: int) -> int:
        """Raw board value at a 1-based cell."""
        return int(self.board[row - 1, col - 1])

    def player_at(self, row: int, col: int) -> Optional[Player]:
        """
        Get the player occupying a cell.

        Args:
            row: Row (1-3).
            col: Column (1-3).

        Returns:
            The Player in the cell, or None if it is empty.
        """
        value = self.value_at(row, col)
        if value == GameConfig.EMPTY:
            return None
        return Player(value)

    def symbol_at(self, row: int, col: int) -> str:
        """Symbol to draw for a cell (space when empty)."""
        player = self.player_at(row, col)
        return player.symbol if player else GameConfig.EMPTY_SYMBOL

    def is_on_board(self, row: int, col: int) -> bool:
        """Check that a 1-based cell lies inside the board."""
        size = GameConfig.BOARD_SIZE
        return 1 <= row <= size and 1 <= col <= size

    def is_cell_empty(self, row: int, col: int) -> bool:
        return self.value_at(row, col) == GameConfig.EMPTY

    def is_full(self) -> bool:
        return not np.any(self.board == GameConfig.EMPTY)

    def make_move(self, row: int, col: int) -> bool:
        """
        Place the current player's symbol at the given cell.

        The turn is not switched here; the state moves to EVALUATING and
        the WinChecker decides whether the game finishes or the turn
        advances.

        Args:
            row: Row (1-3).
            col: Column (1-3).

        Returns:
            True if move was applied, False if the game is not awaiting
            a move, the cell is off the board, or the cell is taken.
        """
        if self.phase != Phase.AWAITING_MOVE:
            return False

        if not self.is_on_board(row, col):
            return False

        if not self.is_cell_empty(row, col):
            return False

        self.board[row - 1, col - 1] = self.current_player.value

        self.moves.append(Move(
            player=self.current_player,
            row=row,
            col=col,
            move_number=len(self.moves) + 1
        ))

        self.phase = Phase.EVALUATING
        return True

    def advance_turn(self):
        """Hand the turn to the other player after a non-terminal move."""
        if self.phase != Phase.EVALUATING:
            return
        self.current_player = self.current_player.opposite()
        self.phase = Phase.AWAITING_MOVE

    def finish(self, outcome: Outcome):
        """Record the outcome and stop accepting moves."""
        if self.phase == Phase.FINISHED:
            return
        self.winner = outcome
        self.phase = Phase.FINISHED

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of 1-based (row, col) tuples.
        """
        rows, cols = np.nonzero(self.board == GameConfig.EMPTY)
        return [(int(r) + 1, int(c) + 1) for r, c in zip(rows, cols)]

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=self.board.copy(),
            current_player=self.current_player,
            phase=self.phase,
            moves=list(self.moves),
            winner=self.winner
        )
