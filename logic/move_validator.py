"""
Move validator for console TicTacToe.
Validates that selections and moves follow the rules.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None
    occupied: bool = False


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Row and column must each be 1, 2 or 3
    2. Can only place on empty cells
    3. Game must not be over
    """

    def parse_selection(self, raw: str) -> Optional[int]:
        """
        Turn typed text into a row or column number.

        One line holds one number: "1 2" is rejected rather than read as
        a row and a column, so the player is always asked for each.

        Args:
            raw: Text entered by the player.

        Returns:
            The number if it is an integer in 1-3, None otherwise.
        """
        text = raw.strip()
        try:
            value = int(text)
        except ValueError:
            return None

        if not self.is_valid_coordinate(value):
            return None
        return value

    def is_valid_coordinate(self, value: int) -> bool:
        return 1 <= value <= GameConfig.BOARD_SIZE

    def is_valid_selection(self, row: int, col: int) -> bool:
        """Check that both row and column are in range."""
        return self.is_valid_coordinate(row) and self.is_valid_coordinate(col)

    def validate_move(
        self,
        game_state: GameState,
        row: int,
        col: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            row: Row to place the symbol (1-3).
            col: Column to place the symbol (1-3).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not self.is_valid_selection(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position ({row}, {col}). Must be 1-3."
            )

        if not game_state.is_cell_empty(row, col):
            return ValidationResult(
                is_valid=False,
                error_message=(
                    f"Cell ({row}, {col}) is already occupied by "
                    f"{game_state.symbol_at(row, col)}"
                ),
                occupied=True
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[Tuple[int, int]]:
        """
        Get all valid moves for the current player.

        Returns:
            List of 1-based (row, col) positions.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
