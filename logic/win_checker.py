"""
Win checker for console TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, List, Tuple

import numpy as np

from .config import GameConfig
from .game_state import GameState, Player, Outcome


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Lines are checked in order: rows, columns, main diagonal,
    anti-diagonal. A tie is a full board with no completed line.
    """

    # All possible winning lines as 0-based (row, col) tuples, in check order
    WINNING_LINES = [
        # Rows
        [(0, 0), (0, 1), (0, 2)],
        [(1, 0), (1, 1), (1, 2)],
        [(2, 0), (2, 1), (2, 2)],
        # Columns
        [(0, 0), (1, 0), (2, 0)],
        [(0, 1), (1, 1), (2, 1)],
        [(0, 2), (1, 2), (2, 2)],
        # Diagonals
        [(0, 0), (1, 1), (2, 2)],
        [(0, 2), (1, 1), (2, 0)],
    ]

    def __init__(self):
        # Index arrays so every line can be read from the board at once
        lines = np.array(self.WINNING_LINES)
        self._line_rows = lines[:, :, 0]
        self._line_cols = lines[:, :, 1]

    def _completed_lines(self, board: np.ndarray) -> np.ndarray:
        """
        Find which lines hold three equal, non-empty cells.

        Returns:
            Boolean array with one entry per line in WINNING_LINES.
        """
        values = board[self._line_rows, self._line_cols]
        same = np.all(values == values[:, :1], axis=1)
        return same & (values[:, 0] != GameConfig.EMPTY)

    def _first_completed_line(self, board: np.ndarray) -> Optional[int]:
        matches = np.flatnonzero(self._completed_lines(board))
        if matches.size == 0:
            return None
        return int(matches[0])

    def check_winner(self, game_state: GameState) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            game_state: The current game state.

        Returns:
            The winning Player, or None if no winner yet.
        """
        index = self._first_completed_line(game_state.board)
        if index is None:
            return None
        row, col = self.WINNING_LINES[index][0]
        return Player(int(game_state.board[row, col]))

    def check_draw(self, game_state: GameState) -> bool:
        """
        Check if the game is a tie: the board is full AND no line is complete.
        """
        if self.check_winner(game_state) is not None:
            return False
        return game_state.is_full()

    def evaluate(self, game_state: GameState) -> Optional[Outcome]:
        """
        Evaluate the board.

        Returns:
            The Outcome if the game is over, None while play continues.
        """
        winner = self.check_winner(game_state)
        if winner is not None:
            return Outcome.for_player(winner)
        if game_state.is_full():
            return Outcome.TIE
        return None

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Finish the game or pass the turn after a move was applied.

        Args:
            game_state: The game state to update.

        Returns:
            Updated game state.
        """
        outcome = self.evaluate(game_state)

        if outcome is not None:
            game_state.finish(outcome)
        else:
            game_state.advance_turn()

        return game_state

    def get_winning_line(self, game_state: GameState) -> Optional[List[Tuple[int, int]]]:
        """
        Get the winning line if there is one.

        Returns:
            The winning line as a list of 1-based (row, col), or None.
        """
        index = self._first_completed_line(game_state.board)
        if index is None:
            return None
        return [(row + 1, col + 1) for row, col in self.WINNING_LINES[index]]
