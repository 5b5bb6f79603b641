"""
Input reader for console TicTacToe.
Asks the current player for a row and a column until both are valid.
"""

from typing import Callable, Optional, Tuple

from logic.move_validator import MoveValidator
from .config import ConsoleConfig


class InputReader:
    """
    Reads row/column selections from the console.

    Invalid entries (not a number, or outside 1-3) print an error and
    the same prompt is shown again. EOFError and KeyboardInterrupt from
    the input function are not caught here.
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the input reader.

        Args:
            config: Console configuration (prompts and error messages).
            input_func: Called with a prompt, returns the typed line.
            output_func: Called with each error line.
        """
        self.config = config or ConsoleConfig()
        self.input = input_func
        self.output = output_func
        self.validator = MoveValidator()

    def read_coordinate(self, prompt: str, error_message: str) -> int:
        """
        Prompt until the player types a number in 1-3.

        Args:
            prompt: Text shown before the cursor.
            error_message: Printed after each invalid entry.

        Returns:
            The selected row or column (1-3).
        """
        while True:
            value = self.validator.parse_selection(self.input(prompt))
            if value is not None:
                return value
            self.output("\n" + error_message)

    def read_row(self) -> int:
        return self.read_coordinate(
            self.config.ROW_PROMPT, self.config.INVALID_ROW_MESSAGE
        )

    def read_column(self) -> int:
        return self.read_coordinate(
            self.config.COLUMN_PROMPT, self.config.INVALID_COLUMN_MESSAGE
        )

    def read_selection(self) -> Tuple[int, int]:
        """Read a row, then a column."""
        row = self.read_row()
        col = self.read_column()
        return row, col
