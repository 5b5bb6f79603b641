"""
Main orchestration script for console TicTacToe.

This script ties together:
- Logic (game state, move validation, win detection)
- Console (input reader, renderer)

Run this script to play TicTacToe against a friend on the same keyboard!
"""

import argparse
import sys
from typing import Callable, Optional

# Logic imports
from logic.game_state import GameState, Outcome, Phase
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker

# Console imports
from console.config import ConsoleConfig
from console.input_reader import InputReader
from console.renderer import Renderer


class GameEngine:
    """
    Main controller for a TicTacToe game.

    Game flow:
    1. Draw the board
    2. Stop if someone won or the board is full
    3. Ask the current player for a row and a column
    4. Ask again (same player) if the cell is taken
    5. Check the board, then pass the turn
    """

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the game engine.

        Args:
            config: Console configuration.
            input_func: Source of typed lines (defaults to input()).
            output_func: Sink for printed lines (defaults to print()).
        """
        self.config = config or ConsoleConfig()
        self.output = output_func

        self.game_state = GameState()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()

        self.reader = InputReader(self.config, input_func, output_func)
        self.renderer = Renderer(self.config, output_func)

    def log(self, msg: str, level: str = "INFO"):
        """Print a log message. DEBUG lines only show in debug mode."""
        if level == "DEBUG" and not self.config.DEBUG_MODE:
            return
        prefix = {"INFO": "[INFO]", "WARN": "[WARN]", "DEBUG": "[DEBUG]"}
        self.output(f"{prefix.get(level, '[INFO]')} {msg}")

    def start(self) -> Outcome:
        """
        Play a full game.

        Returns:
            The final Outcome.
        """
        self.renderer.show_title()
        self.log("Game started, player X moves first", "DEBUG")
        return self._game_loop()

    def _game_loop(self) -> Outcome:
        """Main game loop."""
        while True:
            # Screen is only cleared once a move has been made
            self.renderer.draw(self.game_state, clear=bool(self.game_state.moves))

            if self.game_state.is_game_over:
                self.renderer.announce_result(self.game_state.winner)
                return self.game_state.winner

            self.play_turn()

    def play_turn(self):
        """
        Run one turn for the current player.

        Keeps asking the same player until they pick an empty cell, then
        evaluates the board.
        """
        player = self.game_state.current_player
        self.renderer.announce_turn(player)

        while self.game_state.phase == Phase.AWAITING_MOVE:
            row, col = self.reader.read_selection()
            self.apply_move(row, col)

        self.win_checker.update_game_state(self.game_state)

        if self.game_state.is_game_over:
            self.log(f"Game finished: {self.game_state.winner.value}", "DEBUG")
        else:
            self.log(
                f"Turn passes to {self.game_state.current_player.symbol}", "DEBUG"
            )

    def apply_move(self, row: int, col: int) -> bool:
        """
        Place the current player's symbol if the cell is free.

        Args:
            row: Row (1-3).
            col: Column (1-3).

        Returns:
            True if the move was placed.
        """
        result = self.validator.validate_move(self.game_state, row, col)

        if not result.is_valid:
            if result.occupied:
                self.renderer.warn_occupied()
            self.log(result.error_message, "DEBUG")
            return False

        player = self.game_state.current_player
        self.game_state.make_move(row, col)
        self.log(f"{player.symbol} placed at ({row}, {col})", "DEBUG")
        return True


def main(
    argv=None,
    input_func: Callable[[str], str] = input,
    output_func: Callable[[str], None] = print
) -> int:
    """
    Main entry point.

    Returns:
        0 after a finished game, 1 if input was closed or interrupted.
    """
    parser = argparse.ArgumentParser(description="Two-player console TicTacToe")
    parser.add_argument(
        "--no-clear",
        action="store_true",
        help="Do not clear the screen between turns"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print debug messages for every state change"
    )
    parser.add_argument(
        "--history",
        action="store_true",
        help="Print the list of moves when the game ends"
    )

    args = parser.parse_args(argv)

    config = ConsoleConfig()
    if args.no_clear:
        config.CLEAR_SCREEN = False
    if args.debug:
        config.DEBUG_MODE = True

    engine = GameEngine(config, input_func, output_func)

    try:
        engine.start()
        if args.history:
            engine.renderer.show_history(engine.game_state)
    except (KeyboardInterrupt, EOFError):
        engine.output("\n\nGame interrupted by user.")
        return 1
    finally:
        engine.output("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
