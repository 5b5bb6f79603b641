"""
Renderer for console TicTacToe.
Draws the board and prints game announcements.
"""

from typing import Callable, List, Optional

from logic.config import GameConfig
from logic.game_state import GameState, Player, Outcome
from .config import ConsoleConfig


class Renderer:
    """
    Prints everything the players see.

    Board layout:

             1   2   3
           +---+---+---+
         1 | X |   | O |
           +---+---+---+
    """

    SEPARATOR = "   " + "+---" * GameConfig.BOARD_SIZE + "+"

    def __init__(
        self,
        config: Optional[ConsoleConfig] = None,
        output_func: Callable[[str], None] = print
    ):
        self.config = config or ConsoleConfig()
        self.output = output_func

    def board_lines(self, game_state: GameState) -> List[str]:
        """
        Build the board drawing.

        Args:
            game_state: State whose board is drawn.

        Returns:
            One string per printed line.
        """
        size = GameConfig.BOARD_SIZE
        header = "    " + "".join(f" {col}  " for col in range(1, size + 1))
        lines = [header.rstrip(), self.SEPARATOR]

        for row in range(1, size + 1):
            cells = " | ".join(
                game_state.symbol_at(row, col) for col in range(1, size + 1)
            )
            lines.append(f" {row} | {cells} |")
            lines.append(self.SEPARATOR)

        return lines

    def render_board(self, game_state: GameState) -> str:
        return "\n".join(self.board_lines(game_state))

    def clear_screen(self):
        if self.config.CLEAR_SCREEN:
            self.output(self.config.CLEAR_SEQUENCE)

    def draw(self, game_state: GameState, clear: bool = True):
        """
        Print the board.

        Args:
            game_state: State whose board is drawn.
            clear: Clear the screen first (only if CLEAR_SCREEN is set).
                The first draw of a game passes False so the title stays.
        """
        if clear:
            self.clear_screen()
        self.output(self.render_board(game_state))

    def show_title(self):
        self.output(self.config.TITLE)

    def announce_turn(self, player: Player):
        self.output(self.config.TURN_MESSAGE.format(number=player.number))

    def announce_result(self, outcome: Outcome):
        """Print the winner or the tie message."""
        if outcome == Outcome.TIE:
            self.output(self.config.TIE_MESSAGE)
        else:
            self.output(self.config.WIN_MESSAGE.format(number=outcome.player.number))

    def warn_occupied(self):
        self.output(self.config.OCCUPIED_MESSAGE)
        self.output(self.config.SELECT_AGAIN_MESSAGE)

    def show_history(self, game_state: GameState):
        """Print the moves of the finished game, one per line."""
        for move in game_state.moves:
            self.output(
                f"{move.move_number}. Player {move.player.number} "
                f"({move.player.symbol}) -> row {move.row}, column {move.col}"
            )
