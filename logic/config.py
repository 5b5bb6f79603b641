"""
Game configuration for console TicTacToe.
Board dimensions and the symbols drawn in each cell.
"""


class GameConfig:
    """
    Configuration class for the game rules.
    The board is always 3x3, these values are not meant to be changed.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # Values stored in the numpy board array
    EMPTY = 0
    X_VALUE = 1
    O_VALUE = 2

    # ==================== DISPLAY SYMBOLS ====================
    EMPTY_SYMBOL = " "
    X_SYMBOL = "X"
    O_SYMBOL = "O"

    # Player numbers used in announcements ("Player 1's turn:")
    PLAYER_NUMBERS = {
        "X": 1,
        "O": 2,
    }
