"""
Console configuration for TicTacToe.
All the text shown to the players and the display settings.
"""


class ConsoleConfig:
    """
    Configuration class for console settings.
    Command-line flags override CLEAR_SCREEN and DEBUG_MODE per game.
    """

    # ==================== DISPLAY SETTINGS ====================
    TITLE = "Tic Tac Toe"

    # Clear the terminal before every board redraw
    CLEAR_SCREEN = True
    CLEAR_SEQUENCE = "\033[H\033[J"

    # ==================== PROMPTS ====================
    ROW_PROMPT = "Row: "
    COLUMN_PROMPT = "Column: "

    # ==================== MESSAGES ====================
    TURN_MESSAGE = "Player {number}'s turn:"
    WIN_MESSAGE = "Congratulations! Player {number} is the winner!"
    TIE_MESSAGE = "Tie!"
    INVALID_ROW_MESSAGE = "Invalid row!"
    INVALID_COLUMN_MESSAGE = "Invalid column!"
    OCCUPIED_MESSAGE = "The selected square is occupied!"
    SELECT_AGAIN_MESSAGE = "Select again:"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
