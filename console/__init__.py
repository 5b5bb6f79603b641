"""
Console module for TicTacToe.
Handles reading moves from the keyboard and printing the board.
"""

from .config import ConsoleConfig
from .input_reader import InputReader
from .renderer import Renderer
