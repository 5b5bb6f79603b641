"""
Logic module for console TicTacToe.
Handles game state, rules, and win detection.
"""

__version__ = "1.0.0"

from .config import GameConfig
from .game_state import GameState, Player, Outcome, Phase, Move
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
