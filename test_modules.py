"""
Test script for TicTacToe logic modules.
Run this to verify the rules work before playing.

Usage:
    python test_modules.py     # Run all tests with a summary
    pytest test_modules.py
"""

import random
import sys

import numpy as np

from logic.config import GameConfig
from logic.game_state import GameState, Player, Outcome, Phase
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker


def state_from_rows(*rows: str) -> GameState:
    """Build a state from three strings like "XO " (space is empty)."""
    values = {" ": GameConfig.EMPTY, "X": GameConfig.X_VALUE, "O": GameConfig.O_VALUE}
    board = np.array([[values[c] for c in row] for row in rows], dtype=np.int8)
    return GameState(board=board)


def play(game: GameState, checker: WinChecker, row: int, col: int) -> bool:
    """Apply a move and evaluate it, the way the engine does."""
    placed = game.make_move(row, col)
    if placed:
        checker.update_game_state(game)
    return placed


# ==================== GAME STATE ====================

def test_initial_state():
    game = GameState()
    assert game.current_player == Player.X
    assert game.phase == Phase.AWAITING_MOVE
    assert game.winner is None
    assert not game.is_game_over
    assert game.board.shape == (3, 3)
    assert len(game.get_empty_cells()) == 9
    assert all(game.symbol_at(r, c) == " " for r in range(1, 4) for c in range(1, 4))


def test_make_move_places_symbol():
    game = GameState()
    assert game.make_move(2, 3)
    assert game.symbol_at(2, 3) == "X"
    assert game.player_at(2, 3) == Player.X
    assert game.phase == Phase.EVALUATING
    # Turn switches only after evaluation
    assert game.current_player == Player.X

    move = game.moves[0]
    assert (move.player, move.row, move.col, move.move_number) == (Player.X, 2, 3, 1)


def test_make_move_rejects_occupied_cell():
    game = GameState()
    game.make_move(1, 1)
    game.advance_turn()
    before = game.board.copy()

    assert not game.make_move(1, 1)
    assert np.array_equal(game.board, before)
    assert game.current_player == Player.O
    assert game.phase == Phase.AWAITING_MOVE
    assert len(game.moves) == 1


def test_make_move_rejects_off_board_cells():
    game = GameState()
    for row, col in [(1, 0), (0, 1), (4, 1), (1, 4), (-1, 2)]:
        assert not game.make_move(row, col), (row, col)
        assert not game.is_on_board(row, col)

    assert len(game.get_empty_cells()) == 9
    assert game.moves == []
    assert game.phase == Phase.AWAITING_MOVE
    assert game.current_player == Player.X


def test_make_move_rejected_while_evaluating():
    game = GameState()
    game.make_move(1, 1)
    assert not game.make_move(2, 2)
    assert game.is_cell_empty(2, 2)


def test_advance_turn_alternates_players():
    game = GameState()
    game.make_move(1, 1)
    game.advance_turn()
    assert game.current_player == Player.O
    game.make_move(1, 2)
    game.advance_turn()
    assert game.current_player == Player.X


def test_cells_never_overwritten():
    checker = WinChecker()
    for seed in range(20):
        rng = random.Random(seed)
        game = GameState()
        written = {}
        while not game.is_game_over:
            row, col = rng.randint(1, 3), rng.randint(1, 3)
            placed = play(game, checker, row, col)
            if (row, col) in written:
                assert not placed
            elif placed:
                written[(row, col)] = game.value_at(row, col)
            for (r, c), value in written.items():
                assert game.value_at(r, c) == value


def test_copy_is_independent():
    game = GameState()
    game.make_move(1, 1)
    clone = game.copy()
    clone.board[2, 2] = GameConfig.O_VALUE
    assert game.is_cell_empty(3, 3)
    assert clone.phase == Phase.EVALUATING
    assert clone.moves == game.moves


def test_separate_games_do_not_share_board():
    first = GameState()
    second = GameState()
    first.make_move(2, 2)
    assert second.is_cell_empty(2, 2)


# ==================== MOVE VALIDATOR ====================

def test_parse_selection():
    validator = MoveValidator()
    assert validator.parse_selection("2") == 2
    assert validator.parse_selection(" 3 \n") == 3
    for bad in ["0", "4", "-1", "abc", "", "1.5", "1 2"]:
        assert validator.parse_selection(bad) is None, bad


def test_is_valid_selection():
    validator = MoveValidator()
    assert validator.is_valid_selection(1, 3)
    assert not validator.is_valid_selection(4, 1)
    assert not validator.is_valid_selection(1, 0)


def test_validate_move():
    validator = MoveValidator()
    game = GameState()
    assert validator.validate_move(game, 1, 1).is_valid

    result = validator.validate_move(game, 4, 1)
    assert not result.is_valid
    assert not result.occupied

    game.make_move(1, 1)
    game.advance_turn()
    result = validator.validate_move(game, 1, 1)
    assert not result.is_valid
    assert result.occupied
    assert "occupied" in result.error_message


def test_validate_move_after_game_over():
    validator = MoveValidator()
    game = state_from_rows("XXX", "OO ", "   ")
    game.finish(Outcome.X)
    result = validator.validate_move(game, 3, 3)
    assert not result.is_valid
    assert result.error_message == "Game is already over!"
    assert validator.get_valid_moves(game) == []


def test_get_valid_moves():
    validator = MoveValidator()
    game = state_from_rows("XO ", "   ", "  X")
    moves = validator.get_valid_moves(game)
    assert len(moves) == 6
    assert (1, 3) in moves
    assert (1, 1) not in moves


# ==================== WIN CHECKER ====================

def test_row_column_and_diagonal_wins():
    checker = WinChecker()
    cases = [
        (("XXX", "OO ", "   "), Player.X, [(1, 1), (1, 2), (1, 3)]),
        (("X  ", "OOO", "XX "), Player.O, [(2, 1), (2, 2), (2, 3)]),
        (("O X", " OX", "  X"), Player.X, [(1, 3), (2, 3), (3, 3)]),
        (("O X", " OX", "X O"), Player.O, [(1, 1), (2, 2), (3, 3)]),
        (("XOO", "XO ", "O X"), Player.O, [(1, 3), (2, 2), (3, 1)]),
    ]
    for rows, winner, line in cases:
        game = state_from_rows(*rows)
        assert checker.check_winner(game) == winner, rows
        assert checker.get_winning_line(game) == line, rows
        assert checker.evaluate(game) == Outcome.for_player(winner)
        assert not checker.check_draw(game)


def test_no_winner_on_partial_board():
    checker = WinChecker()
    game = state_from_rows("XO ", " X ", "  O")
    assert checker.check_winner(game) is None
    assert checker.get_winning_line(game) is None
    assert checker.evaluate(game) is None
    assert not checker.check_draw(game)


def test_full_board_without_line_is_tie():
    checker = WinChecker()
    game = state_from_rows("XOX", "XOO", "OXX")
    assert checker.check_winner(game) is None
    assert checker.check_draw(game)
    assert checker.evaluate(game) == Outcome.TIE


def test_full_board_with_line_is_win():
    checker = WinChecker()
    game = state_from_rows("XXX", "OOX", "XOO")
    assert checker.evaluate(game) == Outcome.X
    assert not checker.check_draw(game)


def test_top_row_win_ends_game():
    checker = WinChecker()
    game = GameState()
    for row, col in [(1, 1), (2, 2), (1, 2), (3, 3)]:
        assert play(game, checker, row, col)
        assert game.winner is None

    assert play(game, checker, 1, 3)
    assert game.winner == Outcome.X
    assert game.phase == Phase.FINISHED

    # No further moves accepted
    assert not game.make_move(3, 1)
    assert game.is_cell_empty(3, 1)


def test_update_game_state_passes_turn():
    checker = WinChecker()
    game = GameState()
    game.make_move(2, 2)
    checker.update_game_state(game)
    assert game.current_player == Player.O
    assert game.phase == Phase.AWAITING_MOVE


def test_finish_is_final():
    game = GameState()
    game.finish(Outcome.TIE)
    game.finish(Outcome.X)
    assert game.winner == Outcome.TIE
    game.advance_turn()
    assert game.current_player == Player.X


def run_all_tests():
    """Run all tests."""
    print("="*60)
    print("   TicTacToe - Module Tests")
    print("="*60)

    tests = [
        (name, func) for name, func in sorted(globals().items())
        if name.startswith("test_") and callable(func)
    ]

    results = {}
    for name, func in tests:
        try:
            func()
            results[name] = True
        except AssertionError as e:
            print(f"  ✗ {name} FAILED: {e}")
            results[name] = False

    print("\n" + "="*60)
    print("   Test Results")
    print("="*60)

    all_passed = True
    for name, passed in results.items():
        status = "✓ PASS" if passed else "✗ FAIL"
        print(f"  {name}: {status}")
        if not passed:
            all_passed = False

    print("="*60)

    if all_passed:
        print("\nAll tests passed! Ready to play TicTacToe.\n")
        return 0
    else:
        print("\n⚠ Some tests failed. Check the errors above.\n")
        return 1


if __name__ == "__main__":
    sys.exit(run_all_tests())
