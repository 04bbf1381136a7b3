"""
Move validator for time-travel TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import List, Optional

from .game_state import CELL_COUNT, Board, Cell, get_empty_cells
from .win_checker import WinChecker


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be won already
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: The current board snapshot.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        winner = self.win_checker.evaluate(board)
        if winner is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already won by {winner.symbol}"
            )

        # bool is an int subclass, but True/False are not cell indices
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be 0-{CELL_COUNT - 1}."
            )

        if board[index] != Cell.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {board[index].symbol}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on this board.

        Returns:
            List of cell indices; empty once the game is won.
        """
        if self.win_checker.evaluate(board) is not None:
            return []
        return get_empty_cells(board)
