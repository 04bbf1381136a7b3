"""
Win checker for time-travel TicTacToe.
Decides whether a board snapshot has a winner.
"""

from typing import Optional, Tuple

from .game_state import Board, Cell


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 equal marks in a row
    (horizontally, vertically, or diagonally).
    Full boards without a line are not reported as anything special.
    """

    # All possible winning lines, as cell index triples.
    # Order matters: the first matching line decides the winner.
    WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def evaluate(self, board: Board) -> Optional[Cell]:
        """
        Check if there's a winner.

        Args:
            board: The board snapshot.

        Returns:
            The winning mark, or None if no line is complete.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the winning line if there is one.

        Args:
            board: The board snapshot.

        Returns:
            The first completed line as an index triple, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Board, line: Tuple[int, int, int]) -> bool:
        """True if all three cells of the line hold the same mark."""
        a, b, c = line
        return board[a] != Cell.EMPTY and board[a] == board[b] == board[c]
