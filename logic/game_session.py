"""
Game session for time-travel TicTacToe.
Owns the history of board snapshots and the pointer into it.
"""

import logging
from typing import List, Optional, Tuple

from .game_state import Board, Cell, empty_board, place_mark
from .move_validator import MoveValidator
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class HistoryIndexError(IndexError):
    """Raised when jumping to a move that isn't in the history."""


class GameSession:
    """
    One game of TicTacToe with move history.

    The session keeps:
    - History: every board snapshot, index 0 is the empty board
    - Current move: which snapshot is shown and played from

    Whose turn it is comes from the current move number (X on even,
    O on odd), so it can never drift away from the history.
    Moving after a jump back throws away the snapshots after the
    current one.
    """

    def __init__(self, win_checker: Optional[WinChecker] = None):
        self.win_checker = win_checker or WinChecker()
        self.validator = MoveValidator(self.win_checker)
        self._history: List[Board] = [empty_board()]
        self._current_move = 0

    @property
    def history(self) -> Tuple[Board, ...]:
        """All snapshots, oldest first."""
        return tuple(self._history)

    @property
    def current_move(self) -> int:
        """Index of the current snapshot in the history."""
        return self._current_move

    def current_board(self) -> Board:
        return self._history[self._current_move]

    def turn_owner(self) -> Cell:
        """The mark that moves next from the current snapshot."""
        return Cell.X if self._current_move % 2 == 0 else Cell.O

    def winner(self) -> Optional[Cell]:
        return self.win_checker.evaluate(self.current_board())

    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.win_checker.get_winning_line(self.current_board())

    def valid_moves(self) -> List[int]:
        """Cells the next player may take; empty once the game is won."""
        return self.validator.get_valid_moves(self.current_board())

    def move_list(self) -> List[int]:
        """Move indices the player can jump to."""
        return list(range(len(self._history)))

    def apply_move(self, cell_index: int) -> bool:
        """
        Place the current player's mark on a cell.

        Illegal moves (game already won, cell taken, no such cell) are
        ignored and leave the session unchanged.

        Args:
            cell_index: Cell to play (0-8).

        Returns:
            True if the move was applied, False if it was ignored.
        """
        board = self.current_board()
        result = self.validator.validate_move(board, cell_index)
        if not result.is_valid:
            logger.debug("Ignoring move at %r: %s", cell_index, result.error_message)
            return False

        mark = self.turn_owner()
        next_board = place_mark(board, cell_index, mark)

        discarded = len(self._history) - (self._current_move + 1)
        if discarded:
            logger.debug("Discarding %d later move(s) after move #%d", discarded, self._current_move)

        self._history = self._history[:self._current_move + 1]
        self._history.append(next_board)
        self._current_move = len(self._history) - 1

        logger.debug("Move #%d: %s at %d", self._current_move, mark.symbol, cell_index)
        return True

    def jump_to(self, move_index: int) -> None:
        """
        Make an earlier (or later) snapshot the current one.

        The history itself is not changed, so later snapshots stay
        reachable until the next move is applied.

        Args:
            move_index: Index into the history.

        Raises:
            HistoryIndexError: If move_index is not in the history.
        """
        if (
            isinstance(move_index, bool)
            or not isinstance(move_index, int)
            or not 0 <= move_index < len(self._history)
        ):
            raise HistoryIndexError(
                f"Move {move_index!r} is not in the history (0-{len(self._history) - 1})"
            )

        self._current_move = move_index
        logger.debug("Jumped to move #%d", move_index)

    def reset(self) -> None:
        """Start over with an empty board."""
        self._history = [empty_board()]
        self._current_move = 0
        logger.debug("Session reset")

    @staticmethod
    def move_label(move_index: int) -> str:
        """Label shown for a history entry."""
        if move_index > 0:
            return f"Go to move #{move_index}"
        return "Go to game start"

    def status_text(self) -> str:
        """Status line: the winner, or who moves next."""
        winner = self.winner()
        if winner is not None:
            return f"Winner: {winner.symbol}"
        return f"Next player: {self.turn_owner().symbol}"
