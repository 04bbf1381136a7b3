"""
Board representation for time-travel TicTacToe.
Cells, immutable board snapshots, and small helpers around them.
"""

from enum import Enum
from typing import List, Tuple


BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


class Cell(Enum):
    """The value of a single board cell."""
    EMPTY = ""
    X = "X"
    O = "O"

    def opposite(self) -> "Cell":
        """Get the other mark (EMPTY has no opposite)."""
        if self == Cell.X:
            return Cell.O
        if self == Cell.O:
            return Cell.X
        return Cell.EMPTY

    @property
    def symbol(self) -> str:
        """Text shown for this cell."""
        return self.value


# A board is a tuple of 9 cells, row-major (index = row * 3 + col).
# Tuples can't be mutated, so every snapshot in the history stays distinct.
Board = Tuple[Cell, ...]


def empty_board() -> Board:
    """Create the all-EMPTY starting board."""
    return (Cell.EMPTY,) * CELL_COUNT


def place_mark(board: Board, index: int, mark: Cell) -> Board:
    """
    Build a new board with one cell set.

    Args:
        board: The board to copy.
        index: Cell index (0-8).
        mark: The mark to place.

    Returns:
        A new board; the input board is left untouched.
    """
    cells = list(board)
    cells[index] = mark
    return tuple(cells)


def index_to_row_col(index: int) -> Tuple[int, int]:
    """Convert a cell index to (row, col)."""
    return divmod(index, BOARD_SIZE)


def row_col_to_index(row: int, col: int) -> int:
    """Convert (row, col) to a cell index."""
    return row * BOARD_SIZE + col


def get_empty_cells(board: Board) -> List[int]:
    """
    Get all empty cells on the board.

    Returns:
        List of cell indices, in ascending order.
    """
    return [i for i, cell in enumerate(board) if cell == Cell.EMPTY]


def format_board(board: Board, show_indices: bool = False) -> str:
    """
    Get a text representation of the board grid.

    Args:
        board: The board to draw.
        show_indices: Print the cell index in empty cells, so a console
            player can see which number to type.

    Returns:
        Multi-line string using box-drawing characters.
    """
    lines = ["┌───┬───┬───┐"]

    for row in range(BOARD_SIZE):
        row_str = "│"
        for col in range(BOARD_SIZE):
            index = row_col_to_index(row, col)
            text = board[index].symbol
            if not text:
                text = str(index) if show_indices else " "
            row_str += f" {text} │"
        lines.append(row_str)

        if row < BOARD_SIZE - 1:
            lines.append("├───┼───┼───┤")

    lines.append("└───┴───┴───┘")
    return "\n".join(lines)
