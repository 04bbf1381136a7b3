"""
Board renderer for time-travel TicTacToe.
Draws board snapshots as images and maps clicks back to cells.
"""

import cv2
import numpy as np
from typing import Optional, Tuple

from logic.game_state import Board, Cell, index_to_row_col
from .config import BoardViewConfig


class BoardRenderer:
    """
    Draws a board snapshot with OpenCV.

    The image is a square BGR array of BOARD_OUTPUT_SIZE pixels;
    cell (row, col) covers [col * CELL_SIZE_PX, (col + 1) * CELL_SIZE_PX)
    horizontally and the same range by row vertically.
    """

    def __init__(self, config: Optional[BoardViewConfig] = None):
        """
        Initialize the renderer.

        Args:
            config: Display configuration. Uses defaults if None.
        """
        self.config = config or BoardViewConfig()

    def render(
        self,
        board: Board,
        winning_line: Optional[Tuple[int, int, int]] = None
    ) -> np.ndarray:
        """
        Draw a board snapshot.

        Args:
            board: The board to draw.
            winning_line: Cells to strike through, if the game is won.

        Returns:
            BGR image of the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        image = np.full((size, size, 3), self.config.BACKGROUND_COLOR, dtype=np.uint8)

        self._draw_grid(image)

        for index, cell in enumerate(board):
            if cell == Cell.X:
                self._draw_x(image, index)
            elif cell == Cell.O:
                self._draw_o(image, index)

        if winning_line is not None:
            start = self.cell_center(winning_line[0])
            end = self.cell_center(winning_line[-1])
            cv2.line(
                image,
                start,
                end,
                self.config.WIN_LINE_COLOR,
                self.config.WIN_LINE_THICKNESS,
                self.config.LINE_TYPE
            )

        return image

    def _draw_grid(self, image: np.ndarray):
        cell_size = self.config.CELL_SIZE_PX
        size = self.config.BOARD_OUTPUT_SIZE

        for i in range(1, self.config.BOARD_SIZE):
            # Vertical lines
            cv2.line(
                image,
                (i * cell_size, 0),
                (i * cell_size, size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )
            # Horizontal lines
            cv2.line(
                image,
                (0, i * cell_size),
                (size, i * cell_size),
                self.config.GRID_COLOR,
                self.config.GRID_THICKNESS
            )

    def _draw_x(self, image: np.ndarray, index: int):
        x1, y1, x2, y2 = self._mark_box(index)
        for start, end in (((x1, y1), (x2, y2)), ((x1, y2), (x2, y1))):
            cv2.line(
                image,
                start,
                end,
                self.config.X_COLOR,
                self.config.MARK_THICKNESS,
                self.config.LINE_TYPE
            )

    def _draw_o(self, image: np.ndarray, index: int):
        x1, _, x2, _ = self._mark_box(index)
        cv2.circle(
            image,
            self.cell_center(index),
            (x2 - x1) // 2,
            self.config.O_COLOR,
            self.config.MARK_THICKNESS,
            self.config.LINE_TYPE
        )

    def _mark_box(self, index: int) -> Tuple[int, int, int, int]:
        """Bounding box (x1, y1, x2, y2) a mark is drawn in."""
        row, col = index_to_row_col(index)
        cell_size = self.config.CELL_SIZE_PX
        pad = self.config.MARK_PADDING_PX
        x1 = col * cell_size + pad
        y1 = row * cell_size + pad
        return x1, y1, x1 + cell_size - 2 * pad, y1 + cell_size - 2 * pad

    def cell_center(self, index: int) -> Tuple[int, int]:
        """Pixel (x, y) at the center of a cell."""
        row, col = index_to_row_col(index)
        cell_size = self.config.CELL_SIZE_PX
        return col * cell_size + cell_size // 2, row * cell_size + cell_size // 2

    def point_to_cell(self, x: float, y: float) -> Optional[int]:
        """
        Convert a point on the rendered board to a cell.

        Args:
            x: X coordinate in the board image.
            y: Y coordinate in the board image.

        Returns:
            Cell index (0-8), or None if the point is off the board.
        """
        size = self.config.BOARD_OUTPUT_SIZE
        if not (0 <= x < size and 0 <= y < size):
            return None

        cell_size = self.config.CELL_SIZE_PX
        col = int(x) // cell_size
        row = int(y) // cell_size
        return row * self.config.BOARD_SIZE + col

    @staticmethod
    def to_rgb(image: np.ndarray) -> np.ndarray:
        """Convert a rendered BGR image to RGB (for Pillow)."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
