"""
Display configuration for time-travel TicTacToe.
All the settings for drawing the board and laying out the window.
"""

import cv2


class BoardViewConfig:
    """
    Configuration class for board display settings.
    Change these values to restyle the board.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3

    # Size of each cell in the rendered image (pixels)
    CELL_SIZE_PX = 120

    # Total board image size
    BOARD_OUTPUT_SIZE = CELL_SIZE_PX * BOARD_SIZE  # 360 pixels

    # Empty space kept inside each cell around a mark
    MARK_PADDING_PX = 28

    # ==================== DRAWING SETTINGS ====================
    # Colors are BGR, as OpenCV expects
    BACKGROUND_COLOR = (62, 33, 22)     # '#16213e'
    GRID_COLOR = (255, 212, 0)          # '#00d4ff'
    X_COLOR = (113, 113, 248)           # '#f87171'
    O_COLOR = (129, 185, 16)            # '#10b981'
    WIN_LINE_COLOR = (0, 215, 255)      # '#ffd700'

    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    WIN_LINE_THICKNESS = 8
    LINE_TYPE = cv2.LINE_AA

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_BG = '#1a1a2e'
    HISTORY_PANEL_WIDTH = 260
    FONT_FAMILY = 'Segoe UI'
