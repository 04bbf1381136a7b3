"""
Board view module for time-travel TicTacToe.
Handles drawing the board and mapping clicks to cells.
"""

from .config import BoardViewConfig
from .renderer import BoardRenderer
