"""
Logic module for time-travel TicTacToe.
Handles board snapshots, rules, and the game history.
"""

from .game_state import Board, Cell, empty_board, format_board, place_mark
from .win_checker import WinChecker
from .move_validator import MoveValidator, ValidationResult
from .game_session import GameSession, HistoryIndexError
