"""
TicTacToe UI
A graphical interface for time-travel TicTacToe using Tkinter.

Shows:
- The board for the current move (click a cell to play)
- Game status (winner or next player)
- Move history (click an entry to jump back to it)
"""

import logging
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import List, Optional

from board_view.config import BoardViewConfig
from board_view.renderer import BoardRenderer
from logic.game_session import GameSession

logger = logging.getLogger(__name__)


class TicTacToeUI:
    """
    Main UI class for time-travel TicTacToe.

    The window only reads what the session reports and forwards two
    kinds of input to it: a clicked cell and a clicked history entry.
    """

    def __init__(
        self,
        session: Optional[GameSession] = None,
        config: Optional[BoardViewConfig] = None
    ):
        """Initialize the UI."""
        self.config = config or BoardViewConfig()
        self.session = session or GameSession()
        self.renderer = BoardRenderer(self.config)

        self.history_buttons: List[tk.Button] = []

        # Create UI
        self._create_ui()
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title(self.config.WINDOW_TITLE)
        self.root.configure(bg=self.config.WINDOW_BG)
        self.root.resizable(False, False)

        # Main container
        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        font = self.config.FONT_FAMILY
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=self.config.WINDOW_BG)
        style.configure('TLabel', background=self.config.WINDOW_BG, foreground='white', font=(font, 11))
        style.configure('Title.TLabel', font=(font, 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=(font, 12), foreground='#ffd700')

        # Left panel - board
        left_frame = ttk.Frame(main_frame)
        left_frame.pack(side=tk.LEFT, fill=tk.BOTH, padx=(0, 10))

        self.status_label = ttk.Label(left_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        size = self.config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(
            left_frame,
            width=size,
            height=size,
            bg='#0f0f1a',
            highlightthickness=0
        )
        self.board_canvas.pack()
        self.board_canvas.bind("<Button-1>", self._on_board_click)

        # Right panel - history
        right_frame = ttk.Frame(main_frame, width=self.config.HISTORY_PANEL_WIDTH)
        right_frame.pack(side=tk.RIGHT, fill=tk.Y, padx=(10, 0))
        right_frame.pack_propagate(False)

        ttk.Label(right_frame, text="History", style='Title.TLabel').pack(pady=(0, 10))

        self.history_frame = ttk.Frame(right_frame)
        self.history_frame.pack(fill=tk.BOTH, expand=True)

        # Control buttons
        ttk.Separator(right_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        control_frame = ttk.Frame(right_frame)
        control_frame.pack(pady=5)

        tk.Button(
            control_frame,
            text="New Game",
            font=(font, 10, 'bold'),
            bg='#6366f1',
            fg='white',
            width=10,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Quit",
            font=(font, 10, 'bold'),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _on_board_click(self, event):
        """Forward a click on the board to the session."""
        cell = self.renderer.point_to_cell(event.x, event.y)
        if cell is None:
            return
        if self.session.apply_move(cell):
            logger.info("Move #%d at cell %d", self.session.current_move, cell)
        self._refresh()

    def _on_history_click(self, move_index: int):
        """Forward a click on a history entry to the session."""
        self.session.jump_to(move_index)
        logger.info("Jumped to move #%d", move_index)
        self._refresh()

    def _refresh(self):
        """Redraw everything from the session's current state."""
        self._update_board_canvas()
        self.status_label.configure(text=self.session.status_text())
        self._update_history()

    def _update_board_canvas(self):
        """Update the board canvas with the current snapshot."""
        image = self.renderer.render(
            self.session.current_board(),
            self.session.winning_line()
        )

        # Convert to PIL Image
        photo = ImageTk.PhotoImage(Image.fromarray(self.renderer.to_rgb(image)))

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _update_history(self):
        """Rebuild the list of history entries."""
        for button in self.history_buttons:
            button.destroy()
        self.history_buttons = []

        current = self.session.current_move
        for move_index in self.session.move_list():
            is_current = move_index == current
            button = tk.Button(
                self.history_frame,
                text=self.session.move_label(move_index),
                font=(self.config.FONT_FAMILY, 10, 'bold' if is_current else 'normal'),
                bg='#10b981' if is_current else '#2d3748',
                fg='black' if is_current else 'white',
                anchor='w',
                command=lambda m=move_index: self._on_history_click(m)
            )
            button.pack(fill=tk.X, pady=1)
            self.history_buttons.append(button)

    def _reset_game(self):
        """Reset the game."""
        logger.info("Starting a new game")
        self.session.reset()
        self._refresh()

    def _quit(self):
        """Quit the application."""
        logger.info("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
