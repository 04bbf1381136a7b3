"""
Main entry point for time-travel TicTacToe.

Launches the Tkinter window by default, or a console game with --no-ui.

Console commands:
    0-8         place the next mark on that cell
    j N         jump to move N (also: jump N)
    h           show the move history (also: history)
    r           start a new game (also: reset)
    q           quit (also: quit)
"""

import logging
import os
import sys
from typing import Iterable, Optional, TextIO

from logic.game_session import GameSession, HistoryIndexError
from logic.game_state import format_board

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure root logging from the given level or LOG_LEVEL (default INFO).

    Unknown level names fall back to INFO instead of failing startup.
    """
    if level is None:
        level = os.getenv("LOG_LEVEL", "INFO")
    requested = level
    level = level.upper()
    if level not in LOG_LEVELS:
        level = "INFO"

    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    root_logger.setLevel(level)

    if level != requested.upper():
        logger.warning("Unknown log level %r, using INFO", requested)


def print_state(session: GameSession, out: TextIO) -> None:
    """Print the current board, open cells and status line."""
    print(format_board(session.current_board(), show_indices=True), file=out)
    open_cells = session.valid_moves()
    if open_cells:
        print("Open cells: " + " ".join(str(i) for i in open_cells), file=out)
    print(session.status_text(), file=out)


def print_history(session: GameSession, out: TextIO) -> None:
    """Print the move list, marking the current entry."""
    for move_index in session.move_list():
        marker = ">" if move_index == session.current_move else " "
        print(f"{marker} {move_index}: {session.move_label(move_index)}", file=out)


def run_console(
    session: GameSession,
    lines: Iterable[str],
    out: Optional[TextIO] = None
) -> GameSession:
    """
    Play a game from text commands.

    Args:
        session: The session to drive.
        lines: Input commands, one per item (e.g. sys.stdin).
        out: Where to print the board and messages (default: stdout).

    Returns:
        The session, after the last command.
    """
    if out is None:
        out = sys.stdout

    print_state(session, out)

    for line in lines:
        parts = line.strip().lower().split()
        if not parts:
            continue

        command = parts[0]

        if command in ("q", "quit"):
            break

        if command in ("r", "reset"):
            session.reset()
        elif command in ("h", "history"):
            print_history(session, out)
            continue
        elif command in ("j", "jump"):
            # isdecimal, not isdigit: int() rejects digits like "²"
            if len(parts) != 2 or not parts[1].isdecimal():
                print("Usage: j <move number>", file=out)
                continue
            try:
                session.jump_to(int(parts[1]))
            except HistoryIndexError as e:
                print(e, file=out)
                continue
        elif command.isdecimal() and len(parts) == 1:
            # Illegal moves are ignored; the board is simply printed again
            session.apply_move(int(command))
        else:
            print(f"Unknown command: {line.strip()}", file=out)
            continue

        print_state(session, out)

    return session


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe with time travel")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: LOG_LEVEL env var or INFO)"
    )

    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.debug("Arguments: %s", args)

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI()
        ui.run()
        return

    # Console mode (--no-ui)
    print(__doc__.split("Console commands:")[1])

    try:
        run_console(GameSession(), sys.stdin)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
