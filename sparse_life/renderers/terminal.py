"""Text renderer that draws living cells to a terminal or any text stream."""

from typing import List, Optional, TextIO

from sparse_life.config import EMPTY_BOARD_MESSAGE, LifeConfig
from sparse_life.models.board import Board

# ANSI escape sequences
CLEAR_SCREEN = "\x1b[2J"


def cursor_goto(row: int, col: int) -> str:
    """ANSI sequence moving the cursor to a 1-based row and column."""
    return f"\x1b[{row};{col}H"


class TerminalRenderer:
    """
    Draws the board relative to the top-left corner of its living cells.

    Two modes:
    - ANSI: clear the screen and place each glyph with cursor movement.
    - Plain: write the bounding box as lines of text, for pipes and logs.
    """

    def __init__(self, stream: TextIO, config: LifeConfig, ansi: Optional[bool] = None):
        """
        Initialize the renderer.

        Args:
            stream: Text stream to write to.
            config: Session configuration (glyphs and their width).
            ansi: Force ANSI mode on or off. Defaults to whether the stream
                is a terminal.
        """
        self.stream = stream
        self.config = config
        if ansi is None:
            isatty = getattr(stream, "isatty", None)
            ansi = bool(isatty and isatty())
        self.ansi = ansi

    def render(self, board: Board) -> None:
        """Draw the current board."""
        if board.population == 0:
            self.stream.write(EMPTY_BOARD_MESSAGE + "\n")
        elif self.ansi:
            self.stream.write(self.format_ansi(board))
        else:
            self.stream.write(self.format_frame(board) + "\n")
        self.stream.flush()

    def format_frame(self, board: Board) -> str:
        """
        Build a plain text frame covering the bounding box of living cells.

        Returns:
            The frame, one line per row, or the empty board message.
        """
        box = board.bounding_box()
        if box is None:
            return EMPTY_BOARD_MESSAGE
        min_x, min_y, max_x, max_y = box

        lines: List[str] = []
        for y in range(min_y, max_y + 1):
            line = "".join(
                self.config.alive_glyph if board.is_alive((x, y)) else self.config.dead_glyph
                for x in range(min_x, max_x + 1)
            )
            lines.append(line.rstrip())
        return "\n".join(lines)

    def format_ansi(self, board: Board) -> str:
        """Build the escape sequence string that draws every living cell."""
        box = board.bounding_box()
        if box is None:
            return EMPTY_BOARD_MESSAGE + "\n"
        min_x, min_y, _, max_y = box

        parts = [CLEAR_SCREEN]
        for x, y in sorted(board.living_cells, key=lambda c: (c[1], c[0])):
            row = y - min_y + 1
            col = (x - min_x) * self.config.glyph_columns + 1
            parts.append(cursor_goto(row, col) + self.config.alive_glyph)

        # Leave the cursor on the line below the drawing
        parts.append(cursor_goto(max_y - min_y + 2, 1))
        return "".join(parts)
