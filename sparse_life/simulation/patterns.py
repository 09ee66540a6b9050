"""Named seed patterns that can be placed on a board."""

from typing import TYPE_CHECKING, Dict, List

import numpy as np

from sparse_life.errors import PatternError

if TYPE_CHECKING:
    from sparse_life.models.board import Board


def _pattern(rows: List[str]) -> np.ndarray:
    """Build a 0/1 array from rows where 'O' marks a live cell."""
    return np.array([[1 if c == "O" else 0 for c in row] for row in rows], dtype=np.uint8)


PATTERNS: Dict[str, np.ndarray] = {
    "block": _pattern(
        [
            "OO",
            "OO",
        ]
    ),
    "blinker": _pattern(["OOO"]),
    "glider": _pattern(
        [
            ".O.",
            "..O",
            "OOO",
        ]
    ),
    # Chaotic growth, stabilizes after 1103 generations
    "rpentomino": _pattern(
        [
            ".OO",
            "OO.",
            ".O.",
        ]
    ),
    # Takes 5206 generations to stabilize
    "acorn": _pattern(
        [
            ".O.....",
            "...O...",
            "OO..OOO",
        ]
    ),
    # Gosper glider gun, emits a glider every 30 generations
    "glider_gun": _pattern(
        [
            "........................O...........",
            "......................O.O...........",
            "............OO......OO............OO",
            "...........O...O....OO............OO",
            "OO........O.....O...OO..............",
            "OO........O...O.OO....O.O...........",
            "..........O.....O.......O...........",
            "...........O...O....................",
            "............OO......................",
        ]
    ),
}


def pattern_names() -> List[str]:
    """Names of all available patterns, sorted."""
    return sorted(PATTERNS)


def get_pattern(name: str) -> np.ndarray:
    """
    Look up a pattern by name.

    Args:
        name: Pattern name, case-insensitive.

    Returns:
        A copy of the pattern as a ``(rows, cols)`` 0/1 array.

    Raises:
        PatternError: If no pattern has that name.
    """
    try:
        return PATTERNS[name.lower()].copy()
    except KeyError:
        raise PatternError(name, pattern_names()) from None


def place_pattern(board: "Board", name: str, x: int, y: int) -> int:
    """
    Spawn a pattern with its top-left corner at ``(x, y)``.

    Cells that would fall outside the board are skipped.

    Args:
        board: Board to place the pattern on.
        name: Pattern name.
        x: Column of the top-left corner.
        y: Row of the top-left corner.

    Returns:
        Number of cells that were spawned on the board.
    """
    pattern = get_pattern(name)
    placed = 0
    for row, col in np.argwhere(pattern):
        cell = (x + int(col), y + int(row))
        if board.contains(cell):
            board.spawn(cell)
            placed += 1
    return placed
