"""Conway's Game of Life on a sparse, fixed-size board."""

from sparse_life.models.board import MAX_COORDINATE, Board, Cell

__all__ = ["Board", "Cell", "MAX_COORDINATE"]
__version__ = "0.1.0"
