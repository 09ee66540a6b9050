"""Models package for sparse_life."""

from sparse_life.models.board import MAX_COORDINATE, Board, Cell
from sparse_life.models.life_stats import LifeStats

__all__ = ["Board", "Cell", "LifeStats", "MAX_COORDINATE"]
