"""Simulator that drives a board and keeps generation statistics."""

import logging
from typing import Optional

import numpy as np

from sparse_life.config import LifeConfig
from sparse_life.models.board import Board
from sparse_life.models.life_stats import LifeStats
from sparse_life.simulation.patterns import get_pattern, place_pattern

logger = logging.getLogger(__name__)


class Simulator:
    """
    Owns a board together with its generation counter and statistics.

    The board itself knows nothing about generations; every caller that
    advances time goes through ``step`` here so the counters stay consistent.
    """

    def __init__(self, config: LifeConfig, board: Optional[Board] = None):
        """
        Initialize the simulator.

        Args:
            config: Session configuration.
            board: Existing board to drive. A new empty board of the configured
                size is created if omitted.
        """
        self.config = config
        if board is None:
            board = Board(config.grid_width, config.grid_height)
        self.board = board
        self.stats = LifeStats()
        self.stats.observe_population(self.board.population)

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self.stats.generation

    def step(self) -> None:
        """Advance the board by one generation and record what changed."""
        before = self.board.living
        self.board.step()
        after = self.board.living

        self.stats.record_step(
            births=len(after - before),
            deaths=len(before - after),
            population=len(after),
        )

    def run(self, generations: int) -> None:
        """Advance the board by the given number of generations."""
        for _ in range(generations):
            self.step()

    def refresh(self) -> None:
        """Sync statistics after the board was edited directly."""
        self.stats.observe_population(self.board.population)

    def clear(self) -> None:
        """Kill every cell and restart the generation count."""
        self.board.clear()
        self.stats.reset()

    def initialize_pattern(
        self, pattern: str, x: Optional[int] = None, y: Optional[int] = None
    ) -> int:
        """
        Reset the board to a single named pattern.

        Args:
            pattern: Pattern name (see ``pattern_names``).
            x: Column of the top-left corner; centered if omitted.
            y: Row of the top-left corner; centered if omitted.

        Returns:
            Number of cells placed.
        """
        rows, cols = get_pattern(pattern).shape
        if x is None:
            x = max(0, (self.board.width - cols) // 2)
        if y is None:
            y = max(0, (self.board.height - rows) // 2)

        self.clear()
        placed = place_pattern(self.board, pattern, x, y)
        self.refresh()
        logger.info(f"Placed pattern '{pattern}' at ({x}, {y}): {placed} cells")
        return placed

    def initialize_random(self, density: float, seed: Optional[int] = None) -> int:
        """
        Reset the board to random cells.

        Args:
            density: Probability of each cell being alive (0.0 to 1.0).
            seed: Optional seed for a reproducible board.

        Returns:
            Number of living cells.
        """
        rng = np.random.default_rng(seed)
        cells = rng.random((self.board.height, self.board.width)) < density

        self.clear()
        self.board.spawn_all((int(x), int(y)) for y, x in np.argwhere(cells))
        self.refresh()
        logger.info(f"Randomized board at density {density}: {self.board.population} cells")
        return self.board.population
