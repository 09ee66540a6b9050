"""Game of Life rules: the per-cell table and a dense NumPy reference step."""

import numpy as np


class LifeRules:
    """
    Implements Conway's Game of Life rules (B3/S23).

    Rules:
    1. Any live cell with 2 or 3 live neighbors survives.
    2. Any dead cell with exactly 3 live neighbors becomes alive.
    3. All other cells die or stay dead.

    Cells beyond the edge of the grid count as dead; the grid never wraps.
    """

    @staticmethod
    def next_state(alive: bool, living_neighbors: int) -> bool:
        """
        Decide whether a cell is alive in the next generation.

        Args:
            alive: Whether the cell is alive now.
            living_neighbors: Number of living neighbors (0-8).

        Returns:
            True if the cell is alive after the step.
        """
        if alive:
            return living_neighbors in (2, 3)
        return living_neighbors == 3

    @staticmethod
    def count_neighbors(cells: np.ndarray, x: int, y: int) -> int:
        """
        Count the number of live neighbors for a cell of a dense grid.

        Args:
            cells: ``(height, width)`` array of 0/1 values.
            x: Column of the cell.
            y: Row of the cell.

        Returns:
            Number of live neighbors (0-8).
        """
        height, width = cells.shape
        count = 0
        for dy in [-1, 0, 1]:
            for dx in [-1, 0, 1]:
                if dx == 0 and dy == 0:
                    continue
                nx, ny = x + dx, y + dy
                if 0 <= nx < width and 0 <= ny < height:
                    count += int(cells[ny, nx])
        return count

    @staticmethod
    def compute_next_generation(cells: np.ndarray) -> np.ndarray:
        """
        Compute the next generation of a dense grid.

        Args:
            cells: ``(height, width)`` array of 0/1 values.

        Returns:
            New uint8 array with the next generation.
        """
        current = cells.astype(np.int32)

        # Zero padding keeps the edges dead instead of wrapping
        padded = np.pad(current, 1, mode="constant", constant_values=0)

        neighbors = (
            padded[:-2, :-2]
            + padded[:-2, 1:-1]
            + padded[:-2, 2:]  # Top row
            + padded[1:-1, :-2]
            + padded[1:-1, 2:]  # Middle row (no center)
            + padded[2:, :-2]
            + padded[2:, 1:-1]
            + padded[2:, 2:]  # Bottom row
        )

        return np.where(
            (current == 1) & ((neighbors == 2) | (neighbors == 3)),  # Survival
            1,
            np.where((current == 0) & (neighbors == 3), 1, 0),  # Birth
        ).astype(np.uint8)
