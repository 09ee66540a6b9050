"""Sparse board state for Game of Life."""

import logging
from typing import FrozenSet, Iterable, Optional, Set, Tuple

import numpy as np

from sparse_life.simulation.life_rules import LifeRules

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]

# Largest representable coordinate; neighbor offsets saturate here and at 0.
MAX_COORDINATE: int = 2**64 - 1


def _saturating_dec(value: int) -> int:
    return value - 1 if value > 0 else 0


def _saturating_inc(value: int) -> int:
    return value + 1 if value < MAX_COORDINATE else MAX_COORDINATE


class Board:
    """
    A fixed-size, non-wrapping Game of Life board.

    Only living cells are stored. A cell is an ``(x, y)`` tuple with
    ``0 <= x < width`` and ``0 <= y < height``; anything not in the living set
    is dead. Work per generation is proportional to the number of living
    cells rather than to the grid area.
    """

    def __init__(self, width: int, height: int):
        """
        Create an empty board.

        Args:
            width: Number of columns, must be positive.
            height: Number of rows, must be positive.

        Raises:
            ValueError: If either dimension is not positive or exceeds the
                coordinate range.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width}x{height}")
        if width > MAX_COORDINATE + 1 or height > MAX_COORDINATE + 1:
            raise ValueError(f"Board dimensions must not exceed {MAX_COORDINATE + 1}")
        self.width = width
        self.height = height
        self.living_cells: Set[Cell] = set()

    def __repr__(self) -> str:
        return f"Board(width={self.width}, height={self.height}, population={self.population})"

    def __len__(self) -> int:
        return len(self.living_cells)

    @property
    def living(self) -> FrozenSet[Cell]:
        """Snapshot of the currently living cells."""
        return frozenset(self.living_cells)

    @property
    def population(self) -> int:
        """Number of living cells."""
        return len(self.living_cells)

    def contains(self, cell: Cell) -> bool:
        """True if the cell lies within the bounds of the board."""
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def neighbors(self, cell: Cell) -> Set[Cell]:
        """
        Get the Moore neighborhood of a cell, clipped to the board.

        Offsets saturate at 0 and MAX_COORDINATE instead of wrapping, so at an
        edge some candidates collapse onto each other or onto the cell itself;
        the set drops the duplicates and the cell is removed explicitly.

        Args:
            cell: The cell whose neighbors to compute.

        Returns:
            Up to 8 in-bounds cells, never including ``cell``.
        """
        x, y = cell
        x_lo, x_hi = _saturating_dec(x), _saturating_inc(x)
        y_lo, y_hi = _saturating_dec(y), _saturating_inc(y)

        candidates = {
            (x_lo, y_lo),
            (x_lo, y),
            (x_lo, y_hi),
            (x, y_lo),
            (x, y_hi),
            (x_hi, y_lo),
            (x_hi, y),
            (x_hi, y_hi),
        }
        candidates.discard(cell)
        return {c for c in candidates if self.contains(c)}

    def living_neighbor_count(self, cell: Cell) -> int:
        """Count the living cells in the neighborhood of a cell (0-8)."""
        return len(self.neighbors(cell) & self.living_cells)

    def is_alive(self, cell: Cell) -> bool:
        """True if the specified cell is alive."""
        return cell in self.living_cells

    def spawn(self, cell: Cell) -> None:
        """Bring a cell to life. Out-of-bounds cells are ignored."""
        if not self.contains(cell):
            logger.debug(f"Ignoring spawn outside {self.width}x{self.height} board: {cell}")
            return
        self.living_cells.add(cell)

    def kill(self, cell: Cell) -> None:
        """Kill a cell. No-op if it is not alive."""
        self.living_cells.discard(cell)

    def clear(self) -> None:
        """Kill every cell."""
        self.living_cells.clear()

    def cells_needing_update(self) -> Set[Cell]:
        """
        Get every cell whose state can change in the next generation.

        That is the living cells plus all of their neighbors: a dead cell with
        no living neighbor can never be born.
        """
        dirty: Set[Cell] = set()
        for cell in self.living_cells:
            dirty.update(self.neighbors(cell))
            dirty.add(cell)
        return dirty

    def _next_state(self, cell: Cell) -> bool:
        return LifeRules.next_state(self.is_alive(cell), self.living_neighbor_count(cell))

    def _apply(self, cell: Cell, alive: bool) -> None:
        if alive:
            self.spawn(cell)
        else:
            self.kill(cell)

    def update_cell(self, cell: Cell) -> None:
        """Apply the B3/S23 rule to a single cell based on the current state."""
        if not self.contains(cell):
            return
        alive = self._next_state(cell)
        if alive != self.is_alive(cell):
            self._apply(cell, alive)

    def step(self) -> None:
        """
        Advance the whole board by one generation.

        Every decision is made against the living set as it was before the
        step; changes are applied only once all of them are known.
        """
        dirty = self.cells_needing_update()
        changes = []
        for cell in dirty:
            alive = self._next_state(cell)
            if alive != self.is_alive(cell):
                changes.append((cell, alive))

        for cell, alive in changes:
            self._apply(cell, alive)

        logger.debug(
            f"Step evaluated {len(dirty)} cells, applied {len(changes)} changes, "
            f"population {self.population}"
        )

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """
        Get the smallest rectangle containing every living cell.

        Returns:
            ``(min_x, min_y, max_x, max_y)``, or None if the board is empty.
        """
        if not self.living_cells:
            return None
        xs = [x for x, _ in self.living_cells]
        ys = [y for _, y in self.living_cells]
        return min(xs), min(ys), max(xs), max(ys)

    def to_array(self) -> np.ndarray:
        """Dense ``(height, width)`` uint8 copy of the board, indexed ``[y, x]``."""
        cells = np.zeros((self.height, self.width), dtype=np.uint8)
        for x, y in self.living_cells:
            cells[y, x] = 1
        return cells

    @classmethod
    def from_array(cls, cells: np.ndarray) -> "Board":
        """
        Build a board from a dense ``(height, width)`` array.

        Args:
            cells: Array where any non-zero entry is a living cell.

        Returns:
            A new board with the same dimensions and living cells.
        """
        height, width = cells.shape
        board = cls(int(width), int(height))
        board.spawn_all((int(x), int(y)) for y, x in np.argwhere(cells))
        return board

    def spawn_all(self, cells: Iterable[Cell]) -> None:
        """Spawn each of the given cells."""
        for cell in cells:
            self.spawn(cell)
