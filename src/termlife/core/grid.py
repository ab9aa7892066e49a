"""Sparse grid engine for Conway's Game of Life."""

import sys
from typing import Dict, List, Optional, Set, TextIO, Tuple

import numpy as np

Cell = Tuple[int, int]

# E, NE, N, NW, W, SW, S, SE in screen coordinates (y grows downward)
ALL_NEIGHBORS: Tuple[Cell, ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
    (1, 1),
)

ALIVE_CHAR = "#"
DEAD_CHAR = "."


def neighbors(x: int, y: int, limit: int = 8) -> List[Cell]:
    """Get the compass neighbours of a cell.

    Args:
        x: Column coordinate
        y: Row coordinate
        limit: How many neighbours to return, taken in clockwise order from east

    Returns:
        List of up to ``limit`` (x, y) coordinates
    """
    return [(x + dx, y + dy) for dx, dy in ALL_NEIGHBORS[: max(0, min(limit, 8))]]


class Grid:
    """A bounded square grid that only tracks the cells that can change.

    The state is a mapping from coordinate to liveness. Live cells map to
    True; dead cells adjacent to a live cell are kept as False placeholders
    so that births next to them are evaluated. Every other cell is absent
    and treated as dead, so a step costs O(tracked cells) instead of O(N^2).
    """

    def __init__(self, size: int, rng: Optional[np.random.Generator] = None) -> None:
        """Initialize an empty grid.

        Args:
            size: Side length of the square grid
            rng: Random source used by seed() when none is passed explicitly
        """
        self.size = size
        self.rng = rng if rng is not None else np.random.default_rng()
        self._cells: Dict[Cell, bool] = {}

    @property
    def cells(self) -> Dict[Cell, bool]:
        """Copy of the tracked cell mapping."""
        return dict(self._cells)

    @property
    def population(self) -> int:
        """Get the number of living cells."""
        return self.num_live()

    @property
    def tracked_count(self) -> int:
        """Number of tracked cells, alive or dead."""
        return len(self._cells)

    def is_printable(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies inside the visible grid."""
        return 0 <= x < self.size and 0 <= y < self.size

    def get_cell(self, x: int, y: int) -> bool:
        """Get the state of a cell. Untracked cells are dead."""
        return self._cells.get((x, y), False)

    def set_cell(self, x: int, y: int, alive: bool) -> None:
        """Set the state of a cell.

        A cell set alive also starts tracking its neighbours so that the
        next step can consider them for birth.

        Args:
            x: Column coordinate
            y: Row coordinate
            alive: Whether the cell should be alive

        Raises:
            IndexError: If coordinates are outside the grid
        """
        if not self.is_printable(x, y):
            raise IndexError(f"Coordinates ({x}, {y}) out of bounds")

        self._cells[(x, y)] = alive
        if alive:
            self._track_neighbors(self._cells, x, y)

    def clear(self) -> None:
        """Clear all cells (set all to dead)."""
        self._cells = {}

    def seed(self, num_live: int, init_neighbors: int, rng: Optional[np.random.Generator] = None) -> None:
        """Randomly place live cells away from the border.

        Existing cells are kept; call clear() first for a fresh start.
        Each sampled point is made alive together with up to four of its
        neighbours, which biases the start towards dense clusters.

        Args:
            num_live: Number of points to sample
            init_neighbors: Neighbours of each point to make alive (capped at 4)
            rng: Random source overriding the grid's own

        Raises:
            ValueError: If the grid is too small to hold any seed
        """
        rng = rng if rng is not None else self.rng

        window = int(rng.integers(4, 12))
        low, high = self.size // window, self.size - self.size // window
        if num_live > 0 and low >= high:
            raise ValueError(f"Grid of size {self.size} is too small to seed")

        spread = min(init_neighbors, 4)
        for _ in range(num_live):
            x = int(rng.integers(low, high))
            y = int(rng.integers(low, high))

            for cell in [(x, y)] + neighbors(x, y, spread):
                if self.is_printable(*cell) and cell not in self._cells:
                    self._cells[cell] = True

    def next(self) -> None:
        """Advance the grid by one generation.

        Only tracked cells are evaluated. A live cell survives with 2 or 3
        live neighbours, a dead one is born with exactly 3.
        """
        new_cells: Dict[Cell, bool] = {}

        for (x, y), alive in self._cells.items():
            count = self._live_neighbors(x, y)
            if count == 3 or (alive and count == 2):
                new_cells[(x, y)] = True
                self._track_neighbors(new_cells, x, y)

        self._cells = new_cells

    def num_live(self) -> int:
        """Count the live cells."""
        return sum(1 for alive in self._cells.values() if alive)

    def live_cells(self) -> Set[Cell]:
        """Get coordinates of all live cells."""
        return {cell for cell, alive in self._cells.items() if alive}

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y) or None if no living cells
        """
        living = self.live_cells()
        if not living:
            return None

        xs, ys = zip(*living)
        return (min(xs), min(ys), max(xs), max(ys))

    def to_array(self) -> np.ndarray:
        """Dense int8 copy of the grid indexed as [x, y]."""
        arr = np.zeros((self.size, self.size), dtype=np.int8)
        for x, y in self.live_cells():
            arr[x, y] = 1
        return arr

    def render(self) -> str:
        """Render the full grid, one row per line."""
        rows = []
        for y in range(self.size):
            rows.append(" ".join(ALIVE_CHAR if self.get_cell(x, y) else DEAD_CHAR for x in range(self.size)))
        return "\n".join(rows)

    def print(self, file: Optional[TextIO] = None) -> None:
        """Write the rendered grid to a stream (stdout by default)."""
        print(self.render(), file=file if file is not None else sys.stdout)

    def _live_neighbors(self, x: int, y: int) -> int:
        return sum(1 for cell in neighbors(x, y) if self._cells.get(cell, False))

    def _track_neighbors(self, cells: Dict[Cell, bool], x: int, y: int) -> None:
        # Placeholders never overwrite an existing entry and never leave the grid
        for cell in neighbors(x, y):
            if self.is_printable(*cell) and cell not in cells:
                cells[cell] = False

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same live cells."""
        if not isinstance(other, Grid):
            return False
        return self.size == other.size and self.live_cells() == other.live_cells()

    def __str__(self) -> str:
        return self.render()
