"""
Uniform spatial grid for neighbor lookups during sampling.
"""

from typing import Iterator, List, Optional, Tuple
import math


class SpatialGrid:
    """
    Uniform grid over the canvas storing sample indices per cell.

    Cell size is derived from the largest minimum distance any pair of
    assets can require, so a square neighborhood of a few cells is enough
    to find every sample that could conflict with a candidate.
    """

    def __init__(self, width: float, height: float, max_radius: float, gap: float):
        """
        Initialize grid.

        Args:
            width: Canvas width in pixels
            height: Canvas height in pixels
            max_radius: Largest effective radius in the asset pool
            gap: Minimum boundary-to-boundary spacing
        """
        self.width = width
        self.height = height
        self.max_min_distance = 2 * max_radius + gap
        self.cell_size = self.max_min_distance / math.sqrt(2)
        self.cols = max(1, math.ceil(width / self.cell_size))
        self.rows = max(1, math.ceil(height / self.cell_size))

        # A cell may hold several samples when small assets sit close together
        self._cells: List[List[List[int]]] = [
            [[] for _ in range(self.rows)] for _ in range(self.cols)
        ]
        self.search_radius = self.search_radius_for(self.max_min_distance)

    def search_radius_for(self, min_distance: float) -> int:
        """Number of cells to scan in each direction to cover min_distance."""
        return math.ceil(min_distance / self.cell_size) + 1

    def cell_of(self, x: float, y: float) -> Tuple[int, int]:
        """Grid coordinates of a point, clamped to the grid."""
        col = min(self.cols - 1, max(0, int(math.floor(x / self.cell_size))))
        row = min(self.rows - 1, max(0, int(math.floor(y / self.cell_size))))
        return col, row

    def insert(self, index: int, x: float, y: float):
        """Record sample index at the cell containing (x, y)."""
        col, row = self.cell_of(x, y)
        self._cells[col][row].append(index)

    def query_neighbors(self, x: float, y: float, radius_cells: Optional[int] = None) -> Iterator[int]:
        """
        Yield sample indices in the square neighborhood around (x, y).

        Args:
            x, y: Candidate position
            radius_cells: Neighborhood half-width in cells (defaults to the
                radius derived from the grid's maximum minimum distance)
        """
        if radius_cells is None:
            radius_cells = self.search_radius

        col, row = self.cell_of(x, y)
        for cx in range(max(0, col - radius_cells), min(self.cols - 1, col + radius_cells) + 1):
            column = self._cells[cx]
            for cy in range(max(0, row - radius_cells), min(self.rows - 1, row + radius_cells) + 1):
                yield from column[cy]

    def __len__(self) -> int:
        return sum(len(cell) for column in self._cells for cell in column)
