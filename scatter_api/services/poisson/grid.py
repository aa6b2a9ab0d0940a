from __future__ import annotations

import math
from typing import Iterator, List, Optional, Sequence, Tuple

Point = Tuple[float, float]

LAYOUTS = ("2d", "flat")


class SpatialGrid:
    """Uniform bucket grid over a rectangle for near-constant neighbor lookups.

    Buckets hold indices into the caller's list of accepted points. With a
    cell size of ``radius / sqrt(2)`` and a constant acceptance radius, a
    bucket never holds more than one index.

    Parameters
    ----------
    width, height:
        Extent of the covered rectangle.
    cell_size:
        Edge length of a square cell.
    origin:
        Lower corner of the rectangle; cell addresses are relative to it.
    layout:
        ``"2d"`` stores rows of column buckets, ``"flat"`` stores one list
        addressed by ``row * cols + col``. Both answer queries identically.
    """

    def __init__(
        self,
        width: float,
        height: float,
        cell_size: float,
        origin: Point = (0.0, 0.0),
        layout: str = "2d",
    ) -> None:
        if layout not in LAYOUTS:
            raise ValueError(f"unknown grid layout {layout!r}, expected one of {LAYOUTS}")
        self.cell_size = float(cell_size)
        self.origin = (float(origin[0]), float(origin[1]))
        self.cols = max(1, int(math.ceil(width / self.cell_size)))
        self.rows = max(1, int(math.ceil(height / self.cell_size)))
        self.layout = layout
        if layout == "2d":
            self._cells: list = [[None] * self.cols for _ in range(self.rows)]
        else:
            self._cells = [None] * (self.rows * self.cols)

    def cell_of(self, point: Sequence[float]) -> Tuple[int, int]:
        """Return the ``(row, col)`` address of ``point``."""
        col = int((point[0] - self.origin[0]) // self.cell_size)
        row = int((point[1] - self.origin[1]) // self.cell_size)
        return row, col

    def _bucket(self, row: int, col: int) -> Optional[List[int]]:
        if self.layout == "2d":
            return self._cells[row][col]
        return self._cells[row * self.cols + col]

    def insert(self, point: Sequence[float], index: int) -> None:
        """Store ``index`` in the bucket of ``point``.

        ``point`` must lie inside the covered rectangle.
        """
        row, col = self.cell_of(point)
        bucket = self._bucket(row, col)
        if bucket is None:
            bucket = []
            if self.layout == "2d":
                self._cells[row][col] = bucket
            else:
                self._cells[row * self.cols + col] = bucket
        bucket.append(index)

    def query_neighbors_in_block(
        self, point: Sequence[float], search_cells: int = 2
    ) -> Iterator[int]:
        """Yield indices stored in the ``(2*search_cells+1)`` square block around ``point``.

        Empty cells and cells outside the grid are skipped.
        """
        row, col = self.cell_of(point)
        r0 = max(row - search_cells, 0)
        r1 = min(row + search_cells + 1, self.rows)
        c0 = max(col - search_cells, 0)
        c1 = min(col + search_cells + 1, self.cols)
        for r in range(r0, r1):
            for c in range(c0, c1):
                bucket = self._bucket(r, c)
                if bucket:
                    yield from bucket

    def __len__(self) -> int:
        if self.layout == "2d":
            return sum(len(b) for row in self._cells for b in row if b)
        return sum(len(b) for b in self._cells if b)
