"""The tile grid the caster moves through.

Notes
-----
Maps are arrays of `0` (open) and `1` (wall) indexed `[row, column]`, i.e.
`[y, x]`, so that a text map reads on screen the way it is stored. A world
position is turned into a cell by floor division by the map's tile scale.

Every map must be enclosed by a solid ring of walls. Rays are only guaranteed
to stop because of that ring, so an open border is rejected when the map is
loaded rather than discovered by a runaway ray.
"""

import logging
import math
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .errors import MapError

__all__ = ["GridMap", "OPEN", "WALL"]

logger = logging.getLogger(__name__)

OPEN = 0
WALL = 1


@dataclass(frozen=True, eq=False)
class GridMap:
    """A static 2-D tile map.

    Parameters
    ----------
    cells : NDArray[np.int64]
        A 2D integer array of `0` (open) and `1` (wall), indexed `[y, x]`.
    tile_scale : float, default: 64
        World units per cell.

    Raises
    ------
    MapError
        If the cells are not a non-empty 2D array of zeros and ones enclosed by
        walls, or if `tile_scale` is not positive.
    """

    cells: NDArray[np.int64]
    """A read-only 2D array of `0` (open) and `1` (wall), indexed `[y, x]`."""
    tile_scale: float = 64
    """World units per cell."""

    def __post_init__(self) -> None:
        raw = np.array(self.cells)
        if raw.ndim != 2 or raw.size == 0:
            raise MapError(f"map must be a non-empty 2D grid, got shape {raw.shape}")

        # Checked before the cast so that 0.5 is not truncated to an open cell.
        if raw.dtype.kind not in "biuf":
            raise MapError(f"map cells must be numbers, got dtype {raw.dtype}")
        foreign = np.setdiff1d(np.unique(raw), (OPEN, WALL))
        if foreign.size:
            raise MapError(f"map cells must be 0 or 1, found {foreign.tolist()}")
        cells = raw.astype(np.int64)

        border = np.concatenate((cells[0], cells[-1], cells[:, 0], cells[:, -1]))
        if not border.all():
            ys, xs = np.nonzero(cells == OPEN)
            on_edge = (ys == 0) | (ys == cells.shape[0] - 1)
            on_edge |= (xs == 0) | (xs == cells.shape[1] - 1)
            gaps = list(zip(xs[on_edge].tolist(), ys[on_edge].tolist()))
            raise MapError(f"map border must be solid walls, open cells at {gaps}")

        if not self.tile_scale > 0:
            raise MapError(f"tile scale must be positive, got {self.tile_scale}")

        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)
        logger.info("Loaded %dx%d map.", self.width, self.height)

    @classmethod
    def from_text(cls, text: str, tile_scale: float = 64) -> "GridMap":
        """Read a map from rows of `0` and `1` digits.

        Parameters
        ----------
        text : str
            One map row per line. Blank lines and surrounding whitespace are
            ignored.
        tile_scale : float, default: 64
            World units per cell.

        Returns
        -------
        GridMap
            The loaded map.
        """
        rows = [line.strip() for line in text.splitlines() if line.strip()]
        if not rows:
            raise MapError("map text is empty")
        if len({len(row) for row in rows}) > 1:
            raise MapError("map rows must all have the same length")
        try:
            cells = [[int(cell) for cell in row] for row in rows]
        except ValueError as e:
            raise MapError(f"map rows must contain only digits: {e}") from e
        return cls(np.array(cells, dtype=np.int64), tile_scale)

    @property
    def width(self) -> int:
        """Number of cells along x."""
        return self.cells.shape[1]

    @property
    def height(self) -> int:
        """Number of cells along y."""
        return self.cells.shape[0]

    def cell_of(self, world_x: float, world_y: float) -> tuple[int, int]:
        """Return the `(x, y)` cell containing a world position."""
        return (
            math.floor(world_x / self.tile_scale),
            math.floor(world_y / self.tile_scale),
        )

    def is_cell_wall(self, cell_x: int, cell_y: int) -> bool:
        """Whether a cell is a wall. Cells outside the map are walls."""
        if not (0 <= cell_x < self.width and 0 <= cell_y < self.height):
            return True
        return bool(self.cells[cell_y, cell_x] == WALL)

    def is_wall(self, world_x: float, world_y: float) -> bool:
        """Whether a world position lies in a wall or outside the map."""
        return self.is_cell_wall(*self.cell_of(world_x, world_y))

    def iter_cells(self) -> Iterator[tuple[int, int, bool]]:
        """Yield `(x, y, is_wall)` for every cell, row by row."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row.tolist()):
                yield x, y, cell == WALL
