"""A DDA raycaster."""

import math
from dataclasses import dataclass
from enum import IntEnum

import numpy as np

from .caster import Caster
from .errors import ConfigError, DegenerateRayError
from .grid_map import GridMap
from .vector import Vector2D

__all__ = ["Side", "RayResult", "camera_x", "cast_column", "Raycaster"]


class Side(IntEnum):
    """Which grid line a ray crossed last before hitting a wall."""

    VERTICAL = 0
    """A line of constant x; the ray stepped along x."""
    HORIZONTAL = 1
    """A line of constant y; the ray stepped along y."""


@dataclass(frozen=True)
class RayResult:
    """Where one screen column's ray hit a wall.

    Distances are in cells, not world units.
    """

    perp_wall_dist: float
    """Distance to the wall projected onto the caster's direction."""
    side: Side
    """Which grid line was hit."""
    hit_cell: tuple[int, int]
    """`(x, y)` of the wall cell that was hit."""
    ray_dir: Vector2D
    """Direction of the ray."""
    side_dist: Vector2D
    """Accumulated ray length along each axis when the loop stopped."""
    delta_dist: Vector2D
    """Ray length between two grid lines along each axis."""

    def hit_point(self, caster: Caster, tile_scale: float) -> Vector2D:
        """World position where the ray meets the wall."""
        return caster.pos + self.ray_dir * (self.perp_wall_dist * tile_scale)


def camera_x(column: int, total: int) -> float:
    """Map column `column` of `total` into `[-1, 1)` across the view."""
    return 2 * column / total - 1


def _axis(direction: float, pos: float, cell: int) -> tuple[int, float, float]:
    # (step, side distance, delta distance) for one axis.
    if direction == 0:
        return 1, math.inf, math.inf
    delta = abs(1 / direction)
    if direction < 0:
        return -1, (pos - cell) * delta, delta
    return 1, (cell + 1 - pos) * delta, delta


def _march(
    game_map: GridMap,
    ray_dir: Vector2D,
    pos: Vector2D,
    cell: tuple[int, int],
    step: tuple[int, int],
    side_dist: tuple[float, float],
    delta: tuple[float, float],
) -> RayResult:
    # `pos` is in cells. The map's solid border guarantees the loop ends.
    map_x, map_y = cell
    step_x, step_y = step
    side_x, side_y = side_dist
    delta_x, delta_y = delta
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = Side.VERTICAL
        else:
            side_y += delta_y
            map_y += step_y
            side = Side.HORIZONTAL
        if game_map.is_cell_wall(map_x, map_y):
            break

    if side == Side.VERTICAL:
        distance = (map_x - pos.x + (1 - step_x) / 2) / ray_dir.x
    else:
        distance = (map_y - pos.y + (1 - step_y) / 2) / ray_dir.y

    return RayResult(
        perp_wall_dist=distance,
        side=side,
        hit_cell=(map_x, map_y),
        ray_dir=ray_dir,
        side_dist=Vector2D(side_x, side_y),
        delta_dist=Vector2D(delta_x, delta_y),
    )


def cast_column(caster: Caster, game_map: GridMap, column: int, total: int) -> RayResult:
    """Cast the ray for one screen column.

    Parameters
    ----------
    caster : Caster
        The camera rays are cast from.
    game_map : GridMap
        The map rays are cast into.
    column : int
        Index of the screen column, `0 <= column < total`.
    total : int
        Number of screen columns.

    Returns
    -------
    RayResult
        The first wall the ray hits.

    Raises
    ------
    DegenerateRayError
        If the ray direction is the zero vector.
    """
    ray_dir = caster.dir + caster.plane * camera_x(column, total)
    if ray_dir.x == 0 and ray_dir.y == 0:
        raise DegenerateRayError(f"column {column} has a zero ray direction")

    scale = game_map.tile_scale
    pos = Vector2D(caster.pos.x / scale, caster.pos.y / scale)
    cell = math.floor(pos.x), math.floor(pos.y)
    step_x, side_x, delta_x = _axis(ray_dir.x, pos.x, cell[0])
    step_y, side_y, delta_y = _axis(ray_dir.y, pos.y, cell[1])
    return _march(
        game_map, ray_dir, pos, cell, (step_x, step_y), (side_x, side_y), (delta_x, delta_y)
    )


@dataclass
class Raycaster:
    """Casts one ray per screen column.

    Ray setup for a whole frame is vectorized; only the grid walk runs per
    column.

    Parameters
    ----------
    game_map : GridMap
        The map rays are cast into.
    ray_count : int
        Number of screen columns.
    """

    game_map: GridMap
    """The map rays are cast into."""
    ray_count: int
    """Number of screen columns."""

    def __post_init__(self) -> None:
        self.resize(self.ray_count)

    def resize(self, ray_count: int) -> None:
        """Change the number of columns cast."""
        if ray_count < 1:
            raise ConfigError(f"ray count must be positive, got {ray_count}")
        self.ray_count = ray_count

        # Precalculate camera-x of rays cast.
        self._camera_xs = 2 * np.arange(ray_count) / ray_count - 1

        # Buffers
        self._ray_dirs = np.zeros((ray_count, 2), dtype=float)
        self._deltas = np.zeros_like(self._ray_dirs)
        self._sides = np.zeros_like(self._ray_dirs)
        self._steps = np.zeros_like(self._ray_dirs, dtype=int)

    def cast(self, caster: Caster) -> list[RayResult]:
        """Cast every column's ray, left column first."""
        scale = self.game_map.tile_scale
        pos = caster.pos.as_array() / scale
        cell = np.floor(pos)

        rays = self._ray_dirs
        np.multiply(self._camera_xs[:, None], caster.plane.as_array(), out=rays)
        np.add(caster.dir.as_array(), rays, out=rays)

        flat = ~rays.any(axis=1)
        if flat.any():
            column = int(np.flatnonzero(flat)[0])
            raise DegenerateRayError(f"column {column} has a zero ray direction")

        with np.errstate(divide="ignore"):
            np.true_divide(1.0, rays, out=self._deltas)
        np.absolute(self._deltas, out=self._deltas)
        backward = rays < 0
        np.copyto(self._steps, np.where(backward, -1, 1))
        np.copyto(self._sides, np.where(backward, pos - cell, cell + 1 - pos))
        with np.errstate(invalid="ignore"):
            np.multiply(self._sides, self._deltas, out=self._sides)
        self._sides[rays == 0] = np.inf

        start = Vector2D.from_array(pos)
        start_cell = int(cell[0]), int(cell[1])
        ray_dirs = rays.tolist()
        steps = self._steps.tolist()
        sides = self._sides.tolist()
        deltas = self._deltas.tolist()
        return [
            _march(
                self.game_map,
                Vector2D(*ray_dirs[column]),
                start,
                start_cell,
                tuple(steps[column]),
                tuple(sides[column]),
                tuple(deltas[column]),
            )
            for column in range(self.ray_count)
        ]
