"""Turns elapsed time and held keys into caster motion."""

import logging
from collections.abc import Collection
from dataclasses import dataclass
from enum import Enum

from .caster import Caster
from .collision import try_move
from .grid_map import GridMap

__all__ = ["InputKey", "Integrator"]

logger = logging.getLogger(__name__)


class InputKey(Enum):
    """Movement inputs the integrator understands."""

    FORWARD = "forward"
    BACKWARD = "backward"
    ROTATE_LEFT = "rotate-left"
    ROTATE_RIGHT = "rotate-right"


@dataclass
class Integrator:
    """Advances a caster by one tick of input.

    Parameters
    ----------
    game_map : GridMap
        Map that movement is checked against.
    move_speed : float, default: 64.0
        Translation speed in world units per second.
    rotation_speed : float, default: 3.0
        Rotation speed in radians per second.
    collision_radius : float, default: 0.0
        Half-width of the caster's body; 0 tests the caster's position only.

    Notes
    -----
    Effects are applied in a fixed order: forward, backward, rotate left,
    rotate right. Translation in a tick therefore uses the direction from
    before that tick's rotation.
    """

    game_map: GridMap
    """Map that movement is checked against."""
    move_speed: float = 64.0
    """Translation speed in world units per second."""
    rotation_speed: float = 3.0
    """Rotation speed in radians per second."""
    collision_radius: float = 0.0
    """Half-width of the caster's body."""

    def step(self, caster: Caster, dt: float, keys: Collection[InputKey]) -> None:
        """Apply `dt` seconds of the held `keys` to `caster` in-place."""
        if dt < 0:
            raise ValueError(f"dt must not be negative, got {dt}")

        move = dt * self.move_speed
        rot = dt * self.rotation_speed

        if InputKey.FORWARD in keys:
            self._translate(caster, move)
        if InputKey.BACKWARD in keys:
            self._translate(caster, -move)
        if InputKey.ROTATE_LEFT in keys:
            caster.rotate(-rot)
        if InputKey.ROTATE_RIGHT in keys:
            caster.rotate(rot)

    def _translate(self, caster: Caster, distance: float) -> None:
        target = caster.pos + caster.dir * distance
        try_move(caster, self.game_map, target.x, target.y, self.collision_radius)
        if caster.pos != target:
            logger.debug("Movement toward %s clipped to %s.", target, caster.pos)
