"""The raycaster's camera."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from .vector import Vector2D


@dataclass
class Caster:
    """A raycaster camera.

    Parameters
    ----------
    pos : Vector2D
        Position of the caster in world units.
    dir : Vector2D
        Facing direction of the caster.
    plane : Vector2D
        Camera plane, perpendicular to `dir`. Its length relative to `dir`
        sets the field of view.

    Methods
    -------
    rotation_matrix(theta)
        Return a 2-D rotation matrix from a given angle.
    facing(pos, theta, fov)
        Build a caster looking along angle `theta`.
    rotate(theta)
        Rotate caster `theta` radians in-place.
    """

    pos: Vector2D
    """Position of the caster in world units."""
    dir: Vector2D
    """Facing direction of the caster."""
    plane: Vector2D
    """Camera plane, perpendicular to `dir`."""

    @staticmethod
    def rotation_matrix(theta: float) -> NDArray[np.float64]:
        """Return a 2-D rotation matrix from a given angle.

        Row vectors are rotated by right-multiplication, ``v @ m``.
        """
        x = np.cos(theta)
        y = np.sin(theta)
        return np.array([[x, y], [-y, x]], float)

    @classmethod
    def facing(cls, pos: Vector2D, theta: float, fov: float = 0.66) -> "Caster":
        """Build a caster at `pos` looking along angle `theta`.

        The plane points to the caster's left on a y-down screen, so that
        `theta = pi` gives direction `(-1, 0)` and plane `(0, fov)`.
        """
        m = cls.rotation_matrix(theta)
        initial = np.array([[1.0, 0.0], [0.0, -fov]], float) @ m
        return cls(pos, Vector2D.from_array(initial[0]), Vector2D.from_array(initial[1]))

    @property
    def fov(self) -> float:
        """Length of the camera plane relative to the facing direction."""
        return self.plane.norm() / self.dir.norm()

    def rotate(self, theta: float) -> None:
        """Rotate direction and plane `theta` radians."""
        basis = np.array([self.dir.as_array(), self.plane.as_array()])
        dir_, plane = basis @ self.rotation_matrix(theta)
        self.dir = Vector2D.from_array(dir_)
        self.plane = Vector2D.from_array(plane)
