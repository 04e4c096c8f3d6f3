"""A 2-D vector value type."""

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True, slots=True)
class Vector2D:
    """An immutable x/y pair.

    Parameters
    ----------
    x : float
        Horizontal component.
    y : float
        Vertical component.
    """

    x: float
    """Horizontal component."""
    y: float
    """Vertical component."""

    def __add__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def __mul__(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def dot(self, other: "Vector2D") -> float:
        """Dot product with `other`."""
        return self.x * other.x + self.y * other.y

    def norm(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def rotated(self, theta: float) -> "Vector2D":
        """Return this vector rotated `theta` radians."""
        cos = math.cos(theta)
        sin = math.sin(theta)
        return Vector2D(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def as_array(self) -> NDArray[np.float64]:
        """Return the vector as a length 2 float array."""
        return np.array([self.x, self.y], float)

    @classmethod
    def from_array(cls, array: NDArray[np.float64]) -> "Vector2D":
        """Build a vector from the first two entries of `array`."""
        x, y = array[:2].tolist()
        return cls(x, y)
