"""A tile-grid raycasting renderer."""

from .caster import Caster
from .config import Settings
from .draw import Color, Disc, DrawCommand, FillRect, Segment
from .engine import Engine
from .errors import ConfigError, DegenerateRayError, MapError, TileCasterError
from .grid_map import GridMap
from .integrator import InputKey, Integrator
from .raycaster import Raycaster, RayResult, Side, cast_column
from .surface import TerminalSurface
from .vector import Vector2D

__version__ = "0.1.0"

__all__ = [
    "Caster",
    "Color",
    "ConfigError",
    "DegenerateRayError",
    "Disc",
    "DrawCommand",
    "Engine",
    "FillRect",
    "GridMap",
    "InputKey",
    "Integrator",
    "MapError",
    "RayResult",
    "Raycaster",
    "Segment",
    "Settings",
    "Side",
    "TerminalSurface",
    "TileCasterError",
    "Vector2D",
    "cast_column",
]
