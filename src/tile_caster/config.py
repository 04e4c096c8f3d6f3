"""Startup configuration.

Every constant the caster needs is fixed when `Settings` is built; nothing here
changes while the frame loop runs.
"""

import dataclasses
from dataclasses import dataclass

from .errors import ConfigError
from .vector import Vector2D

__all__ = ["Settings", "DEFAULT_MAP", "TILE_SCALE"]

DEFAULT_MAP = """
1111111111
1000000001
1000111101
1000000101
1000010101
1000011101
1010000001
1011110111
1000000001
1111111111
"""

TILE_SCALE = 64
"""World units per map cell."""


@dataclass(frozen=True)
class Settings:
    """Caster configuration.

    Positions and the move speed are in world units; the map text is read
    with `tile_scale` world units per cell.
    """

    map_text: str = DEFAULT_MAP
    """Rows of `0` (open) and `1` (wall)."""
    tile_scale: float = TILE_SCALE
    """World units per map cell."""
    start_pos: Vector2D = Vector2D(4 * TILE_SCALE, 4 * TILE_SCALE)
    """Initial caster position."""
    start_dir: Vector2D = Vector2D(-1.0, 0.0)
    """Initial facing direction."""
    start_plane: Vector2D = Vector2D(0.0, 0.66)
    """Initial camera plane."""
    move_speed: float = TILE_SCALE * 1.0
    """World units per second, one cell per second by default."""
    rotation_speed: float = 3.0
    """Radians per second."""
    collision_radius: float = 0.0
    """Half-width of the caster's body in world units."""
    ray_count: int = 120
    """Number of wall strips (screen columns) cast per frame."""
    screen_width: int = 1280
    """Virtual screen width; the wall view fills what the map leaves free."""
    screen_height: int = 640
    """Virtual screen height."""
    fade_distance: float = 10.0
    """Distance in cells at which walls fade to black."""
    max_line_height: int | None = None
    """Optional cap on strip height."""
    show_map: bool = True
    """Draw the top-down map."""
    show_rays: bool = True
    """Draw every ray on the top-down map."""

    def __post_init__(self) -> None:
        for name in ("tile_scale", "move_speed", "rotation_speed", "fade_distance"):
            if not getattr(self, name) > 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        for name in ("ray_count", "screen_width", "screen_height"):
            value = getattr(self, name)
            if not (isinstance(value, int) and value > 0):
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")
        if self.collision_radius < 0:
            raise ConfigError(f"collision_radius must not be negative, got {self.collision_radius}")
        if self.start_dir.x == 0 and self.start_dir.y == 0:
            raise ConfigError("start_dir must not be the zero vector")

    def replace(self, **changes) -> "Settings":
        """Return a copy with `changes` applied."""
        return dataclasses.replace(self, **changes)
