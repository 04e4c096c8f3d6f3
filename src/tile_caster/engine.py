"""A raycaster engine."""

import logging
from collections.abc import Collection
from dataclasses import dataclass, field
from typing import Optional

from .caster import Caster
from .config import Settings
from .draw import DrawCommand
from .frame import FrameBuilder
from .grid_map import GridMap
from .integrator import InputKey, Integrator
from .raycaster import Raycaster

__all__ = ["Engine"]

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    """A raycaster engine.

    Owns the one caster; each tick moves it, casts a ray per column and
    returns the frame's draw commands. Drawing them is left to the caller.

    Parameters
    ----------
    settings : Settings, default: Settings()
        Startup configuration.
    game_map : GridMap | None, default: None
        The map; read from `settings.map_text` if not given.
    caster : Caster | None, default: None
        The camera; placed from the settings' start values if not given.
    """

    settings: Settings = field(default_factory=Settings)
    """Startup configuration."""
    game_map: Optional[GridMap] = None
    """The map the caster moves through."""
    caster: Optional[Caster] = None
    """The camera."""

    def __post_init__(self) -> None:
        settings = self.settings
        if self.game_map is None:
            self.game_map = GridMap.from_text(settings.map_text, settings.tile_scale)
        if self.caster is None:
            self.caster = Caster(settings.start_pos, settings.start_dir, settings.start_plane)
        if self.game_map.is_wall(*self.caster.pos):
            logger.warning("Caster starts inside a wall at %s.", self.caster.pos)

        self.integrator = Integrator(
            self.game_map,
            move_speed=settings.move_speed,
            rotation_speed=settings.rotation_speed,
            collision_radius=settings.collision_radius,
        )
        self.raycaster = Raycaster(self.game_map, settings.ray_count)
        self.frame_builder = FrameBuilder(self.game_map, settings)
        logger.info(
            "Engine ready: %dx%d map, %d rays, caster at %s.",
            self.game_map.width,
            self.game_map.height,
            settings.ray_count,
            self.caster.pos,
        )

    def on_tick(self, dt: float, held_keys: Collection[InputKey]) -> list[DrawCommand]:
        """Advance one frame and return its draw commands."""
        self.integrator.step(self.caster, dt, held_keys)
        rays = self.raycaster.cast(self.caster)
        return self.frame_builder.build(self.caster, rays)
