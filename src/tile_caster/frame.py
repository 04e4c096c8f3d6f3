"""Builds the draw commands for one frame."""

from dataclasses import dataclass

from .caster import Caster
from .config import Settings
from .draw import Color, Disc, DrawCommand, FillRect, Segment
from .errors import ConfigError
from .grid_map import GridMap
from .projection import column_to_screen_x, project, shade
from .raycaster import RayResult, Side

__all__ = ["FrameBuilder"]

MAP_WALL_COLOR = Color.from_hex("#888888")
MAP_OPEN_COLOR = Color.from_hex("#555555")
CASTER_COLOR = Color.from_hex("#e4b57b")
RAY_COLORS = {
    Side.VERTICAL: Color.from_hex("#500000"),
    Side.HORIZONTAL: Color.from_hex("#920000"),
}
CASTER_RADIUS = 8
HEADING_LENGTH = 15


@dataclass
class FrameBuilder:
    """Turns a caster and its rays into draw commands.

    The top-down map, when shown, is drawn at one pixel per world unit in the
    top left corner of the screen and the wall view fills the rest of the
    width. Commands are returned in paint order.

    Parameters
    ----------
    game_map : GridMap
        The map being drawn.
    settings : Settings
        Screen size, shading and debug switches.
    """

    game_map: GridMap
    """The map being drawn."""
    settings: Settings
    """Screen size, shading and debug switches."""

    def __post_init__(self) -> None:
        settings = self.settings
        self.view_left = self.game_map.width * self.game_map.tile_scale if settings.show_map else 0
        """Left edge of the wall view."""
        self.view_width = settings.screen_width - self.view_left
        """Width of the wall view."""
        if self.view_width <= 0:
            raise ConfigError(
                f"screen width {settings.screen_width} leaves no room for the wall view "
                f"next to a {self.view_left} pixel wide map"
            )

    def build(self, caster: Caster, rays: list[RayResult]) -> list[DrawCommand]:
        """Return the draw commands for one frame."""
        commands: list[DrawCommand] = []
        if self.settings.show_map:
            commands.extend(self.map_cells())
            if self.settings.show_rays:
                commands.extend(self.ray_segments(caster, rays))
            commands.extend(self.caster_marker(caster))
        commands.extend(self.strips(rays))
        return commands

    def map_cells(self) -> list[FillRect]:
        """One square per map cell, with a one pixel gutter."""
        scale = self.game_map.tile_scale
        return [
            FillRect(
                x * scale,
                y * scale,
                scale - 1,
                scale - 1,
                MAP_WALL_COLOR if is_wall else MAP_OPEN_COLOR,
            )
            for x, y, is_wall in self.game_map.iter_cells()
        ]

    def ray_segments(self, caster: Caster, rays: list[RayResult]) -> list[Segment]:
        """A line from the caster to each ray's wall hit."""
        scale = self.game_map.tile_scale
        return [
            Segment(caster.pos, ray.hit_point(caster, scale), RAY_COLORS[ray.side])
            for ray in rays
        ]

    def caster_marker(self, caster: Caster) -> list[DrawCommand]:
        """A dot at the caster's position and a short heading line."""
        heading = caster.pos + caster.dir * (HEADING_LENGTH / caster.dir.norm())
        return [
            Disc(caster.pos, CASTER_RADIUS, CASTER_COLOR),
            Segment(caster.pos, heading, CASTER_COLOR),
        ]

    def strips(self, rays: list[RayResult]) -> list[FillRect]:
        """One shaded wall strip per ray."""
        settings = self.settings
        total = len(rays)
        if not total:
            return []
        strip_width = self.view_width / total
        commands = []
        for column, ray in enumerate(rays):
            extent = project(ray.perp_wall_dist, settings.screen_height, settings.max_line_height)
            commands.append(
                FillRect(
                    column_to_screen_x(column, total, self.view_left, self.view_width),
                    extent.draw_start,
                    strip_width,
                    extent.draw_end - extent.draw_start,
                    shade(ray.perp_wall_dist, ray.side, settings.fade_distance),
                )
            )
        return commands
