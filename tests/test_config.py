import pytest

from tile_caster.config import DEFAULT_MAP, Settings
from tile_caster.errors import ConfigError
from tile_caster.grid_map import GridMap
from tile_caster.vector import Vector2D


def test_defaults():
    settings = Settings()
    assert settings.tile_scale == 64
    assert settings.move_speed == 64
    assert settings.rotation_speed == 3
    assert settings.start_pos == Vector2D(256, 256)
    assert settings.start_plane == Vector2D(0.0, 0.66)


def test_default_map_is_valid():
    game_map = GridMap.from_text(DEFAULT_MAP)
    assert (game_map.width, game_map.height) == (10, 10)
    assert not game_map.is_wall(*Settings().start_pos)


def test_replace():
    settings = Settings().replace(ray_count=7)
    assert settings.ray_count == 7
    assert Settings().ray_count == 120


def test_frozen():
    with pytest.raises(AttributeError):
        Settings().ray_count = 3


@pytest.mark.parametrize(
    "changes",
    [
        {"ray_count": 0},
        {"ray_count": 2.5},
        {"screen_height": -1},
        {"screen_width": 0},
        {"move_speed": 0},
        {"rotation_speed": -1.0},
        {"tile_scale": 0},
        {"fade_distance": 0},
        {"collision_radius": -0.5},
        {"start_dir": Vector2D(0.0, 0.0)},
    ],
)
def test_invalid_settings_rejected(changes):
    with pytest.raises(ConfigError):
        Settings(**changes)
