import math

import pytest

from tile_caster.caster import Caster
from tile_caster.config import Settings
from tile_caster.draw import FillRect
from tile_caster.engine import Engine
from tile_caster.integrator import InputKey
from tile_caster.surface import TerminalSurface
from tile_caster.vector import Vector2D



def test_defaults():
    engine = Engine()
    assert engine.game_map.width == engine.game_map.height == 10
    assert engine.caster.pos == Vector2D(256, 256)
    assert engine.caster.dir == Vector2D(-1.0, 0.0)


def test_tick_returns_frame():
    engine = Engine(Settings(ray_count=16))
    commands = engine.on_tick(1 / 60, set())
    assert len(commands) == 100 + 16 + 2 + 16
    assert all(isinstance(c, FillRect) for c in commands[-16:])


def test_tick_moves_caster():
    engine = Engine(Settings(ray_count=4))
    engine.on_tick(0.5, {InputKey.FORWARD})
    assert engine.caster.pos == Vector2D(224.0, 256.0)


def test_given_map_and_caster_are_used(obstacle_map):
    caster = Caster(Vector2D(320.0, 320.0), Vector2D(1.0, 1.0), Vector2D(-0.66, 0.66))
    engine = Engine(Settings(ray_count=4), game_map=obstacle_map, caster=caster)
    assert engine.caster is caster
    assert engine.game_map is obstacle_map


def test_caster_starting_in_wall_is_logged(caplog, open_map):
    caster = Caster(Vector2D(10.0, 10.0), Vector2D(1.0, 0.0), Vector2D(0.0, -0.66))
    Engine(Settings(ray_count=4), game_map=open_map, caster=caster)
    assert "inside a wall" in caplog.text


def test_run_into_obstacle_end_to_end(obstacle_map_text):
    settings = Settings(map_text=obstacle_map_text, start_pos=Vector2D(320.0, 320.0), ray_count=32)
    engine = Engine(settings)
    # Face +x +y, straight at the obstacle.
    engine.caster.rotate(-3 * math.pi / 4)
    for _ in range(60 * 10):
        engine.on_tick(1 / 60, {InputKey.FORWARD})
        assert not engine.game_map.is_wall(*engine.caster.pos)


def test_frame_paints_on_surface():
    engine = Engine(Settings(ray_count=32))
    surface = TerminalSurface(engine.settings.screen_width, engine.settings.screen_height)
    surface.resize(80, 24)
    surface.paint(engine.on_tick(1 / 30, {InputKey.ROTATE_RIGHT}))
    lines = surface.lines()
    assert len(lines) == 24
    assert all(len(line) == 80 for line in lines)
    assert any(ch != " " for ch in lines[12][40:])


def test_negative_dt_fails_fast():
    engine = Engine(Settings(ray_count=4))
    with pytest.raises(ValueError):
        engine.on_tick(-1.0, set())
