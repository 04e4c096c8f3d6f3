import math

import pytest

from tile_caster.caster import Caster
from tile_caster.config import DEFAULT_MAP
from tile_caster.errors import ConfigError, DegenerateRayError
from tile_caster.grid_map import GridMap
from tile_caster.raycaster import Raycaster, Side, camera_x, cast_column
from tile_caster.vector import Vector2D


def test_camera_x_spans_view():
    assert camera_x(0, 4) == -1.0
    assert camera_x(2, 4) == 0.0
    assert camera_x(3, 4) == 0.5


def test_central_ray_toward_left_wall(open_map, caster):
    # Cell (4, 4) centre is 4.5 cells from x = 0; column 0's right face is at x = 1.
    ray = cast_column(caster, open_map, 1, 2)
    assert ray.ray_dir == Vector2D(-1.0, 0.0)
    assert ray.side is Side.VERTICAL
    assert ray.hit_cell == (0, 4)
    assert ray.perp_wall_dist == pytest.approx(288 / 64 - 1)
    assert ray.delta_dist.x == 1.0
    assert math.isinf(ray.delta_dist.y)
    hit = ray.hit_point(caster, open_map.tile_scale)
    assert hit.x == pytest.approx(64.0)
    assert hit.y == pytest.approx(288.0)


def test_axis_aligned_ray_along_y(open_map):
    caster = Caster(Vector2D(288.0, 288.0), Vector2D(0.0, 1.0), Vector2D(-0.66, 0.0))
    ray = cast_column(caster, open_map, 5, 10)
    assert ray.side is Side.HORIZONTAL
    assert ray.hit_cell == (4, 9)
    assert ray.perp_wall_dist == pytest.approx(4.5)
    assert math.isinf(ray.delta_dist.x)


def test_diagonal_tie_steps_y_first(open_map):
    caster = Caster(Vector2D(96.0, 96.0), Vector2D(1.0, 1.0), Vector2D(-0.66, 0.66))
    ray = cast_column(caster, open_map, 1, 2)
    assert ray.side is Side.HORIZONTAL
    assert ray.hit_cell == (8, 9)
    assert ray.perp_wall_dist == pytest.approx(7.5)


def test_perpendicular_distance_has_no_fisheye(open_map, caster):
    # A flat wall facing the caster is equally far along the view direction
    # for every column.
    distances = [cast_column(caster, open_map, column, 8).perp_wall_dist for column in range(8)]
    assert distances == pytest.approx([3.5] * 8)


def test_edge_columns_hit_expected_walls(obstacle_map):
    caster = Caster(Vector2D(320.0, 320.0), Vector2D(1.0, 0.0), Vector2D(0.0, -0.66))
    ray = cast_column(caster, obstacle_map, 0, 4)
    assert ray.ray_dir.x == 1.0
    assert ray.ray_dir.y == pytest.approx(0.66)
    # Climbs through row 6 into the obstacle at (8, 7).
    assert ray.hit_cell == (8, 7)
    assert ray.side is Side.HORIZONTAL
    assert ray.perp_wall_dist == pytest.approx((7 - 5.0) / 0.66)


def test_flush_against_wall_gives_zero_distance(open_map):
    caster = Caster(Vector2D(64.0, 288.0), Vector2D(-1.0, 0.0), Vector2D(0.0, 0.66))
    ray = cast_column(caster, open_map, 1, 2)
    assert ray.hit_cell == (0, 4)
    assert ray.perp_wall_dist == 0


def test_zero_ray_direction_rejected(open_map):
    caster = Caster(Vector2D(288.0, 288.0), Vector2D(0.0, 0.0), Vector2D(0.0, 0.0))
    with pytest.raises(DegenerateRayError):
        cast_column(caster, open_map, 0, 1)
    with pytest.raises(DegenerateRayError):
        Raycaster(open_map, 4).cast(caster)


@pytest.mark.parametrize("theta", [0.0, 0.4, math.pi / 2, 2.0, math.pi, 4.0, 3 * math.pi / 2, 5.9])
@pytest.mark.parametrize("pos", [(256.0, 256.0), (100.5, 90.25), (540.0, 130.0)])
def test_vectorized_cast_matches_single_column(theta, pos):
    game_map = GridMap.from_text(DEFAULT_MAP)
    caster = Caster.facing(Vector2D(*pos), theta)
    assert not game_map.is_wall(*caster.pos)
    rays = Raycaster(game_map, 33).cast(caster)
    assert len(rays) == 33
    for column, ray in enumerate(rays):
        expected = cast_column(caster, game_map, column, 33)
        assert ray.hit_cell == expected.hit_cell
        assert ray.side == expected.side
        assert ray.perp_wall_dist == pytest.approx(expected.perp_wall_dist)
        assert ray.ray_dir.x == pytest.approx(expected.ray_dir.x)
        assert ray.ray_dir.y == pytest.approx(expected.ray_dir.y)


def test_vectorized_cast_handles_axis_aligned_rays(open_map, caster):
    rays = Raycaster(open_map, 2).cast(caster)
    assert rays[1].ray_dir == Vector2D(-1.0, 0.0)
    assert rays[1].perp_wall_dist == pytest.approx(3.5)


def test_every_ray_ends_in_a_wall():
    game_map = GridMap.from_text(DEFAULT_MAP)
    caster = Caster.facing(Vector2D(288.0, 288.0), 1.0)
    for ray in Raycaster(game_map, 64).cast(caster):
        assert game_map.is_cell_wall(*ray.hit_cell)
        assert ray.perp_wall_dist >= 0


def test_resize(open_map, caster):
    raycaster = Raycaster(open_map, 4)
    raycaster.resize(9)
    assert len(raycaster.cast(caster)) == 9
    with pytest.raises(ConfigError):
        raycaster.resize(0)
