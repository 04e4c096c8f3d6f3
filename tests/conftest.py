import pytest

from tile_caster.caster import Caster
from tile_caster.grid_map import GridMap
from tile_caster.vector import Vector2D

OPEN_MAP = """
1111111111
1000000001
1000000001
1000000001
1000000001
1000000001
1000000001
1000000001
1000000001
1111111111
"""

# Ten by ten with one 2x2 block in the interior.
OBSTACLE_MAP = """
1111111111
1000000001
1000000001
1000000001
1000000001
1000000001
1000000001
1000000111
1000000111
1111111111
"""

CORNER_MAP = """
111111
100001
100101
100001
111111
"""


@pytest.fixture
def open_map():
    return GridMap.from_text(OPEN_MAP)


@pytest.fixture
def obstacle_map_text():
    return OBSTACLE_MAP


@pytest.fixture
def obstacle_map(obstacle_map_text):
    return GridMap.from_text(obstacle_map_text)


@pytest.fixture
def corner_map():
    """A 6x5 map with a single interior wall at cell (3, 2)."""
    return GridMap.from_text(CORNER_MAP)


@pytest.fixture
def caster():
    """Cell (4, 4) centre, facing -x."""
    return Caster(Vector2D(288.0, 288.0), Vector2D(-1.0, 0.0), Vector2D(0.0, 0.66))
