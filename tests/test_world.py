import math

import pytest

from cubgame.grid import build_layout
from cubgame.scene import Colors, SceneMap, Textures
from cubgame.world import Settings, World, compute_tile_size

MAP_LINES = [
    "111111\n",
    "100001\n",
    "10N001\n",
    "100001\n",
    "111111\n",
]


def make_scene(lines=MAP_LINES):
    layout = build_layout(lines)
    return SceneMap(
        textures=Textures("n.xpm", "s.xpm", "e.xpm", "w.xpm"),
        colors=Colors((0, 0, 0), (255, 255, 255)),
        width=layout.width,
        height=layout.height,
        cells=layout.cells,
        player_x=layout.player_x,
        player_y=layout.player_y,
        player_direction=layout.player_direction,
    )


@pytest.fixture
def world():
    return World(make_scene(), Settings(width=600, height=500))


@pytest.mark.parametrize(
    "sw, sh, mw, mh",
    [(600, 500, 7, 6), (1280, 720, 12, 9), (800, 800, 3, 21)],
)
def test_compute_tile_size_fits(sw, sh, mw, mh):
    tile = compute_tile_size(sw, sh, mw, mh)
    assert tile * (mw - 1) <= sw
    assert tile * (mh - 1) <= sh
    assert (tile + 1) * (mw - 1) > sw or (tile + 1) * (mh - 1) > sh


def test_world_tile_size_matches(world):
    assert world.tile_size == compute_tile_size(600, 500, 7, 6)


@pytest.mark.parametrize("x, y", [(-0.5, 1.0), (1.0, -0.1), (10.0, 1.0), (1.0, 9.0)])
def test_outside_is_wall(world, x, y):
    assert world.is_wall(x, y, math.pi) is True


def test_wall_cell_is_wall(world):
    assert world.is_wall(0.5, 0.5, math.pi) is True
    assert world.is_wall(5.5, 2.5, math.pi) is True


def test_end_column_is_wall(world):
    assert world.is_wall(6.0, 2.0, math.pi) is True


def test_floor_is_free(world):
    assert world.is_wall(2.5, 2.5, math.pi) is False
    assert world.is_wall(2.5, 2.5, 0.1) is False


def test_corner_between_two_walls_blocks(world):
    assert world.is_wall(1.5, 1.5, 0.1) is True
    assert world.is_wall(1.5, 1.5, math.pi) is False


def test_near_corner(world):
    assert world.near_corner(0.0, 0.0, 0.1) is True
    assert world.near_corner(0.0, 0.0, math.pi) is False
    assert world.near_corner(99.5, 0.5, math.pi / 2 + 0.1) is True
    assert world.near_corner(99.5, 99.5, math.pi + 0.1) is True
    assert world.near_corner(0.5, 99.5, 3 * math.pi / 2 + 0.1) is True
    assert world.near_corner(50.0, 50.0, 0.1) is False


def test_near_corner_angle_out_of_range(world):
    assert world.near_corner(0.0, 0.0, -0.1) is False


def test_diagonal_walls(world):
    assert world.diagonal_walls(1, 1, 0.1) is True
    assert world.diagonal_walls(2, 2, 0.1) is False
    assert world.diagonal_walls(4, 1, math.pi / 2 + 0.1) is True
    assert world.diagonal_walls(4, 3, math.pi + 0.1) is True
    assert world.diagonal_walls(1, 3, 3 * math.pi / 2 + 0.1) is True
    assert world.diagonal_walls(2, 2, math.pi + 0.1) is False


def test_diagonal_walls_at_edge(world):
    assert world.diagonal_walls(0, 1, 0.1) is False
    assert world.diagonal_walls(1, 0, 0.1) is False