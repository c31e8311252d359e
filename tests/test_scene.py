import pytest

from cubgame.scene import (
    Cell,
    CellKind,
    Colors,
    SceneMap,
    Textures,
    is_blank,
    is_map_char,
    is_whitespace,
)


@pytest.fixture
def scene():
    cells = [
        [
            Cell(0, 0, CellKind.WALL),
            Cell(1, 0, CellKind.FLOOR),
            Cell(2, 0, CellKind.VOID),
            Cell(3, 0, CellKind.END),
        ],
        [Cell(0, 1, CellKind.END)],
    ]
    return SceneMap(
        textures=Textures("n.xpm", "s.xpm", "e.xpm", "w.xpm"),
        colors=Colors((1, 2, 3), (4, 5, 6)),
        width=4,
        height=2,
        cells=cells,
        player_x=1,
        player_y=0,
        player_direction="N",
    )


@pytest.mark.parametrize("c", [" ", "\t", "\r", "\n", "\v", "\f"])
def test_whitespace_characters(c):
    assert is_whitespace(c) is True


@pytest.mark.parametrize("c", ["a", "0", "1", "N", ""])
def test_non_whitespace_characters(c):
    assert is_whitespace(c) is False


@pytest.mark.parametrize("c", ["0", "1", "N", "E", "S", "W", " ", "\n"])
def test_map_characters_accepted(c):
    assert is_map_char(c) is True


@pytest.mark.parametrize("c", ["2", "X", "n", "#"])
def test_map_characters_rejected(c):
    assert is_map_char(c) is False


def test_is_blank():
    assert is_blank("") is True
    assert is_blank(" \t\n") is True
    assert is_blank("  1 ") is False


def test_cell_lookup(scene):
    assert scene.cell(1, 0) == Cell(1, 0, CellKind.FLOOR)
    assert scene.cell(0, 1).kind is CellKind.END


def test_cell_out_of_range_raises(scene):
    with pytest.raises(IndexError):
        scene.cell(-1, 0)
    with pytest.raises(IndexError):
        scene.cell(1, 1)
    with pytest.raises(IndexError):
        scene.cell(0, 5)


def test_is_wall_cell(scene):
    assert scene.is_wall_cell(1, 0) is False
    assert scene.is_wall_cell(0, 0) is True
    assert scene.is_wall_cell(2, 0) is True
    assert scene.is_wall_cell(3, 0) is True
    assert scene.is_wall_cell(7, 7) is True
    assert scene.is_wall_cell(-1, 0) is True