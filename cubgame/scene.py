"""Scene description types shared by the parser and the game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

WHITESPACE = " \t\r\n\v\f"
PLAYER_CHARS = "NESW"
MAP_CHARS = "01" + PLAYER_CHARS


class ParseError(ValueError):
    """Raised when a scene description is invalid."""


class ElementKind(Enum):
    """Identifiers of the texture and colour elements of a scene file."""

    NORTH = "NO"
    SOUTH = "SO"
    EAST = "EA"
    WEST = "WE"
    CEILING = "C"
    FLOOR = "F"

    @property
    def is_texture(self) -> bool:
        return self in (
            ElementKind.NORTH,
            ElementKind.SOUTH,
            ElementKind.EAST,
            ElementKind.WEST,
        )


class CellKind(IntEnum):
    """What occupies a cell of the parsed map."""

    END = -1
    FLOOR = 0
    WALL = 1
    VOID = 2


@dataclass(frozen=True)
class Textures:
    """Paths of the four wall textures."""

    north: str
    south: str
    east: str
    west: str


@dataclass(frozen=True)
class Colors:
    """RGB colours of the ceiling and the floor."""

    ceiling: tuple[int, int, int]
    floor: tuple[int, int, int]


@dataclass(frozen=True)
class Cell:
    """One cell of the map, with its own coordinates."""

    x: int
    y: int
    kind: CellKind


@dataclass
class SceneMap:
    """A fully parsed scene: textures, colours, map cells and player start."""

    textures: Textures
    colors: Colors
    width: int
    height: int
    cells: list[list[Cell]]
    player_x: int
    player_y: int
    player_direction: str

    def cell(self, x: int, y: int) -> Cell:
        """Return the cell at column ``x`` of row ``y``."""
        if x < 0 or y < 0:
            raise IndexError(f"cell ({x}, {y}) is outside the map")
        try:
            return self.cells[y][x]
        except IndexError:
            raise IndexError(f"cell ({x}, {y}) is outside the map") from None

    def is_wall_cell(self, x: int, y: int) -> bool:
        """True unless the cell is walkable floor; outside the map counts as wall."""
        try:
            return self.cell(x, y).kind is not CellKind.FLOOR
        except IndexError:
            return True


def is_whitespace(c: str) -> bool:
    """True for the six ASCII whitespace characters."""
    return len(c) == 1 and c in WHITESPACE


def is_map_char(c: str) -> bool:
    """True for characters allowed in the map section."""
    return (len(c) == 1 and c in MAP_CHARS) or is_whitespace(c)


def is_blank(line: str) -> bool:
    """True if the line holds nothing but whitespace."""
    return all(is_whitespace(c) for c in line)