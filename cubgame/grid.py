"""Validation of the map section and construction of its cell grid."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import dropwhile

from .scene import (
    PLAYER_CHARS,
    WHITESPACE,
    Cell,
    CellKind,
    ParseError,
    is_blank,
    is_map_char,
    is_whitespace,
)

_OPEN_CHARS = "0" + PLAYER_CHARS


@dataclass(frozen=True)
class MapBounds:
    """Extent of the map: columns ``left`` to ``right`` (exclusive), ``rows`` rows."""

    left: int
    right: int
    rows: int

    @property
    def width(self) -> int:
        return self.right - self.left + 1

    @property
    def height(self) -> int:
        return self.rows + 1


@dataclass
class MapLayout:
    """Grid of cells together with the player's starting cell and direction."""

    width: int
    height: int
    cells: list[list[Cell]]
    player_x: int
    player_y: int
    player_direction: str


def collect_map_lines(lines: Iterable[str]) -> list[str]:
    """Return the lines from the first non-blank one onwards."""
    remaining = list(dropwhile(is_blank, lines))
    if not remaining:
        raise ParseError("No map was found")
    return remaining


def find_bounds(lines: list[str]) -> MapBounds:
    """Check the map characters and find the extent of the map."""
    left: int | None = None
    right = 0
    rows = 0
    has_wall = False
    for y, line in enumerate(lines):
        if not all(is_map_char(c) for c in line):
            raise ParseError(
                "The map has characters other than 1, 0, whitespace "
                "and player direction (N, E, S or W)"
            )
        content = line.rstrip(WHITESPACE)
        if not content:
            continue
        rows = y + 1
        has_wall = has_wall or "1" in content
        lead = len(content) - len(content.lstrip(WHITESPACE))
        left = lead if left is None else min(left, lead)
        right = max(right, len(content))
    if not has_wall or left is None:
        raise ParseError("No possible closed map found")
    return MapBounds(left, right, rows)


def _char_at(line: str, x: int) -> str:
    return line[x] if 0 <= x < len(line) else " "


def _is_enclosed(lines: list[str], bounds: MapBounds, x: int, y: int) -> bool:
    if y == 0 or y == bounds.rows - 1 or x == 0:
        return False
    neighbours = (
        _char_at(lines[y], x - 1),
        _char_at(lines[y], x + 1),
        _char_at(lines[y - 1], x),
        _char_at(lines[y + 1], x),
    )
    return not any(is_whitespace(c) for c in neighbours)


def _kind_of(c: str) -> CellKind:
    if c == "1":
        return CellKind.WALL
    if is_whitespace(c):
        return CellKind.VOID
    return CellKind.FLOOR


def build_layout(lines: Iterable[str]) -> MapLayout:
    """Validate the map section and build its cell grid."""
    map_lines = collect_map_lines(lines)
    bounds = find_bounds(map_lines)
    width = bounds.width
    cells: list[list[Cell]] = []
    player: tuple[int, int, str] | None = None
    for y in range(bounds.rows):
        line = map_lines[y]
        row: list[Cell] = []
        for x in range(bounds.left, bounds.right):
            c = _char_at(line, x)
            column = x - bounds.left
            if c in _OPEN_CHARS and not _is_enclosed(map_lines, bounds, x, y):
                raise ParseError("No possible closed map found")
            row.append(Cell(column, y, _kind_of(c)))
            if c in PLAYER_CHARS:
                if player is not None:
                    raise ParseError("Many players detected")
                player = (column, y, c)
        row.append(Cell(width - 1, y, CellKind.END))
        cells.append(row)
    cells.append([Cell(0, bounds.rows, CellKind.END)])
    if player is None:
        raise ParseError("No player detected")
    return MapLayout(
        width=width,
        height=bounds.height,
        cells=cells,
        player_x=player[0],
        player_y=player[1],
        player_direction=player[2],
    )