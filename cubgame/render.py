"""Top-down drawing of the map, the player and the field of view rays."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .player import Player
from .world import World

WALL_COLOR = 0x0000FF
PLAYER_COLOR = 0xFF0000
RAY_COLOR = 0x00FF00


def _rgb(color: int) -> bytes:
    return (color & 0xFFFFFF).to_bytes(3, "big")


class Framebuffer:
    """An RGB image in memory, addressed by pixel coordinates."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("framebuffer size must be positive")
        self.width = width
        self.height = height
        self._data = bytearray(width * height * 3)

    @property
    def data(self) -> bytearray:
        """Raw RGB bytes, row by row."""
        return self._data

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _offset(self, x: int, y: int) -> int:
        return (y * self.width + x) * 3

    def put_pixel(self, x: float, y: float, color: int) -> None:
        """Set one pixel; positions outside the image are ignored."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return
        offset = self._offset(x, y)
        self._data[offset:offset + 3] = _rgb(color)

    def pixel(self, x: int, y: int) -> int:
        """Return the colour of a pixel as ``0xRRGGBB``."""
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        offset = self._offset(x, y)
        return int.from_bytes(self._data[offset:offset + 3], "big")

    def clear(self) -> None:
        """Paint the whole image black."""
        self._data[:] = bytes(len(self._data))

    def fill_square(self, x: float, y: float, size: int, color: int) -> None:
        """Fill a square whose top-left corner is ``(x, y)``, clipped to the image."""
        x, y = int(x), int(y)
        left, right = max(x, 0), min(x + size, self.width)
        top, bottom = max(y, 0), min(y + size, self.height)
        if left >= right or top >= bottom:
            return
        run = _rgb(color) * (right - left)
        for row in range(top, bottom):
            start = self._offset(left, row)
            self._data[start:start + len(run)] = run


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped: the map cell hit, the side crossed, and the length.

    ``side`` is 0 when the ray entered the cell across a vertical grid line
    and 1 across a horizontal one.
    """

    map_x: int
    map_y: int
    side: int
    distance: float


def _unit_step(direction: float, tile: int) -> float:
    if direction == 0:
        return math.inf
    return abs(1.0 / direction) * tile


def cast_ray(world: World, origin_x: float, origin_y: float, angle: float) -> RayHit:
    """Walk a ray from pixel ``(origin_x, origin_y)`` through the grid until a wall."""
    tile = world.tile_size
    x_dir = math.cos(angle)
    y_dir = math.sin(angle)
    map_x = int(origin_x / tile)
    map_y = int(origin_y / tile)
    delta_x = _unit_step(x_dir, tile)
    delta_y = _unit_step(y_dir, tile)
    if x_dir < 0:
        step_x = -1
        dist_x = (origin_x - map_x * tile) / tile * delta_x
    else:
        step_x = 1
        dist_x = ((map_x + 1) * tile - origin_x) / tile * delta_x
    if y_dir < 0:
        step_y = -1
        dist_y = (origin_y - map_y * tile) / tile * delta_y
    else:
        step_y = 1
        dist_y = ((map_y + 1) * tile - origin_y) / tile * delta_y
    while True:
        if dist_x < dist_y:
            dist_x += delta_x
            map_x += step_x
            side = 0
        else:
            dist_y += delta_y
            map_y += step_y
            side = 1
        if world.is_wall(map_x, map_y, angle):
            break
    distance = dist_x - delta_x if side == 0 else dist_y - delta_y
    return RayHit(map_x, map_y, side, distance)


def draw_walls(world: World, framebuffer: Framebuffer) -> None:
    """Draw every non-floor cell of the map as a blue square."""
    scene = world.scene
    tile = world.tile_size
    for y in range(scene.height - 1):
        for x in range(scene.width - 1):
            if scene.is_wall_cell(x, y):
                framebuffer.fill_square(x * tile, y * tile, tile, WALL_COLOR)


def draw_player(world: World, player: Player, framebuffer: Framebuffer) -> None:
    """Draw the player as a red square centred in its tile."""
    tile = world.tile_size
    size = tile // world.settings.player_ratio
    offset = (tile - size) // 2
    for dy in range(size):
        for dx in range(size):
            framebuffer.put_pixel(
                player.x + dx + offset, player.y + dy + offset, PLAYER_COLOR
            )


def _draw_ray(world: World, player: Player, framebuffer: Framebuffer, angle: float) -> None:
    half = world.tile_size // 2
    x = player.x + half
    y = player.y + half
    hit = cast_ray(world, x, y, angle)
    x_dir = math.cos(angle)
    y_dir = math.sin(angle)
    for _ in range(int(hit.distance)):
        framebuffer.put_pixel(x, y, RAY_COLOR)
        x += x_dir
        y += y_dir


def draw_rays(world: World, player: Player, framebuffer: Framebuffer) -> None:
    """Draw the fan of rays covering the player's field of view."""
    settings = world.settings
    first = player.angle - settings.fov / 2
    spacing = settings.fov / settings.ray_count
    for index in range(settings.ray_count):
        _draw_ray(world, player, framebuffer, first + index * spacing)


def draw_frame(world: World, player: Player, framebuffer: Framebuffer) -> None:
    """Redraw the whole view from scratch."""
    framebuffer.clear()
    draw_walls(world, framebuffer)
    draw_player(world, player, framebuffer)
    draw_rays(world, player, framebuffer)