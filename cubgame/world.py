"""The playing field: map geometry, tile size and wall collision."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .scene import SceneMap

_HALF_PI = math.pi / 2
_TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class Settings:
    """Window size and tuning values of the game."""

    width: int = 1280
    height: int = 720
    player_ratio: int = 4
    player_buffer: float = 1.0
    speed: float = 2.0
    rotation_speed: float = 0.03
    fov: float = math.pi / 3
    ray_count: int = 60


def compute_tile_size(
    screen_width: int, screen_height: int, map_width: int, map_height: int
) -> int:
    """Largest square tile that fits the map on the screen."""
    return min(screen_width // (map_width - 1), screen_height // (map_height - 1))


def _quadrant(angle: float) -> int | None:
    if 0 <= angle < _HALF_PI:
        return 0
    if _HALF_PI <= angle < math.pi:
        return 1
    if math.pi <= angle < 3 * _HALF_PI:
        return 2
    if 3 * _HALF_PI <= angle < _TWO_PI:
        return 3
    return None


@dataclass
class World:
    """A parsed scene together with the settings used to display it."""

    scene: SceneMap
    settings: Settings = field(default_factory=Settings)
    tile_size: int = field(init=False)

    def __post_init__(self) -> None:
        self.tile_size = compute_tile_size(
            self.settings.width,
            self.settings.height,
            self.scene.width,
            self.scene.height,
        )

    def _solid(self, x: int, y: int) -> bool:
        return self.scene.is_wall_cell(x, y)

    def is_wall(self, x: float, y: float, angle: float) -> bool:
        """True if the map position ``(x, y)`` blocks movement or rays."""
        if (
            x < 0
            or y < 0
            or x > self.scene.width - 1
            or y > self.scene.height - 1
        ):
            return True
        if self._solid(int(x), int(y)):
            return True
        return self.near_corner(x, y, angle) and self.diagonal_walls(
            int(x), int(y), angle
        )

    def near_corner(self, x: float, y: float, angle: float) -> bool:
        """True if the position lies near the tile corner the angle points to."""
        tile = self.tile_size
        local_x = math.fmod(x, tile)
        local_y = math.fmod(y, tile)
        margin = 0.1 * tile
        quadrant = _quadrant(angle)
        if quadrant == 0:
            return local_x < margin and local_y < margin
        if quadrant == 1:
            return local_x > tile - margin and local_y < margin
        if quadrant == 2:
            return local_x > tile - margin and local_y > tile - margin
        if quadrant == 3:
            return local_x < margin and local_y > tile - margin
        return False

    def diagonal_walls(self, mx: int, my: int, angle: float) -> bool:
        """True if the two walls around the corner the angle points to are solid."""
        height = self.scene.height - 1
        width = self.scene.width - 1
        solid = self._solid
        quadrant = _quadrant(angle)
        if quadrant == 0:
            return mx > 0 and my > 0 and solid(mx - 1, my) and solid(mx, my - 1)
        if quadrant == 1:
            return (
                mx < width - 1
                and my > 0
                and solid(mx + 1, my)
                and solid(mx, my - 1)
            )
        if quadrant == 2:
            return (
                mx < width - 1
                and my < height - 1
                and solid(mx, my + 1)
                and solid(mx + 1, my)
            )
        if quadrant == 3:
            return (
                mx > 0
                and my < height - 1
                and solid(mx - 1, my)
                and solid(mx, my + 1)
            )
        return False