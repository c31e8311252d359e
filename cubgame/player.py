"""The player: start position, key state and movement with collision."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, auto

from .scene import SceneMap
from .world import World

_TWO_PI = 2 * math.pi

_START_ANGLES = {
    "S": math.pi / 2,
    "N": math.pi * 3 / 2,
    "E": 0.0,
    "W": math.pi,
}


class Action(Enum):
    """Things the player can be told to do while a key is held."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()


def start_angle(direction: str) -> float:
    """Viewing angle for a start direction letter (y grows downwards)."""
    try:
        return _START_ANGLES[direction]
    except KeyError:
        raise ValueError(f"unknown direction {direction!r}") from None


@dataclass
class Player:
    """Position of the player's tile corner in pixels, and viewing angle."""

    x: float
    y: float
    angle: float
    pressed: set[Action] = field(default_factory=set)

    @classmethod
    def from_scene(cls, scene: SceneMap, tile_size: int) -> Player:
        """Place the player at the start cell of ``scene``."""
        return cls(
            x=float(scene.player_x * tile_size),
            y=float(scene.player_y * tile_size),
            angle=start_angle(scene.player_direction),
        )

    def press(self, action: Action) -> None:
        self.pressed.add(action)

    def release(self, action: Action) -> None:
        self.pressed.discard(action)

    def can_move(self, world: World, next_x: float, next_y: float) -> bool:
        """True if the player's centre may go to pixel position ``(next_x, next_y)``."""
        tile = world.tile_size
        settings = world.settings
        px = next_x / tile
        py = next_y / tile
        buffer = ((tile / settings.player_ratio) / 2.0 + settings.player_buffer) / tile
        offsets = (
            (0.0, 0.0),
            (buffer, 0.0),
            (-buffer, 0.0),
            (0.0, buffer),
            (0.0, -buffer),
            (buffer, buffer),
            (-buffer, buffer),
            (buffer, -buffer),
            (-buffer, -buffer),
        )
        return not any(
            world.is_wall(px + ox, py + oy, self.angle) for ox, oy in offsets
        )

    def step(self, world: World, dx: float, dy: float) -> bool:
        """Move by ``(dx, dy)`` times the speed if nothing blocks; report success."""
        speed = world.settings.speed
        half = world.tile_size // 2
        next_x = self.x + half + dx * speed
        next_y = self.y + half + dy * speed
        if not self.can_move(world, next_x, next_y):
            return False
        self.x += dx * speed
        self.y += dy * speed
        return True

    def update(self, world: World) -> None:
        """Apply one frame of rotation and movement for the held actions."""
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        rotation = world.settings.rotation_speed
        if Action.ROTATE_LEFT in self.pressed:
            self.angle -= rotation
        if Action.ROTATE_RIGHT in self.pressed:
            self.angle += rotation
        if self.angle < 0:
            self.angle += _TWO_PI
        if self.angle > _TWO_PI:
            self.angle -= _TWO_PI
        if Action.FORWARD in self.pressed:
            self.step(world, cos_a, sin_a)
        if Action.BACKWARD in self.pressed:
            self.step(world, -cos_a, -sin_a)
        if Action.LEFT in self.pressed:
            self.step(world, sin_a, -cos_a)
        if Action.RIGHT in self.pressed:
            self.step(world, -sin_a, cos_a)