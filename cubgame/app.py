"""The game window, its event handling and the command-line entry point."""

from __future__ import annotations

import sys
from collections.abc import Sequence

import pygame

from .parser import parse_scene
from .player import Action, Player
from .render import Framebuffer, draw_frame
from .scene import ParseError, SceneMap
from .world import Settings, World

_TITLE = "cub3d"
_FRAME_RATE = 60
_USAGE = "Usage : cubgame filename"

_KEY_ACTIONS = {
    pygame.K_w: Action.FORWARD,
    pygame.K_s: Action.BACKWARD,
    pygame.K_a: Action.LEFT,
    pygame.K_d: Action.RIGHT,
    pygame.K_LEFT: Action.ROTATE_LEFT,
    pygame.K_RIGHT: Action.ROTATE_RIGHT,
}


def action_for_key(key: int) -> Action | None:
    """Return the action bound to a pygame key code, if any."""
    return _KEY_ACTIONS.get(key)


class Game:
    """A running game: world, player, image and the main loop."""

    def __init__(self, scene: SceneMap, settings: Settings | None = None) -> None:
        self.world = World(scene, settings or Settings())
        self.player = Player.from_scene(scene, self.world.tile_size)
        self.framebuffer = Framebuffer(
            self.world.settings.width, self.world.settings.height
        )
        self.running = True
        draw_frame(self.world, self.player, self.framebuffer)

    def handle_event(self, event: pygame.event.Event) -> None:
        """Update key state, or stop the game on Escape or window close."""
        if event.type == pygame.QUIT:
            self.running = False
            return
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        if event.key == pygame.K_ESCAPE:
            self.running = False
            return
        action = action_for_key(event.key)
        if action is None:
            return
        if event.type == pygame.KEYDOWN:
            self.player.press(action)
        else:
            self.player.release(action)

    def tick(self) -> None:
        """Advance one frame: move the player and redraw."""
        self.player.update(self.world)
        draw_frame(self.world, self.player, self.framebuffer)

    def run(self) -> None:
        """Open the window and run until the player quits."""
        size = (self.framebuffer.width, self.framebuffer.height)
        pygame.init()
        try:
            screen = pygame.display.set_mode(size)
            pygame.display.set_caption(_TITLE)
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.tick()
                image = pygame.image.frombuffer(self.framebuffer.data, size, "RGB")
                screen.blit(image, (0, 0))
                pygame.display.flip()
                clock.tick(_FRAME_RATE)
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Load the scene named on the command line and play it."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        problem = "2 arguments needed" if not args else "Too many arguments"
        print(f"Error\n{problem}\n{_USAGE}", file=sys.stderr)
        return 1
    try:
        scene = parse_scene(args[0])
    except ParseError as exc:
        print(f"Error\n{exc}", file=sys.stderr)
        return 1
    Game(scene).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())