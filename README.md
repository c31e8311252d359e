# cubgame

A small raycasting explorer. It reads a scene description from a `.cub`
file, checks that the map is closed, and opens a window showing the map
from above: walls in blue, the player as a red square, and a fan of green
rays cast from the player across its field of view until each reaches a
wall.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Running

    cubgame path/to/scene.cub

Exactly one argument is expected, and the file name must end in `.cub`.
Any problem with the arguments or the file is reported on standard error
as `Error` followed by a description, and the command exits with status 1.

### Controls

| Key          | Action               |
|--------------|----------------------|
| W / S        | move forward / back  |
| A / D        | strafe left / right  |
| Left / Right | turn                 |
| Escape       | quit                 |

Closing the window also quits. Movement is blocked by walls, with a small
margin kept around the player.

## The scene file

The file starts with six elements, in any order, each on its own line;
blank lines between them are allowed:

    NO ./textures/north.xpm
    SO ./textures/south.xpm
    WE ./textures/west.xpm
    EA ./textures/east.xpm
    F 220,100,0
    C 225,30,0

- `NO`, `SO`, `WE`, `EA` name texture files. Each must end in `.xpm` and
  must exist and be readable.
- `F` (floor) and `C` (ceiling) are colours given as three numbers from
  0 to 255, digits only, separated by exactly two commas.
- Each element may appear only once and takes exactly one argument.

The map follows the elements, after any number of blank lines:

    111111
    100101
    1010N1
    111111

- `1` is a wall, `0` is open floor, spaces are outside the map.
- Exactly one of `N`, `S`, `E` or `W` marks the player's start and the
  direction they face.
- No other characters are allowed, and every open cell (including the
  player's) must be enclosed: it may not lie on the first or last map row
  or the first column, and may not touch a space or the end of a line.

## What it does not do

The view is a flat top-down map only; there is no first-person 3D view.
The texture files are checked for existence but never loaded, and the
floor and ceiling colours are parsed but not used in drawing.

## Using it as a library

    from cubgame.parser import parse_scene

    scene = parse_scene("maps/level.cub")
    print(scene.textures.north, scene.colors.floor)
    print(scene.player_x, scene.player_y, scene.player_direction)
    print(scene.is_wall_cell(0, 0))

- `cubgame.parser.parse_scene(filename)` reads a file;
  `parse_scene_lines(lines)` parses any iterable of lines. Both return a
  `cubgame.scene.SceneMap` and raise `cubgame.scene.ParseError` describing
  the first problem found.
- `cubgame.world.World(scene, settings)` computes the tile size for the
  window given by `cubgame.world.Settings` (1280×720 by default, along
  with speed, rotation speed, field of view and ray count) and answers
  collision queries through `is_wall`.
- `cubgame.player.Player.from_scene(scene, tile_size)` places the player;
  `press` / `release` take a `cubgame.player.Action`, and `update(world)`
  applies one frame of turning and movement.
- `cubgame.render` draws into an in-memory RGB `Framebuffer`:
  `cast_ray` returns a `RayHit`, and `draw_frame` redraws walls, player
  and rays.
- `cubgame.app.Game(scene)` ties these together; `run()` opens the pygame
  window and `main(argv)` is the command-line entry point.