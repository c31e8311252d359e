"""Reading a whole scene file into a :class:`SceneMap`."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .elements import read_elements
from .grid import build_layout
from .scene import ParseError, SceneMap

SCENE_EXTENSION = ".cub"


def check_scene_filename(filename: str) -> str:
    """Check that ``filename`` ends with the ``.cub`` extension and return it."""
    dot = filename.rfind(".")
    if dot < 0 or filename[dot:] != SCENE_EXTENSION:
        raise ParseError("Wrong filename, should be .cub")
    return filename


def parse_scene_lines(lines: Iterable[str]) -> SceneMap:
    """Parse the elements and the map from an iterable of lines."""
    remaining = iter(lines)
    textures, colors = read_elements(remaining)
    layout = build_layout(remaining)
    return SceneMap(
        textures=textures,
        colors=colors,
        width=layout.width,
        height=layout.height,
        cells=layout.cells,
        player_x=layout.player_x,
        player_y=layout.player_y,
        player_direction=layout.player_direction,
    )


def _split_lines(text: str) -> Iterator[str]:
    """Yield the lines of ``text``, each keeping its trailing newline."""
    parts = text.split("\n")
    for part in parts[:-1]:
        yield part + "\n"
    if parts[-1]:
        yield parts[-1]


def parse_scene(filename: str) -> SceneMap:
    """Read and parse the scene file ``filename``."""
    check_scene_filename(filename)
    try:
        with open(filename, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise ParseError(f"{filename}: {exc.strerror}") from exc
    except UnicodeDecodeError as exc:
        raise ParseError(f"{filename}: not a text file") from exc
    return parse_scene_lines(_split_lines(text))