"""Parsing of the texture and colour elements that precede the map."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from .scene import WHITESPACE, Colors, ElementKind, ParseError, Textures

_DIGITS = "0123456789"
_MAX_CHANNEL = 255


def split_fields(text: str, separators: str) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty fields."""
    return [
        "".join(chunk)
        for is_separator, chunk in groupby(text, key=lambda c: c in separators)
        if not is_separator
    ]


def parse_color(text: str) -> tuple[int, int, int]:
    """Parse an ``R,G,B`` colour with each channel in 0..255."""
    if text.count(",") != 2:
        raise ParseError("Wrong number of commas for colors")
    values: list[int] = []
    for index, part in enumerate(split_fields(text, ",")):
        if index == 3:
            raise ParseError("Too many colors")
        if not part or any(c not in _DIGITS for c in part):
            raise ParseError("Color has wrong format")
        value = int(part)
        if value > _MAX_CHANNEL:
            raise ParseError("Color has wrong format")
        values.append(value)
    if len(values) != 3:
        raise ParseError("Not enough colors")
    return (values[0], values[1], values[2])


def check_texture_path(path: str) -> str:
    """Check that ``path`` names a readable ``.xpm`` file and return it."""
    dot = path.rfind(".")
    if dot < 0 or path[dot:] != ".xpm":
        raise ParseError("Wrong texture filename, should be .xpm")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise ParseError(f"{path}: {exc.strerror}") from exc
    return path


def _element_kind(name: str, found: dict[ElementKind, object]) -> ElementKind:
    try:
        kind = ElementKind(name)
    except ValueError:
        raise ParseError("At least one element is incorrect") from None
    if kind in found:
        raise ParseError("At least one element is incorrect")
    return kind


def read_elements(lines: Iterable[str]) -> tuple[Textures, Colors]:
    """Read the six elements from ``lines``.

    Reading stops right after the last element, so when ``lines`` is an
    iterator the lines that follow remain available to the caller.
    """
    found: dict[ElementKind, object] = {}
    seen_line = False
    for line in lines:
        seen_line = True
        fields = split_fields(line, WHITESPACE)
        if not fields:
            continue
        kind = _element_kind(fields[0], found)
        if len(fields) != 2:
            raise ParseError(
                f"Incorrect argument(s) for texture or color {fields[0]}"
            )
        if kind.is_texture:
            found[kind] = check_texture_path(fields[1])
        else:
            found[kind] = parse_color(fields[1])
        if len(found) == len(ElementKind):
            return (
                Textures(
                    north=found[ElementKind.NORTH],
                    south=found[ElementKind.SOUTH],
                    east=found[ElementKind.EAST],
                    west=found[ElementKind.WEST],
                ),
                Colors(
                    ceiling=found[ElementKind.CEILING],
                    floor=found[ElementKind.FLOOR],
                ),
            )
    if not seen_line:
        raise ParseError("Empty file")
    raise ParseError("Missing texture or color element")