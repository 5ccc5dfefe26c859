"""Reading ``.rt`` scene descriptions into :class:`~minirt.scene.Scene` objects.

Numeric fields are validated by kind:

* ``"r"`` / ``"b"``: ratios and brightness, from 0.0 to 1.0
* ``"c"``: coordinates (for floats, -50.0 to 50.0) or colour channels
  (for integers, 0 to 255)
* ``"v"``: vector components, from -1.0 to 1.0
* ``"d"``: field-of-view degrees, from 0 to 180
* anything else (``"e"`` for sizes): no range check
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from os import PathLike

from .scene import (
    Ambient,
    Camera,
    Cylinder,
    Light,
    Plane,
    Scene,
    Sphere,
    create_trgb,
)
from .vector import Vec

_WHITESPACE = "[\t\n\v\f\r ]*"
_FLOAT_RE = re.compile(_WHITESPACE + r"([+-]?)([0-9]*)(?:\.([0-9]*))?")
_INT_RE = re.compile(_WHITESPACE + r"([+-]?)([0-9]*)")


class SceneError(ValueError):
    """Raised for invalid command-line arguments or scene content."""


def check_arguments(argv: Sequence[str]) -> str:
    """Validate the command-line arguments and return the scene path.

    ``argv`` holds the arguments without the program name.
    """
    if len(argv) != 1:
        raise SceneError("Error: invalid argument size")
    path = argv[0]
    tail = path[-3:].rjust(3, "\0")
    if tail[2] != "t" and tail[1] != "r" and tail[0] != ".":
        raise SceneError("Error: Wrong file name")
    try:
        with open(path, "rb"):
            pass
    except OSError as exc:
        raise SceneError("Error: Cannot open file") from exc
    return path


def _check_float(number: float, kind: str) -> None:
    if kind in ("r", "b"):
        if not 0.0 <= number <= 1.0:
            raise SceneError("invalid ratio value")
    elif kind == "c":
        if not -50.0 <= number <= 50.0:
            raise SceneError("invalid coordinate value")
    elif kind == "v":
        if not -1.0 <= number <= 1.0:
            raise SceneError("invalid vector value")


def _check_int(number: int, kind: str) -> None:
    if kind == "c":
        if not 0 <= number <= 255:
            raise SceneError("invalid number value")
    elif not 0 <= number <= 180:
        raise SceneError("invalid view degrees")


def parse_float(text: str, kind: str) -> float:
    """Read the leading decimal number of ``text`` and range-check it.

    Leading whitespace and one sign are accepted; anything after the number
    is ignored, and text without digits reads as zero.
    """
    match = _FLOAT_RE.match(text)
    sign, whole, fraction = match.group(1), match.group(2), match.group(3)
    value = float(f"{whole or '0'}.{fraction or '0'}")
    if sign == "-":
        value = -value
    _check_float(value, kind)
    return value


def parse_int(text: str, kind: str) -> int:
    """Read the leading integer of ``text`` and range-check it."""
    match = _INT_RE.match(text)
    sign, digits = match.group(1), match.group(2)
    value = int(digits) if digits else 0
    if sign == "-":
        value = -value
    _check_int(value, kind)
    return value


def _split(text: str, separator: str) -> list[str]:
    if not text:
        raise SceneError(" ")
    return [part for part in text.split(separator) if part]


def _triplet(text: str, message: str) -> list[str]:
    parts = _split(text, ",")
    if len(parts) != 3:
        raise SceneError(message)
    return parts


def parse_rgb(text: str) -> tuple[int, int, int]:
    """Parse ``"R,G,B"`` with each channel from 0 to 255."""
    red, green, blue = (
        parse_int(part, "c") for part in _triplet(text, "invalid argument size")
    )
    return red, green, blue


def parse_coord(text: str) -> Vec:
    """Parse ``"x,y,z"`` coordinates, each from -50 to 50."""
    x, y, z = (
        parse_float(part, "c")
        for part in _triplet(text, "invalid coord argument size")
    )
    return Vec(x, y, z)


def parse_vector(text: str) -> Vec:
    """Parse ``"x,y,z"`` direction components, each from -1 to 1."""
    x, y, z = (
        parse_float(part, "v")
        for part in _triplet(text, "invalid vector argument size")
    )
    return Vec(x, y, z)


def _color(text: str) -> int:
    return create_trgb(0, *parse_rgb(text))


def _expect_count(args: Sequence[str], count: int, message: str) -> None:
    if len(args) != count:
        raise SceneError(message)


def _parse_ambient(args: Sequence[str], scene: Scene) -> None:
    if scene.ambient is not None:
        raise SceneError("too many ambient size")
    _expect_count(args, 3, "invalid argument size")
    ratio = parse_float(args[1], "r")
    red, green, blue = parse_rgb(args[2])
    scene.ambient = Ambient(ratio, red, green, blue)


def _parse_camera(args: Sequence[str], scene: Scene) -> None:
    if scene.camera is not None:
        raise SceneError("too many camera definition")
    _expect_count(args, 4, "invalid camera argument size")
    origin = parse_coord(args[1])
    direction = parse_vector(args[2])
    fov = parse_int(args[3], "d")
    scene.camera = Camera(origin, direction, fov)


def _parse_light(args: Sequence[str], scene: Scene) -> None:
    if scene.light is not None:
        raise SceneError("too many light definition")
    _expect_count(args, 4, "invalid light argument size")
    center = parse_coord(args[1])
    brightness = parse_float(args[2], "b")
    scene.light = Light(center, brightness, _color(args[3]))


def _parse_sphere(args: Sequence[str], scene: Scene) -> None:
    _expect_count(args, 4, "invalid sphere argument size")
    center = parse_coord(args[1])
    radius = parse_float(args[2], "e") / 2.0
    scene.spheres.insert(0, Sphere(center, radius, _color(args[3])))


def _parse_plane(args: Sequence[str], scene: Scene) -> None:
    _expect_count(args, 4, "invalid plane argument size")
    point = parse_coord(args[1])
    normal = parse_vector(args[2])
    scene.planes.insert(0, Plane(point, normal, _color(args[3])))


def _parse_cylinder(args: Sequence[str], scene: Scene) -> None:
    _expect_count(args, 6, "invalid cylinder argument size")
    center = parse_coord(args[1])
    axis = parse_vector(args[2])
    diameter = parse_float(args[3], "e")
    height = parse_float(args[4], "e")
    scene.cylinders.insert(
        0, Cylinder(center, axis, diameter, height, _color(args[5]))
    )


_ELEMENTS = {
    "A": _parse_ambient,
    "C": _parse_camera,
    "L": _parse_light,
    "sp": _parse_sphere,
    "pl": _parse_plane,
    "cy": _parse_cylinder,
}


def parse_element(args: Sequence[str], scene: Scene) -> None:
    """Add the element described by the tokens ``args`` to ``scene``.

    Objects are put in front of those already read, so later lines are
    tested first by the renderer.
    """
    handler = _ELEMENTS.get(args[0]) if args else None
    if handler is None:
        raise SceneError("invalid element name")
    handler(args, scene)


def parse_scene(lines: Iterable[str]) -> Scene:
    """Build a scene from lines of text; empty lines are skipped.

    Only the text before a newline counts, and tokens are separated by spaces.
    """
    scene = Scene()
    for raw in lines:
        line = raw.split("\n", 1)[0]
        if not line:
            continue
        parse_element(_split(line, " "), scene)
    return scene


def load_scene(path: str | PathLike[str]) -> Scene:
    """Read and parse the scene file at ``path``."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise SceneError("Error: Cannot open file") from exc
    return parse_scene(text.split("\n"))