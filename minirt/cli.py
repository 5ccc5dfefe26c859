"""Command line: render a scene file to a PPM image and list its contents."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from pathlib import Path

from .dump import format_scene
from .parser import SceneError, check_arguments, load_scene
from .render import render, write_ppm
from .scene import HEIGHT, WIDTH


def _size(text: str) -> tuple[int, int]:
    try:
        width_text, height_text = text.lower().split("x")
        width, height = int(width_text), int(height_text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}") from exc
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"invalid size: {text!r}")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minirt", description="Render a .rt scene to a PPM image."
    )
    parser.add_argument("scene", nargs="*", help="scene description (.rt)")
    parser.add_argument(
        "--size",
        type=_size,
        default=(WIDTH, HEIGHT),
        help=f"image size as WIDTHxHEIGHT (default {WIDTH}x{HEIGHT})",
    )
    parser.add_argument(
        "-o", "--output", type=Path, help="image path (default: scene path with .ppm)"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the renderer; returns the process exit status."""
    options = _build_parser().parse_args(argv)
    try:
        path = check_arguments(options.scene)
    except SceneError as exc:
        print(exc)
        return 1

    try:
        scene = load_scene(path)
        if scene.camera is None:
            raise SceneError("missing camera")
        print("Camera setup completed.")
        width, height = options.size
        pixels = render(scene, width, height)
    except SceneError as exc:
        print(f"error: {exc}")
        return 1

    output = options.output or Path(path).with_suffix(".ppm")
    try:
        write_ppm(pixels, output)
    except OSError as exc:
        print(f"error: {exc}")
        return 1
    print(format_scene(scene), end="")
    return 0