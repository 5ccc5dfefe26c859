"""Scene elements: ambient light, camera, light and the renderable objects."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .vector import Vec

WIDTH = 1920
HEIGHT = 1080
SHARPNESS = 100.0


def create_trgb(t: int, r: int, g: int, b: int) -> int:
    """Pack transparency and colour channels into one integer."""
    return t << 24 | r << 16 | g << 8 | b


@dataclass
class Ambient:
    """Ambient lighting ratio and colour."""

    ratio: float
    red: int
    green: int
    blue: int


@dataclass
class Camera:
    """Camera position, view direction and field of view in degrees.

    The viewport fields are filled in by :meth:`setup`.
    """

    origin: Vec
    direction: Vec
    fov: int
    viewport_u: Vec = field(default_factory=Vec, init=False)
    viewport_v: Vec = field(default_factory=Vec, init=False)
    pixel_delta_u: Vec = field(default_factory=Vec, init=False)
    pixel_delta_v: Vec = field(default_factory=Vec, init=False)
    upper_left: Vec = field(default_factory=Vec, init=False)

    def setup(self, width: int = WIDTH, height: int = HEIGHT) -> None:
        """Compute the viewport for an image of ``width`` x ``height`` pixels."""
        theta = math.radians(self.fov)
        viewport_height = 2.0 * math.tan(theta / 2.0)
        viewport_width = viewport_height * (width / height)

        w = (-self.direction).normalized()
        up_guide = Vec(0, 0, 1) if abs(w.y) > 0.999 else Vec(0, 1, 0)
        u = up_guide.cross(w).normalized()
        v = w.cross(u)

        self.viewport_u = u * viewport_width
        self.viewport_v = v * -viewport_height
        self.pixel_delta_u = self.viewport_u * (1.0 / width)
        self.pixel_delta_v = self.viewport_v * (1.0 / height)

        viewport_center = self.origin - w
        upper_left = viewport_center - self.viewport_u * 0.5 - self.viewport_v * 0.5
        half_pixel = self.pixel_delta_u * 0.5 + self.pixel_delta_v * 0.5
        self.upper_left = upper_left + half_pixel


@dataclass
class Light:
    """Point light with brightness ratio and packed RGB colour."""

    center: Vec
    brightness: float
    color: int


@dataclass
class Sphere:
    center: Vec
    radius: float
    color: int


@dataclass
class Plane:
    point: Vec
    normal: Vec
    color: int


@dataclass
class Cylinder:
    """Cylinder centred on ``center``, extending ``height / 2`` along ``axis`` each way."""

    center: Vec
    axis: Vec
    diameter: float
    height: float
    color: int


@dataclass
class Scene:
    """A whole scene.

    Object lists are kept in the order they are tested by the renderer;
    on equal distances the earlier object wins.
    """

    ambient: Ambient | None = None
    camera: Camera | None = None
    light: Light | None = None
    spheres: list[Sphere] = field(default_factory=list)
    planes: list[Plane] = field(default_factory=list)
    cylinders: list[Cylinder] = field(default_factory=list)