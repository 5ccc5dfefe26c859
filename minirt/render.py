"""Ray tracing: intersections, lighting and image output."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from os import PathLike

from .hits import EPSILON, Ray, hit_cylinder, hit_plane, hit_sphere
from .parser import SceneError
from .scene import HEIGHT, SHARPNESS, WIDTH, Cylinder, Plane, Scene, Sphere, create_trgb
from .vector import Vec

SURFACE_OFFSET = 0.0001


def clamp(value: int) -> int:
    """Limit a colour channel to the range 0 to 255."""
    return max(0, min(255, value))


def calculate_pixel_color(obj_color: int, intensity: float) -> int:
    """Scale each channel of ``obj_color`` by ``intensity``."""
    red = clamp(int(((obj_color >> 16) & 0xFF) * intensity))
    green = clamp(int(((obj_color >> 8) & 0xFF) * intensity))
    blue = clamp(int((obj_color & 0xFF) * intensity))
    return create_trgb(0, red, green, blue)


def _hits(scene: Scene, ray: Ray) -> Iterator[tuple[Sphere | Plane | Cylinder, float | None]]:
    for sphere in scene.spheres:
        yield sphere, hit_sphere(sphere, ray)
    for plane in scene.planes:
        yield plane, hit_plane(plane, ray)
    for cylinder in scene.cylinders:
        yield cylinder, hit_cylinder(cylinder, ray)


def is_in_shadow(scene: Scene, hit_point: Vec, light_dir: Vec, light_dist: float) -> bool:
    """Whether any object lies between ``hit_point`` and the light."""
    shadow_ray = Ray(hit_point, light_dir)
    return any(
        t is not None and EPSILON < t < light_dist
        for _, t in _hits(scene, shadow_ray)
    )


def compute_lighting(
    scene: Scene, hit_point: Vec, normal: Vec, obj_color: int, view_dir: Vec
) -> int:
    """Colour of a surface point under ambient, diffuse and specular light."""
    if scene.ambient is None:
        raise SceneError("missing ambient lighting")
    if scene.light is None:
        raise SceneError("missing light")
    light = scene.light
    intensity = scene.ambient.ratio

    light_vec = light.center - hit_point
    light_dist = light_vec.length()
    light_dir = light_vec.normalized()
    diffuse = normal.dot(light_dir)

    if diffuse > 0 and not is_in_shadow(scene, hit_point, light_dir, light_dist):
        intensity += light.brightness * diffuse
        reflect_dir = (normal * (2.0 * diffuse) - light_dir).normalized()
        specular = reflect_dir.dot(view_dir)
        if specular > 0:
            intensity += light.brightness * math.pow(specular, SHARPNESS)
    return calculate_pixel_color(obj_color, intensity)


def _surface_normal(obj: Sphere | Plane | Cylinder, point: Vec) -> Vec:
    if isinstance(obj, Sphere):
        return (point - obj.center).normalized()
    if isinstance(obj, Plane):
        return obj.normal
    offset = point - obj.center
    along_axis = obj.axis * obj.axis.dot(offset)
    return (offset - along_axis).normalized()


def trace_ray(scene: Scene, ray: Ray) -> int:
    """Colour seen along ``ray``; black when nothing is hit."""
    closest = math.inf
    hit_obj = None
    for obj, t in _hits(scene, ray):
        if t is not None and t > EPSILON and t < closest:
            closest = t
            hit_obj = obj
    if hit_obj is None:
        return 0x000000

    hit_point = ray.at(closest)
    normal = _surface_normal(hit_obj, hit_point)
    if ray.direction.dot(normal) > 0:
        normal = -normal
    hit_point = hit_point + normal * SURFACE_OFFSET
    view_dir = (-ray.direction).normalized()
    return compute_lighting(scene, hit_point, normal, hit_obj.color, view_dir)


def render(scene: Scene, width: int = WIDTH, height: int = HEIGHT) -> list[list[int]]:
    """Trace one ray per pixel and return rows of packed RGB colours."""
    camera = scene.camera
    if camera is None:
        raise SceneError("missing camera")
    camera.setup(width, height)
    image = []
    for y in range(height):
        p_y = camera.pixel_delta_v * float(y)
        row = []
        for x in range(width):
            p_x = camera.pixel_delta_u * float(x)
            pixel_center = camera.upper_left + (p_x + p_y)
            direction = (pixel_center - camera.origin).normalized()
            row.append(trace_ray(scene, Ray(camera.origin, direction)))
        image.append(row)
    return image


def write_ppm(pixels: Sequence[Sequence[int]], path: str | PathLike[str]) -> None:
    """Write rows of packed RGB colours as a binary PPM image."""
    height = len(pixels)
    width = len(pixels[0]) if pixels else 0
    if any(len(row) != width for row in pixels):
        raise ValueError("all rows must have the same length")
    data = bytearray(f"P6\n{width} {height}\n255\n".encode("ascii"))
    for row in pixels:
        for color in row:
            data += bytes(((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    with open(path, "wb") as handle:
        handle.write(data)