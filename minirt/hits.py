"""Ray intersection tests for spheres, planes and cylinders."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .scene import Cylinder, Plane, Sphere
from .vector import Vec

EPSILON = 0.001
PARALLEL_EPSILON = 1e-6


@dataclass(frozen=True)
class Ray:
    origin: Vec
    direction: Vec

    def at(self, t: float) -> Vec:
        """Point reached after travelling ``t`` along the ray."""
        return self.origin + self.direction * t


def hit_sphere(sphere: Sphere, ray: Ray) -> float | None:
    """Nearest positive ray parameter hitting ``sphere``, or ``None``."""
    oc = ray.origin - sphere.center
    a = ray.direction.dot(ray.direction)
    b = 2.0 * oc.dot(ray.direction)
    c = oc.dot(oc) - sphere.radius * sphere.radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0 or a == 0:
        return None
    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2.0 * a)
    t2 = (-b + root) / (2.0 * a)
    if t1 > 0.0:
        return t1
    if t2 > 0.0:
        return t2
    return None


def hit_plane(plane: Plane, ray: Ray) -> float | None:
    """Ray parameter where ``ray`` meets ``plane`` in front of it, or ``None``."""
    denom = plane.normal.dot(ray.direction)
    if abs(denom) < PARALLEL_EPSILON:
        return None
    t = (plane.point - ray.origin).dot(plane.normal) / denom
    if t < EPSILON:
        return None
    return t


def _within_height(cylinder: Cylinder, ray: Ray, t: float) -> bool:
    offset = ray.at(t) - cylinder.center
    return abs(offset.dot(cylinder.axis)) <= cylinder.height / 2.0


def hit_cylinder(cylinder: Cylinder, ray: Ray) -> float | None:
    """Nearest ray parameter hitting the cylinder's side, or ``None``.

    Caps are not hit; if the entry point is behind the ray or outside the
    height, the exit point (the inner wall) is tried.
    """
    oc = ray.origin - cylinder.center
    dir_axis = ray.direction.dot(cylinder.axis)
    oc_axis = oc.dot(cylinder.axis)
    radius = cylinder.diameter / 2

    a = ray.direction.dot(ray.direction) - dir_axis * dir_axis
    b = 2 * (ray.direction.dot(oc) - dir_axis * oc_axis)
    c = oc.dot(oc) - oc_axis * oc_axis - radius * radius
    discriminant = b * b - 4 * a * c
    if discriminant < 0 or a == 0:
        return None

    root = math.sqrt(discriminant)
    t1 = (-b - root) / (2 * a)
    t2 = (-b + root) / (2 * a)
    for t in (t1, t2):
        if t > EPSILON and _within_height(cylinder, ray, t):
            return t
    return None