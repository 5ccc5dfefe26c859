"""Human-readable listing of a parsed scene."""

from __future__ import annotations

from .scene import Scene
from .vector import Vec


def _vec(v: Vec) -> str:
    return f"({v.x:.2f}, {v.y:.2f}, {v.z:.2f})"


def _ambient(scene: Scene) -> list[str]:
    a = scene.ambient
    if a is None:
        return ["Ambient: (yok)"]
    return [
        "Ambient:",
        f"  ratio: {a.ratio:.2f}",
        f"  color: R={a.red} G={a.green} B={a.blue}",
    ]


def _camera(scene: Scene) -> list[str]:
    c = scene.camera
    if c is None:
        return ["Camera: (yok)"]
    return [
        "Camera:",
        f"  origin: {_vec(c.origin)}",
        f"  direction: {_vec(c.direction)}",
        f"  fov: {c.fov}",
    ]


def _light(scene: Scene) -> list[str]:
    light = scene.light
    if light is None:
        return ["Light: (yok)"]
    return [
        "Light:",
        f"  coord     : {_vec(light.center)}",
        f"  brightness: {light.brightness:.2f}",
        f"  color     : 0x{light.color:06X}",
    ]


def _spheres(scene: Scene) -> list[str]:
    if not scene.spheres:
        return ["Spheres: (yok)"]
    lines = ["Spheres:"]
    for index, s in enumerate(scene.spheres):
        lines += [
            f"  [{index}]",
            f"    center: {_vec(s.center)}",
            f"    radius: {s.radius:.2f}",
            f"    color : 0x{s.color:06X}",
        ]
    return lines


def _planes(scene: Scene) -> list[str]:
    if not scene.planes:
        return ["Planes: (yok)"]
    lines = ["Planes:"]
    for index, p in enumerate(scene.planes):
        lines += [
            f"  [{index}]",
            f"    point : {_vec(p.point)}",
            f"    normal: {_vec(p.normal)}",
            f"    color : 0x{p.color:06X}",
        ]
    return lines


def _cylinders(scene: Scene) -> list[str]:
    if not scene.cylinders:
        return ["Cylinders: (yok)"]
    lines = ["Cylinders:"]
    for index, c in enumerate(scene.cylinders):
        lines += [
            f"  [{index}]",
            f"    center: {_vec(c.center)}",
            f"    axis  : {_vec(c.axis)}",
            f"    diam  : {c.diameter:.2f}",
            f"    height: {c.height:.2f}",
            f"    color : 0x{c.color:06X}",
        ]
    return lines


def format_scene(scene: Scene | None) -> str:
    """Describe every element of ``scene``, one field per line."""
    if scene is None:
        return "(all yok)\n"
    lines = ["======== SCENE DUMP ========"]
    for section in (_ambient, _camera, _light, _spheres, _planes, _cylinders):
        lines += section(scene)
    lines.append("========  END DUMP  ========")
    return "\n".join(lines) + "\n"