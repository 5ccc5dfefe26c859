from minirt.dump import format_scene
from minirt.scene import Ambient, Camera, Cylinder, Light, Plane, Scene, Sphere
from minirt.vector import Vec


def test_none_scene():
    assert format_scene(None) == "(all yok)\n"


def test_empty_scene():
    expected = (
        "======== SCENE DUMP ========\n"
        "Ambient: (yok)\n"
        "Camera: (yok)\n"
        "Light: (yok)\n"
        "Spheres: (yok)\n"
        "Planes: (yok)\n"
        "Cylinders: (yok)\n"
        "========  END DUMP  ========\n"
    )
    assert format_scene(Scene()) == expected


def test_full_scene_lines():
    scene = Scene(
        ambient=Ambient(0.2, 255, 255, 255),
        camera=Camera(Vec(-50, 0, 20), Vec(0, 0, 1), 70),
        light=Light(Vec(-40, 0, 30), 0.7, 0xFFFFFF),
        spheres=[Sphere(Vec(0, 0, 20), 10.0, 0xFF0000), Sphere(Vec(1, 1, 1), 1.0, 0x00FF00)],
        planes=[Plane(Vec(0, 0, 0), Vec(0, 1, 0), 0x0000FF)],
        cylinders=[Cylinder(Vec(50, 0, 20.6), Vec(0, 0, 1), 14.2, 21.42, 0x0A0000)],
    )
    lines = format_scene(scene).splitlines()
    assert lines[0] == "======== SCENE DUMP ========"
    assert lines[-1] == "========  END DUMP  ========"
    assert "  ratio: 0.20" in lines
    assert "  color: R=255 G=255 B=255" in lines
    assert "  fov: 70" in lines
    assert "  color     : 0xFFFFFF" in lines
    assert "    color : 0xFF0000" in lines
    assert "  [1]" in lines
    assert "    color : 0x0A0000" in lines
    assert "    height: 21.42" in lines


def test_sections_in_order():
    scene = Scene(
        ambient=Ambient(0.5, 1, 2, 3),
        planes=[Plane(Vec(), Vec(0, 0, 1), 0x111111)],
    )
    text = format_scene(scene)
    order = ["Ambient:", "Camera: (yok)", "Light: (yok)", "Spheres: (yok)", "Planes:", "Cylinders: (yok)"]
    positions = [text.index(label) for label in order]
    assert positions == sorted(positions)