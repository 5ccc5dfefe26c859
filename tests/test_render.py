import pytest

from minirt.hits import Ray
from minirt.parser import SceneError
from minirt.render import (
    calculate_pixel_color,
    clamp,
    compute_lighting,
    is_in_shadow,
    render,
    trace_ray,
    write_ppm,
)
from minirt.scene import Ambient, Camera, Cylinder, Light, Plane, Scene, Sphere
from minirt.vector import Vec


def _scene(light_center=Vec(0, 0, -20), ratio=1.0, brightness=0.6):
    return Scene(
        ambient=Ambient(ratio, 255, 255, 255),
        light=Light(light_center, brightness, 0xFFFFFF),
    )


def test_clamp_limits():
    assert clamp(300) == 255
    assert clamp(-5) == 0
    assert clamp(100) == 100


def test_pixel_color_full_intensity_keeps_color():
    assert calculate_pixel_color(0x123456, 1.0) == 0x123456


def test_pixel_color_zero_intensity_is_black():
    assert calculate_pixel_color(0xABCDEF, 0.0) == 0


def test_pixel_color_channels_saturate():
    color = calculate_pixel_color(0x808080, 5.0)
    for shift in (16, 8, 0):
        assert (color >> shift) & 0xFF == 255


def test_trace_ray_miss_is_black():
    ray = Ray(Vec(0, 0, 0), Vec(0, 0, -1))
    assert trace_ray(Scene(), ray) == 0


def test_trace_ray_ambient_only_sphere():
    scene = _scene()
    scene.spheres.append(Sphere(Vec(0, 0, -5), 1.0, 0x64C8FA))
    ray = Ray(Vec(0, 0, 0), Vec(0, 0, -1))
    assert trace_ray(scene, ray) == 0x64C8FA


def test_trace_ray_picks_nearest_object():
    scene = _scene(light_center=Vec(0, 0, -40))
    scene.spheres.append(Sphere(Vec(0, 0, -10), 1.0, 0x0000FF))
    scene.spheres.append(Sphere(Vec(0, 0, -5), 1.0, 0x00FF00))
    ray = Ray(Vec(0, 0, 0), Vec(0, 0, -1))
    assert trace_ray(scene, ray) == 0x00FF00


def test_trace_ray_plane():
    scene = _scene(light_center=Vec(0, -10, 0))
    scene.planes.append(Plane(Vec(0, -1, 0), Vec(0, 1, 0), 0x336699))
    ray = Ray(Vec(0, 0, 0), Vec(0, -1, 0))
    assert trace_ray(scene, ray) == 0x336699


def test_trace_ray_cylinder():
    scene = _scene()
    scene.cylinders.append(Cylinder(Vec(0, 0, 0), Vec(0, 1, 0), 2.0, 4.0, 0x445566))
    ray = Ray(Vec(0, 0, 5), Vec(0, 0, -1))
    assert trace_ray(scene, ray) == 0x445566


def test_shadow_blocked_and_clear():
    scene = Scene()
    scene.spheres.append(Sphere(Vec(0, 0, -5), 1.0, 0xFFFFFF))
    direction = Vec(0, 0, -1)
    assert is_in_shadow(scene, Vec(0, 0, 0), direction, 10.0) is True
    assert is_in_shadow(scene, Vec(0, 0, 0), direction, 3.0) is False
    assert is_in_shadow(scene, Vec(0, 0, 0), Vec(0, 0, 1), 10.0) is False


def test_lighting_brightens_lit_surface():
    normal = Vec(0, 0, 1)
    view = Vec(0, 0, 1)
    point = Vec(0, 0, 0)
    dark = compute_lighting(_scene(Vec(0, 0, 5), 0.2, 0.0), point, normal, 0x404040, view)
    lit = compute_lighting(_scene(Vec(0, 0, 5), 0.2, 0.5), point, normal, 0x404040, view)
    assert dark == calculate_pixel_color(0x404040, 0.2)
    assert (lit & 0xFF) > (dark & 0xFF)


def test_lighting_in_shadow_is_ambient_only():
    scene = _scene(Vec(0, 0, 10), 0.3, 0.9)
    scene.spheres.append(Sphere(Vec(0, 0, 5), 1.0, 0xFFFFFF))
    result = compute_lighting(scene, Vec(0, 0, 0), Vec(0, 0, 1), 0x808080, Vec(0, 0, 1))
    assert result == calculate_pixel_color(0x808080, 0.3)


def test_lighting_requires_ambient_and_light():
    with pytest.raises(SceneError):
        compute_lighting(Scene(), Vec(), Vec(0, 0, 1), 0xFFFFFF, Vec(0, 0, 1))
    scene = Scene(ambient=Ambient(0.1, 0, 0, 0))
    with pytest.raises(SceneError):
        compute_lighting(scene, Vec(), Vec(0, 0, 1), 0xFFFFFF, Vec(0, 0, 1))


def test_render_dimensions_and_hits():
    scene = _scene(Vec(0, 5, 5), 0.2, 0.6)
    scene.camera = Camera(Vec(0, 0, 5), Vec(0, 0, -1), 70)
    scene.spheres.append(Sphere(Vec(0, 0, 0), 1.0, 0xFF0000))
    image = render(scene, 5, 3)
    assert len(image) == 3
    assert all(len(row) == 5 for row in image)
    assert image[1][2] != 0
    assert image[1][2] & 0x00FFFF == 0
    assert image[0][0] == 0


def test_render_without_camera_fails():
    with pytest.raises(SceneError):
        render(Scene(), 4, 4)


def test_write_ppm(tmp_path):
    target = tmp_path / "image.ppm"
    write_ppm([[0xFF0000, 0x00FF00]], target)
    assert target.read_bytes() == b"P6\n2 1\n255\n\xff\x00\x00\x00\xff\x00"


def test_write_ppm_rejects_ragged_rows(tmp_path):
    with pytest.raises(ValueError):
        write_ppm([[0, 0], [0]], tmp_path / "bad.ppm")