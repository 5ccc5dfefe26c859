# minirt

A small ray tracer written in pure Python with no dependencies. It reads
a scene description in the `.rt` format and renders spheres, planes and
cylinders. Lighting is an ambient term plus diffuse and specular
(Phong-style) light from a single point light, and objects cast hard
shadows. Images are written as binary PPM files.

## Installation

```
pip install .
```

## Usage

```
minirt scene.rt
```

The command takes exactly one scene path. It prints
`Camera setup completed.`, renders the scene, writes the image next to
the scene file with the suffix changed to `.ppm`, and then prints a
listing of the parsed scene.

Options:

- `--size WIDTHxHEIGHT` – image size in pixels (default `1920x1080`).
- `-o PATH`, `--output PATH` – where to write the PPM image.

If the arguments are wrong, the file cannot be opened, or the scene is
invalid, the error message is printed and the command exits with
status 1. Rendering is done one ray per pixel in pure Python, so large
images take a while; a smaller `--size` is useful for previews.

## Scene format

Each non-empty line describes one element. Fields are separated by
spaces. Positions, directions and colours are comma-separated triples.

| Id   | Fields                                                          |
|------|-----------------------------------------------------------------|
| `A`  | ratio (0–1), colour `r,g,b`                                     |
| `C`  | position `x,y,z`, direction `x,y,z`, FOV in degrees (0–180)     |
| `L`  | position `x,y,z`, brightness (0–1), colour `r,g,b`              |
| `sp` | centre `x,y,z`, diameter, colour `r,g,b`                        |
| `pl` | point `x,y,z`, normal `x,y,z`, colour `r,g,b`                   |
| `cy` | centre `x,y,z`, axis `x,y,z`, diameter, height, colour `r,g,b`  |

Rules checked by the parser:

- At most one `A`, one `C` and one `L`; each line must have exactly the
  number of fields shown.
- Coordinates lie in [-50, 50], direction components in [-1, 1], colour
  channels in [0, 255].
- Numbers are read from the start of each field; text after the number
  is ignored and a field without digits reads as zero.

A cylinder's centre is its middle: it extends `height / 2` along the
axis in each direction. Every scene to be rendered needs a camera, and
needs `A` and `L` as soon as a ray hits an object.

Example:

```
A 0.2 255,255,255
C 0,0,-10 0,0,1 70
L -10,10,-10 0.7 255,255,255
sp 0,0,0 4 255,0,0
pl 0,-2,0 0,1,0 200,200,200
cy 3,0,2 0,1,0 1.5 4 0,0,255
```

## Library use

```python
from minirt.parser import load_scene
from minirt.render import render, write_ppm
from minirt.dump import format_scene

scene = load_scene("scene.rt")
pixels = render(scene, 640, 360)   # rows of packed 0xRRGGBB integers
write_ppm(pixels, "scene.ppm")
print(format_scene(scene), end="")
```

Modules:

- `minirt.vector` – the immutable `Vec` type (`+`, `-`, `*`, unary `-`,
  `dot`, `cross`, `length`, `normalized`).
- `minirt.scene` – `Scene`, `Ambient`, `Camera`, `Light`, `Sphere`,
  `Plane`, `Cylinder` and `create_trgb`.
- `minirt.hits` – `Ray` and `hit_sphere`, `hit_plane`, `hit_cylinder`,
  each returning the ray parameter of the hit or `None`.
- `minirt.parser` – `load_scene`, `parse_scene`, `parse_element` and the
  field parsers; invalid input raises `SceneError` (a `ValueError`).
- `minirt.render` – `trace_ray`, `compute_lighting`, `is_in_shadow`,
  `render` and `write_ppm`.
- `minirt.dump` – `format_scene`, a text listing of a scene.

## What it does not do

- It does not open a window or show the image; it only writes PPM files.
- Cylinder caps are not drawn: only the curved side is hit, so an open
  cylinder shows its inner wall.
- There is a single point light. The colours given for `A` and `L` are
  parsed and listed, but only the ambient ratio and the light brightness
  affect the rendered image.
- No anti-aliasing, reflections or refraction.