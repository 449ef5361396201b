# raycaster

A small pure-Python renderer for triangle meshes and spheres. It has no dependencies beyond the standard library.

## Modules

- `raycaster.linalg`: the `Point`, `Vector` and 4×4 `Matrix` types, with `cross_product`, `dot_product` and `sgn`. `Matrix.inverted()` raises `SingularMatrixError` when the determinant is zero.
- `raycaster.color`: `Color` (RGB, channels 0.0–1.0) and `Material` (colour, reflection, refraction, transparency, smooth).
- `raycaster.structs`: `Ray`, `HitRecord` and `Triangle`. `Triangle.from_vertices` computes the face normal, and `Triangle.transformed` maps the vertices through a matrix.
- `raycaster.image`: `Image`, a pixel buffer that starts out white. It provides `set_value`, which ignores pixels outside the image, `get_value`, which raises `IndexError` for pixels outside the image, `to_ppm` and `write_ppm`. The last two produce plain-text PPM (`P3`).
- `raycaster.camera`: `Camera`, which builds primary rays with `get_ray(x, y)` once `set_size` has been called.
- `raycaster.model`: `Model`, a list of triangles with a material and a scale/rotation/translation transform. Rotation angles are given in degrees.
- `raycaster.sphere`: `Sphere`, with a position, a radius and a material.
- `raycaster.scene`:
  - `Scene` holds models, spheres, point lights and a camera. `Scene.intersect` returns the nearest `HitRecord` or `None`.
  - `Scene.load` adds one green model for each PLY file it is given.
  - `read_ply` reads ASCII and binary PLY meshes and splits polygons into triangle fans. It raises `PlyError` on malformed files.
  - `triangle_intersect` and `sphere_intersect` test a ray against a single triangle or a single sphere.
- `raycaster.wireframe`: `WireframeRenderer`, with Bresenham line drawing, triangle outlines of every model (`render_scene`) and a 4-connected seed fill.
- `raycaster.solid`: `SolidRenderer`, a ray caster with:
  - Phong shading (ambient 0.4, diffuse 0.4, specular 0.2, exponent 20)
  - hard shadows
  - mirror reflections up to two levels deep

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
raycaster output.ppm
```

This command builds a demo scene and writes the rendered image to `output.ppm`. The scene contains:

- a bunny mesh
- four cubes, one of them flattened into a floor
- two reflective spheres
- a surrounding room cube with inward normals
- one point light

The default image size is 1920×1080. Options:

- `--width`, `--height`: image size; both must be positive.
- `--bunny PATH`: the bunny mesh. Default: `../data/bunny/bunny_scaled.ply`.
- `--cube PATH`: the cube mesh. Default: `../data/basicObjects/cube_scaled.ply`.

If no output file is named, the scene is still rendered, an error is printed and nothing is written. If a mesh cannot be read, the command exits with status 1.

The mesh files are not included in the package; you must supply them. The `raycaster` command can also be called as `raycaster.cli.main(argv)`. `raycaster.cli.build_scene(bunny_path, cube_path, width, height)` returns the demo scene, image and camera without rendering them.

## Library use

```python
from raycaster.camera import Camera
from raycaster.color import Color, Material
from raycaster.image import Image
from raycaster.linalg import Point, Vector
from raycaster.scene import Scene
from raycaster.solid import SolidRenderer
from raycaster.sphere import Sphere

image = Image(320, 180)

camera = Camera()
camera.set_eye_point(Point(0.0, 0.0, 300.0))
camera.set_up(Vector(0.0, 1.0, 0.0))
camera.set_view_direction(Vector(0.0, 0.0, -1.0))
camera.set_size(image.width, image.height)

scene = Scene()
scene.camera = camera
scene.add_sphere(Sphere(radius=50.0, material=Material(color=Color(0.0, 0.0, 1.0))))
scene.add_point_light(Point(0.0, 200.0, 0.0))

SolidRenderer(scene, image, camera).render_raycast()
image.write_ppm("sphere.ppm")
```

PPM output lists the pixels last first. As a result, image pixel `(0, 0)` ends up in the bottom-right corner of the written picture. Colour channels are scaled from 0.0–1.0 to 0–255 and truncated.

## What it does not do

- Rendering runs single-threaded in pure Python, so full-size images take a long time.
- There is no window or preview.
- Output is plain-text PPM only.
- Mesh input is PLY only.
- Refraction and transparency values in `Material` are stored but not used when shading.