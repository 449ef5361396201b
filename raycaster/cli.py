"""Command line entry point that builds the demo scene and renders it."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from .camera import Camera
from .color import Color, Material
from .image import Image
from .linalg import Point, Vector
from .model import Model
from .scene import PlyError, Scene
from .solid import SolidRenderer
from .sphere import Sphere
from .structs import Triangle

DEFAULT_WIDTH = 1920
DEFAULT_HEIGHT = 1080
DEFAULT_BUNNY = "../data/bunny/bunny_scaled.ply"
DEFAULT_CUBE = "../data/basicObjects/cube_scaled.ply"

EYE_POINT = Point(0.0, 0.0, 300.0)
LIGHT_POSITION = Point(0.0, 200.0, 0.0)


def _inward_copy(triangles: Sequence[Triangle]) -> List[Triangle]:
    """The same triangles with their normals pointing the other way."""
    return [Triangle(t.vertices, -t.normal) for t in triangles]


def build_scene(
    bunny_path: Union[str, Path],
    cube_path: Union[str, Path],
    width: int,
    height: int,
) -> Tuple[Scene, Image, Camera]:
    """Load the bunny and cube meshes and arrange the demo scene.

    Returns the scene, an image of the given size and the camera.
    """
    image = Image(width, height)
    scene = Scene()
    scene.load([bunny_path, cube_path])

    cube = scene.models[1]
    for _ in range(3):
        scene.add_model(cube.copy())

    camera = Camera()
    camera.set_eye_point(EYE_POINT)
    camera.set_up(Vector(0.0, 1.0, 0.0))
    camera.set_view_direction(Vector(0.0, 0.0, -1.0).normalized())
    camera.set_size(image.width, image.height)
    scene.camera = camera

    scene.add_sphere(
        Sphere(
            position=Point(-150.0, 0.0, -30.0),
            radius=50.0,
            material=Material(color=Color(0.0, 0.0, 1.0), reflection=1.0),
        )
    )
    scene.add_sphere(
        Sphere(
            position=Point(150.0, 0.0, -30.0),
            radius=50.0,
            material=Material(color=Color(0.0, 1.0, 1.0), reflection=1.0),
        )
    )

    bunny, cube1, cube2, cube3, cube4 = scene.models[:5]

    cube1.set_translation(Vector(-60.0, -50.0, 0.0))
    cube1.set_scale(Vector(1.0, 1.0, 1.0))

    cube2.set_translation(Vector(60.0, 50.0, -50.0))
    cube2.set_scale(Vector(1.0, 1.0, 1.0))

    cube4.set_translation(Vector(0.0, -100.0, 0.0))
    cube4.set_scale(Vector(500.0, 0.01, 500.0))

    cube3.set_translation(Vector(-80.0, 10.0, -100.0))
    cube3.set_scale(Vector(1.0, 1.0, 1.0))

    bunny.set_translation(Vector(0.0, -10.0, -30.0))
    bunny.set_rotation(Vector(0.0, 170.0, 0.0))
    bunny.set_scale(Vector(1.0, 1.0, 1.0))

    bunny.material = Material(color=Color(0.0, 1.0, 0.0), reflection=1.0)
    cube1.material = Material(color=Color(0.9, 0.9, 0.3))
    cube2.material = Material(color=Color(0.9, 0.4, 0.3))
    cube3.material = Material(color=Color(1.0, 0.0, 0.0))
    cube4.material = Material(color=Color(0.9, 0.9, 0.9))

    room = Model(_inward_copy(scene.models[1].triangles))
    room.set_scale(Vector(500.0, 500.0, 500.0))
    room.set_translation(Vector(0.0, -100.0, 0.0))
    room.material = Material(color=Color(0.99, 0.99, 0.99))
    scene.add_model(room)

    scene.add_point_light(LIGHT_POSITION)
    return scene, image, camera


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="raycaster", description="Render the demo scene to a PPM image."
    )
    parser.add_argument("output", nargs="?", help="file to write the image to")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    parser.add_argument("--bunny", default=DEFAULT_BUNNY, help="bunny mesh (PLY)")
    parser.add_argument("--cube", default=DEFAULT_CUBE, help="cube mesh (PLY)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the scene, ray cast it and write the image if a file is named."""
    args = _parser().parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        print("Error: width and height must be positive.", file=sys.stderr)
        return 2

    try:
        scene, image, camera = build_scene(args.bunny, args.cube, args.width, args.height)
    except (OSError, PlyError) as exc:
        print(f"Error: could not load meshes: {exc}", file=sys.stderr)
        return 1

    print("Ray casting started.")
    SolidRenderer(scene, image, camera).render_raycast()

    if args.output:
        image.write_ppm(args.output)
        print(
            f"Image with dimensions {image.width}x{image.height} "
            f"written to file {args.output}."
        )
    else:
        print("Error: no file name given. No output was generated.", file=sys.stderr)
    return 0