"""The scene: meshes, spheres, lights and camera, plus ray intersection."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Callable, Iterable, List, Optional, Union

from .color import Color, Material
from .linalg import Point, Vector, cross_product, dot_product
from .model import Model
from .sphere import Sphere
from .structs import HitRecord, Ray, Triangle

if TYPE_CHECKING:
    from .camera import Camera

_log = logging.getLogger(__name__)

LOADED_MODEL_COLOR = Color(0.0, 1.0, 0.0)


class PlyError(ValueError):
    """Raised when a PLY file cannot be read."""


_SCALAR_CODES = {
    "char": "b",
    "int8": "b",
    "uchar": "B",
    "uint8": "B",
    "short": "h",
    "int16": "h",
    "ushort": "H",
    "uint16": "H",
    "int": "i",
    "int32": "i",
    "uint": "I",
    "uint32": "I",
    "float": "f",
    "float32": "f",
    "double": "d",
    "float64": "d",
}

_ENDIAN = {"binary_little_endian": "<", "binary_big_endian": ">"}


@dataclass
class _Property:
    name: str
    code: str
    count_code: Optional[str] = None


@dataclass
class _Element:
    name: str
    count: int
    properties: List[_Property] = field(default_factory=list)


def _code(type_name: str) -> str:
    try:
        return _SCALAR_CODES[type_name]
    except KeyError:
        raise PlyError(f"unknown property type {type_name!r}") from None


def _read_header(stream: BinaryIO) -> tuple[str, List[_Element]]:
    if stream.readline().strip() != b"ply":
        raise PlyError("not a PLY file")
    fmt: Optional[str] = None
    elements: List[_Element] = []
    while True:
        raw = stream.readline()
        if not raw:
            raise PlyError("header has no end_header line")
        words = raw.decode("ascii", errors="replace").split()
        if not words:
            continue
        keyword = words[0]
        if keyword == "end_header":
            break
        if keyword in ("comment", "obj_info"):
            continue
        try:
            if keyword == "format":
                fmt = words[1]
            elif keyword == "element":
                elements.append(_Element(words[1], int(words[2])))
            elif keyword == "property":
                if not elements:
                    raise PlyError("property declared before any element")
                if words[1] == "list":
                    prop = _Property(words[4], _code(words[3]), _code(words[2]))
                else:
                    prop = _Property(words[2], _code(words[1]))
                elements[-1].properties.append(prop)
            else:
                raise PlyError(f"unknown header line {keyword!r}")
        except (IndexError, ValueError) as exc:
            if isinstance(exc, PlyError):
                raise
            raise PlyError(f"malformed header line: {raw!r}") from exc
    if fmt is None:
        raise PlyError("header declares no format")
    if fmt != "ascii" and fmt not in _ENDIAN:
        raise PlyError(f"unsupported format {fmt!r}")
    return fmt, elements


def _ascii_reader(data: bytes) -> Callable[[str], Union[int, float]]:
    tokens = iter(data.split())

    def read(code: str) -> Union[int, float]:
        try:
            token = next(tokens)
        except StopIteration:
            raise PlyError("unexpected end of data") from None
        try:
            return float(token) if code in "fd" else int(token)
        except ValueError:
            raise PlyError(f"bad value {token!r}") from None

    return read


def _binary_reader(stream: BinaryIO, endian: str) -> Callable[[str], Union[int, float]]:
    structs: dict[str, struct.Struct] = {}

    def read(code: str) -> Union[int, float]:
        packer = structs.setdefault(code, struct.Struct(endian + code))
        chunk = stream.read(packer.size)
        if len(chunk) < packer.size:
            raise PlyError("unexpected end of data")
        return packer.unpack(chunk)[0]

    return read


def _make_triangle(a: Point, b: Point, c: Point) -> Triangle:
    try:
        return Triangle.from_vertices(a, b, c)
    except ZeroDivisionError:
        # Degenerate faces keep an undefined normal, as they never get hit.
        return Triangle((a, b, c), Vector(math.nan, math.nan, math.nan))


def read_ply(path: Union[str, Path]) -> List[Triangle]:
    """Read the faces of a PLY mesh as triangles; polygons are fan-split."""
    with open(path, "rb") as stream:
        fmt, elements = _read_header(stream)
        if fmt == "ascii":
            read = _ascii_reader(stream.read())
        else:
            read = _binary_reader(stream, _ENDIAN[fmt])

        vertices: List[Point] = []
        faces: List[List[int]] = []
        for element in elements:
            names = [p.name for p in element.properties]
            for _ in range(element.count):
                row = {}
                for prop in element.properties:
                    if prop.count_code is None:
                        row[prop.name] = read(prop.code)
                    else:
                        count = int(read(prop.count_code))
                        row[prop.name] = [read(prop.code) for _ in range(count)]
                if element.name == "vertex":
                    try:
                        vertices.append(
                            Point(float(row["x"]), float(row["y"]), float(row["z"]))
                        )
                    except KeyError:
                        raise PlyError("vertex element lacks x, y or z") from None
                elif element.name == "face":
                    key = next(
                        (n for n in ("vertex_indices", "vertex_index") if n in names),
                        None,
                    )
                    if key is None:
                        raise PlyError("face element lacks vertex indices")
                    faces.append([int(i) for i in row[key]])

    triangles: List[Triangle] = []
    for face in faces:
        if len(face) < 3:
            continue
        try:
            corners = [vertices[i] for i in face]
        except IndexError:
            raise PlyError("face refers to a missing vertex") from None
        first = corners[0]
        triangles.extend(
            _make_triangle(first, b, c) for b, c in zip(corners[1:], corners[2:])
        )
    return triangles


def triangle_intersect(
    ray: Ray, triangle: Triangle, epsilon: float, max_parameter: float = math.inf
) -> Optional[HitRecord]:
    """Hit of ``ray`` with ``triangle`` closer than ``max_parameter``, if any."""
    v0, v1, v2 = triangle.vertices
    edge1 = v1 - v0
    edge2 = v2 - v0

    h = cross_product(ray.direction, edge2)
    a = dot_product(edge1, h)
    if -epsilon < a < epsilon:
        return None

    f = 1.0 / a
    s = ray.origin - v0
    u = f * dot_product(s, h)
    if u < 0.0 or u > 1.0:
        return None

    q = cross_product(s, edge1)
    v = f * dot_product(ray.direction, q)
    if v < 0.0 or u + v > 1.0:
        return None

    t = f * dot_product(edge2, q)
    if not (epsilon < t < max_parameter):
        return None
    return HitRecord(
        parameter=t,
        intersection_point=ray.origin + t * ray.direction,
        normal=triangle.normal,
        ray_direction=ray.direction,
    )


def sphere_intersect(
    ray: Ray, sphere: Sphere, epsilon: float, max_parameter: float = math.inf
) -> Optional[HitRecord]:
    """Nearest hit of ``ray`` with ``sphere`` closer than ``max_parameter``."""
    offset = ray.origin - sphere.position
    a = dot_product(ray.direction, ray.direction)
    b = 2.0 * dot_product(ray.direction, offset)
    c = dot_product(offset, offset) - sphere.radius * sphere.radius

    discriminant = b * b - 4 * a * c
    if discriminant < 0:
        return None
    if discriminant == 0:
        t0 = t1 = -b / (2 * a)
    else:
        root = math.sqrt(discriminant)
        t0 = (-b - root) / (2 * a)
        t1 = (-b + root) / (2 * a)

    candidates = [t for t in (t0, t1) if epsilon < t < max_parameter]
    if not candidates:
        return None
    t = min(candidates)
    point = ray.origin + t * ray.direction
    return HitRecord(
        parameter=t,
        intersection_point=point,
        normal=(point - sphere.position).normalized(),
        ray_direction=ray.direction,
    )


class Scene:
    """Everything that can be rendered, with the camera looking at it."""

    def __init__(self) -> None:
        self.camera: Optional["Camera"] = None
        self.point_lights: List[Point] = []
        self.models: List[Model] = []
        self.spheres: List[Sphere] = []

    def load(self, paths: Iterable[Union[str, Path]]) -> None:
        """Add one green model per mesh file; stop at the first bad file."""
        for path in paths:
            model = Model(read_ply(path))
            model.material = Material(color=LOADED_MODEL_COLOR)
            self.models.append(model)
        _log.info("finished loading mesh files")

    def intersect(
        self, ray: Ray, epsilon: float, max_parameter: float = math.inf
    ) -> Optional[HitRecord]:
        """The nearest hit of ``ray`` with any model or sphere, or None."""
        best: Optional[HitRecord] = None
        limit = max_parameter

        for model_id, model in enumerate(self.models):
            matrix = model.transformation
            for triangle_id, triangle in enumerate(model.triangles):
                hit = triangle_intersect(ray, triangle.transformed(matrix), epsilon, limit)
                if hit is not None:
                    hit.model_id = model_id
                    hit.triangle_id = triangle_id
                    hit.color = model.material.color
                    best, limit = hit, hit.parameter

        for sphere_id, sphere in enumerate(self.spheres):
            hit = sphere_intersect(ray, sphere, epsilon, limit)
            if hit is not None:
                hit.sphere_id = sphere_id
                hit.color = sphere.material.color
                best, limit = hit, hit.parameter

        return best

    def add_point_light(self, point: Point) -> None:
        self.point_lights.append(point)

    def add_model(self, model: Model) -> None:
        self.models.append(model)

    def add_sphere(self, sphere: Sphere) -> None:
        self.spheres.append(sphere)

    def view_point(self) -> Point:
        """The camera's eye point, or the origin when no camera is set."""
        if self.camera is not None:
            return self.camera.eye_point()
        _log.error("no camera set to get view point from")
        return Point(0.0, 0.0, 0.0)