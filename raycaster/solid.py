"""Ray casting with Phong shading, shadows and mirror reflections."""

from __future__ import annotations

from .camera import Camera
from .color import Color
from .image import Image
from .linalg import dot_product
from .scene import Scene
from .structs import HitRecord, Ray

EPSILON = 1e-12
K_AMBIENT = 0.4
K_DIFFUSE = 0.4
K_SPECULAR = 0.2
SHININESS = 20.0
LIGHT_INTENSITY = Color(1.0, 1.0, 1.0)
MAX_RECURSIONS = 2
MISS_COLOR = Color(0.0, 0.0, 0.0)


class SolidRenderer:
    """Renders a scene into an image by casting one ray per pixel."""

    def __init__(self, scene: Scene, image: Image, camera: Camera) -> None:
        self.scene = scene
        self.image = image
        self.camera = camera

    def render_raycast(self) -> None:
        """Render every row of the image."""
        for row in range(self.image.height):
            self.compute_image_row(row)

    def compute_image_row(self, row_number: int) -> None:
        """Render one row: shade the nearest hit or paint the miss colour."""
        for column in range(self.image.width):
            ray = self.camera.get_ray(column, row_number)
            hit = self.scene.intersect(ray, EPSILON)
            color = self.shade(hit) if hit is not None else MISS_COLOR
            self.image.set_value(column, row_number, color)

    def shade(self, hit: HitRecord) -> Color:
        """The colour seen at ``hit``."""
        reflection = 0.0
        if hit.model_id != -1:
            material = self.scene.models[hit.model_id].material
            material_color, reflection = material.color, material.reflection
        elif hit.sphere_id != -1:
            material = self.scene.spheres[hit.sphere_id].material
            material_color, reflection = material.color, material.reflection
        else:
            material_color = hit.color

        result = K_AMBIENT * material_color * LIGHT_INTENSITY
        point = hit.intersection_point

        for light in self.scene.point_lights:
            to_light = light - point
            distance = to_light.norm()
            l_dir = to_light.normalized()
            normal = hit.normal.normalized()

            shadow_ray = Ray(point + normal * EPSILON, l_dir)
            if self.scene.intersect(shadow_ray, EPSILON, distance) is not None:
                continue

            l_dot_n = dot_product(l_dir, normal)
            result = result + K_DIFFUSE * material_color * LIGHT_INTENSITY * max(0.0, l_dot_n)

            view = (self.camera.eye_point() - point).normalized()
            mirrored = (2.0 * l_dot_n * normal - l_dir).normalized()
            specular = max(0.0, dot_product(mirrored, view)) ** SHININESS
            result = result + K_SPECULAR * LIGHT_INTENSITY * specular

        if reflection > 0.0 and hit.recursions < MAX_RECURSIONS:
            normal = hit.normal.normalized()
            incoming = hit.ray_direction.normalized()
            direction = (incoming - 2.0 * dot_product(incoming, normal) * normal).normalized()
            reflected_ray = Ray(point + normal * EPSILON, direction)
            reflected = self.scene.intersect(reflected_ray, EPSILON)
            if reflected is None:
                return MISS_COLOR
            reflected.recursions = hit.recursions + 1
            return self.shade(reflected)

        return result