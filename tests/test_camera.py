import pytest

from raycaster.camera import Camera
from raycaster.linalg import Matrix, Point, Vector, cross_product


def _camera(width=4, height=2):
    cam = Camera()
    cam.set_eye_point(Point(0.0, 0.0, 300.0))
    cam.set_up(Vector(0.0, 1.0, 0.0))
    cam.set_view_direction(Vector(0.0, 0.0, -1.0))
    cam.set_size(width, height)
    return cam


def test_eye_point_round_trip():
    cam = _camera()
    assert cam.eye_point() == Point(0.0, 0.0, 300.0)


def test_side_axis_is_cross_of_up_and_view():
    cam = _camera()
    view = cam.view_matrix()
    assert view.column(0) == cross_product(view.column(1), view.column(2))


def test_inverse_times_view_is_identity():
    cam = _camera()
    product = cam.view_matrix() * cam.inv_view_matrix()
    identity = Matrix()
    for r in range(4):
        for c in range(4):
            assert product[r, c] == pytest.approx(identity[r, c], abs=1e-12)


def test_centre_ray_follows_view_direction():
    cam = _camera(8, 6)
    ray = cam.get_ray(4, 3)
    assert ray.origin == cam.eye_point()
    assert ray.direction == Vector(0.0, 0.0, -1.0)


@pytest.mark.parametrize("x,y", [(0, 0), (3, 1), (7, 5), (1, 4)])
def test_rays_are_unit_length(x, y):
    cam = _camera(8, 6)
    assert cam.get_ray(x, y).direction.norm() == pytest.approx(1.0)


def test_symmetric_pixels_give_mirrored_rays():
    cam = _camera(8, 6)
    left = cam.get_ray(2, 3).direction
    right = cam.get_ray(6, 3).direction
    assert left.x == pytest.approx(-right.x)
    assert left.z == pytest.approx(right.z)


def test_ray_without_size_raises():
    cam = Camera()
    with pytest.raises(ValueError):
        cam.get_ray(0, 0)


def test_degenerate_basis_keeps_view_as_inverse():
    cam = Camera()
    cam.set_up(Vector(0.0, 0.0, 1.0))
    assert cam.inv_view_matrix() == cam.view_matrix()


def test_str_mentions_window_size():
    cam = _camera(4, 2)
    text = str(cam)
    assert text.startswith(str(cam.view_matrix()))
    assert text.endswith("Window: 4x2")