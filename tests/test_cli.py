from pathlib import Path

import pytest

from raycaster.cli import build_scene, main
from raycaster.color import Color
from raycaster.linalg import Point

_CUBE_VERTICES = [
    (-25, -25, -25),
    (25, -25, -25),
    (25, 25, -25),
    (-25, 25, -25),
    (-25, -25, 25),
    (25, -25, 25),
    (25, 25, 25),
    (-25, 25, 25),
]
_CUBE_FACES = [
    (0, 2, 1), (0, 3, 2),
    (4, 5, 6), (4, 6, 7),
    (0, 1, 5), (0, 5, 4),
    (3, 7, 6), (3, 6, 2),
    (0, 4, 7), (0, 7, 3),
    (1, 2, 6), (1, 6, 5),
]


def _write_cube(path: Path) -> Path:
    lines = [
        "ply",
        "format ascii 1.0",
        f"element vertex {len(_CUBE_VERTICES)}",
        "property float x",
        "property float y",
        "property float z",
        f"element face {len(_CUBE_FACES)}",
        "property list uchar int vertex_indices",
        "end_header",
    ]
    lines += [f"{x} {y} {z}" for x, y, z in _CUBE_VERTICES]
    lines += ["3 " + " ".join(str(i) for i in face) for face in _CUBE_FACES]
    path.write_text("\n".join(lines) + "\n")
    return path


@pytest.fixture
def meshes(tmp_path):
    bunny = _write_cube(tmp_path / "bunny.ply")
    cube = _write_cube(tmp_path / "cube.ply")
    return bunny, cube


def test_build_scene_counts(meshes):
    scene, image, camera = build_scene(*meshes, 8, 6)
    assert len(scene.models) == 6
    assert len(scene.spheres) == 2
    assert scene.point_lights == [Point(0.0, 200.0, 0.0)]
    assert scene.camera is camera
    assert (image.width, image.height) == (8, 6)
    assert (camera.width, camera.height) == (8, 6)


def test_build_scene_camera(meshes):
    _, _, camera = build_scene(*meshes, 8, 6)
    assert camera.eye_point() == Point(0.0, 0.0, 300.0)
    view = camera.view_matrix()
    assert view.column(2)[2] == pytest.approx(-1.0)
    assert view.column(1)[1] == pytest.approx(1.0)


def test_build_scene_spheres(meshes):
    scene, _, _ = build_scene(*meshes, 8, 6)
    first, second = scene.spheres
    assert first.position == Point(-150.0, 0.0, -30.0)
    assert second.position == Point(150.0, 0.0, -30.0)
    assert first.radius == 50.0 and second.radius == 50.0
    assert first.material.color == Color(0.0, 0.0, 1.0)
    assert second.material.color == Color(0.0, 1.0, 1.0)
    assert first.material.reflection == 1.0
    assert second.material.reflection == 1.0


def test_build_scene_model_materials(meshes):
    scene, _, _ = build_scene(*meshes, 8, 6)
    colors = [m.material.color for m in scene.models]
    assert colors == [
        Color(0.0, 1.0, 0.0),
        Color(0.9, 0.9, 0.3),
        Color(0.9, 0.4, 0.3),
        Color(1.0, 0.0, 0.0),
        Color(0.9, 0.9, 0.9),
        Color(0.99, 0.99, 0.99),
    ]
    assert scene.models[0].material.reflection == 1.0
    assert scene.models[1].material.reflection == 0.0


def test_build_scene_floor_transformation(meshes):
    scene, _, _ = build_scene(*meshes, 8, 6)
    floor = scene.models[4].transformation
    assert floor[0, 0] == pytest.approx(500.0)
    assert floor[1, 1] == pytest.approx(0.01)
    assert floor[2, 2] == pytest.approx(500.0)
    assert floor[1, 3] == pytest.approx(-100.0)


def test_build_scene_cube_copies_share_mesh(meshes):
    scene, _, _ = build_scene(*meshes, 8, 6)
    base = scene.models[1].triangles
    assert scene.models[2].triangles == base
    assert scene.models[3].triangles == base
    assert scene.models[2].transformation[2, 3] == pytest.approx(-50.0)
    assert scene.models[3].transformation[0, 3] == pytest.approx(-80.0)


def test_room_cube_normals_point_inward(meshes):
    scene, _, _ = build_scene(*meshes, 8, 6)
    room = scene.models[5]
    base = scene.models[1].triangles
    assert len(room.triangles) == len(base)
    for room_tri, tri in zip(room.triangles, base):
        assert room_tri.vertices == tri.vertices
        assert room_tri.normal == -tri.normal
    assert room.transformation[0, 0] == pytest.approx(500.0)
    assert room.transformation[1, 3] == pytest.approx(-100.0)


def test_main_writes_ppm(meshes, tmp_path, capsys):
    bunny, cube = meshes
    out = tmp_path / "out.ppm"
    code = main([str(out), "--width", "4", "--height", "3",
                 "--bunny", str(bunny), "--cube", str(cube)])
    assert code == 0
    lines = out.read_text().splitlines()
    assert lines[:3] == ["P3", "4 3", "255"]
    pixels = lines[3:]
    assert len(pixels) == 12
    for line in pixels:
        channels = [int(v) for v in line.split()]
        assert len(channels) == 3
        assert all(0 <= c <= 255 for c in channels)
    assert str(out) in capsys.readouterr().out


def test_main_without_output_reports_error(meshes, tmp_path, capsys):
    bunny, cube = meshes
    code = main(["--width", "2", "--height", "2",
                 "--bunny", str(bunny), "--cube", str(cube)])
    assert code == 0
    assert "no file name" in capsys.readouterr().err
    assert list(tmp_path.glob("*.ppm")) == []


def test_main_missing_mesh(tmp_path, capsys):
    cube = _write_cube(tmp_path / "cube.ply")
    code = main([str(tmp_path / "out.ppm"), "--width", "2", "--height", "2",
                 "--bunny", str(tmp_path / "missing.ply"), "--cube", str(cube)])
    assert code == 1
    assert "could not load" in capsys.readouterr().err
    assert not (tmp_path / "out.ppm").exists()


def test_main_rejects_non_positive_size(meshes, capsys):
    bunny, cube = meshes
    code = main(["--width", "0", "--height", "2",
                 "--bunny", str(bunny), "--cube", str(cube)])
    assert code == 2
    assert "positive" in capsys.readouterr().err