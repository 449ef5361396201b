[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "raycaster"
version = "0.1.0"
description = "A small ray caster and wireframe renderer for triangle meshes and spheres that writes PPM images"
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "rendering", "phong", "bresenham", "ply", "ppm", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
raycaster = "raycaster.cli:main"

[tool.setuptools.packages.find]
include = ["raycaster*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
