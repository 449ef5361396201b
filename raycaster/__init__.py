"""Ray casting and wireframe rendering of PLY meshes and spheres to PPM images."""

__version__ = "0.1.0"