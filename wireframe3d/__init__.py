"""Load, transform, draw and save 3D wireframe models, with a Tk viewer."""

__version__ = "0.1.0"