"""Spheres rolling down an inclined plane: physics, CSV logging, trails and a pygame view."""

__version__ = "0.1.0"
__all__ = ["__version__"]