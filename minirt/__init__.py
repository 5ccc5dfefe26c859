"""Ray tracer for spheres, planes and cylinders described in .rt scene files, writing PPM images."""

__version__ = "0.1.0"