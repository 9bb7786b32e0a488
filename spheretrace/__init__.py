"""A small sphere ray tracer that renders scenes to TGA images."""

__version__ = "0.0.1"