"""Render Wavefront OBJ models with a small flat-shading software rasterizer."""

__version__ = "0.1.0"