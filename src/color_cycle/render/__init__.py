"""Rendering of computed palettes into raster frames."""

from .raster_animation import generate_raster_frames
from .renderer import Renderer

__all__ = [
    "Renderer",
    "generate_raster_frames",
]
