"""Raster (Pillow) animation frame generators built on top of Animator timelines."""

from typing import Iterator

from PIL import Image

from ..animator import Animator
from .renderer import Renderer


def generate_raster_frames(
    animator: Animator, renderer: Renderer, max_frames: int | None = None
) -> Iterator[Image.Image]:
    """Render raster frame payloads from an animator timeline."""
    for palette, _elapsed_ms, _time_of_day in animator.iter_frames(max_frames=max_frames):
        yield renderer.render_frame(palette)
