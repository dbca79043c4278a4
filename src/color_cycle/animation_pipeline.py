"""Shared animation orchestration used by the CLI."""

from .animator import Animator
from .constants import DEFAULT_DURATION, DEFAULT_SCALE
from .output import resolve_output_provider
from .output.base import OutputProvider
from .palette.engines import ColorCycleEngine
from .render import Renderer, generate_raster_frames


def encode_animation(
    engine: ColorCycleEngine,
    output_path: str,
    *,
    fps: int,
    max_frames: int | None = None,
    time_of_day: int | None = None,
    scale: int = DEFAULT_SCALE,
    provider: OutputProvider | None = None,
) -> bytes:
    """
    Encode animation bytes for the given engine and output path.

    Color cycles never end, so without max_frames DEFAULT_DURATION seconds are rendered.
    """
    if max_frames is None:
        max_frames = DEFAULT_DURATION * fps
    target_provider = provider or resolve_output_provider(output_path)
    animator = Animator(engine, fps=fps, time_of_day=time_of_day)
    renderer = Renderer(engine, scale=scale)
    frame_stream = generate_raster_frames(animator, renderer, max_frames)
    return target_provider.encode(frame_stream, frame_duration=animator.frame_duration)
