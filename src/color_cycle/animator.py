"""Animator producing the per-frame palette timeline of an engine."""

from typing import Iterator

from .constants import DAY_SECONDS
from .palette.engines import ColorCycleEngine
from .palette.models import Color


class Animator:
    """Drives an engine at a fixed frame rate."""

    def __init__(self, engine: ColorCycleEngine, fps: int, time_of_day: int | None = None):
        """
        Initialize animator.

        Args:
            engine: The engine computing each frame's palette
            fps: Frames per second for the animation
            time_of_day: Seconds since midnight at the first frame, None for no timeline blending
        """
        if fps <= 0:
            raise ValueError(f"FPS must be positive, got {fps}")
        self.engine = engine
        self.fps = fps
        self.time_of_day = time_of_day
        self.frame_duration = 1000 // fps

    @property
    def is_static(self) -> bool:
        """True when no palette entry ever changes, so one frame is enough."""
        return not self.engine.animated_indices

    def iter_frames(
        self, max_frames: int | None = None
    ) -> Iterator[tuple[list[Color], int, int | None]]:
        """Yield (palette, elapsed milliseconds, time of day) for each frame."""
        if self.is_static and (max_frames is None or max_frames > 0):
            yield self.engine.compute_frame(self.time_of_day, 0), 0, self.time_of_day
            return

        rendered = 0
        while max_frames is None or rendered < max_frames:
            # Derived from the frame number so fps above 1000 still advances
            elapsed_ms = rendered * 1000 // self.fps
            time_of_day = self._time_of_day_at(elapsed_ms)
            yield self.engine.compute_frame(time_of_day, elapsed_ms), elapsed_ms, time_of_day
            rendered += 1

    def _time_of_day_at(self, elapsed_ms: int) -> int | None:
        if self.time_of_day is None:
            return None
        return (self.time_of_day + elapsed_ms // 1000) % DAY_SECONDS
