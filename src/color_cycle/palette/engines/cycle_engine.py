"""Engine cycling the palette of a single indexed image."""

from ..color_math import cycle_palette
from ..models import Color, CycleRange, IndexedImage
from .base_engine import ColorCycleEngine


class CycleEngine(ColorCycleEngine):
    """Rotates the cycle ranges of a base image over time."""

    def __init__(self, image: IndexedImage):
        self.image = image

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size

    @property
    def indices(self) -> tuple[int, ...]:
        return self.image.pixels

    @property
    def animated_indices(self) -> frozenset[int]:
        return self.image.animated_indices

    @property
    def base_palette(self) -> tuple[Color, ...]:
        return self.image.palette

    @property
    def cycles(self) -> tuple[CycleRange, ...]:
        return self.image.cycles

    def compute_frame(self, time_of_day: int | None, dt_millis: int) -> list[Color]:
        """Return the base palette with every cycle rotated; the time of day is ignored."""
        del time_of_day
        return cycle_palette(self.image.palette, self.image.cycles, dt_millis)
