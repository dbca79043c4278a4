"""Engine fading between time-of-day palettes before cycling."""

from ..color_math import cycle_palette, fade_palette
from ..models import Color
from ..time_of_day import TimeOfDayResolver, TimeOfDayState
from .base_engine import ColorCycleEngine
from .cycle_engine import CycleEngine


class TimelineEngine(ColorCycleEngine):
    """Blends named palettes by time of day, then cycles the base image's ranges."""

    def __init__(self, base: CycleEngine, resolver: TimeOfDayResolver):
        """
        Initialize timeline engine.

        Args:
            base: Engine for the image whose layout and cycles are used
            resolver: Resolver for the time-of-day palette schedule
        """
        self.base = base
        self.resolver = resolver

    @property
    def size(self) -> tuple[int, int]:
        return self.base.size

    @property
    def indices(self) -> tuple[int, ...]:
        return self.base.indices

    @property
    def animated_indices(self) -> frozenset[int]:
        return self.base.animated_indices

    @property
    def time_of_day_state(self) -> TimeOfDayState | None:
        return self.resolver.state

    def compute_frame(self, time_of_day: int | None, dt_millis: int) -> list[Color]:
        state = self.resolver.resolve(time_of_day)

        palette = list(state.current_palette)
        if state.next_palette is not None:
            palette = fade_palette(palette, state.next_palette, state.blend_fraction)

        return cycle_palette(palette, self.base.cycles, dt_millis)
