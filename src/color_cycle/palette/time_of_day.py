"""Time-of-day palette resolution for timeline images."""

from dataclasses import dataclass
from typing import Mapping, Sequence

from ..constants import DAY_SECONDS
from ..errors import EmptyScheduleError, UnknownPaletteError
from .models import Color


@dataclass(frozen=True)
class TimeOfDayState:
    """
    The palettes bracketing a time of day and how far between them it falls.

    Attributes:
        current_palette: Palette of the marker at or before the time of day
        offset_seconds: Seconds elapsed since the previous marker
        window_seconds: Seconds between the previous and next markers
        next_palette: Palette being faded towards, None disables fading
        previous_marker: Time of the previous marker, None when unresolved
        previous_name: Palette name of the previous marker
        next_marker: Time of the next marker
        next_name: Palette name of the next marker
    """
    current_palette: tuple[Color, ...]
    offset_seconds: int
    window_seconds: int
    next_palette: tuple[Color, ...] | None = None
    previous_marker: int | None = None
    previous_name: str | None = None
    next_marker: int | None = None
    next_name: str | None = None

    @property
    def blend_fraction(self) -> float:
        """Fraction of the way from the current palette to the next one."""
        if self.window_seconds == 0:
            return 0.0
        return self.offset_seconds / self.window_seconds


class TimeOfDayResolver:
    """Resolves which named palettes apply at a time of day, once per lifetime."""

    def __init__(
        self,
        base_palette: Sequence[Color],
        palettes: Mapping[str, Sequence[Color]],
        schedule: Mapping[int, str],
    ):
        """
        Initialize resolver.

        Args:
            base_palette: Palette used when no time of day is supplied
            palettes: Named palettes, each the same length as the base palette
            schedule: Seconds since midnight mapped to palette names
        """
        if not schedule:
            raise EmptyScheduleError("Timeline schedule has no time-of-day markers")

        self.base_palette = tuple(base_palette)
        self.palettes = {name: tuple(colors) for name, colors in palettes.items()}
        self.schedule = dict(schedule)
        self._state: TimeOfDayState | None = None

    @property
    def state(self) -> TimeOfDayState | None:
        """The cached state, or None before the first resolve."""
        return self._state

    def resolve(self, absolute_seconds: int | None) -> TimeOfDayState:
        """
        Resolve the palettes for a time of day.

        The first call decides the state for the lifetime of the resolver;
        later calls return it unchanged whatever time they pass.
        """
        if self._state is None:
            if absolute_seconds is None:
                self._state = TimeOfDayState(
                    current_palette=self.base_palette,
                    offset_seconds=1,
                    window_seconds=1,
                )
            else:
                self._state = self._resolve_time(absolute_seconds)
        return self._state

    def _resolve_time(self, absolute_seconds: int) -> TimeOfDayState:
        t = absolute_seconds % DAY_SECONDS
        earliest = min(self.schedule)

        # Latest marker strictly before t, or wrap to the earliest of the day
        earlier = [marker for marker in self.schedule if marker < t]
        end = max(earlier) if earlier else earliest

        # Earliest marker strictly after the previous one, wrapping the same way
        later = [marker for marker in self.schedule if marker > end]
        next_end = min(later) if later else earliest

        previous_name = self.schedule[end]
        next_name = self.schedule[next_end]

        return TimeOfDayState(
            current_palette=self._lookup(previous_name),
            offset_seconds=(t - end) % DAY_SECONDS,
            window_seconds=(next_end - end) % DAY_SECONDS,
            next_palette=self._lookup(next_name),
            previous_marker=end,
            previous_name=previous_name,
            next_marker=next_end,
            next_name=next_name,
        )

    def _lookup(self, name: str) -> tuple[Color, ...]:
        try:
            return self.palettes[name]
        except KeyError:
            raise UnknownPaletteError(name) from None
