"""Common interface for palette engines."""

from abc import ABC, abstractmethod

from ..models import Color


class ColorCycleEngine(ABC):
    """Abstract base class for engines that compute per-frame palettes."""

    @property
    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Image dimensions as (width, height)."""
        raise NotImplementedError

    @property
    @abstractmethod
    def indices(self) -> tuple[int, ...]:
        """Row-major palette index of every pixel."""
        raise NotImplementedError

    @property
    @abstractmethod
    def animated_indices(self) -> frozenset[int]:
        """Palette indices whose color can change between frames."""
        raise NotImplementedError

    @abstractmethod
    def compute_frame(self, time_of_day: int | None, dt_millis: int) -> list[Color]:
        """
        Compute the palette for a frame.

        Args:
            time_of_day: Seconds since midnight, or None when unknown
            dt_millis: Milliseconds elapsed since the animation started

        Returns:
            Palette colors in index order
        """
        raise NotImplementedError
