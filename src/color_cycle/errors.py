"""Exceptions raised while loading and animating color cycle images."""


class ColorCycleError(Exception):
    """Base exception for color cycle errors."""
    pass


class MalformedRangeError(ColorCycleError):
    """A cycle range falls outside the palette bounds."""

    def __init__(self, low: int, high: int, palette_size: int):
        self.low = low
        self.high = high
        self.palette_size = palette_size
        super().__init__(
            f"Cycle range [{low}, {high}] does not fit a palette of {palette_size} colors"
        )


class UnknownPaletteError(ColorCycleError):
    """A timeline marker references a palette that does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown palette '{name}' referenced by timeline")


class EmptyScheduleError(ColorCycleError):
    """A timeline has no time-of-day markers."""
    pass


class ImageLoadError(ColorCycleError):
    """An image description could not be read or is structurally invalid."""
    pass
