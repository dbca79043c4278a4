"""Color cycling palette animation for indexed images."""

from .errors import (
    ColorCycleError,
    EmptyScheduleError,
    ImageLoadError,
    MalformedRangeError,
    UnknownPaletteError,
)
from .loader import load_engine, parse_engine, parse_image, parse_timeline
from .palette import (
    Color,
    ColorCycleEngine,
    CycleEngine,
    CycleRange,
    CycleStyle,
    IndexedImage,
    TimelineEngine,
    TimeOfDayResolver,
    TimeOfDayState,
)

__all__ = [
    "Color",
    "CycleRange",
    "CycleStyle",
    "IndexedImage",
    "ColorCycleEngine",
    "CycleEngine",
    "TimelineEngine",
    "TimeOfDayResolver",
    "TimeOfDayState",
    "ColorCycleError",
    "EmptyScheduleError",
    "ImageLoadError",
    "MalformedRangeError",
    "UnknownPaletteError",
    "load_engine",
    "parse_engine",
    "parse_image",
    "parse_timeline",
]
