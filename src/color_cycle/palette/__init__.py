"""Palette computation: color math, time-of-day resolution and engines."""

from .color_math import cycle_palette, fade_color, fade_palette, rotate, shift_amount
from .engines import ColorCycleEngine, CycleEngine, TimelineEngine
from .models import Color, CycleRange, CycleStyle, IndexedImage
from .time_of_day import TimeOfDayResolver, TimeOfDayState

__all__ = [
    "Color",
    "CycleRange",
    "CycleStyle",
    "IndexedImage",
    "shift_amount",
    "rotate",
    "cycle_palette",
    "fade_color",
    "fade_palette",
    "TimeOfDayResolver",
    "TimeOfDayState",
    "ColorCycleEngine",
    "CycleEngine",
    "TimelineEngine",
]
