"""Palette engine implementations."""

from .base_engine import ColorCycleEngine
from .cycle_engine import CycleEngine
from .timeline_engine import TimelineEngine

__all__ = [
    "ColorCycleEngine",
    "CycleEngine",
    "TimelineEngine",
]
