"""Loading of JSON image and timeline descriptions into engines."""

import json
from typing import Any, Mapping

from .constants import DAY_SECONDS
from .errors import ImageLoadError
from .palette.engines import ColorCycleEngine, CycleEngine, TimelineEngine
from .palette.models import Color, CycleRange, IndexedImage
from .palette.time_of_day import TimeOfDayResolver

_TIMELINE_KEYS = ("base", "palettes", "timeline")


def load_engine(file_path: str) -> ColorCycleEngine:
    """
    Load an engine from a JSON file.

    Timeline descriptions produce a TimelineEngine, plain image descriptions
    a CycleEngine.

    Raises:
        ImageLoadError: If the file is missing, not JSON, or not a valid description
    """
    try:
        with open(file_path, "r") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise ImageLoadError(f"File '{file_path}' not found")
    except json.JSONDecodeError as e:
        raise ImageLoadError(f"Invalid JSON in '{file_path}': {e}")

    return parse_engine(data)


def parse_engine(data: Any) -> ColorCycleEngine:
    if isinstance(data, Mapping) and all(key in data for key in _TIMELINE_KEYS):
        return parse_timeline(data)
    return CycleEngine(parse_image(data))


def parse_image(data: Any) -> IndexedImage:
    """Build an IndexedImage from a base description mapping."""
    data = _require_mapping(data, "image")
    try:
        return IndexedImage(
            width=_require_int(data, "width"),
            height=_require_int(data, "height"),
            palette=_parse_colors(data, "image"),
            cycles=tuple(_parse_cycle(cycle) for cycle in _require_list(data, "cycles")),
            pixels=tuple(_as_int(pixel, "pixels") for pixel in _require_list(data, "pixels")),
        )
    except ValueError as e:
        raise ImageLoadError(str(e))


def parse_timeline(data: Any) -> TimelineEngine:
    """Build a TimelineEngine from a timeline description mapping."""
    data = _require_mapping(data, "timeline description")
    image = parse_image(data.get("base"))

    palettes: dict[str, tuple[Color, ...]] = {}
    for name, entry in _require_mapping(data.get("palettes"), "palettes").items():
        colors = _parse_colors(_require_mapping(entry, f"palette '{name}'"), f"palette '{name}'")
        if len(colors) != len(image.palette):
            raise ImageLoadError(
                f"Palette '{name}' has {len(colors)} colors, "
                f"base image has {len(image.palette)}"
            )
        palettes[name] = colors

    schedule: dict[int, str] = {}
    for marker, name in _require_mapping(data.get("timeline"), "timeline").items():
        try:
            seconds = int(marker)
        except (TypeError, ValueError):
            raise ImageLoadError(f"Timeline marker '{marker}' is not a number of seconds")
        if not 0 <= seconds < DAY_SECONDS:
            raise ImageLoadError(
                f"Timeline marker '{marker}' must be within [0, {DAY_SECONDS}) seconds"
            )
        if seconds in schedule:
            raise ImageLoadError(f"Timeline marker '{marker}' duplicates second {seconds}")
        if not isinstance(name, str):
            raise ImageLoadError(f"Timeline marker '{marker}' must name a palette")
        schedule[seconds] = name

    resolver = TimeOfDayResolver(image.palette, palettes, schedule)
    return TimelineEngine(CycleEngine(image), resolver)


def _parse_colors(data: Mapping[str, Any], owner: str) -> tuple[Color, ...]:
    if "colors" not in data:
        raise ImageLoadError(f"Missing 'colors' in {owner}")
    colors = data["colors"]
    if not isinstance(colors, list):
        raise ImageLoadError(f"'colors' in {owner} must be a list")
    return tuple(_parse_color(color) for color in colors)


def _parse_color(raw: Any) -> Color:
    """Accept both {"r", "g", "b"} objects and [r, g, b] arrays."""
    if isinstance(raw, Mapping):
        channels = [raw.get(key) for key in ("r", "g", "b")]
    elif isinstance(raw, list) and len(raw) == 3:
        channels = raw
    else:
        raise ImageLoadError(f"Invalid color: {raw!r}")

    try:
        return Color(*(_as_int(channel, "colors") for channel in channels))
    except ValueError as e:
        raise ImageLoadError(str(e))


def _parse_cycle(raw: Any) -> CycleRange:
    cycle = _require_mapping(raw, "cycle")
    return CycleRange(
        low=_require_int(cycle, "low"),
        high=_require_int(cycle, "high"),
        rate=_require_int(cycle, "rate"),
        style=_require_int(cycle, "reverse"),
    )


def _require_mapping(value: Any, owner: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ImageLoadError(f"Expected an object for {owner}")
    return value


def _require_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ImageLoadError(f"Missing or invalid '{key}' list")
    return value


def _require_int(data: Mapping[str, Any], key: str) -> int:
    if key not in data:
        raise ImageLoadError(f"Missing '{key}'")
    return _as_int(data[key], key)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ImageLoadError(f"'{key}' must be a non-negative integer, got {value!r}")
    return value
