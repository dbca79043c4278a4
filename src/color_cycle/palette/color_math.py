"""Pure palette arithmetic: shift amounts, range rotation and color fading."""

import math
from typing import Iterable, MutableSequence, Sequence

from ..constants import CYCLE_SPEED
from .models import Color, CycleRange, CycleStyle


def shift_amount(rate: int, dt_millis: int, range_size: int, style: int) -> int:
    """
    Calculate how many single-step rotations a cycle range needs.

    Args:
        rate: Cycle rate already divided by CYCLE_SPEED
        dt_millis: Milliseconds elapsed since the animation started
        range_size: Number of palette entries in the range
        style: Animation style of the range

    Returns:
        Rotation count in [0, range_size)
    """
    steps = dt_millis * rate // 1000

    if style <= CycleStyle.REVERSE:
        return steps % range_size

    if style == CycleStyle.PING_PONG:
        amount = steps % (2 * range_size)
        if amount >= range_size:
            amount = 2 * range_size - amount
        return amount % range_size

    # Legacy sine shaping: the truncation leaves almost only 0 or 1 before scaling
    amount = steps % range_size
    amount = int(math.sin(amount * 2.0 * math.pi) / range_size + 1.0)
    if style == CycleStyle.SINE_QUARTER:
        amount *= range_size // 4
    elif style == CycleStyle.SINE_HALF:
        amount *= range_size // 2
    return amount % range_size


def rotate(
    palette: MutableSequence[Color],
    low: int,
    high: int,
    amount: int,
    reverse: bool = False,
) -> None:
    """
    Rotate palette[low:high + 1] in place by ``amount`` single steps.

    A forward step moves the color at ``high`` to ``low`` and shifts the rest
    up by one; a reverse step moves the color at ``low`` to ``high``.
    """
    size = high - low + 1
    steps = amount % size
    if steps == 0:
        return

    segment = list(palette[low:high + 1])
    if reverse:
        rotated = segment[steps:] + segment[:steps]
    else:
        rotated = segment[-steps:] + segment[:-steps]
    palette[low:high + 1] = rotated


def cycle_palette(
    palette: Sequence[Color], cycles: Iterable[CycleRange], dt_millis: int
) -> list[Color]:
    """Return a copy of ``palette`` with every animated cycle range rotated for ``dt_millis``."""
    working = list(palette)
    for cycle in cycles:
        if not cycle.is_animated:
            continue
        amount = shift_amount(cycle.rate // CYCLE_SPEED, dt_millis, cycle.size, cycle.style)
        rotate(working, cycle.low, cycle.high, amount, cycle.reverse)
    return working


def fade_color(start: Color, end: Color, percent: float) -> Color:
    """Linearly interpolate each channel, truncating toward zero and clamping to 8 bits."""
    return Color(
        _fade_channel(start.r, end.r, percent),
        _fade_channel(start.g, end.g, percent),
        _fade_channel(start.b, end.b, percent),
    )


def fade_palette(start: Sequence[Color], end: Sequence[Color], percent: float) -> list[Color]:
    return [fade_color(a, b, percent) for a, b in zip(start, end)]


def _fade_channel(start: int, end: int, percent: float) -> int:
    value = int(start + (end - start) * percent)
    return max(0, min(255, value))
