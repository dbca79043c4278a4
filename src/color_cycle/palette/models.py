"""Value types describing an indexed, color-cycled image."""

from dataclasses import dataclass, field
from enum import IntEnum

from ..errors import MalformedRangeError


class CycleStyle(IntEnum):
    """Animation styles a cycle range can use."""
    FORWARD = 0
    FORWARD_ALT = 1
    REVERSE = 2
    PING_PONG = 3
    SINE_QUARTER = 4
    SINE_HALF = 5


@dataclass(frozen=True, slots=True)
class Color:
    """An 8-bit RGB color."""
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True, slots=True)
class CycleRange:
    """A contiguous run of palette entries that rotates together."""
    low: int
    high: int
    rate: int
    style: int = CycleStyle.FORWARD

    @property
    def size(self) -> int:
        return self.high - self.low + 1

    @property
    def is_animated(self) -> bool:
        return self.rate != 0

    @property
    def reverse(self) -> bool:
        """Only the REVERSE style flips rotation direction."""
        return self.style == CycleStyle.REVERSE

    @property
    def indices(self) -> range:
        return range(self.low, self.high + 1)


@dataclass(frozen=True)
class IndexedImage:
    """
    A fixed-layout image whose pixels are indices into a palette.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        palette: Base colors, in palette order
        cycles: Cycle ranges animating parts of the palette
        pixels: Row-major palette index for every pixel
    """
    width: int
    height: int
    palette: tuple[Color, ...]
    cycles: tuple[CycleRange, ...]
    pixels: tuple[int, ...]
    animated_indices: frozenset[int] = field(init=False)

    def __post_init__(self) -> None:
        # Normalize sequences so the image stays immutable regardless of input type
        object.__setattr__(self, "palette", tuple(self.palette))
        object.__setattr__(self, "cycles", tuple(self.cycles))
        object.__setattr__(self, "pixels", tuple(self.pixels))
        self._validate()
        object.__setattr__(self, "animated_indices", self._collect_animated_indices())

    def _validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")

        expected = self.width * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"Expected {expected} pixel indices for a {self.width}x{self.height} image, "
                f"got {len(self.pixels)}"
            )

        palette_size = len(self.palette)
        for cycle in self.cycles:
            if not 0 <= cycle.low <= cycle.high < palette_size:
                raise MalformedRangeError(cycle.low, cycle.high, palette_size)

        for position, index in enumerate(self.pixels):
            if not 0 <= index < palette_size:
                raise ValueError(
                    f"Pixel {position} references palette index {index}, "
                    f"palette has {palette_size} colors"
                )

    def _collect_animated_indices(self) -> frozenset[int]:
        animated: set[int] = set()
        for cycle in self.cycles:
            if cycle.is_animated:
                animated.update(cycle.indices)
        return frozenset(animated)

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)
