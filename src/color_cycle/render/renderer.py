"""Renderer for drawing palette frames using Pillow."""

from typing import Sequence

from PIL import Image

from ..constants import DEFAULT_SCALE, MAX_INDEXED_COLORS
from ..palette.engines import ColorCycleEngine
from ..palette.models import Color


class Renderer:
    """Renders engine palettes as PIL Images."""

    def __init__(self, engine: ColorCycleEngine, scale: int = DEFAULT_SCALE):
        """
        Initialize renderer.

        Args:
            engine: Engine providing image size and pixel indices
            scale: Integer pixel scale factor
        """
        if scale <= 0:
            raise ValueError(f"Scale must be positive, got {scale}")
        self.engine = engine
        self.scale = scale
        self.width, self.height = engine.size
        self._index_image: Image.Image | None = None

    def render_frame(self, palette: Sequence[Color]) -> Image.Image:
        """
        Render the pixel indices with the given palette.

        Returns:
            PIL Image of the frame, in "P" mode when the palette fits
        """
        if len(palette) <= MAX_INDEXED_COLORS:
            img = self._indexed_frame(palette)
        else:
            img = self._rgb_frame(palette)

        if self.scale == 1:
            return img
        return img.resize(
            (self.width * self.scale, self.height * self.scale),
            Image.Resampling.NEAREST,
        )

    def _indexed_frame(self, palette: Sequence[Color]) -> Image.Image:
        # Pixel indices never change, so the index data is built once and copied
        if self._index_image is None:
            self._index_image = Image.new("P", (self.width, self.height))
            self._index_image.putdata(self.engine.indices)

        img = self._index_image.copy()
        flat: list[int] = []
        for color in palette:
            flat.extend(color.as_tuple())
        flat.extend([0] * (MAX_INDEXED_COLORS * 3 - len(flat)))
        img.putpalette(flat)
        return img

    def _rgb_frame(self, palette: Sequence[Color]) -> Image.Image:
        img = Image.new("RGB", (self.width, self.height))
        img.putdata([palette[index].as_tuple() for index in self.engine.indices])
        return img
