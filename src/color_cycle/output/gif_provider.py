"""GIF output provider."""

from .base import PillowSequenceOutputProvider


class GifOutputProvider(PillowSequenceOutputProvider):
    """
    Writes cycled frames as an animated GIF.

    Renderer frames are already paletted, so each frame is stored with its
    own local color table instead of being re-quantized. Disposal 1 leaves
    every frame in place under the next one.
    """

    @property
    def output_format(self) -> str:
        return "gif"

    @property
    def save_options(self) -> dict[str, object]:
        return {"optimize": False, "disposal": 1}
