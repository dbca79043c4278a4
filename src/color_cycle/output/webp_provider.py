"""WebP output provider."""

from .base import PillowSequenceOutputProvider


class WebPOutputProvider(PillowSequenceOutputProvider):
    """Writes cycled frames as animated WebP, lossless so palette colors come out exact."""

    @property
    def output_format(self) -> str:
        return "webp"

    @property
    def save_options(self) -> dict[str, object]:
        return {
            "lossless": True,
            "quality": 100,
            "method": 4,
        }
