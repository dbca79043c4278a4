"""Base classes turning rendered palette frames into animated image files."""

from abc import ABC, abstractmethod
from io import BytesIO
from typing import Iterator

from PIL import Image


class OutputProvider(ABC):
    """Encodes a finite stream of rendered frames and writes the result to disk."""

    def __init__(self, path: str = ""):
        """
        Args:
            path: Destination file; may stay empty when only encode() is used
        """
        self.path = path

    @abstractmethod
    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        """
        Encode rendered frames into the provider's format.

        Args:
            frames: Frames from the renderer, in playback order. The stream
                must be finite; color cycles never end on their own.
            frame_duration: Milliseconds each frame is shown

        Returns:
            Encoded file contents, empty when there are no frames
        """
        raise NotImplementedError

    def write(self, data: bytes) -> None:
        """Write encoded bytes to the provider's path."""
        if not self.path:
            raise ValueError("Output path not set")
        with open(self.path, "wb") as f:
            f.write(data)


class PillowSequenceOutputProvider(OutputProvider, ABC):
    """Shared encoder for formats Pillow can save as a looping multi-frame image."""

    @property
    @abstractmethod
    def output_format(self) -> str:
        """Format name passed to ``Image.save``."""
        raise NotImplementedError

    @property
    def save_options(self) -> dict[str, object]:
        """Extra ``Image.save`` arguments for the format."""
        return {}

    def encode(self, frames: Iterator[Image.Image], frame_duration: int) -> bytes:
        frame_list = list(frames)
        if not frame_list:
            return b""

        buffer = BytesIO()
        # 1000 // fps is zero above 1000 fps
        frame_list[0].save(
            buffer,
            format=self.output_format,
            save_all=True,
            append_images=frame_list[1:],
            duration=max(frame_duration, 1),
            loop=0,
            **self.save_options,
        )
        return buffer.getvalue()
