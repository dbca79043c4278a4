"""Output providers for different animation formats."""

from dataclasses import dataclass
from pathlib import Path

from .base import OutputProvider, PillowSequenceOutputProvider
from .gif_provider import GifOutputProvider
from .webp_provider import WebPOutputProvider


@dataclass(frozen=True)
class OutputFormatSpec:
    extension: str
    provider_class: type[OutputProvider]


_OUTPUT_FORMATS: dict[str, OutputFormatSpec] = {
    "gif": OutputFormatSpec(
        extension=".gif",
        provider_class=GifOutputProvider,
    ),
    "webp": OutputFormatSpec(
        extension=".webp",
        provider_class=WebPOutputProvider,
    ),
}


def resolve_output_provider(file_path: str) -> OutputProvider:
    """
    Resolve the appropriate output provider based on file extension.

    Args:
        file_path: Output file path (extension determines format)

    Returns:
        An OutputProvider instance

    Raises:
        ValueError: If file extension is not supported
    """
    ext = Path(file_path).suffix.lower()
    output_format = ext.removeprefix(".")
    spec = _OUTPUT_FORMATS.get(output_format)
    if spec is None:
        supported = ", ".join(spec.extension for spec in _OUTPUT_FORMATS.values())
        raise ValueError(f"Unsupported output format: {ext}. Supported formats: {supported}")
    return spec.provider_class(file_path)


def supported_output_formats() -> tuple[str, ...]:
    """Return supported output format names."""
    return tuple(_OUTPUT_FORMATS.keys())


__all__ = [
    "OutputFormatSpec",
    "OutputProvider",
    "PillowSequenceOutputProvider",
    "GifOutputProvider",
    "WebPOutputProvider",
    "resolve_output_provider",
    "supported_output_formats",
]
