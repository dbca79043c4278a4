"""Tests for the shared encoding pipeline."""

from io import BytesIO

from PIL import Image, ImageSequence

from color_cycle.animation_pipeline import encode_animation
from color_cycle.constants import DEFAULT_DURATION
from color_cycle.loader import parse_engine


def test_encode_gif_scales_frames(base_data):
    engine = parse_engine(base_data)

    encoded = encode_animation(engine, "out.gif", fps=1, max_frames=3, scale=4)

    img = Image.open(BytesIO(encoded))
    assert img.format == "GIF"
    assert img.size == (8, 4)


def test_encode_webp_keeps_every_cycled_frame(base_data):
    engine = parse_engine(base_data)

    encoded = encode_animation(engine, "out.webp", fps=1, max_frames=3, scale=1)

    img = Image.open(BytesIO(encoded))
    assert img.format == "WEBP"
    assert img.n_frames == 3


def test_encode_static_image_produces_single_frame(base_data):
    base_data["cycles"][0]["rate"] = 0
    engine = parse_engine(base_data)

    encoded = encode_animation(engine, "out.webp", fps=30, max_frames=90, scale=1)

    img = Image.open(BytesIO(encoded))
    assert img.format == "WEBP"
    assert getattr(img, "n_frames", 1) == 1


def test_encode_without_frame_limit_renders_default_duration(base_data):
    """A color cycle never ends, so the frame count must be bounded by default."""
    engine = parse_engine(base_data)

    encoded = encode_animation(engine, "out.webp", fps=1, scale=1)

    img = Image.open(BytesIO(encoded))
    assert img.n_frames == DEFAULT_DURATION


def test_encode_gif_keeps_cycled_palette_per_frame(base_data):
    engine = parse_engine(base_data)

    encoded = encode_animation(engine, "out.gif", fps=1, max_frames=3, scale=1)

    frames = [
        [frame.convert("RGB").getpixel((x, 0)) for x in range(2)]
        for frame in ImageSequence.Iterator(Image.open(BytesIO(encoded)))
    ]
    assert frames == [
        [(255, 0, 0), (0, 255, 0)],
        [(0, 0, 255), (255, 0, 0)],
        [(0, 255, 0), (0, 0, 255)],
    ]
