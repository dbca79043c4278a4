"""Tests for the Pillow renderer."""

import pytest

from color_cycle.palette.engines import CycleEngine
from color_cycle.palette.models import Color, IndexedImage
from color_cycle.render import Renderer

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)


def make_engine(palette: list[Color], pixels: list[int], width: int) -> CycleEngine:
    image = IndexedImage(
        width=width,
        height=len(pixels) // width,
        palette=palette,
        cycles=[],
        pixels=pixels,
    )
    return CycleEngine(image)


def test_render_frame_uses_indexed_mode():
    engine = make_engine([RED, GREEN, BLUE], [0, 1, 2, 0], width=2)
    renderer = Renderer(engine, scale=1)

    img = renderer.render_frame(list(engine.base_palette))

    assert img.mode == "P"
    assert img.size == (2, 2)
    rgb = img.convert("RGB")
    assert rgb.getpixel((0, 0)) == (255, 0, 0)
    assert rgb.getpixel((1, 0)) == (0, 255, 0)
    assert rgb.getpixel((0, 1)) == (0, 0, 255)


def test_render_frame_applies_new_palette_each_frame():
    engine = make_engine([RED, GREEN], [0, 1], width=2)
    renderer = Renderer(engine, scale=1)

    first = renderer.render_frame([RED, GREEN]).convert("RGB")
    second = renderer.render_frame([GREEN, RED]).convert("RGB")

    assert first.getpixel((0, 0)) == (255, 0, 0)
    assert second.getpixel((0, 0)) == (0, 255, 0)


def test_render_frame_scales_with_nearest_neighbour():
    engine = make_engine([RED, BLUE], [0, 1], width=2)
    renderer = Renderer(engine, scale=3)

    img = renderer.render_frame([RED, BLUE]).convert("RGB")

    assert img.size == (6, 3)
    assert img.getpixel((2, 2)) == (255, 0, 0)
    assert img.getpixel((3, 0)) == (0, 0, 255)


def test_large_palette_falls_back_to_rgb():
    palette = [Color(i % 256, i // 256, 0) for i in range(300)]
    engine = make_engine(palette, [299], width=1)
    renderer = Renderer(engine, scale=1)

    img = renderer.render_frame(palette)

    assert img.mode == "RGB"
    assert img.getpixel((0, 0)) == (43, 1, 0)


def test_invalid_scale():
    engine = make_engine([RED], [0], width=1)

    with pytest.raises(ValueError, match="Scale must be positive"):
        Renderer(engine, scale=0)
