"""Shared fixtures for color cycle tests."""

import pytest


@pytest.fixture
def base_data() -> dict:
    """A 2x1 image cycling red, green and blue."""
    return {
        "width": 2,
        "height": 1,
        "colors": [
            {"r": 255, "g": 0, "b": 0},
            {"r": 0, "g": 255, "b": 0},
            {"r": 0, "g": 0, "b": 255},
        ],
        "cycles": [{"reverse": 0, "rate": 280, "low": 0, "high": 2}],
        "pixels": [0, 1],
    }


@pytest.fixture
def timeline_data(base_data: dict) -> dict:
    """A timeline fading from black at midnight to white at noon."""
    black = [{"r": 0, "g": 0, "b": 0}] * 3
    white = [[255, 255, 255]] * 3
    return {
        "base": base_data,
        "palettes": {
            "night": {"colors": black, "cycles": []},
            "day": {"colors": white, "cycles": []},
        },
        "timeline": {"0": "night", "43200": "day"},
    }
