"""Tests for palette color math."""

import pytest

from color_cycle.palette.color_math import (
    cycle_palette,
    fade_color,
    fade_palette,
    rotate,
    shift_amount,
)
from color_cycle.palette.models import Color, CycleRange, CycleStyle

RED = Color(255, 0, 0)
GREEN = Color(0, 255, 0)
BLUE = Color(0, 0, 255)
WHITE = Color(255, 255, 255)
BLACK = Color(0, 0, 0)


class TestShiftAmount:
    """Tests for shift amount calculation per animation style."""

    def test_linear_styles_step_once_per_second_at_unit_rate(self) -> None:
        for style in (CycleStyle.FORWARD, CycleStyle.FORWARD_ALT, CycleStyle.REVERSE):
            assert shift_amount(1, 1000, 3, style) == 1

    def test_linear_wraps_around_range_size(self) -> None:
        # 2500ms at rate 2 is 5 steps, which wraps to 2 in a range of 3
        assert shift_amount(2, 2500, 3, CycleStyle.FORWARD) == 2

    def test_partial_seconds_are_truncated(self) -> None:
        assert shift_amount(1, 999, 3, CycleStyle.FORWARD) == 0

    def test_ping_pong_moves_back_and_forth(self) -> None:
        amounts = [
            shift_amount(1, step * 1000, 4, CycleStyle.PING_PONG) for step in range(8)
        ]
        assert amounts == [0, 1, 2, 3, 0, 3, 2, 1]

    def test_sine_styles_scale_the_shaped_value(self) -> None:
        """At the start of a period the legacy shaping yields 1 before scaling."""
        assert shift_amount(1, 0, 8, CycleStyle.SINE_QUARTER) == 2
        assert shift_amount(1, 0, 8, CycleStyle.SINE_HALF) == 4

    def test_sine_quarter_on_small_range_scales_to_zero(self) -> None:
        assert shift_amount(1, 0, 3, CycleStyle.SINE_QUARTER) == 0

    @pytest.mark.parametrize("style", list(CycleStyle))
    @pytest.mark.parametrize("dt_millis", [-12345, -1, 0, 1, 999, 1000, 7777, 10**9])
    def test_result_stays_within_range(self, style: int, dt_millis: int) -> None:
        amount = shift_amount(3, dt_millis, 5, style)
        assert 0 <= amount < 5

    def test_zero_rate_never_shifts(self) -> None:
        assert shift_amount(0, 123456, 7, CycleStyle.FORWARD) == 0


class TestRotate:
    """Tests for in-place palette range rotation."""

    def test_forward_moves_high_to_low(self) -> None:
        palette = [BLACK, RED, GREEN, BLUE, WHITE]
        rotate(palette, 1, 3, 1)
        assert palette == [BLACK, BLUE, RED, GREEN, WHITE]

    def test_reverse_moves_low_to_high(self) -> None:
        palette = [BLACK, RED, GREEN, BLUE, WHITE]
        rotate(palette, 1, 3, 1, reverse=True)
        assert palette == [BLACK, GREEN, BLUE, RED, WHITE]

    def test_full_cycle_of_single_steps_restores_order(self) -> None:
        original = [RED, GREEN, BLUE, WHITE]
        palette = list(original)
        for _ in range(len(palette)):
            rotate(palette, 0, 3, 1)
        assert palette == original

    def test_forward_then_reverse_restores_order(self) -> None:
        original = [BLACK, RED, GREEN, BLUE, WHITE]
        palette = list(original)
        rotate(palette, 0, 4, 3)
        rotate(palette, 0, 4, 3, reverse=True)
        assert palette == original

    def test_multi_step_matches_repeated_single_steps(self) -> None:
        stepped = [BLACK, RED, GREEN, BLUE, WHITE]
        for _ in range(2):
            rotate(stepped, 0, 4, 1)
        direct = [BLACK, RED, GREEN, BLUE, WHITE]
        rotate(direct, 0, 4, 2)
        assert direct == stepped

    def test_zero_amount_is_noop(self) -> None:
        palette = [RED, GREEN, BLUE]
        rotate(palette, 0, 2, 0)
        assert palette == [RED, GREEN, BLUE]

    def test_single_entry_range_is_noop(self) -> None:
        palette = [RED, GREEN, BLUE]
        rotate(palette, 1, 1, 5)
        assert palette == [RED, GREEN, BLUE]


class TestCyclePalette:
    """Tests for applying every cycle range to a palette copy."""

    def test_does_not_mutate_input(self) -> None:
        palette = [RED, GREEN, BLUE]
        cycle_palette(palette, [CycleRange(0, 2, 280)], 1000)
        assert palette == [RED, GREEN, BLUE]

    def test_zero_rate_range_is_untouched(self) -> None:
        palette = [RED, GREEN, BLUE, WHITE]
        cycles = [CycleRange(0, 1, 0), CycleRange(2, 3, 280)]
        result = cycle_palette(palette, cycles, 1000)
        assert result[:2] == [RED, GREEN]
        assert result[2:] == [WHITE, BLUE]

    def test_rate_below_cycle_speed_does_not_move(self) -> None:
        result = cycle_palette([RED, GREEN, BLUE], [CycleRange(0, 2, 279)], 100000)
        assert result == [RED, GREEN, BLUE]

    def test_full_period_returns_original_order(self) -> None:
        palette = [RED, GREEN, BLUE, WHITE]
        cycles = [CycleRange(0, 3, 560, CycleStyle.FORWARD)]
        # Scaled rate 2 over 4 entries: one full rotation every 2000ms
        for k in range(1, 4):
            assert cycle_palette(palette, cycles, 2000 * k) == palette

    def test_reverse_style_rotates_backwards(self) -> None:
        result = cycle_palette([RED, GREEN, BLUE], [CycleRange(0, 2, 280, CycleStyle.REVERSE)], 1000)
        assert result == [GREEN, BLUE, RED]


class TestFade:
    """Tests for linear color interpolation."""

    def test_midpoint(self) -> None:
        assert fade_color(Color(0, 0, 0), Color(100, 100, 100), 0.5) == Color(50, 50, 50)

    def test_truncates_per_channel(self) -> None:
        assert fade_color(Color(0, 0, 0), Color(3, 5, 7), 0.5) == Color(1, 2, 3)

    def test_fades_downwards(self) -> None:
        assert fade_color(Color(100, 200, 40), Color(0, 0, 0), 0.25) == Color(75, 150, 30)

    def test_endpoints(self) -> None:
        start, end = Color(10, 20, 30), Color(200, 100, 0)
        assert fade_color(start, end, 0.0) == start
        assert fade_color(start, end, 1.0) == end

    def test_clamps_when_extrapolating(self) -> None:
        assert fade_color(Color(0, 100, 255), Color(200, 50, 255), 2.0) == Color(255, 0, 255)

    def test_fade_palette_pairs_entries(self) -> None:
        result = fade_palette([BLACK, WHITE], [WHITE, BLACK], 0.5)
        assert result == [Color(127, 127, 127), Color(127, 127, 127)]
