"""Tests for the fire colour ramp."""

import numpy as np
import pytest

from doomfire.exceptions import InvariantViolation
from doomfire.palettes import (MAX_INTENSITY, PALETTE_DOOM, PALETTE_SIZE,
                               color_of, inverse_color, palette_doom)


class TestPalette:
    """Tests for palette contents and lookups."""

    def test_size(self):
        assert PALETTE_SIZE == 37
        assert len(PALETTE_DOOM) == PALETTE_SIZE
        assert len(palette_doom()) == PALETTE_SIZE

    def test_every_intensity_has_a_color(self):
        for intensity in range(MAX_INTENSITY + 1):
            r, g, b = color_of(intensity)
            assert all(0 <= channel <= 255 for channel in (r, g, b))

    def test_ends_of_ramp(self):
        assert color_of(0) == min(PALETTE_DOOM, key=sum)
        assert color_of(MAX_INTENSITY) == (255, 255, 255)

    def test_palette_is_immutable(self):
        with pytest.raises(TypeError):
            PALETTE_DOOM[0] = (0, 0, 0)

    def test_palette_function_returns_fresh_copy(self):
        palette = palette_doom()
        palette[0][0] = 99
        assert PALETTE_DOOM[0] == (7, 7, 7)

    @pytest.mark.parametrize("intensity", [-1, MAX_INTENSITY + 1, 255, True, 3.5, "3"])
    def test_out_of_range_fails_fast(self, intensity):
        with pytest.raises(InvariantViolation) as excinfo:
            color_of(intensity)
        assert excinfo.value.value == intensity

    def test_invariant_violation_is_assertion(self):
        with pytest.raises(AssertionError):
            color_of(40)


class TestInverseColor:
    """Tests for the debug overlay colour."""

    def test_inverse(self):
        assert inverse_color((255, 255, 255)) == (0, 0, 0)
        assert inverse_color((7, 7, 7)) == (248, 248, 248)
        assert inverse_color((0xDF, 0x4F, 0x07)) == (0x20, 0xB0, 0xF8)


class TestColorOfTypes:
    """Tests for which intensity types color_of accepts."""

    def test_numpy_integers_accepted(self):
        assert color_of(np.uint8(MAX_INTENSITY)) == (255, 255, 255)
        assert color_of(np.int64(0)) == PALETTE_DOOM[0]

    def test_integral_float_rejected(self):
        with pytest.raises(InvariantViolation):
            color_of(2.0)
